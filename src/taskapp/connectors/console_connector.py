# src/taskapp/connectors/console_connector.py

from __future__ import annotations

import getpass
import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..users.user_models import User

logger = logging.getLogger(__name__)

MAX_LOGIN_ATTEMPTS = 3


def login(
    state: AppState,
    *,
    read: Callable[[str], str] = input,
    read_secret: Callable[[str], str] = getpass.getpass,
    attempts: int = MAX_LOGIN_ATTEMPTS,
) -> User | None:
    """Prompt for email/password until a user matches or attempts run out."""
    for _ in range(attempts):
        email = read("Email: ").strip()
        password = read_secret("Password: ")
        user = state.users.find_by_credentials(email, password)
        if user is not None:
            state.current_user = user
            logger.info("User logged in code=%s", user.code)
            print(f"Welcome, {user.name}.")
            return user
        print("Unknown email or wrong password.")
    return None


def run_console_loop(state: AppState, *, read: Callable[[str], str] = input) -> None:
    logger.info("Console connector started.")
    print("Type /help for commands, /exit to quit.")

    while True:
        try:
            user_input = read("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = command_registry.handle(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is None:
            reply = "Commands start with '/'. Use /help to list them."
        print(reply)

    logger.info("Console connector finished.")
