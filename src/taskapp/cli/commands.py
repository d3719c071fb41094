# src/taskapp/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.errors import UnsupportedOperationError, ValidationError
from ..core.state import AppState

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Slash-command registry used by the console connector (/help, /list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Domain errors become a reply; the caller can simply let the user retry.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return handler(state, args)
        except ValidationError as e:
            logger.info("Validation failed for /%s: %s", name, e)
            return f"Error: {e}"
        except UnsupportedOperationError as e:
            return f"Not supported: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_int(raw: str) -> int | None:
    try:
        return int(raw)
    except ValueError:
        return None


def _require_user(state: AppState):
    if state.current_user is None:
        raise ValidationError("you must be logged in")
    return state.current_user


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_whoami(state: AppState, args: list[str]) -> str:
    user = state.current_user
    if user is None:
        return "Not logged in."
    return f"Logged in as {user.name} <{user.email}> (code {user.code})."


def cmd_list(state: AppState, args: list[str]) -> str:
    user = _require_user(state)
    rows = state.service.list_all(user)
    if not rows:
        return "No tasks."
    return "\n".join(
        f"{r.code}. {r.name}, {r.assignee_label}, status: {r.status_label}" for r in rows
    )


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <code> <user_code> <name...>
    """
    usage = "Usage: /add <code> <user_code> <name>"
    if len(args) < 3:
        return usage
    code = _parse_int(args[0])
    user_code = _parse_int(args[1])
    if code is None or user_code is None:
        return usage

    user = _require_user(state)
    name = " ".join(args[2:])
    out = state.service.create(code, name, user_code, user)
    if not out.ok:
        return f"Task {code} was not saved, see log."
    return f"Task {out.value.code} '{out.value.name}' registered."


def cmd_status(state: AppState, args: list[str]) -> str:
    """
    /status <code> <new_status>    new_status: 1 = in progress, 2 = done
    """
    usage = "Usage: /status <code> <new_status> (1 = in progress, 2 = done)"
    if len(args) != 2:
        return usage
    code = _parse_int(args[0])
    new_status = _parse_int(args[1])
    if code is None or new_status is None:
        return usage

    user = _require_user(state)
    out = state.service.change_status(code, new_status, user)
    if not out.ok:
        return f"Task {code} status change was not saved, see log."
    return f"Task {out.value.code} is now '{out.value.status.label}'."


def cmd_history(state: AppState, args: list[str]) -> str:
    usage = "Usage: /history <code>"
    if len(args) != 1:
        return usage
    code = _parse_int(args[0])
    if code is None:
        return usage

    entries = state.service.history(code)
    if not entries:
        return f"No history for task {code}."
    return "\n".join(
        f"{e.change_date.isoformat()} user {e.change_user_code} -> "
        f"{e.status.label}"
        for e in entries
    )


def cmd_delete(state: AppState, args: list[str]) -> str:
    usage = "Usage: /delete <code>"
    if len(args) != 1:
        return usage
    code = _parse_int(args[0])
    if code is None:
        return usage

    user = _require_user(state)
    state.service.delete(code, user)
    return f"Task {code} deleted."


registry.register("help", cmd_help, "Show this help", aliases=["h", "?"])
registry.register("whoami", cmd_whoami, "Show the logged-in user")
registry.register("list", cmd_list, "List all tasks", aliases=["ls"])
registry.register("add", cmd_add, "Register a task: /add <code> <user_code> <name>")
registry.register("status", cmd_status, "Advance a task: /status <code> <1|2>")
registry.register("history", cmd_history, "Show the status history of a task")
registry.register("delete", cmd_delete, "Delete a task (not supported)")
