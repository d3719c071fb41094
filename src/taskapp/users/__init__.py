"""
User subsystem (read-only).

- user_models.py: User record
- user_store.py: lookups by code and by credentials over the user record file
"""
