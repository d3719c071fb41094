"""
taskapp: a single-user console task tracker backed by flat CSV-like record files.

Packages:
- users/: read-only user lookups (login, owner resolution)
- history/: append-only status-change log
- tasks/: task records and the service that validates task operations
- cli/, connectors/: console front end
"""

__version__ = "0.1.0"
