"""
Status-change history (append-only audit log).

- log_models.py: LogEntry record
- log_store.py: storage over the log record file
"""
