"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus, TaskRow)
- task_store.py: record-file storage with owner resolution
- task_service.py: validated operations (list, create, change status)
"""
