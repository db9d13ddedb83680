"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskState)
- task_store.py: in-memory per-owner store
- sqlite_store.py: SQLite-backed store with the same contract
- task_api.py: small helpers used by the command layer
"""
