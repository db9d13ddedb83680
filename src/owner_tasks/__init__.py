"""
owner_tasks: per-owner ordered task lists.

Subpackages:
- tasks: models and the task stores (in-memory + SQLite)
- core: ports and application state
- cli: composition root, entrypoint, slash commands
- connectors: console REPL
"""

__version__ = "0.1.0"
