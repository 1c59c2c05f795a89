"""
Persistence for todo lists, with in-session and PostgreSQL backends.
"""

from todos.store.errors import DuplicateKeyError, StoreError
from todos.store.factory import create_store, get_store
from todos.store.interface import TodoStore

__all__ = [
    "DuplicateKeyError",
    "StoreError",
    "TodoStore",
    "create_store",
    "get_store",
]
