"""
Store factory.

Picks the backend named by the STORE_BACKEND setting and binds it to the
signed-in user. One store per request, kept on flask.g.
"""

import logging

from flask import current_app, g, session
from flask_login import current_user

from todos.store.interface import TodoStore

logger = logging.getLogger(__name__)


def create_store(backend, username) -> TodoStore:
    """
    Build a store for one user.

    Args:
        backend: "pg" or "session"
        username: Signed-in username, or None before sign-in

    Raises:
        ValueError: If the backend name is unknown
    """
    backend = backend.lower()

    if backend in ("pg", "postgres", "postgresql"):
        from todos.store.pg_store import PgStore
        return PgStore(username)

    if backend == "session":
        from todos.store.session_store import SessionStore
        return SessionStore(
            session,
            username,
            users=current_app.config.get("SESSION_STORE_USERS"),
        )

    raise ValueError(
        f"Unknown store backend: {backend}. "
        "Use 'pg' or 'session'."
    )


def get_store() -> TodoStore:
    """Get the store for the current request, creating it on first use."""
    if "store" not in g:
        username = current_user.get_id() if current_user.is_authenticated else None
        g.store = create_store(current_app.config.get("STORE_BACKEND", "pg"), username)
        logger.debug(f"Using {type(g.store).__name__} for {username}")
    return g.store
