import os
from datetime import timedelta

from cachelib import FileSystemCache
from werkzeug.security import generate_password_hash


def _parse_session_store_users(raw):
    """Turn 'alice=secret,bob=hunter2' into {username: password_hash}."""
    users = {}
    for entry in raw.split(","):
        username, _, password = entry.strip().partition("=")
        if username and password:
            users[username] = generate_password_hash(password)
    return users


SECRET_KEY = os.getenv("SECRET_KEY")

# "pg" for the relational store, "session" for the in-session store
STORE_BACKEND = os.getenv("STORE_BACKEND", "pg")

# The relational store needs a real DATABASE_URL; create_app refuses to start without one.
# Only the in-session store may fall back to an unused in-memory database.
DATABASE_URL = os.getenv("DATABASE_URL", "").replace("postgres://", "postgresql://", 1)
SQLALCHEMY_DATABASE_URI = DATABASE_URL or ("sqlite://" if STORE_BACKEND == "session" else None)

SESSION_STORE_USERS = _parse_session_store_users(os.getenv("SESSION_STORE_USERS", ""))

# Server-side sessions (Flask-Session) for the in-session store; the cookie only carries the id.
# threshold=0 means sessions are never pruned for count, only when they expire.
SESSION_TYPE = "cachelib"
SESSION_CACHELIB = FileSystemCache(
    cache_dir=os.getenv("SESSION_FILE_DIR", "flask_session"),
    threshold=0,
)

# Session cookie
SESSION_COOKIE_NAME = "todo-lists-session"
SESSION_COOKIE_HTTPONLY = True
SESSION_COOKIE_SECURE = os.getenv("SESSION_COOKIE_SECURE", "false").lower() == "true"
PERMANENT_SESSION_LIFETIME = timedelta(days=31)

# Jinja2 whitespace control - prevents unwanted line breaks in rendered HTML
JINJA2_TRIM_BLOCKS = True
JINJA2_LSTRIP_BLOCKS = True
