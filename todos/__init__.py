from flask import Flask, request
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_wtf.csrf import CSRFProtect
from flask_session import Session
from sqlalchemy import event
from dotenv import load_dotenv
import logging

load_dotenv()

db = SQLAlchemy()
migrate = Migrate()
login_manager = LoginManager()
csrf = CSRFProtect()
server_session = Session()

logger = logging.getLogger(__name__)

STORE_BACKENDS = ('pg', 'session')


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute('PRAGMA foreign_keys=ON')
    cursor.close()


def create_app(config_object='config'):
    app = Flask(__name__)
    app.config.from_object(config_object)

    # Validate required settings
    if not app.config.get('SECRET_KEY'):
        raise ValueError("Required setting SECRET_KEY is not set")
    backend = app.config.get('STORE_BACKEND', 'pg')
    if backend not in STORE_BACKENDS:
        raise ValueError(f"Unknown STORE_BACKEND: {backend}. Use 'pg' or 'session'.")
    if backend == 'pg' and not app.config.get('SQLALCHEMY_DATABASE_URI'):
        raise ValueError("Required setting DATABASE_URL is not set")

    app.jinja_env.trim_blocks = app.config.get('JINJA2_TRIM_BLOCKS', False)
    app.jinja_env.lstrip_blocks = app.config.get('JINJA2_LSTRIP_BLOCKS', False)

    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)

    # The in-session store keeps whole documents in the session, so it is held server-side
    if backend == 'session':
        server_session.init_app(app)

    # SQLite leaves foreign keys off unless asked, which would skip ON DELETE CASCADE
    with app.app_context():
        if db.engine.dialect.name == 'sqlite':
            event.listen(db.engine, 'connect', _enable_sqlite_foreign_keys)

    login_manager.init_app(app)
    login_manager.login_view = 'auth.signin'
    # The sign-in page flashes its own prompt
    login_manager.login_message = None

    # Register blueprints
    from todos.routes.main import main_bp
    from todos.core.auth import auth_bp
    from todos.lists.routes import lists_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(auth_bp, url_prefix='/users')
    app.register_blueprint(lists_bp)

    # Import models to ensure they're known to Flask-SQLAlchemy
    from todos.models import User, SignedInUser
    from todos.lists.models import TodoList, Todo

    from todos import commands
    commands.init_app(app)

    # Access log, one line per request
    @app.after_request
    def log_request(response):
        logger.info(f"{request.method} {request.full_path.rstrip('?')} {response.status_code}")
        return response

    # User loader for Flask-Login; the session only ever holds the username
    @login_manager.user_loader
    def load_user(username):
        return SignedInUser(username)

    return app
