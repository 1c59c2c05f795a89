"""Flask CLI commands for managing todo list accounts"""

import click
from todos import db
from todos.models import User
import logging

logger = logging.getLogger(__name__)


def init_app(app):
    """Register CLI commands with the Flask app"""

    @app.cli.command("create-user")
    @click.argument("username")
    @click.password_option()
    def create_user(username, password):
        """
        Create an account that can sign in with the relational store.

        The password is stored as a salted Werkzeug hash, never in plain text.
        """
        username = username.strip()
        if not username:
            raise click.BadParameter("Username cannot be blank.", param_hint="USERNAME")

        if db.session.get(User, username) is not None:
            raise click.ClickException(f"User {username} already exists.")

        user = User(username=username)
        user.set_password(password)
        db.session.add(user)
        db.session.commit()

        logger.info(f"Created user {username}")
        click.echo(f"Created user {username}.")
