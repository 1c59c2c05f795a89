from flask_login import UserMixin

from todos import db
from werkzeug.security import generate_password_hash, check_password_hash


class User(db.Model):
    __tablename__ = 'users'

    username = db.Column(db.Text, primary_key=True)
    password = db.Column(db.Text, nullable=False)

    def set_password(self, password):
        self.password = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password, password)

    def __repr__(self):
        return f'<User {self.username}>'


class SignedInUser(UserMixin):
    """
    The identity Flask-Login keeps in the session.

    Both store backends key everything by username, so that is all we carry;
    the users table is only consulted at sign-in.
    """

    def __init__(self, username):
        self.username = username

    def get_id(self):
        return self.username

    def __repr__(self):
        return f'<SignedInUser {self.username}>'
