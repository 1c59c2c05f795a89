"""
Unit tests for the create-user CLI command.
"""
import unittest

from todos import create_app, db
from todos.models import User
from todos.store.pg_store import PgStore


class TestConfig:
    TESTING = True
    SECRET_KEY = "test-secret"
    STORE_BACKEND = "pg"
    SQLALCHEMY_DATABASE_URI = "sqlite://"


class TestCreateUser(unittest.TestCase):

    def setUp(self):
        self.app = create_app(TestConfig)
        self.runner = self.app.test_cli_runner()
        with self.app.app_context():
            db.create_all()

    def test_creates_user_that_can_sign_in(self):
        result = self.runner.invoke(args=["create-user", "admin", "--password", "secret"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Created user admin", result.output)

        with self.app.app_context():
            user = db.session.get(User, "admin")
            self.assertNotEqual(user.password, "secret")
            self.assertTrue(user.check_password("secret"))
            db.session.remove()
            self.assertTrue(PgStore(None).authenticate("admin", "secret"))

    def test_existing_user_rejected(self):
        self.runner.invoke(args=["create-user", "admin", "--password", "secret"])
        result = self.runner.invoke(args=["create-user", "admin", "--password", "other"])
        self.assertNotEqual(result.exit_code, 0)
        self.assertIn("already exists", result.output)

        with self.app.app_context():
            self.assertTrue(db.session.get(User, "admin").check_password("secret"))

    def test_blank_username_rejected(self):
        result = self.runner.invoke(args=["create-user", "  ", "--password", "secret"])
        self.assertNotEqual(result.exit_code, 0)


if __name__ == "__main__":
    unittest.main()
