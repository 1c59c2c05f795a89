"""
Unit tests for the relational todo store.
Runs the real SQL against in-memory SQLite with the foreign keys create_app switches on.
"""
import unittest

from todos import create_app, db
from todos.models import User
from todos.store.db_query import db_query
from todos.store.errors import DuplicateKeyError
from todos.store.pg_store import PgStore


class TestConfig:
    TESTING = True
    SECRET_KEY = "test-secret"
    WTF_CSRF_ENABLED = False
    STORE_BACKEND = "pg"
    SQLALCHEMY_DATABASE_URI = "sqlite://"


def _titles(items):
    return [item["title"] for item in items]


class PgStoreTestCase(unittest.TestCase):

    def setUp(self):
        self.app = create_app(TestConfig)
        self.ctx = self.app.app_context()
        self.ctx.push()
        db.create_all()
        self.store = PgStore("alice")

    def tearDown(self):
        db.session.remove()
        db.drop_all()
        self.ctx.pop()

    def _create_list(self, title, todos=()):
        self.assertTrue(self.store.create_todo_list(title))
        row = db_query(
            "SELECT id FROM todolists WHERE title = :title AND username = :username",
            title=title, username=self.store.username,
        ).rows[0]
        for todo_title in todos:
            self.assertTrue(self.store.create_todo(row["id"], todo_title))
        return self.store.load_todo_list(row["id"])


class TestTodoLists(PgStoreTestCase):

    def test_create_then_exists_for_owner_only(self):
        self._create_list("Groceries")
        self.assertTrue(self.store.exists_todo_list_title("Groceries"))
        self.assertFalse(PgStore("bob").exists_todo_list_title("Groceries"))

    def test_duplicate_title_returns_false(self):
        first = self._create_list("Groceries", ["Milk"])
        self.assertFalse(self.store.create_todo_list("Groceries"))

        lists = self.store.sorted_todo_lists()
        self.assertEqual(_titles(lists), ["Groceries"])
        self.assertEqual(_titles(self.store.load_todo_list(first["id"])["todos"]), ["Milk"])

    def test_same_title_allowed_for_different_users(self):
        self._create_list("Groceries")
        self.assertTrue(PgStore("bob").create_todo_list("Groceries"))

    def test_sorted_todo_lists_order(self):
        self._create_list("Banana")
        self._create_list("apple")
        finished = self._create_list("Cherry", ["Pick"])
        self.store.complete_all_todos(finished["id"])
        self._create_list("date", ["Eat"])

        lists = self.store.sorted_todo_lists()
        self.assertEqual(_titles(lists), ["apple", "Banana", "date", "Cherry"])
        self.assertEqual(_titles(lists[2]["todos"]), ["Eat"])
        self.assertIs(lists[3]["todos"][0]["done"], True)

    def test_sorted_todo_lists_only_for_user(self):
        self._create_list("Mine")
        PgStore("bob").create_todo_list("Theirs")
        self.assertEqual(_titles(self.store.sorted_todo_lists()), ["Mine"])

    def test_load_todo_list_missing_or_foreign(self):
        self.assertIsNone(self.store.load_todo_list(12345))
        bob = PgStore("bob")
        bob.create_todo_list("Theirs")
        theirs = bob.sorted_todo_lists()[0]
        self.assertIsNone(self.store.load_todo_list(theirs["id"]))

    def test_empty_list_is_not_done(self):
        todo_list = self._create_list("Empty")
        self.assertEqual(todo_list["todos"], [])
        self.assertFalse(self.store.is_done_todo_list(todo_list))

    def test_delete_list_cascades_to_todos(self):
        todo_list = self._create_list("Groceries", ["Milk", "Eggs"])
        todo_ids = [todo["id"] for todo in todo_list["todos"]]

        self.assertTrue(self.store.delete_todo_list(todo_list["id"]))
        self.assertIsNone(self.store.load_todo_list(todo_list["id"]))
        for todo_id in todo_ids:
            self.assertIsNone(self.store.load_todo(todo_list["id"], todo_id))
        remaining = db_query("SELECT COUNT(*) AS n FROM todos").rows[0]["n"]
        self.assertEqual(remaining, 0)

    def test_delete_missing_list(self):
        self.assertFalse(self.store.delete_todo_list(12345))

    def test_set_title(self):
        todo_list = self._create_list("Groceries")
        self.assertTrue(self.store.set_todo_list_title(todo_list["id"], "Shopping"))
        self.assertEqual(self.store.load_todo_list(todo_list["id"])["title"], "Shopping")

    def test_set_title_missing_list(self):
        self.assertFalse(self.store.set_todo_list_title(12345, "Shopping"))

    def test_set_title_to_existing_title_raises(self):
        self._create_list("Groceries")
        other = self._create_list("Hardware")
        with self.assertRaises(DuplicateKeyError):
            self.store.set_todo_list_title(other["id"], "Groceries")
        self.assertEqual(self.store.load_todo_list(other["id"])["title"], "Hardware")


class TestTodos(PgStoreTestCase):

    def test_groceries_scenario(self):
        todo_list = self._create_list("Groceries", ["Milk", "Eggs"])
        milk = next(todo for todo in todo_list["todos"] if todo["title"] == "Milk")
        self.assertIs(milk["done"], False)

        self.assertTrue(self.store.toggle_done_todo(todo_list["id"], milk["id"]))
        todos = self.store.sorted_todos(todo_list)
        self.assertEqual(_titles(todos), ["Eggs", "Milk"])
        self.assertEqual([todo["done"] for todo in todos], [False, True])

    def test_toggle_twice_restores_state(self):
        todo_list = self._create_list("Groceries", ["Milk"])
        todo = todo_list["todos"][0]
        self.store.toggle_done_todo(todo_list["id"], todo["id"])
        self.assertTrue(self.store.load_todo(todo_list["id"], todo["id"])["done"])
        self.store.toggle_done_todo(todo_list["id"], todo["id"])
        self.assertFalse(self.store.load_todo(todo_list["id"], todo["id"])["done"])

    def test_toggle_missing(self):
        todo_list = self._create_list("Groceries")
        self.assertFalse(self.store.toggle_done_todo(todo_list["id"], 12345))

    def test_sorted_todos_ignore_case(self):
        todo_list = self._create_list("Groceries", ["banana", "Apple", "cherry"])
        self.assertEqual(_titles(self.store.sorted_todos(todo_list)), ["Apple", "banana", "cherry"])

    def test_create_todo_missing_list(self):
        self.assertFalse(self.store.create_todo(12345, "Milk"))

    def test_create_todo_in_other_users_list(self):
        bob = PgStore("bob")
        bob.create_todo_list("Theirs")
        theirs = bob.sorted_todo_lists()[0]
        self.assertFalse(self.store.create_todo(theirs["id"], "Sneaky"))
        self.assertEqual(bob.load_todo_list(theirs["id"])["todos"], [])

    def test_delete_todo(self):
        todo_list = self._create_list("Groceries", ["Milk", "Eggs"])
        milk = next(todo for todo in todo_list["todos"] if todo["title"] == "Milk")
        self.assertTrue(self.store.delete_todo(todo_list["id"], milk["id"]))
        self.assertIsNone(self.store.load_todo(todo_list["id"], milk["id"]))
        self.assertFalse(self.store.delete_todo(todo_list["id"], milk["id"]))

    def test_delete_todo_scoped_to_list(self):
        groceries = self._create_list("Groceries", ["Milk"])
        hardware = self._create_list("Hardware")
        milk = groceries["todos"][0]
        self.assertFalse(self.store.delete_todo(hardware["id"], milk["id"]))
        self.assertIsNotNone(self.store.load_todo(groceries["id"], milk["id"]))

    def test_complete_all(self):
        todo_list = self._create_list("Groceries", ["Milk", "Eggs"])
        self.assertTrue(self.store.has_undone_todos(todo_list))
        self.assertTrue(self.store.complete_all_todos(todo_list["id"]))

        reloaded = self.store.load_todo_list(todo_list["id"])
        self.assertTrue(self.store.is_done_todo_list(reloaded))
        self.assertFalse(self.store.has_undone_todos(reloaded))

    def test_complete_all_on_empty_list_succeeds(self):
        todo_list = self._create_list("Empty")
        self.assertTrue(self.store.complete_all_todos(todo_list["id"]))
        self.assertFalse(self.store.is_done_todo_list(self.store.load_todo_list(todo_list["id"])))

    def test_complete_all_missing_list(self):
        self.assertFalse(self.store.complete_all_todos(12345))


class TestAuthenticate(PgStoreTestCase):

    def setUp(self):
        super().setUp()
        user = User(username="admin")
        user.set_password("secret")
        db.session.add(user)
        db.session.commit()
        db.session.remove()

    def test_correct_credentials(self):
        self.assertTrue(self.store.authenticate("admin", "secret"))

    def test_wrong_password(self):
        self.assertFalse(self.store.authenticate("admin", "wrong"))

    def test_unknown_user(self):
        self.assertFalse(self.store.authenticate("nobody", "secret"))


if __name__ == "__main__":
    unittest.main()
