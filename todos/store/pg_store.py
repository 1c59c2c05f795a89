"""
Todo store backed by the todolists/todos/users tables.

Every statement is filtered by the signed-in user's username. The schema
does part of the work: UNIQUE(title, username) on todolists, and
ON DELETE CASCADE from todos to todolists.
"""

import logging

from werkzeug.security import check_password_hash

from todos.store.db_query import db_query, db_query_all
from todos.store.errors import DuplicateKeyError
from todos.store.interface import TodoStore
from todos.utils.sorting import partition

logger = logging.getLogger(__name__)


def _todo_row(row):
    # SQLite hands back 0/1 for booleans
    row['done'] = bool(row['done'])
    return row


class PgStore(TodoStore):
    """Relational backend: one SQL statement per operation where possible."""

    def sorted_todo_lists(self):
        all_todo_lists, all_todos = db_query_all(
            ("SELECT * FROM todolists"
             "  WHERE username = :username"
             "  ORDER BY lower(title) ASC",
             {'username': self.username}),
            ("SELECT * FROM todos"
             "  WHERE username = :username"
             "  ORDER BY done ASC, lower(title) ASC",
             {'username': self.username}),
        )

        todos_by_list = {}
        for todo in all_todos.rows:
            todos_by_list.setdefault(todo['todolist_id'], []).append(_todo_row(todo))

        todo_lists = all_todo_lists.rows
        for todo_list in todo_lists:
            todo_list['todos'] = todos_by_list.get(todo_list['id'], [])

        undone, done = partition(todo_lists, self.is_done_todo_list)
        return undone + done

    def sorted_todos(self, todo_list):
        result = db_query(
            "SELECT * FROM todos"
            "  WHERE todolist_id = :todolist_id AND username = :username"
            "  ORDER BY done ASC, lower(title) ASC",
            todolist_id=todo_list['id'], username=self.username,
        )
        return [_todo_row(todo) for todo in result.rows]

    def load_todo_list(self, todo_list_id):
        params = {'todolist_id': todo_list_id, 'username': self.username}
        todo_list_result, todos_result = db_query_all(
            ("SELECT * FROM todolists"
             "  WHERE id = :todolist_id AND username = :username",
             params),
            ("SELECT * FROM todos"
             "  WHERE todolist_id = :todolist_id AND username = :username",
             params),
        )
        if not todo_list_result.rows:
            return None

        todo_list = todo_list_result.rows[0]
        todo_list['todos'] = [_todo_row(todo) for todo in todos_result.rows]
        return todo_list

    def load_todo(self, todo_list_id, todo_id):
        result = db_query(
            "SELECT * FROM todos"
            "  WHERE todolist_id = :todolist_id AND id = :todo_id"
            "    AND username = :username",
            todolist_id=todo_list_id, todo_id=todo_id, username=self.username,
        )
        if not result.rows:
            return None
        return _todo_row(result.rows[0])

    def create_todo_list(self, title):
        try:
            result = db_query(
                "INSERT INTO todolists (title, username)"
                "  VALUES (:title, :username)",
                title=title, username=self.username,
            )
        except DuplicateKeyError:
            logger.info(f"Duplicate todo list title for {self.username}: {title}")
            return False
        return result.rowcount > 0

    def create_todo(self, todo_list_id, title):
        # Selecting from the user's own list keeps other users' lists out of reach
        result = db_query(
            "INSERT INTO todos (todolist_id, title, done, username)"
            "  SELECT id, :title, :done, username FROM todolists"
            "    WHERE id = :todolist_id AND username = :username",
            todolist_id=todo_list_id, title=title, done=False, username=self.username,
        )
        return result.rowcount > 0

    def delete_todo_list(self, todo_list_id):
        result = db_query(
            "DELETE FROM todolists"
            "  WHERE id = :todolist_id AND username = :username",
            todolist_id=todo_list_id, username=self.username,
        )
        return result.rowcount > 0

    def delete_todo(self, todo_list_id, todo_id):
        result = db_query(
            "DELETE FROM todos"
            "  WHERE todolist_id = :todolist_id AND id = :todo_id"
            "    AND username = :username",
            todolist_id=todo_list_id, todo_id=todo_id, username=self.username,
        )
        return result.rowcount > 0

    def toggle_done_todo(self, todo_list_id, todo_id):
        result = db_query(
            "UPDATE todos SET done = NOT done"
            "  WHERE todolist_id = :todolist_id AND id = :todo_id"
            "    AND username = :username",
            todolist_id=todo_list_id, todo_id=todo_id, username=self.username,
        )
        return result.rowcount > 0

    def complete_all_todos(self, todo_list_id):
        params = {'todolist_id': todo_list_id, 'username': self.username}
        todo_list_result, _ = db_query_all(
            ("SELECT id FROM todolists"
             "  WHERE id = :todolist_id AND username = :username",
             params),
            ("UPDATE todos SET done = :done"
             "  WHERE todolist_id = :todolist_id AND username = :username",
             {**params, 'done': True}),
        )
        return len(todo_list_result.rows) > 0

    def set_todo_list_title(self, todo_list_id, title):
        result = db_query(
            "UPDATE todolists SET title = :title"
            "  WHERE id = :todolist_id AND username = :username",
            todolist_id=todo_list_id, title=title, username=self.username,
        )
        return result.rowcount > 0

    def exists_todo_list_title(self, title):
        result = db_query(
            "SELECT 1 FROM todolists"
            "  WHERE title = :title AND username = :username",
            title=title, username=self.username,
        )
        return len(result.rows) > 0

    def authenticate(self, username, password):
        result = db_query(
            "SELECT password FROM users WHERE username = :username",
            username=username,
        )
        if not result.rows:
            logger.info(f"Sign-in rejected, unknown user: {username}")
            return False
        return check_password_hash(result.rows[0]['password'], password)
