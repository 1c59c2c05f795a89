"""
Todo store that keeps each user's lists in their Flask session.

Layout of the session:

    session['todo_stores'][username] = {
        'last_id': 9,
        'todo_lists': [{'id': 1, 'title': ..., 'todos': [{'id': 2, ...}]}],
    }

Nothing outlives the session cookie.
"""

import logging

from flask.sessions import SessionMixin
from werkzeug.security import check_password_hash

from todos.store.errors import DuplicateKeyError
from todos.store.interface import TodoStore
from todos.store.seed_data import SEED_DATA
from todos.utils.copying import deep_copy
from todos.utils.ids import next_id
from todos.utils.sorting import partition, sort_todo_lists, sort_todos

logger = logging.getLogger(__name__)


class SessionStore(TodoStore):
    """
    In-session backend.

    Reads hand back deep copies; writes find their target by scanning the
    user's document and change it in place.
    """

    def __init__(self, session, username, users=None):
        """
        Args:
            session: The session mapping (flask.session, or a dict in tests)
            username: Signed-in user, or None before sign-in
            users: {username: password_hash} accepted by authenticate()
        """
        super().__init__(username)
        self._session = session
        self._users = users or {}

    @property
    def _document(self):
        stores = self._session.setdefault('todo_stores', {})
        if self.username not in stores:
            stores[self.username] = deep_copy(SEED_DATA)
            self._touch()
        return stores[self.username]

    @property
    def _todo_lists(self):
        return self._document['todo_lists']

    def _touch(self):
        # Nested changes are invisible to Flask's session unless flagged
        if isinstance(self._session, SessionMixin):
            self._session.modified = True

    def _find_todo_list(self, todo_list_id):
        for todo_list in self._todo_lists:
            if todo_list['id'] == todo_list_id:
                return todo_list
        return None

    def _find_todo(self, todo_list_id, todo_id):
        todo_list = self._find_todo_list(todo_list_id)
        if todo_list is None:
            return None
        for todo in todo_list['todos']:
            if todo['id'] == todo_id:
                return todo
        return None

    def sorted_todo_lists(self):
        todo_lists = deep_copy(self._todo_lists)
        undone, done = partition(todo_lists, self.is_done_todo_list)
        return sort_todo_lists(undone, done)

    def sorted_todos(self, todo_list):
        undone, done = partition(todo_list['todos'], lambda todo: todo['done'])
        return deep_copy(sort_todos(undone, done))

    def load_todo_list(self, todo_list_id):
        return deep_copy(self._find_todo_list(todo_list_id))

    def load_todo(self, todo_list_id, todo_id):
        return deep_copy(self._find_todo(todo_list_id, todo_id))

    def create_todo_list(self, title):
        if self.exists_todo_list_title(title):
            return False
        self._todo_lists.append({
            'id': next_id(self._document),
            'title': title,
            'todos': [],
        })
        self._touch()
        return True

    def create_todo(self, todo_list_id, title):
        todo_list = self._find_todo_list(todo_list_id)
        if todo_list is None:
            return False
        todo_list['todos'].append({
            'id': next_id(self._document),
            'title': title,
            'done': False,
        })
        self._touch()
        return True

    def delete_todo_list(self, todo_list_id):
        todo_list = self._find_todo_list(todo_list_id)
        if todo_list is None:
            return False
        self._todo_lists.remove(todo_list)
        self._touch()
        return True

    def delete_todo(self, todo_list_id, todo_id):
        todo_list = self._find_todo_list(todo_list_id)
        todo = self._find_todo(todo_list_id, todo_id)
        if todo is None:
            return False
        todo_list['todos'].remove(todo)
        self._touch()
        return True

    def toggle_done_todo(self, todo_list_id, todo_id):
        todo = self._find_todo(todo_list_id, todo_id)
        if todo is None:
            return False
        todo['done'] = not todo['done']
        self._touch()
        return True

    def complete_all_todos(self, todo_list_id):
        todo_list = self._find_todo_list(todo_list_id)
        if todo_list is None:
            return False
        for todo in todo_list['todos']:
            todo['done'] = True
        self._touch()
        return True

    def set_todo_list_title(self, todo_list_id, title):
        todo_list = self._find_todo_list(todo_list_id)
        if todo_list is None:
            return False
        for other in self._todo_lists:
            if other is not todo_list and other['title'] == title:
                raise DuplicateKeyError(f"Todo list title already exists: {title}")
        todo_list['title'] = title
        self._touch()
        return True

    def exists_todo_list_title(self, title):
        return any(todo_list['title'] == title for todo_list in self._todo_lists)

    def authenticate(self, username, password):
        password_hash = self._users.get(username)
        if password_hash is None:
            logger.info(f"Sign-in rejected, unknown user: {username}")
            return False
        return check_password_hash(password_hash, password)
