"""
Abstract todo store interface.

Views talk to a TodoStore and never to a concrete backend. Each store is
built for one request and bound to the signed-in user's username.
"""

from abc import ABC, abstractmethod


class TodoStore(ABC):
    """
    Abstract base class for todo stores.

    Implementations must:
    - Scope every read and write to self.username
    - Return copies the caller may mutate freely
    - Report "not found" and "duplicate title" as False/None, and raise for
      anything unexpected
    """

    def __init__(self, username):
        self.username = username

    @abstractmethod
    def sorted_todo_lists(self) -> list[dict]:
        """
        All of the user's todo lists, each with its todos.

        Undone lists come first, then done lists; both groups are ordered by
        title, ignoring case.
        """

    @abstractmethod
    def sorted_todos(self, todo_list: dict) -> list[dict]:
        """The list's todos, undone first, then done, each group by title."""

    @abstractmethod
    def load_todo_list(self, todo_list_id: int) -> dict | None:
        """The todo list with its todos, or None if the user has no such list."""

    @abstractmethod
    def load_todo(self, todo_list_id: int, todo_id: int) -> dict | None:
        """The todo, or None if either the list or the todo is missing."""

    @abstractmethod
    def create_todo_list(self, title: str) -> bool:
        """
        Create an empty todo list.

        Returns:
            True on success, False if the user already has a list with this title
        """

    @abstractmethod
    def create_todo(self, todo_list_id: int, title: str) -> bool:
        """Add an undone todo to the list. False if the list is missing."""

    @abstractmethod
    def delete_todo_list(self, todo_list_id: int) -> bool:
        """Delete the list and all of its todos. False if the list is missing."""

    @abstractmethod
    def delete_todo(self, todo_list_id: int, todo_id: int) -> bool:
        """Delete one todo from one list. False if either is missing."""

    @abstractmethod
    def toggle_done_todo(self, todo_list_id: int, todo_id: int) -> bool:
        """Flip a todo between done and undone. False if it is missing."""

    @abstractmethod
    def complete_all_todos(self, todo_list_id: int) -> bool:
        """
        Mark every todo in the list as done.

        An empty list still counts as success. False only if the list is missing.
        """

    @abstractmethod
    def set_todo_list_title(self, todo_list_id: int, title: str) -> bool:
        """
        Rename a todo list.

        Returns:
            True on success, False if the list is missing

        Raises:
            DuplicateKeyError: another of the user's lists already has the title
        """

    @abstractmethod
    def exists_todo_list_title(self, title: str) -> bool:
        """Does the user own a list with exactly this title?"""

    @abstractmethod
    def authenticate(self, username: str, password: str) -> bool:
        """
        Check a username and plaintext password against the stored hash.

        An unknown username and a wrong password both give False.
        """

    def is_done_todo_list(self, todo_list: dict) -> bool:
        """A list is done when it has at least one todo and every todo is done."""
        todos = todo_list['todos']
        return len(todos) > 0 and all(todo['done'] for todo in todos)

    def has_undone_todos(self, todo_list: dict) -> bool:
        return any(not todo['done'] for todo in todo_list['todos'])
