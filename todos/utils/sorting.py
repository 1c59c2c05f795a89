"""
Ordering helpers shared by the store backends.

Lists and todos are shown undone first, then done. Inside each group
titles are compared without regard to case, and sorted() keeps equal titles
in their original order.
"""


def _by_title(items):
    return sorted(items, key=lambda item: item['title'].lower())


def sort_todo_lists(undone, done):
    """Return undone lists then done lists, each ordered by title."""
    return _by_title(undone) + _by_title(done)


def sort_todos(undone, done):
    """Return undone todos then done todos, each ordered by title."""
    return _by_title(undone) + _by_title(done)


def partition(items, is_done):
    """Split items into (undone, done) keeping their relative order."""
    undone, done = [], []
    for item in items:
        (done if is_done(item) else undone).append(item)
    return undone, done
