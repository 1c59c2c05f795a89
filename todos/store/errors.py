class StoreError(Exception):
    """Base class for errors raised by a todo store."""


class DuplicateKeyError(StoreError):
    """A write collided with a uniqueness rule, e.g. a list title the user already has."""
