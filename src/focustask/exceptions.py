"""Exception types raised by focustask."""


class FocusTaskError(Exception):
    """Base class for focustask errors."""


class ImportRejectedError(FocusTaskError):
    """Imported text could not be accepted as a board.

    The message is meant to be shown to the user as-is.
    """


class ClipboardError(FocusTaskError):
    """Text could not be written to the clipboard."""


class StorageError(FocusTaskError):
    """The key-value storage backend failed to read or write."""
