"""Storage protocol for key-value backends."""

from typing import Protocol


class StorageProtocol(Protocol):
    """Interface for a durable key-value store holding text values.

    Implementations include:
    - Filesystem (one file per key)
    - In-memory (tests, ephemeral sessions)

    Backends raise StorageError (or OSError) when a read or write fails;
    callers decide whether the failure is fatal.
    """

    def get_item(self, key: str) -> str | None:
        """Read the value stored under key.

        Returns:
            The stored text, or None if nothing is stored under key.
        """
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...

    def remove_item(self, key: str) -> None:
        """Delete the value stored under key.

        Note:
            Does not raise an error if the key doesn't exist.
        """
        ...
