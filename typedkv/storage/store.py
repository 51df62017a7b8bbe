"""
Key-Value Store Module

This module implements the map that owns every stored TypedValue.
"""

from typing import Dict, Iterator, Optional, Tuple

from .value import TypedValue


class Store:
    """
    In-memory mapping from key to TypedValue.

    Keys are case-sensitive text. Each key holds exactly one value and
    ``set`` on an existing key replaces the old value outright. Nothing
    is persisted; the contents live as long as the instance does.

    A Store is created by the caller and handed to the command processor
    on every call, so independent instances never share state.
    """

    def __init__(self):
        """Initialize an empty store."""
        self._store: Dict[str, TypedValue] = {}

    def get(self, key: str) -> Optional[TypedValue]:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up

        Returns:
            The TypedValue if present, None otherwise
        """
        return self._store.get(key)

    def set(self, key: str, value: TypedValue) -> None:
        """
        Insert or replace the value for a key.

        Args:
            key: The key to store
            value: The TypedValue to associate with the key
        """
        self._store[key] = value

    def items(self) -> Iterator[Tuple[str, TypedValue]]:
        """Iterate over (key, value) pairs in map order."""
        return iter(list(self._store.items()))

    def size(self) -> int:
        """Get the current number of keys in the store."""
        return len(self._store)
