"""Pattern databases holding move-count lower bounds for cube states."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import Any

from .nibble_array import NibbleArray

_EMPTY = 0xF


class DatabaseCorruptError(Exception):
    """A stored database does not match the expected size."""


class PatternDatabase(ABC):
    """Maps cube states to move counts through a subclass-defined index."""

    def __init__(self, size: int, init_val: int = 0xFF) -> None:
        self._database = NibbleArray(size, init_val)
        self._size = size
        self._num_items = 0

    @abstractmethod
    def database_index(self, cube: Any) -> int:
        """Return the database slot for ``cube``."""

    def set_num_moves(self, cube: Any, num_moves: int) -> bool:
        """Store ``num_moves`` for ``cube`` if it improves the stored count."""
        return self.set_num_moves_at(self.database_index(cube), num_moves)

    def set_num_moves_at(self, index: int, num_moves: int) -> bool:
        """Store ``num_moves`` at ``index`` if lower than what is there.

        Returns True when the value was written.
        """
        old_moves = self._database[index]
        if old_moves == _EMPTY:
            self._num_items += 1
        if old_moves > num_moves:
            self._database[index] = num_moves
            return True
        return False

    def get_num_moves(self, cube: Any) -> int:
        return self.get_num_moves_at(self.database_index(cube))

    def get_num_moves_at(self, index: int) -> int:
        return self._database[index]

    @property
    def size(self) -> int:
        return self._size

    @property
    def num_items(self) -> int:
        return self._num_items

    @property
    def is_full(self) -> bool:
        return self._num_items == self._size

    def to_file(self, path: str | os.PathLike[str]) -> None:
        """Write the packed database to ``path``, replacing any existing file."""
        with open(path, "wb") as writer:
            writer.write(self._database.data())

    def from_file(self, path: str | os.PathLike[str]) -> bool:
        """Load the database from ``path``.

        Returns False if the file cannot be opened; raises
        DatabaseCorruptError if its size does not match.
        """
        try:
            with open(path, "rb") as reader:
                raw = reader.read()
        except OSError:
            return False
        if len(raw) != self._database.storage_size():
            raise DatabaseCorruptError(
                f"database file has {len(raw)} bytes, expected "
                f"{self._database.storage_size()}"
            )
        self._database.load(raw)
        self._num_items = self._size
        return True

    def inflate(self) -> list[int]:
        """Return every stored move count as a list."""
        return self._database.inflate()

    def reset(self) -> None:
        """Mark every slot empty again."""
        if self._num_items != 0:
            self._database.reset(0xFF)
            self._num_items = 0