"""Interned names compared without regard to letter case."""

from __future__ import annotations

from dataclasses import dataclass

from enginecore.singleton import Singleton

NAME_SIZE = 256
"""Names of this length or longer are not stored and become ``None``."""

_MASK32 = 0xFFFFFFFF


def hash_string(text: str) -> int:
    """Return the 32-bit djb2 hash of ``text``."""
    value = 5381
    for char in text:
        value = (((value << 5) + value) + ord(char)) & _MASK32
    return value


def _lower_char(char: str) -> str:
    lowered = char.lower()
    return lowered if len(lowered) == 1 else char


def hash_string_lower(text: str) -> int:
    """Return the djb2 hash of ``text`` with each character lower-cased."""
    return hash_string("".join(_lower_char(c) for c in text))


@dataclass(frozen=True)
class NameEntry:
    """A stored name and the hash used when comparing it."""

    comparison_id: int
    name: str


class NamePool(Singleton):
    """Stores every name by its case-sensitive and case-insensitive hashes."""

    def __init__(self) -> None:
        self._display: dict[int, NameEntry] = {}
        self._comparison: dict[int, NameEntry] = {}

    def resolve(self, display_hash: int) -> NameEntry:
        """Return the entry stored under ``display_hash``.

        Raises KeyError if no name has that hash.
        """
        try:
            return self._display[display_hash]
        except KeyError:
            raise KeyError(f"no name stored under hash {display_hash}") from None

    def find_or_store(self, name: str) -> int:
        """Store ``name`` if it is new and return its display hash."""
        display_hash = hash_string(name)
        if display_hash in self._display:
            return display_hash

        comparison_hash = hash_string_lower(name)
        if comparison_hash not in self._comparison:
            self._comparison[comparison_hash] = NameEntry(0, name)

        self._display[display_hash] = NameEntry(comparison_hash, name)
        return display_hash


class FName:
    """A name interned in the global pool; equality ignores letter case."""

    __slots__ = ("_display_index", "_comparison_index")

    def __init__(self, name: str | None = None) -> None:
        self._display_index = 0
        self._comparison_index = 0
        if name is None:
            return
        if not isinstance(name, str):
            raise TypeError(f"name must be a str, not {type(name).__name__}")
        if len(name) >= NAME_SIZE:
            return
        pool = NamePool.get()
        display_hash = pool.find_or_store(name)
        self._display_index = display_hash
        self._comparison_index = pool.resolve(display_hash).comparison_id if display_hash else 0

    @property
    def display_index(self) -> int:
        return self._display_index

    @property
    def comparison_index(self) -> int:
        return self._comparison_index

    @property
    def is_none(self) -> bool:
        return self._display_index == 0 and self._comparison_index == 0

    def to_string(self) -> str:
        """Return the name as first written, or ``"None"`` for an empty name."""
        if self.is_none:
            return "None"
        return NamePool.get().resolve(self._display_index).name

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"FName({self.to_string()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FName):
            return NotImplemented
        return self._comparison_index == other._comparison_index

    def __hash__(self) -> int:
        return self._comparison_index