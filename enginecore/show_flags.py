"""Engine show flags and end-of-play reasons."""

from __future__ import annotations

from enum import IntEnum, IntFlag

from enginecore.singleton import Singleton

_ALL_BITS = (1 << 64) - 1


class EndPlayReason(IntEnum):
    """Why an actor stopped playing."""

    DESTROYED = 0
    """Removed explicitly, for example by a destroy call."""
    WORLD_TRANSITION = 1
    """The world was changed."""
    QUIT = 2
    """The program was closed."""


class EngineShowFlag(IntFlag):
    """A single thing the viewport can show or hide."""

    PRIMITIVES = 1 << 0
    BILLBOARD_TEXT = 1 << 1


class EngineShowFlags(Singleton):
    """A 64-bit set of show flags, all enabled at start."""

    def __init__(self) -> None:
        self._bits = 0
        self._name_to_flag: dict[str, EngineShowFlag] = {}
        self.initialize()

    def initialize(self) -> None:
        """Enable every flag and register the flag names."""
        self._bits = _ALL_BITS
        self._name_to_flag["Primitives"] = EngineShowFlag.PRIMITIVES
        self._name_to_flag["BillboardText"] = EngineShowFlag.BILLBOARD_TEXT

    @property
    def bits(self) -> int:
        """The raw 64-bit flag word."""
        return self._bits

    def get_single_flag(self, flag: EngineShowFlag | int) -> bool:
        """Tell whether any bit of ``flag`` is set."""
        return (self._bits & int(flag)) != 0

    def set_single_flag(self, flag: EngineShowFlag | int, enabled: bool) -> None:
        """Set or clear the bits of ``flag``."""
        mask = int(flag) & _ALL_BITS
        if enabled:
            self._bits |= mask
        else:
            self._bits &= ~mask & _ALL_BITS

    def toggle_single_flag(self, flag: EngineShowFlag | int) -> None:
        """Flip the bits of ``flag``."""
        self._bits ^= int(flag) & _ALL_BITS

    def set_flag_by_name(self, flag_name: str, enabled: bool) -> bool:
        """Set the flag registered as ``flag_name``; False if there is none."""
        flag = self._name_to_flag.get(flag_name)
        if flag is None:
            return False
        self.set_single_flag(flag, enabled)
        return True

    @classmethod
    def find_index_by_name(cls, flag_name: str) -> int:
        """Return the value of the flag named ``flag_name``, or -1."""
        flag = cls.get()._name_to_flag.get(flag_name)
        return int(flag) if flag is not None else -1