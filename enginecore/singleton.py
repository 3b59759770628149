"""Lazily created, per-class single instances."""

from __future__ import annotations

from typing import Any, ClassVar, TypeVar

_T = TypeVar("_T", bound="Singleton")


class Singleton:
    """Base class whose subclasses each own one lazily created instance.

    ``get`` builds the instance on first use; ``destroy`` drops it so the
    next ``get`` builds a fresh one.
    """

    _instances: ClassVar[dict[type, Any]] = {}

    @classmethod
    def get(cls: type[_T]) -> _T:
        """Return the instance for this class, creating it if needed."""
        instance = Singleton._instances.get(cls)
        if instance is None:
            instance = cls()
            Singleton._instances[cls] = instance
        return instance

    @classmethod
    def destroy(cls) -> None:
        """Forget the instance for this class, if there is one."""
        Singleton._instances.pop(cls, None)