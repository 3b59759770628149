"""Engine objects with run-time class information and checked casts."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, TypeVar

from enginecore.names import FName

_T = TypeVar("_T", bound="UObject")

INDEX_NONE = 0xFFFFFFFF
"""Internal index of an object that is not registered anywhere."""

_POINTER_ALIGNMENT = struct.calcsize("P")

_static_classes: dict[type, "UClass"] = {}


class UObject:
    """Root of every engine object."""

    def __init__(self) -> None:
        self.fname = FName("None")
        self.uuid = 0
        self.internal_index = INDEX_NONE
        self._class: UClass | None = None

    @classmethod
    def static_class(cls) -> UClass:
        """Return the class information shared by every instance of ``cls``."""
        info = _static_classes.get(cls)
        if info is None:
            super_class = None
            for base in cls.__mro__[1:]:
                if isinstance(base, type) and issubclass(base, UObject):
                    super_class = base.static_class()
                    break
            info = UClass(cls.__name__, cls.__basicsize__, _POINTER_ALIGNMENT, super_class)
            info._python_type = cls
            _static_classes[cls] = info
        return info

    @property
    def uclass(self) -> UClass:
        """The class information of this object."""
        if self._class is None:
            self._class = type(self).static_class()
        return self._class

    @uclass.setter
    def uclass(self, value: UClass) -> None:
        self._class = value

    @property
    def name(self) -> str:
        return self.fname.to_string()

    def is_a(self, some_base: UClass | type | None) -> bool:
        """Tell whether this object is ``some_base`` or derives from it."""
        if isinstance(some_base, type):
            if not issubclass(some_base, UObject):
                return False
            some_base = some_base.static_class()
        return self.uclass.is_child_of(some_base)


class UClass(UObject):
    """Run-time information about a ``UObject`` subclass."""

    def __init__(self, name: str, size: int, alignment: int, super_class: UClass | None) -> None:
        super().__init__()
        self.fname = FName(name)
        self.size = size
        self.alignment = alignment
        self.super_class = super_class
        self._default_object: UObject | None = None
        self._python_type: type | None = None

    def is_child_of(self, some_base: UClass | None) -> bool:
        """Tell whether this class is ``some_base`` or one of its subclasses."""
        if some_base is None:
            return False
        current: UClass | None = self
        while current is not None:
            if current is some_base:
                return True
            current = current.super_class
        return False

    def default_object(self) -> UObject | None:
        """Return the class default object, built on first request.

        Classes not tied to a Python type have no default object.
        """
        if self._default_object is None and self._python_type is not None:
            self._default_object = self._python_type()
        return self._default_object

    def __repr__(self) -> str:
        return f"UClass({self.name!r})"


def cast(target: type[_T], obj: Any) -> _T | None:
    """Return ``obj`` if it is a ``target``, otherwise ``None``."""
    if obj is None:
        return None
    if isinstance(obj, target):
        return obj
    if isinstance(obj, UObject) and obj.is_a(target):
        return obj  # type: ignore[return-value]
    return None


def cast_checked(target: type[_T], obj: Any) -> _T:
    """Like ``cast``, but raise instead of returning ``None``."""
    if obj is None:
        raise ValueError("cannot cast None")
    result = cast(target, obj)
    if result is None:
        raise TypeError(f"{type(obj).__name__} is not a {target.__name__}")
    return result


def iterate_objects(objects: Mapping[Any, Any] | Iterable[Any], cls: type[_T]) -> Iterator[_T]:
    """Iterate over a snapshot of the objects in ``objects`` that are ``cls``."""
    values = objects.values() if isinstance(objects, Mapping) else objects
    matches = [found for found in (cast(cls, obj) for obj in values) if found is not None]
    return iter(matches)