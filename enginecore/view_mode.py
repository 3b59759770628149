"""Global view modes and the rasterizer settings they apply."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, IntEnum

from enginecore.singleton import Singleton


class ViewModeIndex(IntEnum):
    DEFAULT = 0
    """No global rasterizer override."""
    SOLID = 1
    WIREFRAME = 2


class FillMode(Enum):
    SOLID = "solid"
    WIREFRAME = "wireframe"


class CullMode(Enum):
    NONE = "none"
    FRONT = "front"
    BACK = "back"


@dataclass(frozen=True)
class RasterizerDesc:
    """Rasterizer settings."""

    fill_mode: FillMode = FillMode.SOLID
    cull_mode: CullMode = CullMode.BACK
    front_counter_clockwise: bool = False
    depth_clip_enable: bool = True
    multisample_enable: bool = False


class ViewMode(Singleton):
    """Holds the current view mode and a rasterizer for each overriding mode."""

    def __init__(self) -> None:
        self._current = ViewModeIndex.SOLID
        self._rasterizers: dict[ViewModeIndex, RasterizerDesc] = {}

    def initialize(self) -> None:
        """Build the rasterizer settings and reset to the default mode."""
        solid = RasterizerDesc(
            fill_mode=FillMode.SOLID,
            cull_mode=CullMode.BACK,
            front_counter_clockwise=False,
            depth_clip_enable=True,
            multisample_enable=True,
        )
        self._rasterizers[ViewModeIndex.SOLID] = solid
        self._rasterizers[ViewModeIndex.WIREFRAME] = replace(solid, fill_mode=FillMode.WIREFRAME)
        self._current = ViewModeIndex.DEFAULT

    @property
    def view_mode(self) -> ViewModeIndex:
        return self._current

    def set_view_mode(self, view_mode: ViewModeIndex | int) -> None:
        """Switch mode; raise ValueError for an unknown mode."""
        self._current = ViewModeIndex(view_mode)

    def current_rasterizer(self) -> RasterizerDesc | None:
        """Return the settings for the current mode, or None if it has none."""
        return self._rasterizers.get(self._current)