"""Which on-screen statistics groups are shown."""

from __future__ import annotations

from enginecore.names import FName
from enginecore.singleton import Singleton


def _as_name(group_name: FName | str) -> FName:
    return group_name if isinstance(group_name, FName) else FName(group_name)


class StatGroupManager(Singleton):
    """Tracks the statistics panel and its named groups."""

    def __init__(self) -> None:
        self._stat_enabled = False
        self._groups: dict[FName, bool] = {}
        self.initialize()

    def initialize(self) -> None:
        """Register the known groups, all disabled."""
        self._groups[FName("FPS")] = False
        self._groups[FName("Memory")] = False

    def is_group_enabled(self, group_name: FName | str) -> bool:
        """Tell whether a group is enabled; unknown groups are added disabled."""
        return self._groups.setdefault(_as_name(group_name), False)

    def enable_group(self, group_name: FName | str) -> None:
        self._groups[_as_name(group_name)] = True

    def disable_group(self, group_name: FName | str) -> None:
        self._groups[_as_name(group_name)] = False

    def enable_stat(self) -> None:
        """Show the statistics panel."""
        self._stat_enabled = True

    def disable_stat(self) -> None:
        """Hide the statistics panel; group states are kept."""
        self._stat_enabled = False

    def is_stat_enabled(self) -> bool:
        return self._stat_enabled