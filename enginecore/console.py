"""Debug console: log lines, command history and built-in commands."""

from __future__ import annotations

from typing import Any

from enginecore.stats import StatGroupManager

_LOG_LIMIT = 1023

Vec2 = tuple[float, float]


def resize_to_screen(vec: Vec2, pre_ratio: Vec2, cur_ratio: Vec2) -> Vec2:
    """Rescale a window position or size after the screen ratio changed."""
    cur_min = min(cur_ratio[0], cur_ratio[1])
    pre_min = min(pre_ratio[0], pre_ratio[1])
    return (
        vec[0] * pre_ratio[0] / cur_ratio[0] * cur_min / pre_min,
        vec[1] * pre_ratio[1] / cur_ratio[1] * cur_min / pre_min,
    )


class DebugConsole:
    """Keeps the console log and runs the commands typed into it."""

    def __init__(self, stats: StatGroupManager | None = None) -> None:
        self.items: list[str] = []
        self.history: list[str] = []
        self.history_pos = -1
        self._stats = stats

    @property
    def stats(self) -> StatGroupManager:
        return self._stats if self._stats is not None else StatGroupManager.get()

    def log(self, fmt: str, *args: Any) -> str:
        """Append a %-formatted line, cut to the log line limit, and return it."""
        line = (fmt % args if args else fmt)[:_LOG_LIMIT]
        self.items.append(line)
        return line

    def submit(self, text: str) -> None:
        """Record and run a line typed into the console; empty lines are ignored."""
        if not text:
            return
        self.items.append("> " + text)
        self.history.append(text)
        self.history_pos = len(self.history)
        self.process_command(text, self.items)

    def process_command(self, command: str, log: list[str]) -> None:
        """Run ``command``, writing its output to ``log``."""
        log.append("Executing: " + command)
        if command == "clear":
            log.clear()
        elif command == "help":
            log.extend(
                [
                    "Available commands:",
                    "- clear: Clears the console.",
                    "- stat fps: Show fps stat",
                    "- stat memory: Shows memory stat",
                    "- help: Shows this help message.",
                ]
            )
        elif command == "stat fps":
            self.stats.enable_stat()
            self.stats.enable_group("FPS")
        elif command == "stat memory":
            self.stats.enable_stat()
            self.stats.enable_group("Memory")
        elif command == "stat clear":
            self.stats.disable_stat()
        else:
            log.append("Unknown command: " + command)

    def _step_history(self, step: int) -> str | None:
        if not self.history:
            return None
        self.history_pos = max(0, min(self.history_pos + step, len(self.history) - 1))
        return self.history[self.history_pos]

    def history_previous(self) -> str | None:
        """Move back in the history and return that entry, or None if empty."""
        return self._step_history(-1)

    def history_next(self) -> str | None:
        """Move forward in the history and return that entry, or None if empty."""
        return self._step_history(1)