"""Engine runtime core: names, object reflection, delegates, show flags, console, font atlas, debug lines, scene files."""

__version__ = "0.1.0"