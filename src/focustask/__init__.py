"""FocusTask - sectioned task board with local persistence."""

__version__ = "0.1.0"
