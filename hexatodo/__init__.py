"""Task manager with JSON-file and in-memory repositories and an interactive menu."""

__version__ = "0.1.0"