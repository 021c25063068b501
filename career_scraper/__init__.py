"""Football career history extraction from Wikipedia articles."""

__version__ = "0.1.0"
