"""jot: search markdown notes with a small query language."""

__version__ = "0.3.0"
