"""Senior care assistant chat relay."""

__version__ = "1.0.0"
