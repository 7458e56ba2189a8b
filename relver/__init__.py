"""Release version resolver."""

__version__ = "0.1.0"
