"""Training log analytics for climbing and running sessions."""

__version__ = "0.1.0"
