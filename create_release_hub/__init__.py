"""Interactive setup for release-hub in JavaScript projects."""

__version__ = "0.1.0"
