"""gNMI message types, typed-value conversion, subscription statistics and a file watcher interface."""

__version__ = "0.1.0"
__all__ = ["messages", "stats", "value", "watch"]