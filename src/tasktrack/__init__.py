"""tasktrack: in-memory project/task tracker with simulated remote status updates."""

__version__ = "0.1.0"
