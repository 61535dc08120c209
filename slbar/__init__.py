"""Status line generator for window manager bars, built from system components."""

__version__ = "1.0.0"