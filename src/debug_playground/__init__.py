"""Debug playground - a small program for exercising debugger features."""

__version__ = "0.1.0"
