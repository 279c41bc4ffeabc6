"""hiit-timer: a countdown interval trainer for the terminal."""

__version__ = "0.1.0"
