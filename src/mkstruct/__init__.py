"""Create directory and file structures from plain-text tree depictions."""

__version__ = "0.1.0"
