"""CommandPal: natural-language to shell command service."""

__version__ = "0.1.0"
