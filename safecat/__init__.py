"""Deliver standard input to a directory with the maildir algorithm."""

__version__ = "1.0.0"
__all__ = ["cli", "copying", "dirs", "errors", "naming"]