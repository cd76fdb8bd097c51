"""Seedbed: idea board with market reality checks."""

__version__ = "0.1.0"
