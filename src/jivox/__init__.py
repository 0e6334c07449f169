"""Jivox: a personal task-tracking assistant driven by short text commands."""

__version__ = "0.1.0"
