"""Linked-list containers, sets, a mutable string and process-scheduling tools."""

__version__ = "0.1.0"