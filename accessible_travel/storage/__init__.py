"""Backing store for directory data and generated trip plans."""
from .memory import InMemoryTable, Storage, Table, get_storage

__all__ = [
    "InMemoryTable",
    "Storage",
    "Table",
    "get_storage",
]
