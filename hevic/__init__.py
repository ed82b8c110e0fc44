from __future__ import annotations

from .interfaces import Document, JsonDocumentStore
from .options import StoreOptions
from .store import Store

# `hevic.db(path)` reads the same as the original package export.
db = Store

__all__ = [
    "Document",
    "JsonDocumentStore",
    "Store",
    "StoreOptions",
    "db",
]
