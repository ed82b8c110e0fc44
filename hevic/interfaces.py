from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, Union

# Top-level JSON document: an array or an object.
Document = Union[list[Any], dict[str, Any]]


class JsonDocumentStore(Protocol):
    """
    A single JSON document persisted at a fixed path, replaced wholesale on every write.
    """

    @property
    def path(self) -> Path:
        ...

    async def overwrite(self, value: Document | None = None) -> None:
        """Replace the document with `value`, or empty the file when no value is given."""
        ...

    async def update(self, new_data: Document) -> None:
        """Replace the document with `new_data` (no merge)."""
        ...

    @property
    def data(self) -> Document:
        """Read and parse the full document from disk."""
        ...
