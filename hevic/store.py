from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import Any, Mapping

from .interfaces import Document, JsonDocumentStore
from .json_io import dump_json, load_json, read_text, write_text
from .options import StoreOptions

logger = logging.getLogger(__name__)


class Store(JsonDocumentStore):
    """
    Treats one JSON file as a mutable store.

    - Writes are coroutines; the file I/O runs in a worker thread via asyncio.to_thread.
    - `data` reads synchronously and never caches.
    - Every write replaces the whole file. No locking, no atomic rename.
    """

    def __init__(self, path: str | os.PathLike[str], options: StoreOptions | Mapping[str, Any] | None = None):
        self._path = Path(path)
        self._options = StoreOptions.coerce(options)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def options(self) -> StoreOptions:
        return self._options

    def __repr__(self) -> str:
        return f"Store(path={str(self._path)!r}, options={self._options!r})"

    async def overwrite(self, value: Document | None = None) -> None:
        if value is None or value == "":
            payload = ""
        else:
            payload = dump_json(value, indent=self._options.json_indent)
        await self._write(payload, "Overwritten JSON db.")

    async def update(self, new_data: Document) -> None:
        payload = dump_json(new_data, indent=self._options.json_indent)
        await self._write(payload, "Updated JSON db.")

    @property
    def data(self) -> Document:
        return load_json(read_text(self._path))

    async def _write(self, payload: str, message: str) -> None:
        await asyncio.to_thread(write_text, self._path, payload)
        if self._options.debug:
            logger.info(message)
