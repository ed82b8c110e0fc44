from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def dump_json(value: Any, *, indent: int | None) -> str:
    """
    Serialize `value` to JSON text.

    Compact output (indent=None) has no whitespace between tokens.
    Raises TypeError for unserializable values, ValueError for circular references.
    """
    if indent is None:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(value, ensure_ascii=False, indent=indent)


def load_json(text: str) -> Any:
    return json.loads(text)


def read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def write_text(path: Path, text: str) -> None:
    """Truncate and replace the file at `path` with `text`."""
    with path.open("w", encoding="utf-8") as f:
        f.write(text)
