from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field


class StoreOptions(BaseModel):
    """
    Options for a Store. Accepts either `indent_spaces` or the `indentSpaces` alias.

    indent_spaces == 0 means compact output (no pretty-printing).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    debug: bool = False
    indent_spaces: int = Field(default=4, ge=0, alias="indentSpaces")

    @classmethod
    def coerce(cls, options: "StoreOptions | Mapping[str, Any] | None") -> "StoreOptions":
        if options is None:
            return cls()
        if isinstance(options, StoreOptions):
            return options
        return cls.model_validate(dict(options))

    @property
    def json_indent(self) -> int | None:
        return self.indent_spaces or None
