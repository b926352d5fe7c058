"""Pydantic model for the request passed through both chains."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict


class Request(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: Optional[str] = None
    country: Optional[str] = None
    age: str | int | None = None
    payment: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Request":
        return cls.model_validate(dict(data))

    def get(self, field: str) -> Any:
        if field not in type(self).model_fields:
            return None
        return getattr(self, field)
