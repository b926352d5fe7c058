"""Pydantic model describing how a run ended."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, computed_field


class OutcomeStatus(str, Enum):
    HANDLED = "handled"
    REJECTED = "rejected"
    UNHANDLED = "unhandled"


class RunOutcome(BaseModel):
    status: OutcomeStatus
    handler: Optional[str] = None  # name of the handler that fired

    @computed_field  # type: ignore[prop-decorator]
    @property
    def terminated(self) -> bool:
        return self.status is not OutcomeStatus.UNHANDLED

    @classmethod
    def handled(cls, handler: str) -> "RunOutcome":
        return cls(status=OutcomeStatus.HANDLED, handler=handler)

    @classmethod
    def rejected(cls) -> "RunOutcome":
        return cls(status=OutcomeStatus.REJECTED)

    @classmethod
    def unhandled(cls) -> "RunOutcome":
        return cls(status=OutcomeStatus.UNHANDLED)
