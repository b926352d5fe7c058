"""Validation steps and the chain that runs them."""

from __future__ import annotations

import logging
import re
from decimal import Decimal
from typing import Iterable

from request_chain.diagnostics import DiagnosticSink
from request_chain.models.request import Request

logger = logging.getLogger(__name__)

DECIMAL_RE = re.compile(r"[+-]?[0-9]+(\.[0-9]+)?")


class Middleware:
    name: str = "middleware"

    def check(self, request: Request, sink: DiagnosticSink) -> bool:
        raise NotImplementedError("Middleware.check must be implemented by subclasses.")


class AgeMiddleware(Middleware):
    name = "age"
    min_age_exclusive = 20

    def check(self, request: Request, sink: DiagnosticSink) -> bool:
        age = _as_number(request.get("age"))
        if age is not None and age > self.min_age_exclusive:
            sink.emit("Age validation passed.")
            return True
        sink.emit("Age validation FAILED.")
        return False


class ExactMatchMiddleware(Middleware):
    field: str = ""
    expected: str = ""
    label: str = ""

    def check(self, request: Request, sink: DiagnosticSink) -> bool:
        value = request.get(self.field)
        if value is not None and value == self.expected:
            sink.emit(f"{self.label} validation passed.")
            return True
        sink.emit(f"{self.label} validation FAILED.")
        return False


class CountryMiddleware(ExactMatchMiddleware):
    name = "country"
    field = "country"
    expected = "Poland"
    label = "Country"


class NameMiddleware(ExactMatchMiddleware):
    name = "name"
    field = "name"
    expected = "John"
    label = "Name"


class MiddlewareChain:
    def __init__(self, steps: Iterable[Middleware]) -> None:
        self.steps: tuple[Middleware, ...] = tuple(steps)

    def run(self, request: Request, sink: DiagnosticSink) -> bool:
        for step in self.steps:
            logger.debug("Running middleware %s", step.name)
            if not step.check(request, sink):
                logger.debug("Middleware %s rejected the request", step.name)
                return False
        return True


def _as_number(value: str | int | None) -> int | Decimal | None:
    """
    Interprets a request value as a plain decimal number.
    Returns None for missing or non-numeric values so the caller treats them as failures.
    """
    if value is None:
        return None
    if isinstance(value, int):
        return value
    text = value.strip()
    if not DECIMAL_RE.fullmatch(text):
        return None
    return Decimal(text)
