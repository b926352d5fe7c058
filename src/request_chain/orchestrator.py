"""Runs a request through the validation chain and then the handler chain."""

from __future__ import annotations

import logging
from typing import Any, Optional

from request_chain.diagnostics import DiagnosticSink
from request_chain.handlers import Handler, HandlerChain
from request_chain.middleware import Middleware, MiddlewareChain
from request_chain.models.request import Request
from request_chain.models.run_outcome import RunOutcome

logger = logging.getLogger(__name__)


class ChainConfigurationError(TypeError):
    pass


class Orchestrator:
    def __init__(self, request: Request, sink: DiagnosticSink | None = None) -> None:
        self._request: Request = request
        self._sink: DiagnosticSink = sink or DiagnosticSink()
        self._middleware: Optional[MiddlewareChain] = None
        self._handlers: Optional[HandlerChain] = None

    @property
    def sink(self) -> DiagnosticSink:
        return self._sink

    @property
    def middleware(self) -> Optional[MiddlewareChain]:
        return self._middleware

    @property
    def handlers(self) -> Optional[HandlerChain]:
        return self._handlers

    def add_middleware(self, *steps: Any) -> None:
        if not steps:
            return
        self._ensure_steps(steps, Middleware, "Error building the middleware chain.")
        self._middleware = MiddlewareChain(steps)

    def add_handlers(self, *steps: Any) -> None:
        if not steps:
            return
        self._ensure_steps(steps, Handler, "Error building the handler chain.")
        self._handlers = HandlerChain(steps)

    def handle(self) -> RunOutcome:
        if self._middleware is not None and not self._middleware.run(self._request, self._sink):
            self._sink.emit("Request did not reach a handler.")
            return RunOutcome.rejected()

        if self._handlers is not None:
            outcome = self._handlers.run(self._request, self._sink)
            if outcome is not None and outcome.terminated:
                return outcome

        self._sink.emit("Request was not processed: no handler found.")
        return RunOutcome.unhandled()

    def _ensure_steps(self, steps: tuple[Any, ...], step_type: type, message: str) -> None:
        for index, step in enumerate(steps):
            if not isinstance(step, step_type):
                self._sink.emit(message)
                logger.error("Step %d is %r, expected %s", index, step, step_type.__name__)
                raise ChainConfigurationError(
                    f"{message} Step {index} is {type(step).__name__}, expected {step_type.__name__}."
                )
