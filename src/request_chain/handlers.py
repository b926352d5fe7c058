"""Dispatch handlers and the chain that selects one of them."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from request_chain.diagnostics import DiagnosticSink
from request_chain.models.request import Request
from request_chain.models.run_outcome import RunOutcome

logger = logging.getLogger(__name__)


class Handler:
    name: str = "handler"

    def matches(self, request: Request) -> bool:
        raise NotImplementedError("Handler.matches must be implemented by subclasses.")

    def act(self, request: Request, sink: DiagnosticSink) -> RunOutcome:
        raise NotImplementedError("Handler.act must be implemented by subclasses.")


class PaymentHandler(Handler):
    payment_method: str = ""

    def matches(self, request: Request) -> bool:
        payment = request.get("payment")
        return payment is not None and payment == self.payment_method

    def act(self, request: Request, sink: DiagnosticSink) -> RunOutcome:
        sink.emit(f"Processing payment request via {self.payment_method}.")
        return RunOutcome.handled(self.name)


class QiwiHandler(PaymentHandler):
    name = "qiwi"
    payment_method = "QIWI"


class SberbankHandler(PaymentHandler):
    name = "sberbank"
    payment_method = "Sberbank"


class HandlerChain:
    def __init__(self, steps: Iterable[Handler]) -> None:
        self.steps: tuple[Handler, ...] = tuple(steps)

    def run(self, request: Request, sink: DiagnosticSink) -> Optional[RunOutcome]:
        """
        Walks handlers in order and stops at the first one whose action terminates the run.
        Returns None when no handler matched.
        """
        for step in self.steps:
            if not step.matches(request):
                logger.debug("Handler %s skipped", step.name)
                continue
            logger.debug("Handler %s matched", step.name)
            outcome = step.act(request, sink)
            if outcome.terminated:
                return outcome
        return None
