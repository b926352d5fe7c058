"""Public package exports."""

from request_chain.diagnostics import DiagnosticSink
from request_chain.handlers import Handler
from request_chain.handlers import HandlerChain
from request_chain.handlers import PaymentHandler
from request_chain.handlers import QiwiHandler
from request_chain.handlers import SberbankHandler
from request_chain.middleware import AgeMiddleware
from request_chain.middleware import CountryMiddleware
from request_chain.middleware import ExactMatchMiddleware
from request_chain.middleware import Middleware
from request_chain.middleware import MiddlewareChain
from request_chain.middleware import NameMiddleware
from request_chain.models import OutcomeStatus
from request_chain.models import Request
from request_chain.models import RunOutcome
from request_chain.orchestrator import ChainConfigurationError
from request_chain.orchestrator import Orchestrator

__all__ = [
    "AgeMiddleware",
    "ChainConfigurationError",
    "CountryMiddleware",
    "DiagnosticSink",
    "ExactMatchMiddleware",
    "Handler",
    "HandlerChain",
    "Middleware",
    "MiddlewareChain",
    "NameMiddleware",
    "Orchestrator",
    "OutcomeStatus",
    "PaymentHandler",
    "QiwiHandler",
    "Request",
    "RunOutcome",
    "SberbankHandler",
]
