"""Model types for requests and run outcomes."""

from request_chain.models.request import Request
from request_chain.models.run_outcome import OutcomeStatus
from request_chain.models.run_outcome import RunOutcome

__all__ = [
    "OutcomeStatus",
    "Request",
    "RunOutcome",
]
