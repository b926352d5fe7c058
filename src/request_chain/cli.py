"""CLI entrypoint."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from request_chain.diagnostics import DiagnosticSink
from request_chain.handlers import QiwiHandler, SberbankHandler
from request_chain.middleware import AgeMiddleware, CountryMiddleware, NameMiddleware
from request_chain.models.request import Request
from request_chain.orchestrator import ChainConfigurationError, Orchestrator


def default_request() -> dict[str, Any]:
    return {
        "name": "John",
        "country": "Poland",
        "age": "25",
        "payment": "QIWI",
    }


def build_orchestrator(request: Request, sink: DiagnosticSink) -> Orchestrator:
    orch = Orchestrator(request, sink)
    orch.add_middleware(AgeMiddleware(), CountryMiddleware(), NameMiddleware())
    orch.add_handlers(QiwiHandler(), SberbankHandler())
    return orch


def main(argv: list[str] | None = None) -> None:
    defaults = default_request()
    parser = argparse.ArgumentParser(description="Validate a request and dispatch it to a payment handler.")
    parser.add_argument("--name", type=str, default=defaults["name"])
    parser.add_argument("--country", type=str, default=defaults["country"])
    parser.add_argument("--age", type=str, default=defaults["age"])
    parser.add_argument("--payment", type=str, default=defaults["payment"])
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for stderr output",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), stream=sys.stderr)

    request = Request.from_mapping(
        {
            "name": args.name,
            "country": args.country,
            "age": args.age,
            "payment": args.payment,
        }
    )
    sink = DiagnosticSink(sys.stdout)

    try:
        orch = build_orchestrator(request, sink)
    except ChainConfigurationError as exc:
        raise SystemExit(1) from exc

    outcome = orch.handle()
    # A handler firing or a rejected request ends the process.
    if outcome.terminated:
        raise SystemExit(0)
