"""Diagnostic line output shared by steps and the orchestrator."""

from __future__ import annotations

import logging
from typing import TextIO

logger = logging.getLogger(__name__)


class DiagnosticSink:
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self.lines: list[str] = []

    def emit(self, message: str) -> None:
        self.lines.append(message)
        logger.info("%s", message)
        if self._stream is not None:
            self._stream.write(f"{message}\n")
