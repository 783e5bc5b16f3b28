# Alarm Fax Parser
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Parse diagnostics.

A fax parser never fails for a single bad line. Instead it reports the line
index and error message to a diagnostics sink supplied by the caller and moves
on to the next line.
"""

import logging
from dataclasses import dataclass, field
from typing import Protocol


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Diagnostic:
    """
    A non-fatal problem found while parsing one line.

    Attributes:
        line_index:
            0-based index of the line in the parsed transcript.
        message:
            Error message of the underlying fault.
        line:
            The offending line, if available.
    """

    line_index: int
    message: str
    line: str = ""

    def __str__(self) -> str:
        return f"Error while parsing line {self.line_index}: {self.message}"

    def to_dict(self) -> dict[str, object]:
        return {"line_index": self.line_index, "message": self.message, "line": self.line}


class DiagnosticsSink(Protocol):
    """Receiver for parse diagnostics."""

    def report(self, diagnostic: Diagnostic) -> None:
        """Record one diagnostic. Must not block."""

        raise NotImplementedError


@dataclass
class CollectingSink:
    """Keep all diagnostics in memory."""

    diagnostics: list[Diagnostic] = field(default_factory=list)

    def report(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)


@dataclass
class LoggingSink:
    """Write diagnostics to a logger as warnings."""

    name: str = "alarmfax.parsers"

    def report(self, diagnostic: Diagnostic) -> None:
        logging.getLogger(self.name).warning(
            "Error while parsing line '%d'. The error message was: %s",
            diagnostic.line_index,
            diagnostic.message,
        )


def safe_report(sink: DiagnosticsSink | None, diagnostic: Diagnostic) -> None:
    """Forward a diagnostic to a sink, ignoring errors raised by the sink."""

    if sink is None:
        return
    try:
        sink.report(diagnostic)
    except Exception:  # noqa: BLE001
        logger.exception("Diagnostics sink failed for line %d", diagnostic.line_index)
