# Alarm Fax Parser
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Fax parser interface."""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterable, Protocol

from alarmfax.diagnostics import Diagnostic, DiagnosticsSink
from alarmfax.operation import Operation


@dataclass
class ParseResult:
    """Outcome of one parse: the operation plus all non-fatal diagnostics."""

    operation: Operation
    diagnostics: list[Diagnostic] = field(default_factory=list)


class AlarmfaxParser(Protocol):
    """Interface for alarm fax parsing.

    Implementations receive the fax as a sequence of text lines (OCR and line
    splitting happen upstream) and always return an operation, even if only
    a few fields could be read.
    """

    name: str
    description: str

    def parse(
        self,
        lines: Iterable[str],
        *,
        sink: DiagnosticsSink | None = None,
        now: datetime | None = None,
    ) -> Operation:
        """Return the operation described by the given fax lines."""

        raise NotImplementedError

    def parse_with_diagnostics(
        self,
        lines: Iterable[str],
        *,
        sink: DiagnosticsSink | None = None,
        now: datetime | None = None,
    ) -> ParseResult:
        """Return the operation together with the diagnostics of the parse."""

        raise NotImplementedError


@dataclass(frozen=True)
class ParserError(RuntimeError):
    """Raised when a fax transcript cannot be read."""

    message: str
    path: Path | None = None
    line: int | None = None
    excerpt: str | None = None

    def __str__(self) -> str:  # pragma: no cover
        parts: list[str] = []

        if self.path is not None:
            if self.line is not None:
                parts.append(f"{self.path}:{self.line}: {self.message}")
            else:
                parts.append(f"{self.path}: {self.message}")
        else:
            parts.append(self.message)

        if isinstance(self.excerpt, str) and self.excerpt.strip():
            excerpt = self.excerpt.strip().replace("\n", " ")
            if len(excerpt) > 160:
                excerpt = excerpt[:157] + "..."
            parts.append(f"> {excerpt}")

        return "\n".join(parts)
