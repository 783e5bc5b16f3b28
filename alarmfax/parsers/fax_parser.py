# Alarm Fax Parser
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Parser facade for one fax layout."""

from datetime import datetime
from typing import Iterable

from alarmfax.diagnostics import DiagnosticsSink, LoggingSink
from alarmfax.operation import Operation
from alarmfax.parsers.base import ParseResult
from alarmfax.parsers.engine import FormatDefinition, FormatEngine


class FaxParser:
    """Parse faxes of one layout.

    Diagnostics go to the given sink. Without a sink they are logged as
    warnings.
    """

    def __init__(self, definition: FormatDefinition) -> None:
        self.definition = definition
        self.name = definition.name
        self.description = definition.description
        self._engine = FormatEngine(definition)

    def __repr__(self) -> str:
        return f"FaxParser({self.name!r})"

    def parse(
        self,
        lines: Iterable[str],
        *,
        sink: DiagnosticsSink | None = None,
        now: datetime | None = None,
    ) -> Operation:
        return self.parse_with_diagnostics(lines, sink=sink, now=now).operation

    def parse_with_diagnostics(
        self,
        lines: Iterable[str],
        *,
        sink: DiagnosticsSink | None = None,
        now: datetime | None = None,
    ) -> ParseResult:
        if sink is None:
            sink = LoggingSink(name=f"{__name__}.{self.name}")
        return self._engine.run(lines, sink=sink, now=now)
