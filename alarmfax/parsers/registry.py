# Alarm Fax Parser
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Fax parser registry."""

from datetime import datetime
from pathlib import Path

from alarmfax.config import ConfigError
from alarmfax.diagnostics import DiagnosticsSink
from alarmfax.parser_utility import trim_lines
from alarmfax.parsers.base import ParseResult, ParserError
from alarmfax.parsers.fax_parser import FaxParser
from alarmfax.parsers.formats import FORMATS


# Bump this whenever parsing semantics change in a way that should force
# re-parsing of fax files even if the file bytes are unchanged.
PARSING_VERSION = 1


_PARSERS: list[FaxParser] = [FaxParser(definition) for definition in FORMATS]


def available_parsers() -> list[FaxParser]:
    """Return all registered parsers in registration order."""

    return list(_PARSERS)


def get_parser(name: str) -> FaxParser:
    """Select a parser by name.

    Args:
        name:
            Parser id (e.g. `ils_amberg`) or one of its aliases. Case is
            ignored.

    Returns:
        A parser instance.

    Raises:
        ConfigError:
            If no parser is registered under this name.
    """

    wanted = name.strip().casefold()
    for parser in _PARSERS:
        names = (parser.name, *parser.definition.aliases)
        if wanted in {n.casefold() for n in names}:
            return parser

    supported = ", ".join(p.name for p in _PARSERS)
    raise ConfigError(f"Unknown fax parser: {name} (supported: {supported})")


def read_fax_lines(path: Path, *, encoding: str = "utf-8") -> list[str]:
    """Read a fax transcript and return its trimmed lines."""

    try:
        raw = path.read_text(encoding=encoding)
    except Exception as exc:  # noqa: BLE001
        raise ParserError(f"Failed to read fax file: {exc}", path=path) from exc

    text = raw.replace("\r\n", "\n").replace("\r", "\n")
    return trim_lines(text.split("\n"))


def parse_fax_file(
    path: Path,
    parser: FaxParser,
    *,
    encoding: str = "utf-8",
    sink: DiagnosticsSink | None = None,
    now: datetime | None = None,
) -> ParseResult:
    """Read and parse a fax file and normalize read errors to ConfigError."""

    try:
        lines = read_fax_lines(path, encoding=encoding)
    except ParserError as exc:
        raise ConfigError(str(exc)) from exc

    return parser.parse_with_diagnostics(lines, sink=sink, now=now)
