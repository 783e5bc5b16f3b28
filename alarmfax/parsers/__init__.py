"""Alarm fax parsing.

A parser turns the trimmed lines of one fax into an `Operation`. All parsers
share one section-aware engine (`engine.FormatEngine`); the supported fax
layouts are configurations of it (`formats`).

Parsers are looked up by name via `get_parser()`.
"""

from alarmfax.parsers.base import AlarmfaxParser, ParseResult
from alarmfax.parsers.registry import available_parsers, get_parser

__all__ = [
    "AlarmfaxParser",
    "ParseResult",
    "available_parsers",
    "get_parser",
]
