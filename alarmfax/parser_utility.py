# Alarm Fax Parser
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Shared text helpers for fax parsers.

The helpers in this module never raise for odd input. They return empty strings
or the supplied fallback instead, so that a single strange field cannot break a
whole fax.
"""

import re
from datetime import datetime
from typing import Iterable

from dateutil import parser as dateutil_parser


# German postal codes are five digits. Accept them anywhere in the text as long
# as they are not part of a longer number.
_ZIP_RE = re.compile(r"(?<!\d)\d{5}(?!\d)")

_HOUSE_NUMBER_MARKER = "Haus-Nr.:"

# House numbers like "12", "12a", "12 a", "12-14", "12/1". A letter suffix must
# not start a word ("12 Hinterhaus").
_LETTER_SUFFIX = r"(?:\s?[a-zA-Z](?![a-zA-Z]))?"
_NUMBER_PATTERN = rf"\d+{_LETTER_SUFFIX}(?:\s?[-/]\s?\d+{_LETTER_SUFFIX})?"

_STREET_RE = re.compile(
    rf"^(?P<street>.*?\D)\s*(?P<number>{_NUMBER_PATTERN})(?:\s+(?P<appendix>.*))?$"
)
_NUMBER_RE = re.compile(rf"^(?P<number>{_NUMBER_PATTERN})\s*(?P<appendix>.*)$")

_DATE_RE = re.compile(
    r"(?<!\d)(?:0?[1-9]|[12][0-9]|3[01])[-/.](?:0?[1-9]|1[012])[-/.](?:(?:19|20)\d\d|\d\d)(?!\d)"
)
_TIME_RE = re.compile(r"(?<!\d)(?:[01]?[0-9]|2[0-3]):[0-5][0-9](?::[0-5][0-9])?(?!\d)")


def trim_lines(lines: Iterable[str]) -> list[str]:
    """Return a new list with every line stripped of surrounding whitespace."""

    return [str(line).strip() for line in lines]


def normalize_label(text: str) -> str:
    """Normalize a field label so it can be used as a dispatch key."""

    return text.strip().upper()


def starts_with_keyword(line: str, keywords: Iterable[str]) -> tuple[bool, str]:
    """
    Check whether a line starts with one of the given keywords.

    The comparison ignores case. Keywords are tried in list order and the first
    match wins, so longer keywords that share a prefix with shorter ones must be
    listed first.

    Args:
        line:
            Line to check.
        keywords:
            Candidate keywords.

    Returns:
        A tuple `(matched, keyword)`. `keyword` is the matching entry from
        `keywords` or an empty string.
    """

    line_upper = line.upper()
    for keyword in keywords:
        if keyword and line_upper.startswith(keyword.upper()):
            return True, keyword
    return False, ""


def keyword_prefix_length(line: str, keyword: str) -> int:
    """
    Return the number of characters at the start of `line` covered by `keyword`.

    Upper-casing can change the length of a text (`ß` becomes `SS`), so the
    keyword length is not always the length of the matched prefix.
    """

    target = keyword.upper()
    for length in range(len(line) + 1):
        if line[:length].upper() == target:
            return length
    return min(len(keyword), len(line))


def get_message_text(line: str, keyword: str | None) -> str:
    """
    Return the text that follows a keyword.

    Without a keyword the text after the first colon is returned. A colon
    directly following the keyword is removed as well.
    """

    text = line
    if keyword:
        text = text[keyword_prefix_length(text, keyword):].strip()
    else:
        colon = text.find(":")
        if colon != -1:
            text = text[colon + 1:]

    if text.startswith(":"):
        text = text[1:]
    return text.strip()


def read_zip_code_from_city(text: str) -> str:
    """Return the first five-digit postal code in `text` or an empty string."""

    match = _ZIP_RE.search(text or "")
    return match.group(0) if match else ""


def analyze_street_line(text: str) -> tuple[str, str, str]:
    """
    Split a street line into street name, house number and appendix.

    Supported forms:
    - `Hauptstraße 12`
    - `Hauptstraße 12a Hinterhaus`
    - `Hauptstraße Haus-Nr.: 12 Hinterhaus`

    Args:
        text:
            Street text as printed on the fax.

    Returns:
        A tuple `(street, street_number, appendix)`. If no house number can be
        found, the whole text is returned as street.
    """

    line = (text or "").strip()
    if not line:
        return "", "", ""

    marker = line.find(_HOUSE_NUMBER_MARKER)
    if marker != -1:
        street = line[:marker].strip()
        rest = line[marker + len(_HOUSE_NUMBER_MARKER):].strip()
        number_match = _NUMBER_RE.match(rest)
        if number_match is None:
            return street, rest, ""
        return street, number_match.group("number").strip(), number_match.group("appendix").strip()

    match = _STREET_RE.match(line)
    if match is None:
        return line, "", ""

    street = match.group("street").strip().rstrip(",").strip()
    number = match.group("number").strip()
    appendix = (match.group("appendix") or "").strip()
    return street, number, appendix


def get_text_between(text: str, start: str, end: str | None = None) -> str:
    """
    Return the text between `start` and `end` (or the end of the text).

    Returns an empty string if `start` does not occur.
    """

    index = text.find(start)
    if index == -1:
        return ""

    rest = text[index + len(start):]
    if end:
        end_index = rest.find(end)
        if end_index != -1:
            rest = rest[:end_index]
    return rest.strip()


def append_line(existing: str, line: str) -> str:
    """Append a line to multi-line text."""

    if not existing:
        return line
    return f"{existing}\n{line}"


def try_get_timestamp_from_message(text: str, fallback: datetime) -> datetime:
    """
    Extract a timestamp from free text.

    A date (`dd.mm.yyyy` or `dd.mm.yy`) and a time (`hh:mm` or `hh:mm:ss`) are
    searched independently. Missing parts are taken from `fallback`.

    Args:
        text:
            Free text, e.g. `12.03.2013 10:15` or just `10:15`.
        fallback:
            Timestamp used to complete partial values and returned if nothing
            usable is found.

    Returns:
        The extracted timestamp.
    """

    fragments = [m.group(0) for m in (_DATE_RE.search(text or ""), _TIME_RE.search(text or "")) if m]
    if not fragments:
        return fallback

    default = fallback.replace(second=0, microsecond=0)
    try:
        return dateutil_parser.parse(" ".join(fragments), dayfirst=True, default=default)
    except (ValueError, OverflowError):
        return fallback


def read_fax_timestamp(line: str, fallback: datetime) -> datetime:
    """Read the transmission timestamp from a fax status line."""

    return try_get_timestamp_from_message(line, fallback)
