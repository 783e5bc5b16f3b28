# Alarm Fax Parser
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Section-aware line parsing engine.

All supported fax layouts share the same scan: each line is classified (is it a
section banner?), tokenized into label and value (only lines starting with a
known keyword in keyword-gated sections), and the value is handed to the field
handler registered for `(section, label)`.

A fax layout is therefore pure configuration (`FormatDefinition`), and the
`FormatEngine` below is the only place that loops over lines.

Rules:
- Empty lines are skipped and never change the parse state.
- Errors while handling a line are reported as diagnostics; the scan then
  continues with the next line.
- Once a terminal section (the fax footer) is reached, all further lines are
  ignored.
- A resource that has not been finalized when the input ends is dropped.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping, Protocol

from alarmfax.diagnostics import Diagnostic, DiagnosticsSink, safe_report
from alarmfax.operation import Operation, OperationResource
from alarmfax.parser_utility import (
    get_message_text,
    keyword_prefix_length,
    normalize_label,
    starts_with_keyword,
    trim_lines,
)
from alarmfax.parsers.base import ParseResult


logger = logging.getLogger(__name__)


@dataclass
class ParseState:
    """
    Mutable state of a single parse.

    A state object belongs to exactly one `FormatEngine.run()` call and is
    discarded afterwards; only the operation survives.

    Attributes:
        section:
            Current section of the fax.
        gated:
            If True, only lines starting with a known keyword are processed.
        operation:
            The operation being built.
        now:
            Reference time used to complete partial timestamps.
        resource:
            The resource currently being collected.
        scratch:
            Format-specific intermediate values (e.g. the first half of a
            coordinate pair).
        terminated:
            True once a terminal section has been reached.
    """

    section: str
    gated: bool
    operation: Operation
    now: datetime
    resource: OperationResource = field(default_factory=OperationResource)
    scratch: dict[str, Any] = field(default_factory=dict)
    terminated: bool = False

    def finalize_resource(self) -> None:
        """Move the pending resource into the operation and start a new one."""

        self.operation.add_resource(self.resource)
        self.resource = OperationResource()


FieldHandler = Callable[[ParseState, str], None]


@dataclass(frozen=True)
class Transition:
    """Result of classifying a line."""

    is_boundary: bool
    section: str
    gated: bool


@dataclass(frozen=True)
class Token:
    """A line split into dispatch label and value."""

    label: str
    value: str


@dataclass(frozen=True)
class LineOutcome:
    """Result of processing one line: success or a fault message."""

    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


_OK = LineOutcome()


class SectionClassifier(Protocol):
    def classify(self, line: str, state: ParseState) -> Transition:
        """Return the section the machine is in after seeing `line`."""

        raise NotImplementedError


class LineTokenizer(Protocol):
    def tokenize(self, line: str, keywords: tuple[str, ...], gated: bool) -> Token | None:
        """Split a line into label and value, or return None to skip it."""

        raise NotImplementedError


@dataclass(frozen=True)
class SectionRule:
    """A banner token and the section it starts."""

    token: str
    section: str
    gated: bool = True


class BannerClassifier:
    """Detect section banners by substring.

    Rules are checked in order and the first one whose token occurs in the line
    wins. The check is case-sensitive. Banner lines carry no field data.
    """

    def __init__(self, rules: Iterable[SectionRule]) -> None:
        self.rules = tuple(rules)

    def classify(self, line: str, state: ParseState) -> Transition:
        for rule in self.rules:
            if rule.token in line:
                return Transition(is_boundary=True, section=rule.section, gated=rule.gated)
        return Transition(is_boundary=False, section=state.section, gated=state.gated)


class KeywordClassifier:
    """Select the section from the keyword a line starts with.

    Used by layouts without banners where every field line begins with its own
    keyword. Keywords without a transition keep the current section. Lines that
    start with no keyword at all move the machine to `fallback_section`.
    """

    def __init__(
        self,
        keywords: Iterable[str],
        transitions: Mapping[str, str],
        fallback_section: str,
    ) -> None:
        self.keywords = tuple(keywords)
        self.transitions = MappingProxyType(dict(transitions))
        self.fallback_section = fallback_section

    def classify(self, line: str, state: ParseState) -> Transition:
        matched, keyword = starts_with_keyword(line, self.keywords)
        if not matched:
            return Transition(is_boundary=False, section=self.fallback_section, gated=True)
        section = self.transitions.get(keyword, state.section)
        return Transition(is_boundary=False, section=section, gated=True)


class ColonTokenizer:
    """Split `Label : value` lines.

    In gated sections a line must start with a keyword. The label ends at the
    first colon at or after the keyword; without a colon it ends right after
    the keyword. In ungated sections the whole line is the value.
    """

    def tokenize(self, line: str, keywords: tuple[str, ...], gated: bool) -> Token | None:
        if not gated:
            return Token(label="", value=line)

        matched, keyword = starts_with_keyword(line, keywords)
        if not matched:
            return None

        start = keyword_prefix_length(line, keyword)
        colon = line.find(":", start)
        if colon == -1:
            # No colon (happens occasionally): the keyword alone is the label.
            return Token(label=normalize_label(line[:start]), value=line[start:].strip())

        return Token(label=normalize_label(line[:colon]), value=line[colon + 1:].strip())


class KeywordTokenizer:
    """Use the matched keyword itself as label and the rest of the line as value."""

    def tokenize(self, line: str, keywords: tuple[str, ...], gated: bool) -> Token | None:
        matched, keyword = starts_with_keyword(line, keywords)
        if not matched:
            return None if gated else Token(label="", value=line)
        return Token(label=normalize_label(keyword), value=get_message_text(line, keyword))


@dataclass(frozen=True)
class FormatDefinition:
    """
    Configuration of one fax layout.

    Attributes:
        name:
            Registry id of the layout (e.g. `ils_amberg`).
        description:
            Human-readable description.
        keywords:
            Field keywords, in match priority order.
        initial_section:
            Section before the first banner.
        classifier:
            Section transition rules.
        tokenizer:
            Label/value splitting rules.
        fields:
            Dispatch table `(section, label) -> handler`. Ungated sections use
            the empty label.
        terminal_sections:
            Sections after which the rest of the fax is ignored.
        aliases:
            Alternative registry names.
    """

    name: str
    description: str
    keywords: tuple[str, ...]
    initial_section: str
    classifier: SectionClassifier
    tokenizer: LineTokenizer
    fields: Mapping[tuple[str, str], FieldHandler]
    terminal_sections: frozenset[str] = frozenset()
    initial_gated: bool = True
    aliases: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        normalized = {(section, normalize_label(label)): handler for (section, label), handler in self.fields.items()}
        object.__setattr__(self, "fields", MappingProxyType(normalized))
        object.__setattr__(self, "keywords", tuple(self.keywords))


class FormatEngine:
    """Run the line scan for one `FormatDefinition`.

    The engine holds no per-parse state, so one instance can be shared by
    concurrent callers.
    """

    def __init__(self, definition: FormatDefinition) -> None:
        self.definition = definition

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def description(self) -> str:
        return self.definition.description

    def new_state(self, now: datetime | None = None) -> ParseState:
        return ParseState(
            section=self.definition.initial_section,
            gated=self.definition.initial_gated,
            operation=Operation(),
            now=now or datetime.now(),
        )

    def run(
        self,
        lines: Iterable[str],
        *,
        sink: DiagnosticsSink | None = None,
        now: datetime | None = None,
    ) -> ParseResult:
        """
        Parse all lines of one fax.

        Args:
            lines:
                Fax lines in order. Surrounding whitespace is removed.
            sink:
                Optional receiver for diagnostics.
            now:
                Reference time for partial timestamps (default: current time).

        Returns:
            The operation and the diagnostics collected during the scan.
        """

        state = self.new_state(now)
        diagnostics: list[Diagnostic] = []

        for index, line in enumerate(trim_lines(lines)):
            outcome = self.process_line(state, line)
            if outcome.ok:
                continue
            diagnostic = Diagnostic(line_index=index, message=str(outcome.error), line=line)
            diagnostics.append(diagnostic)
            safe_report(sink, diagnostic)

        if state.resource != OperationResource():
            logger.debug("Dropping unfinished resource at end of fax: %s", state.resource.full_name)

        logger.debug(
            "Parsed fax with %s: %d resource(s), %d diagnostic(s)",
            self.definition.name,
            len(state.operation.resources),
            len(diagnostics),
        )
        return ParseResult(operation=state.operation, diagnostics=diagnostics)

    def process_line(self, state: ParseState, line: str) -> LineOutcome:
        """Apply one line to the parse state."""

        if not line or state.terminated:
            return _OK

        definition = self.definition
        before = (state.section, state.gated, state.terminated)
        try:
            transition = definition.classifier.classify(line, state)
            state.section = transition.section
            state.gated = transition.gated
            if transition.section in definition.terminal_sections:
                state.terminated = True
            if transition.is_boundary:
                return _OK

            token = definition.tokenizer.tokenize(line, definition.keywords, state.gated)
            if token is None:
                return _OK

            handler = definition.fields.get((state.section, token.label))
            if handler is None:
                return _OK

            handler(state, token.value)
        except Exception as exc:  # noqa: BLE001
            # A faulty line leaves the machine where it was.
            state.section, state.gated, state.terminated = before
            return LineOutcome(error=str(exc) or type(exc).__name__)

        return _OK
