# Alarm Fax Parser
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""ILS Ingolstadt layout.

Similar to the Amberg layout, with a destination section (`ZIELORT`) and
combined street lines (`Straße : Hauptstraße Haus-Nr.: 12`). The operation
number is embedded in the sender line. Dispatched units are printed one per
line as `<unit> >> <details>`; a line in the units section without `>>` is
reported as malformed. Unlike the historic layout, the units section is not
keyword-gated, since unit lines start with no keyword. The footer starts with a
row of asterisks.
"""

from alarmfax.parser_utility import analyze_street_line, get_text_between, read_zip_code_from_city
from alarmfax.operation import OperationResource
from alarmfax.parsers import fields
from alarmfax.parsers.engine import (
    BannerClassifier,
    ColonTokenizer,
    FormatDefinition,
    ParseState,
    SectionRule,
)


HEADER = "header"
EINSATZORT = "einsatzort"
EREIGNIS = "ereignis"
ZIELORT = "zielort"
BEMERKUNG = "bemerkung"
EINSATZMITTEL = "einsatzmittel"
FOOTER = "footer"


KEYWORDS = (
    "Absender", "Objekt", "Station", "Straße", "Abschnitt",
    "Kreuzung", "Ort", "Plannummer", "Meldebild", "Priorität",
)

SECTION_RULES = (
    SectionRule("EINSATZORT", EINSATZORT),
    SectionRule("EREIGNIS", EREIGNIS),
    SectionRule("ZIELORT", ZIELORT),
    SectionRule("BEMERKUNG", BEMERKUNG, gated=False),
    SectionRule("EINSATZMITTEL", EINSATZMITTEL, gated=False),
    SectionRule("******************", FOOTER, gated=False),
)

_RESOURCE_DELIMITER = ">>"


def _operation_number(state: ParseState, value: str) -> None:
    state.operation.operation_number = get_text_between(value, "Einsatznummer:")


def _street(location: str, appendix_key: str):
    def handler(state: ParseState, value: str) -> None:
        street, street_number, appendix = analyze_street_line(value)
        target = getattr(state.operation, location)
        state.operation.custom_data[appendix_key] = appendix
        target.street = street
        target.street_number = street_number

    return handler


def _einsatzort_city(state: ParseState, value: str) -> None:
    zip_code = read_zip_code_from_city(value)
    city = value.replace(zip_code, "").strip() if zip_code else value.strip()

    # Cut the repeated municipality ("City A - City A City A").
    dash = city.find(" - ")
    if dash != -1:
        city = city[:dash]

    location = state.operation.einsatzort
    location.zip_code = zip_code
    location.city = city
    state.operation.custom_data["Einsatzort Gemeinde"] = get_text_between(value, "Gemeinde:")


def _zielort_city(state: ParseState, value: str) -> None:
    zielort = state.operation.zielort
    zielort.city = value

    dash = value.find("-")
    if dash != -1:
        # Known quirk of this layout: the truncated text is taken from the
        # Einsatzort city, not from the Zielort line.
        einsatzort_city = state.operation.einsatzort.city
        if dash > len(einsatzort_city):
            raise ValueError(
                f"Cannot truncate Einsatzort city '{einsatzort_city}' at index {dash} of Zielort '{value}'"
            )
        zielort.city = einsatzort_city[:dash]

    state.operation.custom_data["Zielort Gemeinde"] = get_text_between(value, "Gemeinde:")


def _resource(state: ParseState, value: str) -> None:
    delimiter = value.find(_RESOURCE_DELIMITER)
    if delimiter == -1:
        raise ValueError(f"Resource line without '{_RESOURCE_DELIMITER}': {value}")

    state.resource = OperationResource(full_name=value[:delimiter].strip())
    state.finalize_resource()


FORMAT = FormatDefinition(
    name="ils_ingolstadt",
    description="Integrierte Leitstelle Ingolstadt",
    aliases=("IlsIngolstadtParser",),
    keywords=KEYWORDS,
    initial_section=HEADER,
    classifier=BannerClassifier(SECTION_RULES),
    tokenizer=ColonTokenizer(),
    terminal_sections=frozenset({FOOTER}),
    fields={
        (HEADER, "ABSENDER"): _operation_number,
        (EINSATZORT, "STRAßE"): _street("einsatzort", "Einsatzort Zusatz"),
        (EINSATZORT, "ORT"): _einsatzort_city,
        (EINSATZORT, "OBJEKT"): fields.set_field("einsatzort.property"),
        (EINSATZORT, "STATION"): fields.set_custom("Einsatzort Station"),
        (EINSATZORT, "KREUZUNG"): fields.set_field("einsatzort.intersection"),
        (EINSATZORT, "PLANNUMMER"): fields.set_field("operation_plan"),
        (EREIGNIS, "MELDEBILD"): fields.set_field("keywords.keyword"),
        (EREIGNIS, "PRIORITÄT"): fields.set_field("priority"),
        (ZIELORT, "STRAßE"): _street("zielort", "Zielort Zusatz"),
        (ZIELORT, "ORT"): _zielort_city,
        (ZIELORT, "OBJEKT"): fields.set_field("zielort.property"),
        (ZIELORT, "STATION"): fields.set_custom("Zielort Station"),
        (EINSATZMITTEL, ""): _resource,
        (BEMERKUNG, ""): fields.append_field("picture"),
    },
)
