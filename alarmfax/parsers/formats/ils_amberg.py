# Alarm Fax Parser
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""ILS Amberg layout.

Sections are introduced by banner lines (`MITTEILER`, `EINSATZORT`, ...) and
contain `Label : value` lines. Remarks are free text. Dispatched units are
listed as `Name`, optional `Gerät` lines and a closing `Alarmiert` line; a unit
is only recorded once its `Alarmiert` line has been seen. The incident location
may be given as Gauss-Krüger coordinates (`X`, then `Y`).
"""

from alarmfax.parser_utility import read_zip_code_from_city
from alarmfax.parsers import fields
from alarmfax.parsers.engine import (
    BannerClassifier,
    ColonTokenizer,
    FormatDefinition,
    ParseState,
    SectionRule,
)


HEADER = "header"
MITTEILER = "mitteiler"
KOORDINATEN = "koordinaten"
EINSATZORT = "einsatzort"
EINSATZGRUND = "einsatzgrund"
BEMERKUNGEN = "bemerkungen"
EINSATZMITTEL = "einsatzmittel"
FOOTER = "footer"


KEYWORDS = (
    "Einsatznummer", "Name", "Rufnummer", "Straße", "Haus-Nr.",
    "Ort", "Objekt", "Station", "Schlagw.",
    "Stichwort", "Alarmiert", "Gerät", "X", "Y",
)

SECTION_RULES = (
    SectionRule("MITTEILER", MITTEILER),
    SectionRule("EINSATZORT", EINSATZORT),
    SectionRule("EINSATZGRUND", EINSATZGRUND),
    SectionRule("BEMERKUNGEN", BEMERKUNGEN, gated=False),
    SectionRule("EINSATZMITTEL", EINSATZMITTEL),
    SectionRule("ENDE ALARMFAX", FOOTER, gated=False),
    SectionRule("KOORDINATEN", KOORDINATEN),
)


def _einsatzort_city(state: ParseState, value: str) -> None:
    zip_code = read_zip_code_from_city(value)
    city = value.replace(zip_code, "").strip() if zip_code else value

    # The city is often followed by a dash and the municipality repeated a few
    # times ("City A - City A City A"). Map services do fine without it.
    dash = city.find("-")
    if dash != -1:
        city = city[:dash].strip()

    state.operation.einsatzort.zip_code = zip_code
    state.operation.einsatzort.city = city


FORMAT = FormatDefinition(
    name="ils_amberg",
    description="Integrierte Leitstelle Amberg",
    aliases=("IlsAmbergParser",),
    keywords=KEYWORDS,
    initial_section=HEADER,
    classifier=BannerClassifier(SECTION_RULES),
    tokenizer=ColonTokenizer(),
    terminal_sections=frozenset({FOOTER}),
    fields={
        (HEADER, "EINSATZNUMMER"): fields.set_field("operation_number"),
        (KOORDINATEN, "X"): fields.geo_easting,
        (KOORDINATEN, "Y"): fields.geo_northing("einsatzort"),
        (MITTEILER, "NAME"): fields.set_field("messenger"),
        (MITTEILER, "RUFNUMMER"): fields.append_formatted("messenger", "Nr.: {}"),
        (EINSATZORT, "STRAßE"): fields.set_field("einsatzort.street"),
        (EINSATZORT, "HAUS-NR."): fields.set_field("einsatzort.street_number"),
        (EINSATZORT, "ORT"): _einsatzort_city,
        (EINSATZORT, "OBJEKT"): fields.set_field("einsatzort.property"),
        (EINSATZORT, "STATION"): fields.set_custom("Einsatzort Station"),
        (EINSATZGRUND, "SCHLAGW."): fields.set_field("keywords.keyword"),
        (EINSATZGRUND, "STICHWORT"): fields.set_field("keywords.emergency_keyword"),
        (EINSATZMITTEL, "NAME"): fields.set_resource_field("full_name"),
        (EINSATZMITTEL, "GERÄT"): fields.add_requested_equipment,
        (EINSATZMITTEL, "ALARMIERT"): fields.finalize_resource_alerted,
        (BEMERKUNGEN, ""): fields.append_field("picture"),
    },
)
