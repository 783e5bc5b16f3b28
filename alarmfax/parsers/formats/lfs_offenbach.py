# Alarm Fax Parser
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""LFS Offenbach layout.

This layout has no banners. Every field line starts with an upper-case
keyword (`EINSATZNUMMER`, `ORT `, `STRASSE`, ...) which also selects the
section. Any line that starts with no keyword switches to the end section, so
multi-line values are not supported by this layout.
"""

from alarmfax.parser_utility import read_fax_timestamp, read_zip_code_from_city
from alarmfax.parsers import fields
from alarmfax.parsers.engine import (
    FormatDefinition,
    KeywordClassifier,
    KeywordTokenizer,
    ParseState,
)


ANFANG = "anfang"
EINSATZNUMMER = "einsatznummer"
EINSATZORT = "einsatzort"
STRASSE = "strasse"
OBJEKT = "objekt"
EINSATZPLAN = "einsatzplan"
MELDEBILD = "meldebild"
EINSATZSTICHWORT = "einsatzstichwort"
HINWEIS = "hinweis"
MELDENDER = "meldender"
FAXTIME = "faxtime"
ENDE = "ende"


# Trailing blanks are part of the keyword ("ORT " must not match "ORTSTEIL").
KEYWORDS = (
    "ALARMAUSDRUCK", "EINSATZNUMMER", "ORT ", "STRASSE",
    "OBJEKT ", "EINSATZPLANNUMMER", "DIAGNOSE",
    "EINSATZSTICHWORT", "BEMERKUNGEN", "DAS FAX WURDE", "AUSDRUCK VOM", "MELDENDE(R)",
)

TRANSITIONS = {
    "EINSATZNUMMER": EINSATZNUMMER,
    "ORT ": EINSATZORT,
    "STRASSE": STRASSE,
    "OBJEKT ": OBJEKT,
    "EINSATZPLANNUMMER": EINSATZPLAN,
    "DIAGNOSE": MELDEBILD,
    "EINSATZSTICHWORT": EINSATZSTICHWORT,
    "MELDENDE(R)": MELDENDER,
    "BEMERKUNGEN": HINWEIS,
    "DAS FAX WURDE": FAXTIME,
    "AUSDRUCK VOM": ENDE,
}


def _einsatzort(state: ParseState, value: str) -> None:
    zip_code = read_zip_code_from_city(value)
    state.operation.einsatzort.zip_code = zip_code
    state.operation.einsatzort.city = value[len(zip_code):].strip()


def _fax_timestamp(state: ParseState, value: str) -> None:
    state.operation.timestamp = read_fax_timestamp(value, state.now)


FORMAT = FormatDefinition(
    name="lfs_offenbach",
    description="Leitstelle Feuerwehr Offenbach",
    aliases=("LFSOffenbachParser",),
    keywords=KEYWORDS,
    initial_section=ANFANG,
    classifier=KeywordClassifier(KEYWORDS, TRANSITIONS, fallback_section=ENDE),
    tokenizer=KeywordTokenizer(),
    fields={
        (EINSATZNUMMER, "EINSATZNUMMER"): fields.set_field("operation_number"),
        (EINSATZORT, "ORT"): _einsatzort,
        (STRASSE, "STRASSE"): fields.set_field("einsatzort.street"),
        (OBJEKT, "OBJEKT"): fields.set_field("einsatzort.property"),
        (EINSATZPLAN, "EINSATZPLANNUMMER"): fields.set_field("operation_plan"),
        (MELDEBILD, "DIAGNOSE"): fields.set_field("picture"),
        (EINSATZSTICHWORT, "EINSATZSTICHWORT"): fields.set_field("keywords.emergency_keyword"),
        (HINWEIS, "BEMERKUNGEN"): fields.append_field("comment"),
        (FAXTIME, "DAS FAX WURDE"): _fax_timestamp,
    },
)
