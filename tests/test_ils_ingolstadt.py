"""Tests for the ILS Ingolstadt layout."""

import pytest

from alarmfax.parsers import get_parser


@pytest.fixture
def parser():
    return get_parser("ils_ingolstadt")


class TestFullFax:
    """Parse a complete fax and check every field."""

    @pytest.fixture
    def result(self, parser, ingolstadt_fax, sink, now):
        return parser.parse_with_diagnostics(ingolstadt_fax, sink=sink, now=now)

    def test_operation_number_from_sender_line(self, result):
        assert result.operation.operation_number == "7.1 234567"

    def test_einsatzort(self, result):
        operation = result.operation
        assert operation.einsatzort.street == "Hauptstraße"
        assert operation.einsatzort.street_number == "12"
        assert operation.einsatzort.zip_code == "85049"
        assert operation.einsatzort.city == "Ingolstadt"
        assert operation.einsatzort.property == "Klinikum"
        assert operation.einsatzort.intersection == "Nebenstraße"
        assert operation.operation_plan == "P-42"

    def test_custom_data(self, result):
        assert result.operation.custom_data == {
            "Einsatzort Zusatz": "Hinterhaus",
            "Einsatzort Gemeinde": "Ingolstadt",
            "Einsatzort Station": "Wache Süd",
            "Zielort Zusatz": "",
            "Zielort Gemeinde": "",
            "Zielort Station": "Wache Nord",
        }

    def test_zielort(self, result):
        zielort = result.operation.zielort
        assert zielort.street == "Krankenhausweg"
        assert zielort.street_number == "3"
        assert zielort.property == "Klinikum Nord"

    def test_zielort_city_is_cut_from_einsatzort_city(self, result):
        # "Manching-Nord" has its dash at index 8.
        assert result.operation.zielort.city == "Ingolsta"

    def test_event(self, result):
        assert result.operation.keywords.keyword == "Brand Wohnhaus"
        assert result.operation.priority == "1"

    def test_remarks(self, result):
        assert result.operation.picture == "Zufahrt über Hof\nHydrant vor dem Haus"

    def test_resources(self, result):
        assert [r.full_name for r in result.operation.resources] == ["FL IN 11/1", "FL IN 30/1"]
        assert all(r.timestamp is None for r in result.operation.resources)

    def test_malformed_resource_line_is_reported(self, result, sink):
        assert len(result.diagnostics) == 1
        diagnostic = result.diagnostics[0]
        assert diagnostic.line_index == 22
        assert diagnostic.line == "Rettungsdienst ohne Trenner"
        assert ">>" in diagnostic.message
        assert sink.diagnostics == result.diagnostics


class TestFields:
    def test_zielort_city_without_dash(self, parser, now):
        operation = parser.parse(["====== ZIELORT ======", "Ort : Manching"], now=now)
        assert operation.zielort.city == "Manching"

    def test_zielort_dash_beyond_einsatzort_city(self, parser, sink, now):
        """The Einsatzort city is too short to cut, so the line is reported."""
        result = parser.parse_with_diagnostics(
            [
                "====== EINSATZORT ======",
                "Ort : 85049 Etting",
                "====== ZIELORT ======",
                "Ort : Gaimersheim-Rackertshofen",
            ],
            sink=sink,
            now=now,
        )

        assert [d.line_index for d in sink.diagnostics] == [3]
        assert result.operation.zielort.city == "Gaimersheim-Rackertshofen"
        assert "Zielort Gemeinde" not in result.operation.custom_data

    def test_street_without_house_number(self, parser, now):
        operation = parser.parse(["====== EINSATZORT ======", "Straße : Marktplatz"], now=now)
        assert operation.einsatzort.street == "Marktplatz"
        assert operation.einsatzort.street_number == ""

    def test_sender_without_operation_number(self, parser, now):
        operation = parser.parse(["Absender : ILS Ingolstadt"], now=now)
        assert operation.operation_number == ""

    def test_zielort_dash_at_end_of_einsatzort_city(self, parser, sink, now):
        operation = parser.parse(
            [
                "====== EINSATZORT ======",
                "Ort : 85049 Etting",
                "====== ZIELORT ======",
                "Ort : Hepber-Ost",
            ],
            sink=sink,
            now=now,
        )

        assert sink.diagnostics == []
        assert operation.zielort.city == "Etting"
