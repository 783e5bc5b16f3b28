"""Tests for the ILS Amberg layout."""

from datetime import datetime

import pytest

from alarmfax.parsers import get_parser


@pytest.fixture
def parser():
    return get_parser("ils_amberg")


class TestFullFax:
    """Parse a complete fax and check every field."""

    @pytest.fixture
    def result(self, parser, amberg_fax, sink, now):
        return parser.parse_with_diagnostics(amberg_fax, sink=sink, now=now)

    def test_no_diagnostics(self, result, sink):
        assert result.diagnostics == []
        assert sink.diagnostics == []

    def test_header(self, result):
        assert result.operation.operation_number == "T 4.1 123456"

    def test_messenger(self, result):
        assert result.operation.messenger == "Max Mustermann\nNr.: 0961 12345"

    def test_einsatzort(self, result):
        location = result.operation.einsatzort
        assert location.street == "Hauptstraße"
        assert location.street_number == "12"
        assert location.zip_code == "92224"
        assert location.city == "Amberg"
        assert location.property == "Sporthalle Nord"
        assert result.operation.custom_data == {"Einsatzort Station": "Wache 1"}

    def test_coordinates(self, result):
        location = result.operation.einsatzort
        assert location.geo_latitude == pytest.approx(49.99887, abs=1e-3)
        assert location.geo_longitude == pytest.approx(11.99852, abs=1e-3)

    def test_keywords(self, result):
        assert result.operation.keywords.keyword == "#B1014#Brand#Gebäude"
        assert result.operation.keywords.emergency_keyword == "B 3"

    def test_remarks_become_picture(self, result):
        assert result.operation.picture == "Rauchentwicklung im Keller\nPersonen evtl. noch im Gebäude"

    def test_resources(self, result):
        resources = result.operation.resources
        assert [r.full_name for r in resources] == ["7.8.1 FL AM 11/1", "7.8.1 FL AM 40/1"]
        assert resources[0].requested_equipment == ["Atemschutz"]
        assert resources[0].timestamp == datetime(2013, 3, 12, 10, 15)
        assert resources[1].requested_equipment == []
        assert resources[1].timestamp == datetime(2013, 3, 12, 10, 16)

    def test_footer_ends_the_fax(self, result):
        names = [r.full_name for r in result.operation.resources]
        assert "FL AM 99/1" not in names


class TestFields:
    """Individual field rules of the layout."""

    def test_messenger_with_phone_number(self, parser, now):
        operation = parser.parse(
            ["----- MITTEILER -----", "Name : Anrufer", "Rufnummer : 0961 1"],
            now=now,
        )
        assert operation.messenger == "Anrufer\nNr.: 0961 1"

    def test_city_without_zip_code(self, parser, now):
        operation = parser.parse(["----- EINSATZORT -----", "Ort : Amberg"], now=now)
        assert operation.einsatzort.zip_code == ""
        assert operation.einsatzort.city == "Amberg"

    def test_city_with_repeated_municipality(self, parser, now):
        operation = parser.parse(
            ["----- EINSATZORT -----", "Ort : 92245 Kümmersbruck - Kümmersbruck Haselmühl"],
            now=now,
        )
        assert operation.einsatzort.zip_code == "92245"
        assert operation.einsatzort.city == "Kümmersbruck"

    def test_street_keyword_with_double_s(self, parser, now):
        operation = parser.parse(["----- EINSATZORT -----", "STRASSE : Bahnhofstraße"], now=now)
        assert operation.einsatzort.street == "Bahnhofstraße"

    def test_alert_time_without_date(self, parser, now):
        operation = parser.parse(
            ["----- EINSATZMITTEL -----", "Name : FL AM 1", "Alarmiert : 10:15"],
            now=now,
        )
        assert operation.resources[0].timestamp == datetime(2026, 10, 17, 10, 15, 0)

    def test_invalid_coordinate_is_reported(self, parser, sink, now):
        result = parser.parse_with_diagnostics(
            ["----- KOORDINATEN -----", "X : abc", "Y : 5540279.6", "----- EINSATZORT -----", "Ort : Amberg"],
            sink=sink,
            now=now,
        )
        assert [d.line_index for d in sink.diagnostics] == [1, 2]
        assert result.operation.einsatzort.geo_latitude is None
        assert result.operation.einsatzort.city == "Amberg"

    def test_fields_outside_their_section_are_ignored(self, parser, now):
        operation = parser.parse(["Name : Niemand", "Ort : Nirgendwo"], now=now)
        assert operation.messenger == ""
        assert operation.einsatzort.city == ""
