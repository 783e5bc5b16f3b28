"""Tests for parser lookup and fax file reading."""

import logging

import pytest

from alarmfax.config import ConfigError
from alarmfax.parsers import available_parsers, get_parser
from alarmfax.parsers.base import ParserError
from alarmfax.parsers.registry import parse_fax_file, read_fax_lines


class TestLookup:
    """Test cases for get_parser()."""

    def test_all_layouts_are_registered(self):
        assert [p.name for p in available_parsers()] == ["ils_amberg", "ils_ingolstadt", "lfs_offenbach"]

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("ils_amberg", "ils_amberg"),
            ("ILS_AMBERG", "ils_amberg"),
            ("IlsAmbergParser", "ils_amberg"),
            ("ilsingolstadtparser", "ils_ingolstadt"),
            (" LFSOffenbachParser ", "lfs_offenbach"),
        ],
    )
    def test_names_and_aliases(self, name, expected):
        assert get_parser(name).name == expected

    def test_unknown_parser(self):
        with pytest.raises(ConfigError, match="Unknown fax parser: ils_nowhere"):
            get_parser("ils_nowhere")

    def test_parsers_are_shared(self):
        assert get_parser("ils_amberg") is get_parser("IlsAmbergParser")


class TestFiles:
    """Test cases for reading fax transcripts."""

    def test_line_endings_are_normalized(self, tmp_path):
        path = tmp_path / "fax.txt"
        path.write_bytes(b"  eins \r\nzwei\rdrei\n")
        assert read_fax_lines(path) == ["eins", "zwei", "drei", ""]

    def test_encoding(self, tmp_path):
        path = tmp_path / "fax.txt"
        path.write_bytes("Straße : Hauptstraße".encode("latin-1"))
        assert read_fax_lines(path, encoding="latin-1") == ["Straße : Hauptstraße"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ParserError):
            read_fax_lines(tmp_path / "missing.txt")

    def test_read_error_becomes_config_error(self, tmp_path):
        with pytest.raises(ConfigError, match="Failed to read fax file"):
            parse_fax_file(tmp_path / "missing.txt", get_parser("ils_amberg"))

    def test_parse_file(self, tmp_path, offenbach_fax, now):
        path = tmp_path / "fax.txt"
        path.write_text("\n".join(offenbach_fax), encoding="utf-8")

        result = parse_fax_file(path, get_parser("lfs_offenbach"), now=now)

        assert result.operation.operation_number == "2013-001234"


class TestDefaultSink:
    def test_diagnostics_are_logged_without_sink(self, ingolstadt_fax, now, caplog):
        parser = get_parser("ils_ingolstadt")
        with caplog.at_level(logging.WARNING, logger="alarmfax"):
            result = parser.parse_with_diagnostics(ingolstadt_fax, now=now)

        assert len(result.diagnostics) == 1
        messages = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
        assert any("Error while parsing line '22'" in m for m in messages)
        assert all(r.name == "alarmfax.parsers.fax_parser.ils_ingolstadt" for r in caplog.records if r.levelno == logging.WARNING)
