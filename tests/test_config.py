"""Tests for loading alarmfax.yaml."""

from pathlib import Path

import pytest

from alarmfax.config import CONFIG_ENV_VAR, ConfigError, find_config_path, load_config


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


class TestFindConfig:
    def test_cli_path_wins(self, monkeypatch, tmp_path):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "env.yaml"))
        assert find_config_path("cli.yaml") == Path("cli.yaml")

    def test_environment_variable(self, monkeypatch, tmp_path):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "env.yaml"))
        assert find_config_path(None) == tmp_path / "env.yaml"

    def test_current_directory(self, monkeypatch, tmp_path):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        monkeypatch.chdir(tmp_path)
        assert find_config_path(None) == Path.cwd() / "alarmfax.yaml"


class TestLoadConfig:
    """Test cases for load_config()."""

    def test_minimal_config(self, tmp_path):
        path = _write(tmp_path / "alarmfax.yaml", "parser: ils_amberg\ninclude: faxes/*.txt\noutdir: out\n")

        config = load_config(path)

        assert config.parser == "ils_amberg"
        assert config.include == ["faxes/*.txt"]
        assert config.exclude == []
        assert config.outdir == (tmp_path / "out").resolve()
        assert config.base_dir == tmp_path.resolve()
        assert config.encoding == "utf-8"
        assert config.output_format == "yaml"
        assert config.log_level == "WARNING"

    def test_all_settings(self, tmp_path):
        path = _write(
            tmp_path / "alarmfax.yaml",
            "\n".join(
                [
                    "parser: lfs_offenbach",
                    "include: ['a/*.txt', 'b/*.txt']",
                    "exclude: a/old.txt",
                    "outdir: ../out",
                    "encoding: latin-1",
                    "output_format: JSON",
                    "log_level: debug",
                ]
            ),
        )

        config = load_config(path)

        assert config.include == ["a/*.txt", "b/*.txt"]
        assert config.exclude == ["a/old.txt"]
        assert config.outdir == (tmp_path.parent / "out").resolve()
        assert config.encoding == "latin-1"
        assert config.output_format == "json"
        assert config.log_level == "DEBUG"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="template"):
            load_config(tmp_path / "alarmfax.yaml")

    def test_missing_keys(self, tmp_path):
        path = _write(tmp_path / "alarmfax.yaml", "parser: ils_amberg\n")
        with pytest.raises(ConfigError, match="include, outdir"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path):
        path = _write(tmp_path / "alarmfax.yaml", "- parser\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_broken_yaml(self, tmp_path):
        path = _write(tmp_path / "alarmfax.yaml", "parser: [unclosed\n")
        with pytest.raises(ConfigError, match="Failed to read YAML"):
            load_config(path)

    @pytest.mark.parametrize(
        "extra",
        [
            "output_format: xml",
            "log_level: LOUD",
            "encoding: ''",
            "exclude: []",
        ],
    )
    def test_invalid_values(self, tmp_path, extra):
        path = _write(
            tmp_path / "alarmfax.yaml",
            f"parser: ils_amberg\ninclude: '*.txt'\noutdir: out\n{extra}\n",
        )
        with pytest.raises(ConfigError):
            load_config(path)

    def test_empty_include_entry(self, tmp_path):
        path = _write(tmp_path / "alarmfax.yaml", "parser: ils_amberg\ninclude: ['*.txt', '']\noutdir: out\n")
        with pytest.raises(ConfigError, match="index 2"):
            load_config(path)
