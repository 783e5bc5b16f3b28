# Alarm Fax Parser
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Configuration loading and validation.

This module handles reading `alarmfax.yaml`, validating required keys, and
normalizing paths so that actions can rely on a typed config object.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml


CONFIG_ENV_VAR = "ALARMFAX_CONFIG"
DEFAULT_CONFIG_NAME = "alarmfax.yaml"

_OUTPUT_FORMATS = {"yaml", "json"}


@dataclass(frozen=True)
class AlarmfaxConfig:
    """
    Parsed configuration for a parse run.

    Attributes:
        config_path:
            Path to the YAML config file used for this run.
        base_dir:
            Directory that relative paths and glob patterns are resolved against.
        parser:
            Name of the fax parser (layout) to use.
        include:
            Glob patterns for fax transcript files to include.
        exclude:
            Glob patterns for fax files to exclude.
        outdir:
            Directory for the parsed operation files.
        encoding:
            Text encoding of the fax transcripts.
        output_format:
            `yaml` or `json`.
        log_level:
            Logging level name (e.g. `WARNING`).
    """

    config_path: Path
    base_dir: Path
    parser: str
    include: list[str]
    exclude: list[str]
    outdir: Path
    encoding: str = "utf-8"
    output_format: str = "yaml"
    log_level: str = "WARNING"


class ConfigError(RuntimeError):
    """
    Raised when the YAML configuration is missing, invalid, or cannot be parsed.
    """

    pass


def find_config_path(cli_path: str | None) -> Path:
    """
    Determine which YAML config file to use.

    Args:
        cli_path:
            Optional config path provided on the command line. Takes precedence
            over the `ALARMFAX_CONFIG` environment variable.

    Returns:
        The resolved Path object (not necessarily existing).
    """

    if cli_path:
        return Path(cli_path)

    env_path = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if env_path:
        return Path(env_path)

    return Path.cwd() / DEFAULT_CONFIG_NAME


def _parse_patterns(value: Any, *, key: str, required: bool) -> list[str]:
    """Parse a glob pattern setting given as string or list of strings."""

    if value is None:
        if required:
            raise ConfigError(f"'{key}' must be a non-empty string or list of strings")
        return []

    items = [value] if isinstance(value, str) else value
    if not isinstance(items, list) or not items:
        raise ConfigError(f"'{key}' must be a non-empty string or list of strings")

    patterns: list[str] = []
    for idx, item in enumerate(items, start=1):
        if not isinstance(item, str) or not item.strip():
            raise ConfigError(f"'{key}' entries must be non-empty strings (problem at index {idx})")
        patterns.append(item.strip())
    return patterns


def load_config(path: Path) -> AlarmfaxConfig:
    """
    Load and validate an `alarmfax.yaml` configuration file.

    Args:
        path:
            Path to the YAML config file.

    Returns:
        A validated AlarmfaxConfig instance.

    Raises:
        ConfigError:
            If the file is missing, unreadable, cannot be parsed as YAML, or is
            missing required keys.
    """

    if not path.exists():
        raise ConfigError(
            f"No {DEFAULT_CONFIG_NAME} found in current directory and no --config provided. "
            "Use the 'template' command to create one or pass --config PATH."
        )
    if not path.is_file():
        raise ConfigError(f"Config path is not a file: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except Exception as exc:  # noqa: BLE001
        raise ConfigError(f"Failed to read YAML config: {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("Config YAML must contain a mapping at the top level")

    missing = [k for k in ("parser", "include", "outdir") if k not in raw]
    if missing:
        raise ConfigError(f"Config is missing required key(s): {', '.join(missing)}")

    parser = raw.get("parser")
    if not isinstance(parser, str) or not parser.strip():
        raise ConfigError("'parser' must be a non-empty string")

    include = _parse_patterns(raw.get("include"), key="include", required=True)
    exclude = _parse_patterns(raw.get("exclude"), key="exclude", required=False)

    outdir = raw.get("outdir")
    if not isinstance(outdir, str) or not outdir.strip():
        raise ConfigError("'outdir' must be a non-empty string")

    encoding = raw.get("encoding", AlarmfaxConfig.encoding)
    if not isinstance(encoding, str) or not encoding.strip():
        raise ConfigError("'encoding' must be a non-empty string")

    output_format = raw.get("output_format", AlarmfaxConfig.output_format)
    if not isinstance(output_format, str) or output_format.strip().lower() not in _OUTPUT_FORMATS:
        raise ConfigError("'output_format' must be either 'yaml' or 'json'")

    log_level = raw.get("log_level", AlarmfaxConfig.log_level)
    if not isinstance(log_level, str) or not isinstance(
        logging.getLevelName(log_level.strip().upper()), int
    ):
        raise ConfigError("'log_level' must be a logging level name like 'INFO' or 'WARNING'")

    # Interpret outdir and glob patterns relative to config file location.
    base_dir = path.parent.resolve()
    outdir_path = (base_dir / outdir).resolve()

    return AlarmfaxConfig(
        config_path=path.resolve(),
        base_dir=base_dir,
        parser=parser.strip(),
        include=include,
        exclude=exclude,
        outdir=outdir_path,
        encoding=encoding.strip(),
        output_format=output_format.strip().lower(),
        log_level=log_level.strip().upper(),
    )
