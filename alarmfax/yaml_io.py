# Alarm Fax Parser
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Result file I/O.

Parsed operations are written as YAML (default) or JSON documents. This module
centralizes reading and writing them so that actions agree on the format.
"""

import json
from pathlib import Path
from typing import Any

import yaml

from alarmfax.config import ConfigError


_SUFFIXES = {"yaml": ".yaml", "json": ".json"}


def result_suffix(output_format: str) -> str:
    """Return the file suffix for an output format."""

    try:
        return _SUFFIXES[output_format]
    except KeyError:
        raise ConfigError(f"Unsupported output format: {output_format}") from None


def dump_document(payload: dict[str, Any], output_format: str) -> str:
    """Serialize a result document."""

    if output_format == "json":
        return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"
    if output_format == "yaml":
        return yaml.safe_dump(payload, sort_keys=False, allow_unicode=True)
    raise ConfigError(f"Unsupported output format: {output_format}")


def write_document(path: Path, payload: dict[str, Any], output_format: str) -> None:
    """Write a result document, creating parent directories as needed."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_document(payload, output_format), encoding="utf-8")


def read_document(path: Path) -> dict[str, Any]:
    """Read a YAML or JSON result document into a dictionary.

    Args:
        path:
            Document path. JSON is a subset of YAML, so both are read with the
            YAML loader.

    Returns:
        Parsed mapping.

    Raises:
        ConfigError:
            If the file cannot be read or does not contain a mapping.
    """

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except Exception as exc:  # noqa: BLE001
        raise ConfigError(f"Failed to read result file '{path}': {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"Result file must contain a mapping: {path}")

    return raw
