# Alarm Fax Parser
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Template configuration generator.

This action writes a ready-to-edit `alarmfax.yaml` file into the current
directory (or a user-specified path).
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from alarmfax.config import DEFAULT_CONFIG_NAME, AlarmfaxConfig, ConfigError
from alarmfax.parsers import available_parsers


@dataclass(frozen=True)
class TemplateAction:
    """
    `template` subcommand.

    This action does not require a YAML config because it produces one.
    """

    name: str = "template"
    help: str = f"Write a template {DEFAULT_CONFIG_NAME} config"
    requires_config: bool = False

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "path",
            nargs="?",
            default=DEFAULT_CONFIG_NAME,
            help=f"Destination path for the template (default: ./{DEFAULT_CONFIG_NAME})",
        )
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Allow overwriting an existing file",
        )

    def run(self, args: argparse.Namespace, config: AlarmfaxConfig | None) -> None:
        """
        Execute the template writer.

        Raises:
            ConfigError:
                If the destination exists and `--force` is not set.
        """

        _ = config
        dest = Path(args.path)
        if dest.exists() and not args.force:
            raise ConfigError(f"Refusing to overwrite existing file: {dest} (use --force)")

        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(render_template(), encoding="utf-8")
        print(f"Wrote template config to: {dest}")


def render_template() -> str:
    """Return the commented template configuration."""

    parsers = available_parsers()
    lines = [
        "# Fax layout (parser) used for all files below. Available parsers:",
        *[f"#   {p.name}: {p.description}" for p in parsers],
        f"parser: {parsers[0].name}",
        "",
        "# Glob patterns for fax transcripts (plain text, one fax per file).",
        "# 'include' and 'exclude' can be a string or a list of strings.",
        'include: ["faxes/**/*.txt"]',
        '# exclude: "faxes/archive/**"',
        "",
        "# Directory for parsed operations (one file per fax plus index.yaml)",
        "outdir: ./operations",
        "",
        "# Optional settings (defaults shown)",
        "# encoding: utf-8",
        "# output_format: yaml   # or: json",
        "# log_level: WARNING",
        "",
    ]
    return "\n".join(lines)
