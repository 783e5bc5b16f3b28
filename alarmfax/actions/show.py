# Alarm Fax Parser
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Single fax preview.

The `show` subcommand parses one fax file and prints the operation to stdout.
It does not need a config file, which makes it handy for trying out a parser
on a new fax.
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from alarmfax.config import AlarmfaxConfig
from alarmfax.diagnostics import CollectingSink
from alarmfax.parsers.registry import get_parser, parse_fax_file
from alarmfax.yaml_io import dump_document


@dataclass(frozen=True)
class ShowAction:
    """`show` subcommand."""

    name: str = "show"
    help: str = "Parse a single fax file and print the operation"
    requires_config: bool = False

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("path", help="Fax transcript file")
        parser.add_argument(
            "-p",
            "--parser",
            required=True,
            help="Parser (fax layout) to use, see the 'parsers' command",
        )
        parser.add_argument(
            "--encoding",
            default="utf-8",
            help="Text encoding of the fax file (default: utf-8)",
        )
        parser.add_argument(
            "--format",
            choices=["yaml", "json"],
            default="yaml",
            help="Output format (default: yaml)",
        )

    def run(self, args: argparse.Namespace, config: AlarmfaxConfig | None) -> None:
        """
        Parse and print one fax.

        Raises:
            ConfigError:
                If the parser is unknown or the file cannot be read.
        """

        _ = config
        fax_parser = get_parser(args.parser)
        sink = CollectingSink()
        result = parse_fax_file(Path(args.path), fax_parser, encoding=args.encoding, sink=sink)

        payload = {
            "parser": fax_parser.name,
            "operation": result.operation.to_dict(),
            "diagnostics": [d.to_dict() for d in sink.diagnostics],
        }
        print(dump_document(payload, args.format), end="")
