from __future__ import annotations

"""List available fax parsers."""

import argparse
from dataclasses import dataclass

from alarmfax.config import AlarmfaxConfig
from alarmfax.parsers import available_parsers


@dataclass(frozen=True)
class ParsersAction:
    """`parsers` subcommand."""

    name: str = "parsers"
    help: str = "List the supported fax layouts"
    requires_config: bool = False

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        _ = parser

    def run(self, args: argparse.Namespace, config: AlarmfaxConfig | None) -> None:
        _ = args, config
        for parser in available_parsers():
            aliases = ", ".join(parser.definition.aliases)
            suffix = f" (alias: {aliases})" if aliases else ""
            print(f"{parser.name:<16} {parser.description}{suffix}")
