from __future__ import annotations

"""
Shared action interface.

Actions implement a small protocol so the CLI can register their arguments and
dispatch execution based on the selected subcommand.
"""

import argparse
from typing import Protocol

from alarmfax.config import AlarmfaxConfig


class Action(Protocol):
    """
    Interface for a CLI action (subcommand).

    Implementations provide a `name` used as the subcommand, a short `help`
    string, and declare whether they need a loaded `alarmfax.yaml`.
    """

    name: str
    help: str
    requires_config: bool

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register action-specific CLI arguments.

        Args:
            parser:
                The subparser dedicated to this action.
        """

    def run(self, args: argparse.Namespace, config: AlarmfaxConfig | None) -> None:
        """
        Execute the action.

        Args:
            args:
                Parsed arguments for this subcommand.
            config:
                Loaded configuration, if `requires_config` is True.
        """
