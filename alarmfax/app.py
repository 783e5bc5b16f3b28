from __future__ import annotations

"""
CLI entrypoint for the alarm fax parser.

This module builds a git-style subcommand CLI (via argparse) and dispatches
execution to action modules.
"""

import argparse
import logging
import sys
from dotenv import load_dotenv

from alarmfax.actions.base import Action
from alarmfax.actions.clean import CleanAction
from alarmfax.actions.parse import ParseAction
from alarmfax.actions.parsers import ParsersAction
from alarmfax.actions.show import ShowAction
from alarmfax.actions.template import TemplateAction
from alarmfax.config import DEFAULT_CONFIG_NAME, ConfigError, find_config_path, load_config


def _action_repository() -> dict[str, Action]:
	"""
	Construct the action registry.

	Returns:
		A mapping from subcommand name to an action instance.
	"""
	actions = [
		TemplateAction(),
		ParsersAction(),
		ShowAction(),
		ParseAction(),
		CleanAction(),
	]
	return {a.name: a for a in actions}


def build_parser() -> argparse.ArgumentParser:
	"""
	Build the top-level argument parser.

	The parser uses subcommands (similar to `git`) where each action registers its
	own arguments.

	Returns:
		The configured ArgumentParser instance.
	"""
	parser = argparse.ArgumentParser(
		prog="alarmfax",
		description="Extract structured operation records from alarm fax transcripts.",
	)
	parser.add_argument(
		"--verbose",
		"-v",
		action="store_true",
		help="Log debug output (overrides log_level from the config)",
	)

	actions = _action_repository()

	config_parent = argparse.ArgumentParser(add_help=False)
	config_parent.add_argument(
		"--config",
		"-c",
		help=(
			f"Path to {DEFAULT_CONFIG_NAME}. If omitted, $ALARMFAX_CONFIG or "
			f"./{DEFAULT_CONFIG_NAME} in the current directory is used."
		),
	)

	subparsers = parser.add_subparsers(dest="action", metavar="COMMAND", required=True)

	for name, action in actions.items():
		parents = [config_parent] if action.requires_config else []
		sub = subparsers.add_parser(name, help=action.help, parents=parents)
		action.add_arguments(sub)
		sub.set_defaults(_action_name=name)

	return parser


def configure_logging(level: str, *, verbose: bool = False) -> None:
	"""Configure the root logger for CLI use."""

	logging.basicConfig(
		level=logging.DEBUG if verbose else level,
		format="%(levelname)s %(name)s: %(message)s",
	)


def main(argv: list[str] | None = None) -> int:
	"""
	Run the CLI.

	Args:
		argv:
			Optional argument list (without program name). If omitted, argparse
			reads from sys.argv.

	Returns:
		Process exit code. `0` on success, `2` on configuration/usage errors.
	"""
	load_dotenv()

	parser = build_parser()
	args = parser.parse_args(argv)
	verbose = bool(getattr(args, "verbose", False))

	try:
		actions = _action_repository()
		action_name = getattr(args, "_action_name", None)
		if not action_name or action_name not in actions:
			parser.error("Unknown or missing command")
			return 2

		action = actions[action_name]

		config = None
		if action.requires_config:
			config_path = find_config_path(getattr(args, "config", None))
			config = load_config(config_path)
			configure_logging(config.log_level, verbose=verbose)
		else:
			configure_logging("WARNING", verbose=verbose)

		action.run(args, config)
		return 0
	except ConfigError as exc:
		print(f"error: {exc}", file=sys.stderr)
		return 2


if __name__ == "__main__":
	raise SystemExit(main())
