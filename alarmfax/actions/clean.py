# Alarm Fax Parser
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Result cleanup action.

The `clean` subcommand deletes the operation files written by `parse`, as
listed in `<outdir>/index.yaml`, and the index itself. Other files in the
output directory are left alone, so `outdir` may safely point to a shared
folder.

Without `--force` the user is asked for confirmation. Non-interactive sessions
must pass `--force`.
"""

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

from alarmfax.config import AlarmfaxConfig, ConfigError
from alarmfax.yaml_io import read_document


@dataclass(frozen=True)
class CleanAction:
    """`clean` subcommand."""

    name: str = "clean"
    help: str = "Delete parsed operation files from the output directory"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Do not prompt for confirmation",
        )

    def run(self, args: argparse.Namespace, config: AlarmfaxConfig | None) -> None:
        """
        Delete the result files of the last parse run.

        Raises:
            ConfigError:
                If the index cannot be read, a file cannot be deleted, or
                confirmation is required but cannot be requested.
        """

        if config is None:
            raise RuntimeError("CleanAction requires a config, but none was provided")

        index_path = config.outdir / "index.yaml"
        if not index_path.is_file():
            print(f"Nothing to clean in: {config.outdir}")
            return

        targets = self._result_files(read_document(index_path), config)
        targets.append(index_path)

        if not args.force:
            if not (sys.stdin.isatty() and sys.stdout.isatty()):
                raise ConfigError("Refusing to delete result files without confirmation. Re-run with --force.")

            answer = input(f"Delete {len(targets)} file(s) from '{config.outdir}'? [y/N] ")
            if answer.strip().lower() not in {"y", "yes"}:
                print("Aborted.")
                return

        removed = 0
        for path in targets:
            try:
                path.unlink()
            except FileNotFoundError:
                continue
            except OSError as exc:
                raise ConfigError(f"Failed to remove '{path}': {exc}") from exc
            removed += 1

        print(f"Removed {removed} file(s) from: {config.outdir}")

    def _result_files(self, index: dict, config: AlarmfaxConfig) -> list[Path]:
        """
        Collect the result files named in the index.

        Only files inside `outdir` are returned. An edited or foreign index
        cannot make the command delete anything else.
        """

        outdir = config.outdir.resolve()
        documents = index.get("documents")
        if not isinstance(documents, list):
            return []

        files: list[Path] = []
        for document in documents:
            if not isinstance(document, dict) or not document.get("result_file"):
                continue

            path = (config.base_dir / str(document["result_file"])).resolve()
            if path.parent != outdir:
                print(f"WARNING: Not deleting file outside outdir: {path}")
                continue
            files.append(path)

        return files
