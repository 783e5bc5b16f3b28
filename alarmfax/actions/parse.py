# Alarm Fax Parser
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Fax parsing action.

This action parses all configured fax transcripts and writes one result file
per fax into the output directory, plus an `index.yaml` listing all faxes.

Faxes whose file content, parser and parsing version did not change since the
last run are skipped unless `--force` is given.
"""

import argparse
import fnmatch
import glob
import hashlib
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import yaml

from alarmfax.config import AlarmfaxConfig, ConfigError
from alarmfax.hash_utils import md5_file
from alarmfax.parsers.fax_parser import FaxParser
from alarmfax.parsers.registry import PARSING_VERSION, get_parser, parse_fax_file
from alarmfax.yaml_io import read_document, result_suffix, write_document


@dataclass(frozen=True)
class ParseAction:
    """
    `parse` subcommand.

    Turns fax transcripts into structured operation files.
    """

    name: str = "parse"
    help: str = "Parse fax transcripts into operation files"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "paths",
            nargs="*",
            help="Fax files to parse (default: files matched by 'include' in the config)",
        )
        parser.add_argument(
            "-p",
            "--parser",
            help="Override the parser configured in the config file",
        )
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Re-parse faxes even if they did not change",
        )

    def run(self, args: argparse.Namespace, config: AlarmfaxConfig | None) -> None:
        """
        Parse the fax files.

        Raises:
            ConfigError:
                If the parser is unknown or the output directory cannot be
                written.
        """

        if config is None:
            raise RuntimeError("ParseAction requires a config, but none was provided")

        fax_parser = get_parser(args.parser or config.parser)
        force = bool(args.force)

        outdir = config.outdir
        outdir.mkdir(parents=True, exist_ok=True)

        if args.paths:
            input_files = sorted({Path(p).resolve() for p in args.paths})
        else:
            input_files = self._discover_input_files(config)

        if not input_files:
            print("No fax files found.")
            return

        index: dict[str, Any] = {
            "schema_version": 1,
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "config": {
                "path": self._rel_posix(config.base_dir, config.config_path),
            },
            "parser": fax_parser.name,
            "parsing_version": PARSING_VERSION,
            "documents": [],
        }

        updated = 0
        skipped = 0
        failed = 0
        for input_path in input_files:
            doc_record, did_update = self._parse_one_file(
                config=config,
                fax_parser=fax_parser,
                input_path=input_path,
                force=force,
            )
            index["documents"].append(doc_record)
            if doc_record.get("status") == "failed":
                failed += 1
            elif did_update:
                updated += 1
            else:
                skipped += 1

        index_path = outdir / "index.yaml"
        index_path.write_text(
            yaml.safe_dump(index, sort_keys=False, allow_unicode=True),
            encoding="utf-8",
        )

        total = len(input_files)
        print(
            f"Processed {total} fax(es): updated {updated}, skipped {skipped}, failed {failed}. "
            f"Wrote index: {index_path}"
        )

    def _discover_input_files(self, config: AlarmfaxConfig) -> list[Path]:
        """
        Find fax files based on include/exclude patterns.

        Patterns are resolved relative to the directory containing the YAML
        configuration.
        """

        base_dir = config.base_dir

        paths: list[Path] = []
        for pattern in config.include:
            include = self._normalize_glob_pattern(pattern)
            matches = glob.glob(str((base_dir / include).as_posix()), recursive=True)
            paths.extend(Path(p) for p in matches)

        if config.exclude:
            exclude_norms = [self._normalize_glob_pattern(p) for p in config.exclude]
            paths = [
                p
                for p in paths
                if not any(fnmatch.fnmatch(self._rel_posix(base_dir, p), ex) for ex in exclude_norms)
            ]

        paths = [p for p in paths if p.is_file()]
        return sorted({p.resolve() for p in paths})

    def _parse_one_file(
        self,
        *,
        config: AlarmfaxConfig,
        fax_parser: FaxParser,
        input_path: Path,
        force: bool,
    ) -> tuple[dict[str, Any], bool]:
        """
        Parse one fax file and write its result file.

        Returns:
            A document entry for the index file and whether the result file was
            (re)written.
        """

        doc_id = self._document_id(config.base_dir, input_path)
        rel_path = self._rel_posix(config.base_dir, input_path)
        out_path = config.outdir / f"{doc_id}{result_suffix(config.output_format)}"

        try:
            fax_md5 = md5_file(input_path)
        except OSError as exc:
            print(f"WARNING: Skipping unreadable fax: {rel_path}\n{exc}")
            return self._failed_record(doc_id, rel_path, exc), False

        if out_path.exists() and not force:
            existing = read_document(out_path)
            if self._result_up_to_date(existing, rel_path=rel_path, fax_md5=fax_md5, parser=fax_parser.name):
                print(f"Skipping unchanged fax: {rel_path}")
                return self._document_record(doc_id, rel_path, config, out_path, existing), False

        print(f"Parsing: {rel_path} ", end="", flush=True)

        try:
            result = parse_fax_file(input_path, fax_parser, encoding=config.encoding)
        except ConfigError as exc:
            print()  # finish progress line
            print(f"WARNING: Skipping fax due to read error: {rel_path}\n{exc}")
            return self._failed_record(doc_id, rel_path, exc), False

        operation = result.operation
        print(f"({len(operation.resources)} resource(s), {len(result.diagnostics)} warning(s))")

        payload: dict[str, Any] = {
            "schema_version": 1,
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "parsing_version": PARSING_VERSION,
            "parser": fax_parser.name,
            "source": {
                "path": rel_path,
                "md5": fax_md5,
            },
            "document_id": doc_id,
            "operation": operation.to_dict(),
            "diagnostics": [d.to_dict() for d in result.diagnostics],
        }
        write_document(out_path, payload, config.output_format)

        return self._document_record(doc_id, rel_path, config, out_path, payload), True

    def _result_up_to_date(
        self,
        existing: dict[str, Any],
        *,
        rel_path: str,
        fax_md5: str,
        parser: str,
    ) -> bool:
        """Return True if an existing result file matches the current inputs."""

        if int(existing.get("parsing_version") or 0) != PARSING_VERSION:
            return False

        if str(existing.get("parser") or "") != parser:
            return False

        source = existing.get("source")
        if not isinstance(source, dict):
            return False

        if str(source.get("path") or "") != rel_path:
            return False

        return str(source.get("md5") or "") == fax_md5

    def _document_record(
        self,
        doc_id: str,
        rel_path: str,
        config: AlarmfaxConfig,
        out_path: Path,
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        operation = payload.get("operation")
        operation_number = operation.get("operation_number") if isinstance(operation, dict) else None
        diagnostics = payload.get("diagnostics")
        return {
            "document_id": doc_id,
            "source_path": rel_path,
            "result_file": self._rel_posix(config.base_dir, out_path),
            "operation_number": operation_number or "",
            "diagnostics_total": len(diagnostics) if isinstance(diagnostics, list) else 0,
        }

    def _failed_record(self, doc_id: str, rel_path: str, exc: Exception) -> dict[str, Any]:
        return {
            "document_id": doc_id,
            "source_path": rel_path,
            "status": "failed",
            "error": str(exc),
        }

    def _document_id(self, base_dir: Path, input_path: Path) -> str:
        """
        Compute a stable document identifier from the file path.

        Returns:
            The file stem made filesystem-friendly plus a short path hash, so
            equally named faxes in different folders do not collide.
        """

        rel = self._rel_posix(base_dir, input_path)
        digest = hashlib.sha1(rel.encode("utf-8"), usedforsecurity=False).hexdigest()[:10]
        safe = "".join(ch if ch.isalnum() or ch in {"-", "_"} else "_" for ch in input_path.stem)
        safe = safe.strip("_") or "fax"
        return f"{safe}-{digest}"

    def _normalize_glob_pattern(self, pattern: str) -> str:
        """
        Normalize user-provided glob patterns to Python's recursive glob syntax.

        Patterns like `**.txt` are not a standard recursive glob segment and are
        converted to `**/*.txt`.
        """

        p = pattern.strip()
        if p.startswith("**.") and "/" not in p:
            return f"**/*.{p[3:]}"
        if p == "**" or p == "**/":
            return "**/*"
        return p

    def _rel_posix(self, base_dir: Path, path: Path) -> str:
        """Compute a stable POSIX-style path relative to `base_dir`."""

        try:
            rel = path.resolve().relative_to(base_dir.resolve())
        except Exception:  # noqa: BLE001
            rel = path.resolve()
        return rel.as_posix()
