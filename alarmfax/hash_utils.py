# Alarm Fax Parser
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Change detection for fax files."""

from pathlib import Path
import hashlib


def md5_file(path: Path) -> str:
    """
    Return the lowercase hex MD5 digest of a file.

    The digest is stored in each result file and compared on the next run to
    decide whether a fax must be parsed again.
    """

    hasher = hashlib.md5(usedforsecurity=False)
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(64 * 1024), b""):
            hasher.update(chunk)
    return hasher.hexdigest()
