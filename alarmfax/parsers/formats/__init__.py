"""Supported fax layouts.

Each module defines one `FormatDefinition` named `FORMAT`. New layouts are
added here and picked up by the parser registry.
"""

from alarmfax.parsers.formats import ils_amberg, ils_ingolstadt, lfs_offenbach

FORMATS = (
    ils_amberg.FORMAT,
    ils_ingolstadt.FORMAT,
    lfs_offenbach.FORMAT,
)

__all__ = ["FORMATS"]
