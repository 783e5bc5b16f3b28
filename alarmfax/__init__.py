"""
Alarm fax parser package.

This package turns plain-text transcripts of fire/rescue dispatch faxes into
structured operation records:
- one configurable, section-aware line parser per dispatch center layout,
- field transforms for addresses, timestamps and coordinates,
- a small CLI that parses fax files and writes the results as YAML or JSON.
"""
