"""CLI actions (subcommands)."""
