"""CLI subcommands for tinyver."""
