"""Command-Line-Interface (CLI) for minipre toolkit."""
