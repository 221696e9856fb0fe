"""Entry point for CLI.

Only for calling via `python -m minipre`, prefer installed `minipre` executable.
"""

from minipre.cli.main import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()
