import sys
from platform import platform, python_implementation, python_version
from typing import NoReturn

from minipre import __version__
from minipre.cli.parser.arguments import CLIArguments


def cli_perform_version_goal(args: CLIArguments) -> NoReturn:
    """Perform version goal that display information about host and toolchain."""
    print("[minipre toolchain]")
    print(f"\tVersion: {__version__}")
    print("Host machine:")
    print(f"\tPlatform: {platform()}")
    print(f"\tPython: {python_implementation()} {python_version()}")
    if args.definitions:
        print("Definitions:")
        for name, value in args.definitions.items():
            print(f"\t{name} = {value!r}")
    return sys.exit(0)
