"""Command-line interface for rcprompt."""

import argparse
import sys

from rcprompt import __version__
from rcprompt.cli import configure, hook, render

COMMANDS = {
    "render": render.run,
    "init": hook.run,
    "config": configure.run,
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rcprompt",
        description="Two-line shell prompt with exit status, nix-shell and git state",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument("command", choices=sorted(COMMANDS), help="Subcommand to run")
    parser.add_argument("args", nargs=argparse.REMAINDER, help=argparse.SUPPRESS)

    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    command_argv = ["-d", *args.args] if args.debug else args.args
    return COMMANDS[args.command](command_argv)


def entrypoint() -> None:
    raise SystemExit(main())
