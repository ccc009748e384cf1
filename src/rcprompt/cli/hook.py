"""`rcprompt init` command implementation."""

import argparse
import logging
import sys

from rcprompt.shell.detection import detect_shell
from rcprompt.shell.dialects import DIALECTS
from rcprompt.shell.hooks import hook_script


def build_parser() -> argparse.ArgumentParser:
    """Build parser for the init command."""
    parser = argparse.ArgumentParser(
        prog="rcprompt init",
        description=(
            "Print the shell hook that renders the prompt before every command line. "
            'Add `eval "$(rcprompt init bash)"` to ~/.bashrc.'
        ),
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "shell",
        nargs="?",
        choices=sorted(DIALECTS),
        help="Shell to integrate with (default: detected from $SHELL)",
    )
    parser.add_argument(
        "--executable",
        help="Command the hook should call (default: rcprompt on PATH)",
    )
    return parser


def run(argv: list[str]) -> int:
    """Execute the init command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    sys.stdout.write(hook_script(args.shell or detect_shell(), args.executable))
    return 0
