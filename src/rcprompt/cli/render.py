"""`rcprompt render` command implementation."""

import argparse
import logging
import sys

from rcprompt.config import load_config
from rcprompt.shell.detection import detect_shell
from rcprompt.shell.dialects import DIALECTS, get_dialect
from rcprompt.shell.hooks import format_assignments
from rcprompt.shell.host import PromptHook, make_renderer


def build_parser() -> argparse.ArgumentParser:
    """Build parser for the render command."""
    parser = argparse.ArgumentParser(
        prog="rcprompt render",
        description="Print shell assignments for the primary and continuation prompts",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "-s",
        "--exit-status",
        type=int,
        default=0,
        help="Exit status of the previous command (pass $? from the hook)",
    )
    parser.add_argument(
        "--shell",
        choices=sorted(DIALECTS),
        help="Prompt syntax to emit (default: detected from $SHELL)",
    )
    parser.add_argument("--cwd", help="Directory to display and query (default: $PWD)")
    parser.add_argument("--no-git", action="store_true", help="Skip the git branch fragment")
    return parser


def run(argv: list[str]) -> int:
    """Execute the render command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    config = load_config()
    if args.no_git:
        config.git_enabled = False
    dialect = get_dialect(args.shell or detect_shell())

    hook = PromptHook(config)
    hook.register(make_renderer(config, dialect))
    rendered = hook.before_prompt(args.exit_status, cwd=args.cwd)

    sys.stdout.write(format_assignments(rendered, dialect))
    return 0
