"""`rcprompt config` command implementation."""

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from rcprompt.config import (
    PromptConfig,
    load_config,
    reset_config,
    save_config,
    update_config,
)


def build_parser() -> argparse.ArgumentParser:
    """Build parser for the config command."""
    parser = argparse.ArgumentParser(
        prog="rcprompt config",
        description="Show or change the stored rcprompt configuration",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    actions = parser.add_subparsers(dest="action", required=True)

    actions.add_parser("show", help="Print the effective configuration as JSON")

    set_parser = actions.add_parser("set", help="Set one configuration field")
    set_parser.add_argument("key", choices=sorted(PromptConfig.model_fields), help="Field name")
    set_parser.add_argument("value", help="New value (comma-separated for lists)")

    actions.add_parser("reset", help="Delete the stored configuration file")
    return parser


def run(argv: list[str]) -> int:
    """Execute the config command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    if args.action == "show":
        print(json.dumps(load_config().model_dump(), indent=2))
        return 0

    if args.action == "reset":
        if removed := reset_config():
            print(f"Removed {removed}")
        else:
            print("No stored configuration; defaults are in effect")
        return 0

    # Env overrides are per-session and must not end up in the file.
    existing = load_config(apply_env=False)
    try:
        updated = update_config(existing, args.key, args.value)
    except ValidationError as e:
        print(f"Error: invalid value for {args.key}: {e.errors()[0]['msg']}", file=sys.stderr)
        return 1

    try:
        save_config(updated)
    except OSError as e:
        print(f"Error: could not save configuration: {e}", file=sys.stderr)
        return 1

    print(f"{args.key} = {json.dumps(getattr(updated, args.key))}")
    return 0
