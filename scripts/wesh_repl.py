#!/usr/bin/env python3
"""
wesh_repl.py - Interactive operational shell

Presents a hierarchy of branches (operational mode, configuration mode)
and runs exact-match single-line commands against it.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from wesh_lib import __version__
from wesh_lib.common import Colors, error, info, paint
from wesh_lib.config import UNKNOWN_POLICIES, SettingsError, resolve_settings
from wesh_lib.config.layout import LayoutValidationError
from wesh_lib.repl import (
    BranchLookupError,
    InputStreamError,
    PromptReader,
    StreamReader,
    run_loop,
)
from wesh_lib.shell import create_shell


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="WeSh operational network shell")
    parser.add_argument("--config", type=Path, default=None,
                        help="Settings file (default: $WESH_CONFIG or /etc/wesh/wesh.json)")
    parser.add_argument("--layout", type=Path, default=None,
                        help="Shell layout YAML file (default: built-in layout)")
    parser.add_argument("--unknown-policy", choices=UNKNOWN_POLICIES, default=None,
                        help="How to report unknown commands")
    parser.add_argument("--plain", action="store_true",
                        help="Read plain lines from stdin instead of the interactive prompt")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Shell entry point. Returns an exit code on fatal errors."""
    args = build_parser().parse_args(argv)

    try:
        settings = resolve_settings(args.config, args.unknown_policy, args.layout)
        state = create_shell(settings)
    except SettingsError as e:
        error(str(e))
        return 1
    except LayoutValidationError as e:
        error("Invalid shell layout:")
        for msg in e.errors:
            print(f"  {msg}")
        return 1

    use_plain = args.plain or not sys.stdin.isatty()
    reader = StreamReader() if use_plain else PromptReader()

    if not use_plain:
        print()
        print(paint(f"WeSh {__version__}", Colors.BOLD))
        info("Type '?' for commands, 'exit' to quit")
        print()

    try:
        run_loop(state, reader)
    except InputStreamError as e:
        print()
        error(str(e))
        return 1
    except BranchLookupError as e:
        error(f"Internal error: {e}")
        return 1
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
