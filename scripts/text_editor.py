#!/usr/bin/env python3
"""Interactive console text editor.

Reads one command per line, applies it to the in-memory paragraphs and
prints the result. Type ``help`` for the command list, ``exit`` to quit.

Usage:
    python3 scripts/text_editor.py
    python3 scripts/text_editor.py --width 40 --verbose
    python3 scripts/text_editor.py --config editor.json --json < commands.txt
"""
from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TextIO

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from texteditor.commands import filter_input, parse_command_line
from texteditor.config import load_config
from texteditor.session import WELCOME_MESSAGE, EditorSession, Message

log = logging.getLogger("text_editor")

type LineReader = Callable[[str], str]

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Edit paragraphs interactively from the console."
    )
    parser.add_argument(
        "--config", type=Path, default=None,
        help="JSON config file (keys: max_width, glossary_min_count, verbose)",
    )
    parser.add_argument(
        "--width", type=int, default=None,
        help="Line width for 'format fix' (overrides the config file)",
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print the glossary as JSON",
    )
    parser.add_argument(
        "--log-file", type=Path, default=None,
        help="Write the session log to this file instead of stderr",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def emit(messages: Sequence[Message], *, out: TextIO, err: TextIO) -> None:
    """Print info lines to *out* and error lines to *err*."""
    for message in messages:
        print(message.text, file=err if message.level == "error" else out)


def read_line(label: str) -> str:
    """Prompt on stdout and read one line; raises EOFError at end of input."""
    return input(label)


def run(
    session: EditorSession,
    reader: LineReader = read_line,
    *,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Command loop. Returns when the session exits or input runs out."""
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr

    def prompt(label: str) -> str:
        return filter_input(reader(label))

    print(WELCOME_MESSAGE, file=out)
    while session.running:
        try:
            raw = reader("> ")
        except EOFError:
            log.info("End of input, leaving editor")
            break
        try:
            messages = session.execute(parse_command_line(raw), prompt)
        except EOFError:
            # Input ended inside a prompt; the command is dropped unapplied.
            log.warning("End of input during %r, command aborted", raw)
            break
        emit(messages, out=out, err=err)
    return 0


def configure_logging(*, verbose: bool, log_file: Path | None) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    if log_file is not None:
        logging.basicConfig(
            level=level,
            format=LOG_FORMAT,
            filename=str(log_file),
        )
        return
    # User messages already reach the console; stderr logging is opt-in.
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
        config = config.with_overrides(
            max_width=args.width,
            verbose=True if args.verbose else None,
        )
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    configure_logging(verbose=config.verbose, log_file=args.log_file)
    log.debug("Starting editor with %s", config)

    session = EditorSession(config=config, json_output=args.json)
    return run(session)


if __name__ == "__main__":
    sys.exit(main())
