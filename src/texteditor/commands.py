"""Console input sanitizing and command-line parsing.

A raw input line becomes a ``ParsedCommand``: the command keyword, an
optional 1-based number, and whatever text followed the keyword.
Keywords are matched case-insensitively on the first word, then on the
first two words (``format raw``, ``format fix``).
"""
from __future__ import annotations

import re
from dataclasses import dataclass


# Everything outside this set is silently removed from user input.
DISALLOWED_CHARACTERS_RE = re.compile(
    r"[^A-Za-zäöüÄÖÜ 0-9/.,:;\-!?'\\()\"%@+*{}&#$\[\]]"
)
_NUMBER_RE = re.compile(r"^[0-9]+$")

UNKNOWN_COMMAND = "unknown"


@dataclass(frozen=True, slots=True)
class CommandSpec:
    """A console command keyword and whether it takes a number argument."""

    name: str
    takes_index: bool
    usage: str
    description: str


COMMANDS: tuple[CommandSpec, ...] = (
    CommandSpec("add", True, "add [n]", "Insert a new paragraph at n (default: end)"),
    CommandSpec("dummy", True, "dummy [n]", "Insert a filler paragraph at n (default: end)"),
    CommandSpec("del", True, "del [n]", "Delete paragraph n (default: last)"),
    CommandSpec("replace", True, "replace [n]", "Replace a word in paragraph n (default: last)"),
    CommandSpec("index", False, "index", "Show capitalized terms used 3+ times"),
    CommandSpec("print", False, "print", "Print the text in the current format"),
    CommandSpec("format raw", False, "format raw", "Print paragraphs with their numbers"),
    CommandSpec("format fix", True, "format fix [w]", "Wrap paragraphs at w columns"),
    CommandSpec("help", False, "help", "Show this list"),
    CommandSpec("exit", False, "exit", "Quit the editor"),
)

_COMMANDS_BY_NAME: dict[str, CommandSpec] = {c.name: c for c in COMMANDS}


@dataclass(frozen=True, slots=True)
class ParsedCommand:
    """One parsed input line.

    ``command`` is a keyword from ``COMMANDS``, ``"unknown"``, or ``""``
    for a blank line. ``index`` is set only when a numeric argument was
    given; ``index_valid`` is False when a number was expected but the
    argument was not one.
    """

    command: str
    index: int | None = None
    rest: str = ""
    index_valid: bool = True


def lookup_command(name: str) -> CommandSpec | None:
    return _COMMANDS_BY_NAME.get(name.lower())


def filter_input(line: str) -> str:
    """Remove disallowed characters from a raw input line."""
    return DISALLOWED_CHARACTERS_RE.sub("", line)


def extract_command(line: str) -> str:
    """Return the matched command keyword, or ``""`` if none matches."""
    words = line.lower().split(" ")
    spec = lookup_command(words[0])
    if spec is None and len(words) > 1:
        spec = lookup_command(f"{words[0]} {words[1]}")
    return spec.name if spec is not None else ""


def parse_index(rest: str) -> tuple[int | None, bool]:
    """Parse an optional number argument.

    Returns:
        (index, valid): ``(None, True)`` for no argument, ``(n, True)`` for
        a decimal number, ``(None, False)`` for anything else.
    """
    if not rest:
        return None, True
    if _NUMBER_RE.match(rest):
        return int(rest), True
    return None, False


def parse_command_line(raw_line: str) -> ParsedCommand:
    """Sanitize and parse a raw console line."""
    line = filter_input(raw_line).strip()
    name = extract_command(line)
    rest = line[len(name):].strip()
    if not name:
        return ParsedCommand(command=UNKNOWN_COMMAND if rest else "", rest=rest)

    spec = _COMMANDS_BY_NAME[name]
    if not spec.takes_index:
        if rest:
            return ParsedCommand(command=UNKNOWN_COMMAND, rest=rest)
        return ParsedCommand(command=name)

    index, valid = parse_index(rest)
    return ParsedCommand(command=name, index=index, rest=rest, index_valid=valid)


def help_lines() -> list[str]:
    width = max(len(c.usage) for c in COMMANDS)
    return [f"{c.usage:<{width}}  {c.description}" for c in COMMANDS]
