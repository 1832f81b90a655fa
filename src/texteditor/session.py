"""Interactive editor session: runs one parsed command against the core.

The session owns the paragraph store plus the display state (current
render mode and fixed width). Each command yields ``Message`` lines for the
console; successes are logged at INFO and failures at WARNING.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Literal

from texteditor.commands import UNKNOWN_COMMAND, ParsedCommand, help_lines
from texteditor.config import EditorConfig
from texteditor.glossary import build_glossary, format_glossary
from texteditor.io_utils import dump_json
from texteditor.paragraphs import DUMMY_TEXT, EditFailure, EditResult, ParagraphStore
from texteditor.reflow import RenderMode, is_valid_width, reflow

log = logging.getLogger(__name__)

type MessageLevel = Literal["info", "error"]
type Prompt = Callable[[str], str]

WELCOME_MESSAGE = "Welcome to the TextEditor! Type 'help' for a list of commands."
EXIT_MESSAGE = "Exiting TextEditor... Thank you for using TextEditor!"
INVALID_COMMAND_MESSAGE = "Invalid command! Please try again."

FAILURE_REASONS: dict[EditFailure, str] = {
    "invalid_index": "no paragraph at that position",
    "no_op_change": "the text would not change",
    "missing_configuration": "no valid line width is set (use 'format fix <width>')",
    "malformed_number": "the argument is not a number",
    "invalid_text": "the text is not a string",
}


@dataclass(frozen=True, slots=True)
class Message:
    """One line of console output."""

    level: MessageLevel
    text: str


def _info(text: str) -> Message:
    log.info(text)
    return Message("info", text)


def _error(text: str, failure: EditFailure | None = None) -> Message:
    if failure is not None:
        text = f"{text}: {FAILURE_REASONS[failure]}"
    log.warning(text)
    return Message("error", text)


def _outcome(result: EditResult, success: str, failure: str) -> list[Message]:
    if result:
        return [_info(success)]
    return [_error(failure, result.failure)]


@dataclass(slots=True)
class EditorSession:
    """State of one console session."""

    store: ParagraphStore = field(default_factory=ParagraphStore)
    config: EditorConfig = field(default_factory=EditorConfig)
    mode: RenderMode = "raw"
    max_width: int | None = None
    json_output: bool = False
    running: bool = True

    def __post_init__(self) -> None:
        if self.max_width is None:
            self.max_width = self.config.max_width

    def execute(self, parsed: ParsedCommand, prompt: Prompt) -> list[Message]:
        """Run *parsed*; *prompt* reads follow-up text (e.g. the new paragraph)."""
        log.debug("Executing %r", parsed)
        if parsed.command == "":
            return []
        if parsed.command == UNKNOWN_COMMAND:
            return [_error(INVALID_COMMAND_MESSAGE)]
        if not parsed.index_valid:
            return [_error(f"Command '{parsed.command}' failed", "malformed_number")]

        match parsed.command:
            case "add":
                text = prompt("Text: ")
                return _outcome(
                    self.store.insert(text, parsed.index),
                    "Text has been added",
                    "Text has not been added",
                )
            case "dummy":
                return _outcome(
                    self.store.insert(DUMMY_TEXT, parsed.index),
                    "Dummy text generated successfully!",
                    "Dummy text has not been generated",
                )
            case "del":
                return _outcome(
                    self.store.delete(parsed.index),
                    "Text deleted successfully!",
                    "Text has not been deleted",
                )
            case "replace":
                return self._replace(parsed.index, prompt)
            case "index":
                return self._glossary()
            case "print":
                return self._print()
            case "format raw":
                self.mode = "raw"
                return [_info("Format set to raw")]
            case "format fix":
                return self._format_fix(parsed.index)
            case "help":
                return [Message("info", line) for line in help_lines()]
            case "exit":
                self.running = False
                return [_info(EXIT_MESSAGE)]
        raise ValueError(f"Unhandled command: {parsed.command!r}")

    def _replace(self, index: int | None, prompt: Prompt) -> list[Message]:
        if self.store.get(index) is None:
            return [_error("Text has not been replaced", "invalid_index")]
        original = prompt("Replacing Word: ")
        replacement = prompt("Replacing with: ")
        return _outcome(
            self.store.replace_word(index, original, replacement),
            "Text replaced successfully!",
            "Text has not been replaced",
        )

    def _glossary(self) -> list[Message]:
        glossary = build_glossary(
            self.store.read(), min_count=self.config.glossary_min_count,
        )
        if not glossary:
            return [_error("Index has not been generated: no term occurs often enough")]
        if self.json_output:
            body = [Message("info", dump_json(glossary).decode("utf-8"))]
        else:
            body = [Message("info", line) for line in format_glossary(glossary)]
        return [_info("Glossary:"), *body]

    def _print(self) -> list[Message]:
        rendered = reflow(self.store.read(), self.mode, max_width=self.max_width)
        if not rendered:
            return [_error("Text has not been printed", rendered.failure)]
        return [Message("info", rendered.text)]

    def _format_fix(self, width: int | None) -> list[Message]:
        candidate = width if width is not None else self.max_width
        if not is_valid_width(candidate):
            return [_error("Format has not been changed", "missing_configuration")]
        self.max_width = candidate
        self.mode = "fixed"
        return [_info(f"Format set to fixed width {candidate}")]
