"""Editor configuration: defaults, JSON config file, CLI overrides."""
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from texteditor.glossary import GLOSSARY_MIN_COUNT
from texteditor.io_utils import load_json


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Settings for one editor session."""

    max_width: int | None = None  # None = fixed-width rendering unavailable
    glossary_min_count: int = GLOSSARY_MIN_COUNT
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.max_width is not None:
            if isinstance(self.max_width, bool) or not isinstance(self.max_width, int):
                raise ValueError(f"max_width must be an integer, got {self.max_width!r}")
            if self.max_width < 1:
                raise ValueError(f"max_width must be >= 1, got {self.max_width}")
        if isinstance(self.glossary_min_count, bool) or not isinstance(
            self.glossary_min_count, int
        ):
            raise ValueError(
                f"glossary_min_count must be an integer, got {self.glossary_min_count!r}"
            )
        if self.glossary_min_count < 1:
            raise ValueError(
                f"glossary_min_count must be >= 1, got {self.glossary_min_count}"
            )
        if not isinstance(self.verbose, bool):
            raise ValueError(f"verbose must be a boolean, got {self.verbose!r}")

    def with_overrides(self, **overrides: Any) -> EditorConfig:
        """Copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def config_from_dict(data: Any) -> EditorConfig:
    """Build an EditorConfig from a decoded JSON object.

    Raises ValueError on a non-object payload or unknown keys.
    """
    if not isinstance(data, dict):
        raise ValueError("config must be a JSON object")
    known = {f.name for f in fields(EditorConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
    return EditorConfig(**data)


def load_config(path: Path | None) -> EditorConfig:
    """Load configuration from *path*, or defaults when no path is given."""
    if path is None:
        return EditorConfig()
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    return config_from_dict(load_json(path))
