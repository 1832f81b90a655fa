"""JSON helpers for configuration files and machine-readable output.

orjson-backed; callers get plain Python objects back.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import orjson


def load_json(path: Path) -> Any:
    """Load JSON from a file."""
    return orjson.loads(path.read_bytes())


def dump_json(obj: Any, *, pretty: bool = True) -> bytes:
    """Serialize *obj* to JSON bytes, keys sorted."""
    opts = orjson.OPT_SORT_KEYS
    if pretty:
        opts |= orjson.OPT_INDENT_2
    return orjson.dumps(obj, option=opts)
