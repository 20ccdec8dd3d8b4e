"""Source-reading helpers for quest loaders."""
from __future__ import annotations

import json
from pathlib import Path

from .errors import DataLoadError


def read_source(path: Path) -> str:
    """Return the text of a definition file, raising DataLoadError if it cannot be read."""
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DataLoadError(f"Definition file not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise DataLoadError(f"Unable to read definition file: {path}") from exc


def load_json(path: Path | str) -> object:
    """Read and decode a JSON definition file.

    Anything the decoder rejects becomes a DataLoadError, including nesting
    too deep to decode and integer literals over the interpreter's digit
    limit.
    """
    source = Path(path)
    text = read_source(source)
    try:
        return json.loads(text)
    except RecursionError as exc:
        raise DataLoadError(f"JSON in {source} is nested too deeply") from exc
    except ValueError as exc:
        raise DataLoadError(f"Invalid JSON in {source}: {exc}") from exc
