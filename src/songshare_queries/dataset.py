"""Loading song records from JSON.

The queries in :mod:`songshare_queries.core` never read data themselves; a
caller loads the dataset once (from a JSON file, the bundled example data, or
audio tags via :mod:`songshare_queries.tag_io`) and passes it in explicitly.
"""

from __future__ import annotations

import json
import logging
import math
import os
from collections.abc import Mapping
from importlib import resources
from pathlib import Path

from .types import Song

logger = logging.getLogger(__name__)

SONGS_PATH_ENV = "SONGSHARE_SONGS_PATH"

_TEXT_FIELDS = ("title", "artist", "album")
# The external data format spells the runtime in camelCase; accept both.
_RUNTIME_KEYS = ("runtimeInSeconds", "runtime_in_seconds")


def song_from_mapping(raw: Mapping[str, object]) -> Song:
    """Build a :class:`Song` from a mapping such as one parsed from JSON.

    Raises ``ValueError`` naming the field when a text field is missing or
    not a string, or when the runtime is missing, not a finite number, or
    negative.
    """
    values: dict[str, str] = {}
    for field in _TEXT_FIELDS:
        value = raw.get(field)
        if not isinstance(value, str):
            msg = f"song record field {field!r} must be a string, got {value!r}"
            raise ValueError(msg)
        values[field] = value

    runtime = next((raw[k] for k in _RUNTIME_KEYS if k in raw), None)
    # bool is an int subclass but never a meaningful runtime
    if isinstance(runtime, bool) or not isinstance(runtime, (int, float)):
        msg = f"song record field 'runtimeInSeconds' must be a number, got {runtime!r}"
        raise ValueError(msg)
    if not math.isfinite(runtime) or runtime < 0:
        msg = f"song record field 'runtimeInSeconds' must be finite and not negative: {runtime}"
        raise ValueError(msg)

    return Song(runtime_in_seconds=runtime, **values)


def songs_from_json(text: str, source: str = "<string>") -> tuple[Song, ...]:
    """Parse a JSON array of song mappings."""
    payload = json.loads(text)
    if not isinstance(payload, list):
        msg = f"{source}: expected a JSON array of songs"
        raise ValueError(msg)

    songs: list[Song] = []
    for index, raw in enumerate(payload):
        if not isinstance(raw, dict):
            msg = f"{source}: song #{index} is not a JSON object"
            raise ValueError(msg)
        try:
            songs.append(song_from_mapping(raw))
        except ValueError as exc:
            msg = f"{source}: song #{index}: {exc}"
            raise ValueError(msg) from exc

    logger.debug("Loaded %d songs from %s", len(songs), source)
    return tuple(songs)


def load_songs(path: Path | str) -> tuple[Song, ...]:
    """Read songs from the JSON file at ``path``."""
    p = Path(path)
    return songs_from_json(p.read_text(encoding="utf-8"), source=str(p))


def load_example_songs() -> tuple[Song, ...]:
    """Return the example dataset shipped with the package."""
    data = resources.files("songshare_queries") / "data" / "songs.json"
    return songs_from_json(data.read_text(encoding="utf-8"), source="example songs")


def default_songs_path() -> Path | None:
    """Return the dataset path configured via ``SONGSHARE_SONGS_PATH``, if any."""
    configured = os.environ.get(SONGS_PATH_ENV)
    return Path(configured) if configured else None


def load_default_songs() -> tuple[Song, ...]:
    """Load the configured dataset, falling back to the bundled examples."""
    path = default_songs_path()
    if path is None:
        return load_example_songs()
    return load_songs(path)
