"""Lightweight shared types for songshare-queries.

`Song` is the record every query operates on. It is a frozen dataclass so a
query can never mutate the dataset it was handed; queries build new values
instead.

The result shapes returned by the queries are `TypedDict`s so they stay plain
dicts at runtime (easy to print, serialise, or compare in tests) while still
documenting their keys for the type checker.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Protocol, TypedDict

# Runtimes come from JSON (ints) or audio tags (floats); both are accepted.
Runtime = int | float


@dataclass(frozen=True)
class Song:
    """One song entry: title, artist, album, and duration in seconds."""

    title: str
    artist: str
    album: str
    runtime_in_seconds: Runtime


class RuntimeCategories(TypedDict):
    """Song counts per runtime bucket.

    - ``short``: under 180 seconds
    - ``medium``: 180 to 300 seconds, inclusive
    - ``long``: over 300 seconds
    """

    short: int
    medium: int
    long: int


class SongDuration(TypedDict):
    title: str
    duration_in_minutes: float


class AlbumSummary(TypedDict):
    """Per-album totals used by the album summary report."""

    album: str
    total_runtime: Runtime
    song_count: int


class LibrarySummary(TypedDict):
    """Small typed dict describing the summary returned by `dataframe_summary`."""

    rows: int
    total_runtime: Runtime
    albums: int
    artists: int


class TagReadResult(TypedDict):
    """Return shape for the tag reader.

    - ``path``: file path string
    - ``tags``: normalised key (``title``, ``artist``, ``album``...) -> values;
      multi-valued frames keep one list entry per value
    - ``info``: stream metadata (``length`` in seconds when known)
    """

    path: str
    tags: dict[str, list[str]]
    info: dict[str, object]


class EasyTagsLike(Protocol):
    """Minimal structural type for Mutagen's "easy" tag mappings.

    Covers both a ``mutagen.File(..., easy=True)`` result and a bare
    ``EasyID3``; only key listing and lookup are used.
    """

    def keys(self) -> Iterable[str]: ...

    def __getitem__(self, key: str) -> Any: ...
