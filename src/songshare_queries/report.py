"""Printing queries.

These write their results to stdout. Each one delegates to a pure function
in :mod:`songshare_queries.core`, which callers that need the value rather
than the text should use directly.
"""

from __future__ import annotations

from collections.abc import Sequence

from .core import (
    album_summaries,
    artists_with_multiple_songs,
    longest_song_title,
    songs_sorted_by_runtime,
)
from .types import Song


def print_artists_with_multiple_songs(songs: Sequence[Song]) -> None:
    """Print each artist who has more than one song in the list."""
    for artist in artists_with_multiple_songs(songs):
        print(artist)  # noqa: T201


def print_longest_song_title(songs: Sequence[Song]) -> None:
    title = longest_song_title(songs)
    if title is not None:
        print(title)  # noqa: T201


def print_songs_sorted_by_runtime(songs: Sequence[Song]) -> None:
    """Print song titles from shortest to longest runtime."""
    for song in songs_sorted_by_runtime(songs):
        print(f"{song.title} ({song.runtime_in_seconds}s)")  # noqa: T201


def print_album_summaries(songs: Sequence[Song]) -> None:
    """Print each album's name, total runtime, and number of songs."""
    for summary in album_summaries(songs):
        count = summary["song_count"]
        noun = "song" if count == 1 else "songs"
        print(  # noqa: T201
            f"{summary['album']}: {count} {noun}, "
            f"total runtime {summary['total_runtime']}s"
        )
