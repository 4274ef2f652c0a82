"""Core query functions for the songshare-queries package.

Every function takes the song sequence (plus at most one scalar parameter)
and returns a freshly built value. None of them mutate their input, keep
state between calls, or raise for a "not found" condition: they return
``None``, ``0`` or an empty container instead.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .types import AlbumSummary, Runtime, RuntimeCategories, Song, SongDuration

SHORT_SONG_LIMIT = 180
LONG_SONG_LIMIT = 300


def get_sorted_titles(songs: Sequence[Song]) -> list[str]:
    """Return the song titles sorted alphabetically."""
    return sorted(song.title for song in songs)


def get_songs_from_album(songs: Sequence[Song], album_name: str) -> list[str]:
    """Return the titles of every song on ``album_name``, in input order."""
    return [song.title for song in songs if song.album == album_name]


def categorize_songs_by_runtime(songs: Sequence[Song]) -> RuntimeCategories:
    """Count songs as short (<180s), medium (180-300s) or long (>300s)."""
    counts: RuntimeCategories = {"short": 0, "medium": 0, "long": 0}
    for song in songs:
        if song.runtime_in_seconds < SHORT_SONG_LIMIT:
            counts["short"] += 1
        elif song.runtime_in_seconds <= LONG_SONG_LIMIT:
            counts["medium"] += 1
        else:
            counts["long"] += 1
    return counts


def _first_max(values: Mapping[str, float]) -> str | None:
    """Return the key with the largest value.

    Keys are scanned in insertion order and only a strictly larger value
    replaces the current best, so the first key seen wins a tie.
    """
    best: str | None = None
    best_value = 0.0
    for key, value in values.items():
        if best is None or value > best_value:
            best = key
            best_value = value
    return best


def _count_by(songs: Sequence[Song], field: str) -> dict[str, int]:
    counts: dict[str, int] = {}
    for song in songs:
        key = getattr(song, field)
        counts[key] = counts.get(key, 0) + 1
    return counts


def find_album_with_most_songs(songs: Sequence[Song]) -> str | None:
    """Return the album with the most songs, or None for an empty list.

    On a tie the album that appears first in ``songs`` wins.
    """
    return _first_max(_count_by(songs, "album"))


def get_first_song_in_album(songs: Sequence[Song], album_name: str) -> Song | None:
    return next((song for song in songs if song.album == album_name), None)


def is_there_long_song(songs: Sequence[Song], runtime: Runtime) -> bool:
    """Return True if at least one song runs strictly longer than ``runtime``."""
    return any(song.runtime_in_seconds > runtime for song in songs)


def get_songs_with_duration_in_minutes(songs: Sequence[Song]) -> list[SongDuration]:
    """Return ``{title, duration_in_minutes}`` for each song (not rounded)."""
    return [
        {"title": song.title, "duration_in_minutes": song.runtime_in_seconds / 60}
        for song in songs
    ]


def get_albums_in_reverse_order(songs: Sequence[Song]) -> list[str]:
    """Return the distinct album names in reverse alphabetical order."""
    # dict keeps first-seen order while dropping duplicates
    unique_albums = list(dict.fromkeys(song.album for song in songs))
    return sorted(unique_albums, reverse=True)


def songs_with_word(songs: Sequence[Song], word: str) -> list[str]:
    """Return titles containing ``word``, ignoring case.

    An empty ``word`` matches every title.
    """
    needle = word.lower()
    return [song.title for song in songs if needle in song.title.lower()]


def get_total_runtime_of_artist(songs: Sequence[Song], artist_name: str) -> Runtime:
    """Return the total runtime in seconds of songs by ``artist_name``.

    Returns 0 when the artist has no songs in the list.
    """
    return sum(song.runtime_in_seconds for song in songs if song.artist == artist_name)


def artists_with_multiple_songs(songs: Sequence[Song]) -> list[str]:
    """Return artists with more than one song, in first-seen order."""
    return [artist for artist, n in _count_by(songs, "artist").items() if n > 1]


def longest_song_title(songs: Sequence[Song]) -> str | None:
    """Return the longest title; the earliest one wins a tie."""
    longest: str | None = None
    for song in songs:
        if longest is None or len(song.title) > len(longest):
            longest = song.title
    return longest


def sort_songs_by_artist_and_title(songs: Sequence[Song]) -> list[Song]:
    """Return a new list sorted by artist name, then by song title."""
    return sorted(songs, key=lambda song: (song.artist, song.title))


def list_album_total_runtimes(songs: Sequence[Song]) -> dict[str, Runtime]:
    """Map each album to the sum of its song runtimes, in first-seen order."""
    totals: dict[str, Runtime] = {}
    for song in songs:
        totals[song.album] = totals.get(song.album, 0) + song.runtime_in_seconds
    return totals


def find_first_song_starting_with(songs: Sequence[Song], letter: str) -> Song | None:
    """Return the first song whose title starts with ``letter`` (case-sensitive)."""
    return next((song for song in songs if song.title.startswith(letter)), None)


def map_artists_to_songs(songs: Sequence[Song]) -> dict[str, list[str]]:
    """Map each artist to the titles of their songs."""
    mapping: dict[str, list[str]] = {}
    for song in songs:
        mapping.setdefault(song.artist, []).append(song.title)
    return mapping


def find_album_with_longest_average_runtime(songs: Sequence[Song]) -> str | None:
    """Return the album whose songs have the highest mean runtime.

    Returns None for an empty list; on a tie the first-seen album wins.
    """
    totals = list_album_total_runtimes(songs)
    counts = _count_by(songs, "album")
    averages = {album: totals[album] / counts[album] for album in totals}
    return _first_max(averages)


def songs_sorted_by_runtime(songs: Sequence[Song]) -> list[Song]:
    # sorted() is stable: equal runtimes keep their input order
    return sorted(songs, key=lambda song: song.runtime_in_seconds)


def album_summaries(songs: Sequence[Song]) -> list[AlbumSummary]:
    """Return name, total runtime and song count for each album."""
    counts = _count_by(songs, "album")
    return [
        {"album": album, "total_runtime": total, "song_count": counts[album]}
        for album, total in list_album_total_runtimes(songs).items()
    ]


def find_artist_with_most_songs(songs: Sequence[Song]) -> str | None:
    """Return the artist with the most songs; the first-seen artist wins a tie."""
    return _first_max(_count_by(songs, "artist"))
