from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from dataclasses import asdict, dataclass
from logging import Logger
from pathlib import Path
from typing import Any, Protocol

from songshare_queries import core, report
from songshare_queries.dataset import load_default_songs, load_songs
from songshare_queries.tag_io import scan_songs
from songshare_queries.types import Song


class QueryArgs(Protocol):
    """Protocol for parsed CLI args used by the query helpers."""

    command: str | None
    data: str | None
    scan: str | None
    recursive: bool | None
    verbose: bool | None


@dataclass(frozen=True)
class QueryCommand:
    """One CLI subcommand bound to a query function.

    ``argument`` names the single scalar parameter the query takes (if any);
    ``printer`` marks queries from :mod:`songshare_queries.report` that write
    their own output.
    """

    name: str
    func: Callable[..., Any]
    help: str
    argument: str | None = None
    argument_type: Callable[[str], Any] = str
    printer: bool = False


QUERY_COMMANDS: tuple[QueryCommand, ...] = (
    QueryCommand("titles", core.get_sorted_titles, "Song titles, sorted"),
    QueryCommand(
        "album", core.get_songs_from_album, "Titles on an album", argument="album_name"
    ),
    QueryCommand(
        "runtimes",
        core.categorize_songs_by_runtime,
        "Count short, medium, and long songs",
    ),
    QueryCommand("top-album", core.find_album_with_most_songs, "Album with most songs"),
    QueryCommand(
        "first-in-album",
        core.get_first_song_in_album,
        "First song on an album",
        argument="album_name",
    ),
    QueryCommand(
        "has-long",
        core.is_there_long_song,
        "Whether any song is longer than the given seconds",
        argument="runtime",
        argument_type=float,
    ),
    QueryCommand(
        "minutes",
        core.get_songs_with_duration_in_minutes,
        "Song durations in minutes",
    ),
    QueryCommand(
        "albums", core.get_albums_in_reverse_order, "Albums in reverse order"
    ),
    QueryCommand(
        "search",
        core.songs_with_word,
        "Titles containing a word (case-insensitive)",
        argument="word",
    ),
    QueryCommand(
        "artist-runtime",
        core.get_total_runtime_of_artist,
        "Total runtime of an artist's songs",
        argument="artist_name",
    ),
    QueryCommand(
        "multi-artists",
        report.print_artists_with_multiple_songs,
        "Artists with more than one song",
        printer=True,
    ),
    QueryCommand(
        "longest-title",
        report.print_longest_song_title,
        "The longest song title",
        printer=True,
    ),
    QueryCommand(
        "sorted",
        core.sort_songs_by_artist_and_title,
        "Songs sorted by artist, then title",
    ),
    QueryCommand(
        "album-runtimes",
        core.list_album_total_runtimes,
        "Total runtime per album",
    ),
    QueryCommand(
        "starts-with",
        core.find_first_song_starting_with,
        "First song whose title starts with a letter",
        argument="letter",
    ),
    QueryCommand("artists", core.map_artists_to_songs, "Each artist's song titles"),
    QueryCommand(
        "longest-average",
        core.find_album_with_longest_average_runtime,
        "Album with the longest average runtime",
    ),
    QueryCommand(
        "by-runtime",
        report.print_songs_sorted_by_runtime,
        "Song titles sorted by runtime",
        printer=True,
    ),
    QueryCommand(
        "summaries",
        report.print_album_summaries,
        "Name, total runtime and song count per album",
        printer=True,
    ),
    QueryCommand(
        "top-artist", core.find_artist_with_most_songs, "Artist with most songs"
    ),
)

COMMANDS_BY_NAME = {cmd.name: cmd for cmd in QUERY_COMMANDS}


def load_dataset(args: QueryArgs) -> tuple[Song, ...]:
    """Load songs from ``--data``, ``--scan``, or the configured default."""
    if getattr(args, "data", None):
        return load_songs(Path(args.data))
    if getattr(args, "scan", None):
        return scan_songs(Path(args.scan), bool(getattr(args, "recursive", False)))
    return load_default_songs()


def _jsonable(value: object) -> object:
    if isinstance(value, Song):
        return asdict(value)
    if isinstance(value, list):
        return [_jsonable(v) for v in value]
    return value


def run_query(args: QueryArgs, songs: Sequence[Song], logger: Logger) -> None:
    """Run the subcommand named by ``args.command`` against ``songs``."""
    cmd = COMMANDS_BY_NAME[args.command]
    params = [getattr(args, cmd.argument)] if cmd.argument else []
    if getattr(args, "verbose", False):
        logger.info("Running %s over %d songs", cmd.name, len(songs))

    result = cmd.func(songs, *params)
    if cmd.printer:
        return
    print(json.dumps(_jsonable(result), indent=2, ensure_ascii=False))  # noqa: T201
