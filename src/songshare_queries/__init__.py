"""songshare-queries package.

Exports the song query functions, the `Song` record, and the package
`__version__`.
"""

from importlib.metadata import version

# Default version fallback; if this package isn't installed as a distribution, we
# still want a usable `__version__` attribute during development.
try:
    __version__ = version("songshare-queries")
except Exception:  # pragma: no cover - import-time fallback
    __version__ = "0.1.0"

from .core import (
    album_summaries,
    artists_with_multiple_songs,
    categorize_songs_by_runtime,
    find_album_with_longest_average_runtime,
    find_album_with_most_songs,
    find_artist_with_most_songs,
    find_first_song_starting_with,
    get_albums_in_reverse_order,
    get_first_song_in_album,
    get_songs_from_album,
    get_songs_with_duration_in_minutes,
    get_sorted_titles,
    get_total_runtime_of_artist,
    is_there_long_song,
    list_album_total_runtimes,
    longest_song_title,
    map_artists_to_songs,
    songs_sorted_by_runtime,
    songs_with_word,
    sort_songs_by_artist_and_title,
)
from .dataset import load_default_songs, load_example_songs, load_songs
from .report import (
    print_album_summaries,
    print_artists_with_multiple_songs,
    print_longest_song_title,
    print_songs_sorted_by_runtime,
)
from .types import Song

__all__ = [
    "__version__",
    "Song",
    "album_summaries",
    "artists_with_multiple_songs",
    "categorize_songs_by_runtime",
    "find_album_with_longest_average_runtime",
    "find_album_with_most_songs",
    "find_artist_with_most_songs",
    "find_first_song_starting_with",
    "get_albums_in_reverse_order",
    "get_first_song_in_album",
    "get_songs_from_album",
    "get_songs_with_duration_in_minutes",
    "get_sorted_titles",
    "get_total_runtime_of_artist",
    "is_there_long_song",
    "list_album_total_runtimes",
    "load_default_songs",
    "load_example_songs",
    "load_songs",
    "longest_song_title",
    "map_artists_to_songs",
    "print_album_summaries",
    "print_artists_with_multiple_songs",
    "print_longest_song_title",
    "print_songs_sorted_by_runtime",
    "songs_sorted_by_runtime",
    "songs_with_word",
    "sort_songs_by_artist_and_title",
]
