"""Tabular (pandas) views over a song list.

Used by the CLI for table/CSV output and the ``--summary`` flag.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict

import pandas as pd

from .types import LibrarySummary, Song

SONG_COLUMNS = ["title", "artist", "album", "runtime_in_seconds"]


def songs_dataframe(songs: Sequence[Song]) -> pd.DataFrame:
    """Return one row per song, in input order."""
    return pd.DataFrame([asdict(song) for song in songs], columns=SONG_COLUMNS)


def dataframe_summary(df: pd.DataFrame) -> LibrarySummary:
    """Return a small summary of the song table.

    Accepts the frame produced by `songs_dataframe`; an empty frame
    summarises to zeros.
    """
    total_runtime = df["runtime_in_seconds"].sum()
    return {
        "rows": len(df),
        "total_runtime": total_runtime.item() if hasattr(total_runtime, "item") else total_runtime,
        "albums": int(df["album"].nunique()),
        "artists": int(df["artist"].nunique()),
    }

