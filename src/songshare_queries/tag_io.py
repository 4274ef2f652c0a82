"""Building song records from audio file tags.

Tags are read through Mutagen's "easy" interface, which exposes the same
``title``/``artist``/``album`` keys for ID3, Vorbis comments (FLAC, Ogg) and
MP4 atoms. Every tag value is kept as a list so multi-valued frames (for
example several artists in one ID3v2.4 TPE1 frame) stay separate.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, cast

from .types import Song

if TYPE_CHECKING:
    from mutagen import File as MutagenFile

    from .types import EasyTagsLike, TagReadResult
else:
    try:
        from mutagen import File as MutagenFile
    except ImportError:  # pragma: no cover - runtime dependency
        MutagenFile = None

logger = logging.getLogger(__name__)

AUDIO_SUFFIXES = {".mp3", ".mp4", ".m4a", ".flac", ".wav", ".ogg"}
UNKNOWN = "Unknown"


def _tag_values(tags: EasyTagsLike) -> dict[str, list[str]]:
    out: dict[str, list[str]] = {}
    for key in tags.keys():
        value = tags[key]
        values = value if isinstance(value, list) else [value]
        out[str(key)] = [str(v) for v in values]
    return out


def read_tags(path: Path) -> TagReadResult:
    """Read normalised tags and the stream length from ``path``.

    Returns a :class:`TagReadResult`. Files Mutagen cannot parse as audio
    (for example an MP3 holding only an ID3 header) fall back to reading the
    ID3 tag alone, with no length.
    """
    if MutagenFile is None:
        msg = (
            "mutagen is required to read audio tags. "
            "Install with `pip install mutagen`"
        )
        raise RuntimeError(msg)

    try:
        audio = MutagenFile(str(path), easy=True)
    except Exception:  # noqa: BLE001
        audio = None

    if audio is None:
        return _read_easy_id3_only(path)

    length = getattr(getattr(audio, "info", None), "length", None)
    tags = cast("EasyTagsLike", audio) if audio.tags is not None else None
    return {
        "path": str(path),
        "tags": _tag_values(tags) if tags is not None else {},
        "info": {"length": length},
    }


def _read_easy_id3_only(path: Path) -> TagReadResult:
    import importlib  # noqa: PLC0415 (dynamic import to avoid runtime dependency at module import time)

    try:
        easyid3_mod = importlib.import_module("mutagen.easyid3")
    except ImportError as exc:  # pragma: no cover - runtime dependency
        msg = "mutagen.easyid3 is required to read ID3-only files"
        raise RuntimeError(msg) from exc

    tags = cast("EasyTagsLike", easyid3_mod.EasyID3(str(path)))
    return {"path": str(path), "tags": _tag_values(tags), "info": {}}


def _first_text(info: TagReadResult, key: str) -> str | None:
    for value in info["tags"].get(key, []):
        if value.strip():
            return value.strip()
    return None


def song_from_tags(info: TagReadResult) -> Song:
    """Map the title/artist/album tags and stream length onto a :class:`Song`.

    Only the first non-blank value of a multi-valued tag is used. Missing
    titles fall back to the file stem; missing artist or album tags become
    ``"Unknown"``. A missing or unreadable length counts as 0 seconds.
    """
    length = info["info"].get("length")
    runtime = length if isinstance(length, (int, float)) and length > 0 else 0
    return Song(
        title=_first_text(info, "title") or Path(info["path"]).stem,
        artist=_first_text(info, "artist") or UNKNOWN,
        album=_first_text(info, "album") or UNKNOWN,
        runtime_in_seconds=runtime,
    )


def iter_audio_files(path: Path, recursive: bool = False) -> list[Path]:
    """Return the audio files at ``path`` in sorted order.

    A file path is returned as-is. For a directory, only its direct children
    are considered unless ``recursive`` is True.
    """
    if path.is_file():
        return [path]
    if not path.is_dir():
        return []

    out: list[Path] = []
    if recursive:
        for dirpath, _, filenames in os.walk(str(path)):
            d = Path(dirpath)
            out.extend(d / fn for fn in filenames if Path(fn).suffix.lower() in AUDIO_SUFFIXES)
    else:
        out.extend(
            p for p in path.iterdir() if p.is_file() and p.suffix.lower() in AUDIO_SUFFIXES
        )
    return sorted(out)


def scan_songs(path: Path | str, recursive: bool = False) -> tuple[Song, ...]:
    """Read every audio file under ``path`` into a tuple of songs.

    Files whose tags cannot be read are logged and skipped.
    """
    songs: list[Song] = []
    for f in iter_audio_files(Path(path), recursive):
        try:
            info = read_tags(f)
        except RuntimeError:
            raise
        except Exception:  # noqa: BLE001
            logger.exception("Failed to read tags from %s", str(f))
            continue
        songs.append(song_from_tags(info))

    logger.debug("Scanned %d songs from %s", len(songs), str(path))
    return tuple(songs)
