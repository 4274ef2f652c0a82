from pathlib import Path

import pytest

from songshare_queries.tag_io import iter_audio_files, read_tags, scan_songs, song_from_tags
from songshare_queries.types import Song


def _write_tagged_mp3(path: Path, artists: list[str]) -> None:
    try:
        from mutagen.id3 import ID3
        from mutagen.id3._frames import TALB, TIT2, TPE1
    except Exception as exc:  # pragma: no cover - test dependency
        pytest.skip("mutagen not available: %s" % exc)

    path.write_bytes(b"")
    tags = ID3()
    tags.add(TIT2(encoding=3, text=["Test Title"]))
    tags.add(TPE1(encoding=3, text=artists))
    tags.add(TALB(encoding=3, text=["Some Album"]))
    tags.save(str(path))


def _write_flac(path: Path, seconds: int, **comments: str) -> None:
    """Write a FLAC holding only a STREAMINFO block, then tag it."""
    try:
        from mutagen.flac import FLAC
    except Exception as exc:  # pragma: no cover - test dependency
        pytest.skip("mutagen not available: %s" % exc)

    sample_rate = 44100
    # 20 bits sample rate, 3 bits channels-1, 5 bits bits-per-sample-1, 36 bits samples
    packed = (sample_rate << 44) | (1 << 41) | (15 << 36) | (sample_rate * seconds)
    streaminfo = (
        (4096).to_bytes(2, "big") * 2
        + (0).to_bytes(3, "big") * 2
        + packed.to_bytes(8, "big")
        + b"\x00" * 16
    )
    header = bytes([0x80]) + len(streaminfo).to_bytes(3, "big")
    path.write_bytes(b"fLaC" + header + streaminfo)

    audio = FLAC(str(path))
    for key, value in comments.items():
        audio[key] = value
    audio.save()


def test_read_tags_on_created_mp3(tmp_path: Path) -> None:
    p = tmp_path / "test.mp3"
    _write_tagged_mp3(p, ["Some Artist"])

    info = read_tags(p)
    assert info["path"] == str(p)
    assert info["tags"]["title"] == ["Test Title"]

    song = song_from_tags(info)
    assert song == Song("Test Title", "Some Artist", "Some Album", 0)


def test_multi_valued_artist_keeps_primary_artist(tmp_path: Path) -> None:
    p = tmp_path / "duet.mp3"
    _write_tagged_mp3(p, ["Ann", "Bob"])

    assert read_tags(p)["tags"]["artist"] == ["Ann", "Bob"]
    (song,) = scan_songs(tmp_path)
    assert song.artist == "Ann"


def test_scan_songs_reads_flac_vorbis_comments(tmp_path: Path) -> None:
    _write_flac(tmp_path / "t.flac", 10, title="Song", artist="Ann", album="Disc")

    assert scan_songs(tmp_path) == (Song("Song", "Ann", "Disc", 10.0),)


def test_song_from_tags_fallbacks() -> None:
    song = song_from_tags({"path": "/music/untitled track.mp3", "tags": {}, "info": {}})
    assert song == Song("untitled track", "Unknown", "Unknown", 0)


def test_song_from_tags_skips_blank_values() -> None:
    song = song_from_tags(
        {
            "path": "/music/a.mp3",
            "tags": {"title": [" Spaced "], "artist": ["", "Second"], "album": [""]},
            "info": {"length": 187.25},
        }
    )
    assert song == Song("Spaced", "Second", "Unknown", 187.25)


def test_iter_audio_files(tmp_path: Path) -> None:
    (tmp_path / "b.mp3").write_bytes(b"")
    (tmp_path / "a.FLAC").write_bytes(b"")
    (tmp_path / "cover.jpg").write_bytes(b"")
    nested = tmp_path / "disc2"
    nested.mkdir()
    (nested / "c.ogg").write_bytes(b"")

    assert [p.name for p in iter_audio_files(tmp_path)] == ["a.FLAC", "b.mp3"]
    assert [p.name for p in iter_audio_files(tmp_path, recursive=True)] == [
        "a.FLAC",
        "b.mp3",
        "c.ogg",
    ]
    assert iter_audio_files(tmp_path / "b.mp3") == [tmp_path / "b.mp3"]
    assert iter_audio_files(tmp_path / "missing") == []


def test_scan_songs_skips_unreadable_files(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    import songshare_queries.tag_io as tag_io

    (tmp_path / "good.mp3").write_bytes(b"")
    (tmp_path / "broken.mp3").write_bytes(b"")

    def _fake_read_tags(path: Path) -> dict[str, object]:
        if path.name == "broken.mp3":
            raise ValueError("corrupt header")
        return {"path": str(path), "tags": {"title": ["Good"]}, "info": {"length": 10}}

    monkeypatch.setattr(tag_io, "read_tags", _fake_read_tags)
    songs = scan_songs(tmp_path)

    assert [s.title for s in songs] == ["Good"]
    assert any("broken.mp3" in r.getMessage() for r in caplog.records)
