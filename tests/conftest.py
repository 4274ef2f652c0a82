import pytest

from songshare_queries.dataset import load_example_songs
from songshare_queries.types import Song


@pytest.fixture
def songs() -> list[Song]:
    """Three songs across two albums: one short, one medium, one long."""
    return [
        Song(title="A", artist="Ann", album="X", runtime_in_seconds=100),
        Song(title="B", artist="Bob", album="X", runtime_in_seconds=200),
        Song(title="C", artist="Ann", album="Y", runtime_in_seconds=400),
    ]


@pytest.fixture
def example_songs() -> tuple[Song, ...]:
    return load_example_songs()


@pytest.fixture(autouse=True)
def _no_configured_dataset(monkeypatch: pytest.MonkeyPatch) -> None:
    # Tests must not pick up a dataset path from the developer's environment.
    monkeypatch.delenv("SONGSHARE_SONGS_PATH", raising=False)
