"""
Pytest fixtures shared by the test suite.
"""

import os

import pytest

from music_insights.config import DEFAULT_DATA_DIR
from music_insights.models import ListenEvent, Song


@pytest.fixture(autouse=True)
def listener_environment(monkeypatch):
    """Read the bundled data in UTC regardless of the machine running the tests."""
    monkeypatch.setenv("LISTENER_TIMEZONE", "UTC")
    monkeypatch.delenv("MUSIC_INSIGHTS_DATA_DIR", raising=False)


@pytest.fixture
def songs():
    """Small song catalogue keyed by song ID."""
    catalogue = [
        Song("a", "Artist A", "Song X", "rock", 200),
        Song("b", "Artist B", "Song Y", "jazz", 300),
        Song("c", "Artist A", "Song Z", "pop", 100),
        Song("d", "Artist C", "Song W", "folk", 250),
    ]
    return {song.id: song for song in catalogue}


@pytest.fixture
def get_song(songs):
    """Song resolver backed by the catalogue."""
    return songs.get


@pytest.fixture
def make_events():
    """Build ListenEvent lists from (song_id, timestamp) pairs."""

    def _make(*plays):
        return [ListenEvent(song_id, timestamp) for song_id, timestamp in plays]

    return _make


@pytest.fixture
def data_dir():
    """Directory of the bundled listening data."""
    assert os.path.isdir(DEFAULT_DATA_DIR)
    return DEFAULT_DATA_DIR


@pytest.fixture
def write_data(tmp_path):
    """Write users/songs/listen_events CSV files into a temporary directory."""

    def _write(users="user_id\n", songs="id,artist,title,genre,duration_seconds\n",
               listens="user_id,song_id,timestamp\n"):
        (tmp_path / "users.csv").write_text(users, encoding="utf-8")
        (tmp_path / "songs.csv").write_text(songs, encoding="utf-8")
        (tmp_path / "listen_events.csv").write_text(listens, encoding="utf-8")
        return str(tmp_path)

    return _write
