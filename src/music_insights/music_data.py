import os

import pandas as pd

from music_insights.models import ListenEvent, Song, UnresolvedSongError

USERS_FILE = 'users.csv'
SONGS_FILE = 'songs.csv'
EVENTS_FILE = 'listen_events.csv'


def _read_csv(data_dir, filename):
    path = os.path.join(data_dir, filename)
    if not os.path.exists(path):
        raise FileNotFoundError(f"Listening data file not found: {path}")
    # Keep IDs and timestamps as the strings they were written as
    return pd.read_csv(path, dtype=str, keep_default_na=False)


def _duration(value):
    """Whole-second durations stay integers, fractional ones stay floats"""
    value = float(value)
    return int(value) if value.is_integer() else value


class MusicData:
    def __init__(self, data_dir):
        """Load the users, songs and listen events from CSV files

        Args:
            data_dir (str): Directory containing users.csv, songs.csv and listen_events.csv
        """
        self.data_dir = data_dir

        self.users_df = _read_csv(data_dir, USERS_FILE)
        self.songs_df = _read_csv(data_dir, SONGS_FILE)
        self.listens_df = _read_csv(data_dir, EVENTS_FILE)

        self.songs = {}
        durations = pd.to_numeric(self.songs_df['duration_seconds'])
        for row, duration in zip(self.songs_df.itertuples(index=False), durations):
            self.songs[row.id] = Song(
                id=row.id,
                artist=row.artist,
                title=row.title,
                genre=row.genre,
                duration_seconds=_duration(duration)
            )

        print(f"Loaded {len(self.users_df)} users, {len(self.songs)} songs and "
              f"{len(self.listens_df)} listen events from {data_dir}")

    def get_user_ids(self):
        """Get the IDs of every listener, in file order

        Returns:
            list: Listener IDs as strings
        """
        return self.users_df['user_id'].tolist()

    def get_listen_events(self, user_id):
        """Get a listener's plays in the order they happened

        Args:
            user_id (str): Listener ID

        Returns:
            list: List of ListenEvent objects, empty when the listener has no plays
        """
        rows = self.listens_df[self.listens_df['user_id'] == str(user_id)]
        return [ListenEvent(song_id=row.song_id, timestamp=row.timestamp) for row in rows.itertuples(index=False)]

    def get_song(self, song_id):
        """Get the details of a song

        Args:
            song_id (str): Song ID

        Returns:
            Song: Song details

        Raises:
            UnresolvedSongError: No song has this ID
        """
        try:
            return self.songs[str(song_id)]
        except KeyError:
            raise UnresolvedSongError(song_id) from None


if __name__ == "__main__":
    from music_insights.config import load_settings
    from music_insights.listening_analysis import ListeningAggregator

    settings = load_settings()
    music_data = MusicData(settings.data_dir)
    aggregator = ListeningAggregator(music_data.get_listen_events, music_data.get_song, settings.tzinfo)
    for user_id in music_data.get_user_ids():
        insights = aggregator.aggregate(user_id)
        print(f"User {user_id}")
        if insights is None:
            print("  No music for this user")
            continue
        for insight in insights:
            print(f"  {insight.question}: {insight.answer}")
