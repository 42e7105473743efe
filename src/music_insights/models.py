"""
Plain data objects shared by the data layer, the aggregation and the dashboard.
"""
from datetime import datetime


class UnresolvedSongError(KeyError):
    """Raised when a listen event references a song ID with no song details."""

    def __init__(self, song_id):
        super().__init__(song_id)
        self.song_id = song_id

    def __str__(self):
        return f"No song found for song ID {self.song_id!r}"


class MalformedTimestampError(ValueError):
    """Raised when a listen event timestamp cannot be read as a date/time."""

    def __init__(self, value):
        super().__init__(f"Cannot parse listen timestamp {value!r}")
        self.value = value


def parse_timestamp(value):
    """Parse an ISO-8601 timestamp into a datetime

    Args:
        value (str or datetime): Timestamp, a trailing 'Z' is read as UTC

    Returns:
        datetime: Parsed timestamp (timezone-aware when the input carried an offset)
    """
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise MalformedTimestampError(value)
    try:
        return datetime.fromisoformat(value.strip().replace('Z', '+00:00'))
    except ValueError:
        raise MalformedTimestampError(value) from None


class Song:
    def __init__(self, id, artist, title, genre, duration_seconds):
        """Initialize a Song object

        Args:
            id (str): Song ID referenced by listen events
            artist (str): Artist name
            title (str): Song title
            genre (str): Genre name
            duration_seconds (int or float): Song duration in seconds
        """
        if duration_seconds < 0:
            raise ValueError(f"Song {id!r} has a negative duration: {duration_seconds}")
        self.id = id
        self.artist = artist
        self.title = title
        self.genre = genre
        self.duration_seconds = duration_seconds

    @property
    def key(self):
        """Identity of the song across a listener's history"""
        return f"{self.artist} - {self.title}"

    def __str__(self):
        return self.key

    def __repr__(self):
        return f"Song(id={self.id!r}, key={self.key!r})"


class ListenEvent:
    def __init__(self, song_id, timestamp):
        """Initialize a ListenEvent object

        Args:
            song_id (str): ID of the song that was played
            timestamp (str or datetime): ISO timestamp when the song was played
        """
        self.song_id = song_id
        self.timestamp = parse_timestamp(timestamp)

    def local_time(self, tz=None):
        """Wall-clock time of the play as the listener saw it

        Timestamps without an offset are already local and are returned as they are.

        Args:
            tz (tzinfo, optional): Listener's time zone, the system zone when omitted

        Returns:
            datetime: Local time of the play
        """
        if self.timestamp.tzinfo is None:
            return self.timestamp
        return self.timestamp.astimezone(tz)

    def __repr__(self):
        return f"ListenEvent(song_id={self.song_id!r}, timestamp={self.timestamp.isoformat()!r})"


class Insight:
    def __init__(self, question, answer):
        """One row of the insights table

        Args:
            question (str): Label shown in the Question column
            answer (str): Value shown in the Answer column
        """
        self.question = question
        self.answer = answer

    def __eq__(self, other):
        if not isinstance(other, Insight):
            return NotImplemented
        return (self.question, self.answer) == (other.question, other.answer)

    def __repr__(self):
        return f"Insight(question={self.question!r}, answer={self.answer!r})"

    def to_dict(self):
        return {'question': self.question, 'answer': self.answer}
