"""
Listening insights for a single listener.

A listener's play history is scanned once, in the order it was recorded,
to build per-song, per-artist and per-genre totals. The totals are then
reduced to the question/answer rows shown on the dashboard.
"""
from music_insights.models import Insight, UnresolvedSongError

FRIDAY = 4
SATURDAY = 5
TOP_GENRE_COUNT = 3


def is_friday_night(local_time):
    """Friday 17:00 up to and including Saturday 03:59:59"""
    day, hour = local_time.weekday(), local_time.hour
    return (day == FRIDAY and hour >= 17) or (day == SATURDAY and hour < 4)


def _add(totals, key, amount=1):
    totals[key] = totals.get(key, 0) + amount


def top_key(totals):
    """Key with the highest total, the earliest key wins a tie

    Args:
        totals (dict): Totals keyed in first-seen order

    Returns:
        str: Winning key, or None when there are no totals
    """
    if not totals:
        return None
    return max(totals, key=totals.get)


class ListeningStats:
    """Totals gathered from one pass over a listener's history."""

    def __init__(self):
        self.event_count = 0
        self.song_count = {}
        self.song_time = {}
        self.artist_count = {}
        self.artist_time = {}
        self.genre_count = {}
        self.friday_night_count = {}
        self.friday_night_time = {}
        self.song_days = {}
        self.listening_days = set()
        self.hour_count = {}
        self.max_streak = 0
        # Ordered set of songs tied for the longest streak
        self.streak_songs = {}

    def add(self, song, local_time, current_streak):
        song_key = song.key
        self.event_count += 1

        _add(self.song_count, song_key)
        _add(self.song_time, song_key, song.duration_seconds)
        _add(self.artist_count, song.artist)
        _add(self.artist_time, song.artist, song.duration_seconds)
        _add(self.genre_count, song.genre)
        _add(self.hour_count, local_time.hour)

        if is_friday_night(local_time):
            _add(self.friday_night_count, song_key)
            _add(self.friday_night_time, song_key, song.duration_seconds)

        day = local_time.date()
        self.song_days.setdefault(song_key, set()).add(day)
        self.listening_days.add(day)

        if current_streak > self.max_streak:
            self.max_streak = current_streak
            self.streak_songs = {song_key: None}
        elif current_streak == self.max_streak:
            self.streak_songs.setdefault(song_key, None)

    @property
    def most_played_song(self):
        return top_key(self.song_count)

    @property
    def most_played_song_by_time(self):
        return top_key(self.song_time)

    @property
    def most_played_artist(self):
        return top_key(self.artist_count)

    @property
    def most_played_artist_by_time(self):
        return top_key(self.artist_time)

    @property
    def top_friday_song(self):
        return top_key(self.friday_night_count)

    @property
    def top_friday_song_by_time(self):
        return top_key(self.friday_night_time)

    @property
    def longest_streak_songs(self):
        return list(self.streak_songs)

    @property
    def everyday_songs(self):
        """Songs played on every day the listener played anything"""
        total_days = len(self.listening_days)
        return [song for song, days in self.song_days.items() if len(days) == total_days]

    @property
    def top_genres(self):
        # sorted() is stable, so equal counts keep their first-seen order
        ranked = sorted(self.genre_count, key=self.genre_count.get, reverse=True)
        return ranked[:TOP_GENRE_COUNT]


def collect_listening_stats(events, get_song, tz=None):
    """Scan a listener's history once and gather the totals

    Args:
        events (list): ListenEvent objects in the order they were played
        get_song (callable): Resolves a song ID to a Song
        tz (tzinfo, optional): Listener's time zone, the system zone when omitted

    Returns:
        ListeningStats: Totals for the whole history

    Raises:
        UnresolvedSongError: An event references a song that cannot be resolved
    """
    stats = ListeningStats()
    previous_key = None
    current_streak = 0

    for event in events:
        song = get_song(event.song_id)
        if song is None:
            raise UnresolvedSongError(event.song_id)

        if song.key == previous_key:
            current_streak += 1
        else:
            previous_key = song.key
            current_streak = 1

        stats.add(song, event.local_time(tz), current_streak)

    return stats


def get_genres(top_genres):
    """Row describing the listener's top genres

    Args:
        top_genres (list): Genre names, most played first

    Returns:
        Insight: 'Top N Genre' for a single genre, 'Top N Genres' otherwise
    """
    noun = "Genre" if len(top_genres) == 1 else "Genres"
    return Insight(f"Top {len(top_genres)} {noun}", ", ".join(top_genres))


def build_insights(stats):
    """Turn gathered totals into the ordered rows of the insights table

    Rows whose statistic is undefined (e.g. no Friday night plays) are left out.

    Args:
        stats (ListeningStats): Totals from collect_listening_stats

    Returns:
        list: Insight objects in display order
    """
    single_answers = [
        ("Most listened song (count)", stats.most_played_song),
        ("Most listened song (time)", stats.most_played_song_by_time),
        ("Most listened artist (count)", stats.most_played_artist),
        ("Most listened artist (time)", stats.most_played_artist_by_time),
        ("Friday night song (count)", stats.top_friday_song),
        ("Friday night song (time)", stats.top_friday_song_by_time),
    ]
    insights = [Insight(question, answer) for question, answer in single_answers if answer is not None]

    streak_songs = stats.longest_streak_songs
    if streak_songs:
        insights.append(Insight(
            "Longest streak song",
            f"{', '.join(streak_songs)} (length: {stats.max_streak})"
        ))

    everyday_songs = stats.everyday_songs
    if everyday_songs:
        insights.append(Insight("Every day songs", ", ".join(everyday_songs)))

    top_genres = stats.top_genres
    if top_genres:
        insights.append(get_genres(top_genres))

    return insights


class ListeningAggregator:
    def __init__(self, fetch_events, resolve_song, tz=None):
        """Initialize the aggregator with its data sources

        Args:
            fetch_events (callable): Returns a listener's ListenEvent list for a listener ID
            resolve_song (callable): Returns the Song for a song ID
            tz (tzinfo, optional): Listener's time zone, the system zone when omitted
        """
        self.fetch_events = fetch_events
        self.resolve_song = resolve_song
        self.tz = tz

    def stats(self, listener_id):
        """Gathered totals for a listener, or None when they have never played anything"""
        events = self.fetch_events(listener_id)
        if not events:
            return None
        return collect_listening_stats(events, self.resolve_song, self.tz)

    def aggregate(self, listener_id):
        """Insights for a listener

        Args:
            listener_id (str): Listener to analyze

        Returns:
            list: Insight objects in display order, or None when the listener has no plays
        """
        stats = self.stats(listener_id)
        if stats is None:
            return None
        return build_insights(stats)
