"""
Tests for the listener charts.
"""

import altair as alt
import plotly.graph_objects as go

from music_insights.charts import plot_genre_distribution, plot_hourly_distribution, plot_top_artists
from music_insights.listening_analysis import ListeningStats, collect_listening_stats


def _stats(get_song, make_events):
    events = make_events(
        ("a", "2024-08-01T10:00:00"),
        ("b", "2024-08-01T10:05:00"),
        ("b", "2024-08-01T21:00:00"),
        ("d", "2024-08-02T08:00:00"),
    )
    return collect_listening_stats(events, get_song)


class TestPlotTopArtists:
    """Test the top artists chart."""

    def test_chart(self, get_song, make_events):
        """Test artists are ranked by plays."""
        chart = plot_top_artists(_stats(get_song, make_events))
        assert isinstance(chart, alt.Chart)
        assert chart.data['Artist'].tolist() == ["Artist B", "Artist A", "Artist C"]
        assert chart.data['Plays'].tolist() == [2, 1, 1]

    def test_limit(self, get_song, make_events):
        """Test only the top N artists are drawn."""
        chart = plot_top_artists(_stats(get_song, make_events), n=2)
        assert len(chart.data) == 2

    def test_no_data(self):
        """Test nothing is drawn without plays."""
        assert plot_top_artists(None) is None
        assert plot_top_artists(ListeningStats()) is None


class TestPlotGenreDistribution:
    """Test the genre chart."""

    def test_figure(self, get_song, make_events):
        """Test every genre is drawn."""
        fig = plot_genre_distribution(_stats(get_song, make_events))
        assert isinstance(fig, go.Figure)
        assert sorted(fig.data[0].y) == ["folk", "jazz", "rock"]

    def test_no_data(self):
        """Test nothing is drawn without plays."""
        assert plot_genre_distribution(ListeningStats()) is None


class TestPlotHourlyDistribution:
    """Test the hour of day chart."""

    def test_all_hours_present(self, get_song, make_events):
        """Test every hour appears, including hours without plays."""
        fig = plot_hourly_distribution(_stats(get_song, make_events))
        assert isinstance(fig, go.Figure)
        assert list(fig.data[0].x) == list(range(24))
        counts = dict(zip(fig.data[0].x, fig.data[0].y))
        assert counts[10] == 2
        assert counts[21] == 1
        assert counts[8] == 1
        assert counts[0] == 0

    def test_no_data(self):
        """Test nothing is drawn without plays."""
        assert plot_hourly_distribution(None) is None
