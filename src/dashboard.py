#!/usr/bin/env python3
"""
Music Listening Insights Dashboard
This Streamlit app lets you pick a listener and shows what stands out in their play history.
"""

import streamlit as st
import pandas as pd

from music_insights.charts import plot_genre_distribution, plot_hourly_distribution, plot_top_artists
from music_insights.config import load_settings
from music_insights.listening_analysis import ListeningAggregator, build_insights
from music_insights.music_data import MusicData

NO_MUSIC_MESSAGE = "No music for this user"

# Set page configuration
st.set_page_config(
    page_title="Music Listening Insights",
    page_icon="🎧",
    layout="wide"
)

# Apply custom CSS for better styling
st.markdown("""
<style>
    .main-header {
        font-size: 2.5rem;
        color: #0056b3;
        margin-bottom: 1rem;
    }
    .sub-header {
        font-size: 1.5rem;
        color: #0056b3;
        margin-top: 2rem;
    }
    footer {
        visibility: hidden;
    }
</style>
""", unsafe_allow_html=True)

# Initialize session state for data persistence between reruns
if "music_data" not in st.session_state:
    st.session_state.music_data = None
if "listener_tz" not in st.session_state:
    st.session_state.listener_tz = None


def load_music_data():
    """Load settings and the listening data CSV files"""
    with st.spinner("Loading listening data..."):
        try:
            settings = load_settings()
            listener_tz = settings.tzinfo
            music_data = MusicData(settings.data_dir)
        except (OSError, ValueError) as e:
            st.error(f"Error loading listening data: {str(e)}")
            st.error("Make sure the data directory and listener time zone settings are correct.")
            return None, None

        st.session_state.listener_tz = listener_tz
        st.session_state.music_data = music_data
        return listener_tz, music_data


def show_insights_table(insights):
    """Display the question/answer table for a listener"""
    table_df = pd.DataFrame(
        [(insight.question, insight.answer) for insight in insights],
        columns=['Question', 'Answer']
    )
    st.dataframe(table_df, hide_index=True)


def show_charts(stats):
    """Display the charts for a listener below the table"""
    st.markdown("<h2 class='sub-header'>📈 Listening Charts</h2>", unsafe_allow_html=True)

    artists_chart = plot_top_artists(stats)
    if artists_chart is not None:
        st.altair_chart(artists_chart)

    col1, col2 = st.columns(2)
    with col1:
        genre_fig = plot_genre_distribution(stats)
        if genre_fig is not None:
            st.plotly_chart(genre_fig)
    with col2:
        hourly_fig = plot_hourly_distribution(stats)
        if hourly_fig is not None:
            st.plotly_chart(hourly_fig)


def main():
    """Main function for Streamlit app"""
    st.markdown("<h1 class='main-header' style='text-align: center;'>🎵 Music Listening Insights 🎵</h1>", unsafe_allow_html=True)

    listener_tz, music_data = st.session_state.listener_tz, st.session_state.music_data
    if music_data is None:
        listener_tz, music_data = load_music_data()
        if music_data is None:
            return

    user_id = st.selectbox(
        "Select User:",
        options=music_data.get_user_ids(),
        index=None,
        placeholder="Choose a User",
        format_func=lambda user: f"User {user} 🎧"
    )
    if user_id is None:
        return

    aggregator = ListeningAggregator(music_data.get_listen_events, music_data.get_song, listener_tz)
    try:
        stats = aggregator.stats(user_id)
    except (KeyError, ValueError) as e:
        st.error(f"Could not analyze the listening history of user {user_id}: {str(e)}")
        return

    if stats is None:
        st.info(NO_MUSIC_MESSAGE)
        return

    show_insights_table(build_insights(stats))
    show_charts(stats)


if __name__ == "__main__":
    main()
