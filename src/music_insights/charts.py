"""
Charts of a listener's gathered totals for the dashboard.
"""
import altair as alt
import pandas as pd
import plotly.express as px


def plot_top_artists(stats, n=10):
    """Plot a listener's top N artists by play count with Altair"""
    if stats is None or not stats.artist_count:
        return None

    top_artists = pd.Series(stats.artist_count).sort_values(ascending=False, kind='stable').head(n).reset_index()
    top_artists.columns = ['Artist', 'Plays']

    chart = alt.Chart(top_artists).mark_bar().encode(
        x=alt.X('Plays:Q', title='Number of Plays'),
        y=alt.Y('Artist:N', sort='-x', title=None),
        color=alt.Color('Plays:Q', scale=alt.Scale(scheme='greenblue'), legend=None),
        tooltip=['Artist', 'Plays']
    ).properties(
        title=f'Top {len(top_artists)} Artists',
        height=len(top_artists) * 30 + 50
    )

    return chart


def plot_genre_distribution(stats):
    """
    Plot how a listener's plays are spread over genres.

    Args:
        stats: ListeningStats for the listener

    Returns:
        Plotly figure, or None when there is nothing to plot
    """
    if stats is None or not stats.genre_count:
        return None

    genre_df = pd.DataFrame({'Genre': list(stats.genre_count), 'Plays': list(stats.genre_count.values())})

    fig = px.bar(
        genre_df,
        x='Plays',
        y='Genre',
        orientation='h',
        labels={'Plays': 'Number of Plays', 'Genre': ''},
        color='Plays',
        color_continuous_scale='Viridis'
    )

    fig.update_layout(
        title='Plays by Genre',
        yaxis=dict(categoryorder='total ascending'),
        plot_bgcolor='rgba(0,0,0,0)',
        height=min(100 + len(genre_df) * 25, 500)
    )

    return fig


def plot_hourly_distribution(stats):
    """Plot listening patterns by local hour of day with Plotly"""
    if stats is None or not stats.hour_count:
        return None

    # Fill missing hours with 0
    hourly_counts = pd.Series(stats.hour_count).reindex(range(24), fill_value=0).reset_index()
    hourly_counts.columns = ['Hour', 'Count']
    hourly_counts['TimeLabel'] = hourly_counts['Hour'].apply(lambda x: f"{x}:00")

    fig = px.bar(
        hourly_counts,
        x='Hour',
        y='Count',
        labels={'Count': 'Number of Plays', 'Hour': 'Hour of Day'},
        hover_data={'TimeLabel': True, 'Hour': False},
        color='Count',
        color_continuous_scale=px.colors.sequential.Viridis
    )

    fig.update_layout(
        title='Listening Pattern by Hour of Day',
        xaxis=dict(tickmode='array', tickvals=list(range(0, 24, 2))),
        plot_bgcolor='rgba(0,0,0,0)',
        height=400
    )

    return fig
