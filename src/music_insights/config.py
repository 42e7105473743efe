import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import toml
from dotenv import load_dotenv

SECRETS_PATH = os.path.join('.streamlit', 'secrets.toml')
SECTION = 'music_insights'
DEFAULT_DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'data')


class Settings:
    def __init__(self, data_dir=None, timezone=None):
        """Runtime settings for the dashboard

        Args:
            data_dir (str, optional): Directory holding the listening data CSV files
            timezone (str, optional): IANA zone name of the listener, the system zone when omitted
        """
        self.data_dir = data_dir or DEFAULT_DATA_DIR
        self.timezone = timezone or None

    @property
    def tzinfo(self):
        """Listener's time zone, None meaning the system zone"""
        if not self.timezone:
            return None
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown listener time zone: {self.timezone!r}") from None


def load_settings(secrets_path=SECRETS_PATH):
    """Read settings from .streamlit/secrets.toml, falling back to environment variables

    Returns:
        Settings: Loaded settings
    """
    # Streamlit sharing reads .streamlit/secrets.toml
    if os.path.exists(secrets_path):
        secrets = toml.load(secrets_path).get(SECTION, {})
        return Settings(
            data_dir=secrets.get('data_dir'),
            timezone=secrets.get('timezone'),
        )

    load_dotenv()
    return Settings(
        data_dir=os.getenv('MUSIC_INSIGHTS_DATA_DIR'),
        timezone=os.getenv('LISTENER_TIMEZONE'),
    )
