"""
Application Configuration Model
Represents a validated configuration state
"""

from typing import Optional


DEFAULT_AI_MODEL = "gemini-2.0-flash"


class AppConfig:
    """
    Immutable configuration object for Playlist Insights.

    Represents a VALID configuration state only.
    All validation must be performed before instantiation.
    """

    def __init__(
        self,
        api_key: str,
        playlist_url: Optional[str] = None,
        ai_api_key: Optional[str] = None,
        ai_model: str = DEFAULT_AI_MODEL,
        binge_hours: Optional[int] = None,
        binge_minutes: Optional[int] = None,
        log_level: str = "INFO"
    ):
        """
        Initialize AppConfig with validated values.

        Args:
            api_key: Google Cloud API key for the YouTube Data API (non-empty)
            playlist_url: Playlist URL to analyze (optional)
            ai_api_key: Gemini API key (defaults to api_key)
            ai_model: Gemini model name (default: "gemini-2.0-flash")
            binge_hours: Daily watch hours for the binge estimate (optional)
            binge_minutes: Daily watch minutes for the binge estimate (optional)
            log_level: Logging level name (default: "INFO")
        """
        self._api_key = api_key
        self._playlist_url = playlist_url
        self._ai_api_key = ai_api_key or api_key
        self._ai_model = ai_model
        self._binge_hours = binge_hours
        self._binge_minutes = binge_minutes
        self._log_level = log_level

    @property
    def api_key(self) -> str:
        """YouTube Data API key."""
        return self._api_key

    @property
    def playlist_url(self) -> Optional[str]:
        """Playlist URL (None = must be given on the command line)."""
        return self._playlist_url

    @property
    def ai_api_key(self) -> str:
        """Gemini API key."""
        return self._ai_api_key

    @property
    def ai_model(self) -> str:
        return self._ai_model

    @property
    def binge_hours(self) -> Optional[int]:
        return self._binge_hours

    @property
    def binge_minutes(self) -> Optional[int]:
        return self._binge_minutes

    @property
    def log_level(self) -> str:
        return self._log_level

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"AppConfig(playlist_url={self.playlist_url!r}, "
            f"ai_model={self.ai_model!r}, "
            f"log_level={self.log_level!r})"
        )
