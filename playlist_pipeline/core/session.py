"""
Analysis Session
Orchestrates one playlist analysis run and keeps the latest result.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

from .analysis import AggregateStats, aggregate, estimate_binge_days
from .errors import EmptyResultError, ValidationError
from .youtube import PlaylistMiner, PlaylistSummary, VideoRecord, YouTubeClient, extract_playlist_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    """Everything one successful run produced."""
    playlist_id: str
    playlist: Optional[PlaylistSummary]
    videos: Tuple[VideoRecord, ...]
    stats: AggregateStats

    @property
    def playlist_title(self) -> str:
        return self.playlist.title if self.playlist else "this playlist"


class AnalysisSession:
    """
    Owns the most recent AnalysisResult.

    The result is replaced only when a run completes successfully; a failed
    run leaves the previous result untouched. Only one run may be in flight
    at a time, which callers are expected to guarantee.
    """

    def __init__(self, client_factory: Callable[[str], Any] = YouTubeClient):
        self._client_factory = client_factory
        self._result: Optional[AnalysisResult] = None

    @property
    def result(self) -> Optional[AnalysisResult]:
        return self._result

    def clear(self) -> None:
        """Drops the cached result."""
        self._result = None

    async def analyze(self, playlist_url: str, api_key: str) -> AnalysisResult:
        """
        Fetches and aggregates every video of the playlist behind `playlist_url`.

        Raises:
            ValidationError: Empty URL/key or no playlist ID in the URL.
            RemoteError: Any backend call returned an error descriptor.
            EmptyResultError: The playlist has no retrievable videos.
        """
        playlist_url = (playlist_url or "").strip()
        api_key = (api_key or "").strip()
        if not playlist_url or not api_key:
            raise ValidationError("Please provide both a playlist URL and a Google Cloud API key.")

        playlist_id = extract_playlist_id(playlist_url)
        if not playlist_id:
            raise ValidationError("Invalid YouTube playlist URL. Please check the format.")

        logger.info(f"Starting analysis for playlist {playlist_id}")
        miner = PlaylistMiner(self._client_factory(api_key))

        playlist = await miner.fetch_playlist(playlist_id)
        items = await miner.fetch_playlist_items(playlist_id)
        if not items:
            raise EmptyResultError("This playlist is empty or private.")

        videos = await miner.fetch_video_details(PlaylistMiner.video_ids_from_items(items))
        if not videos:
            raise EmptyResultError("Could not retrieve video details.")

        result = AnalysisResult(
            playlist_id=playlist_id,
            playlist=playlist,
            videos=tuple(videos),
            stats=aggregate(videos),
        )
        self._result = result

        logger.info(f"Analysis complete: {result.stats.video_count} videos, {result.stats.total_seconds}s total")
        return result

    def estimate_binge(self, hours: Any = 0, minutes: Any = 0) -> int:
        """Days needed to finish the last analyzed playlist at the given daily budget."""
        if self._result is None:
            raise ValidationError("Analyze a playlist before estimating binge time.")
        return estimate_binge_days(self._result.stats.total_seconds, hours, minutes)
