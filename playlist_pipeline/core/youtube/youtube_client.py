"""
YouTube API Client
Read-only access to the playlist, playlist item and video endpoints.
"""

import re
import logging
from typing import Any, Dict, List, Optional
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from .playlist_info import PlaylistSummary
from .video_info import VideoRecord
from ..errors import RemoteError

logger = logging.getLogger(__name__)

_PLAYLIST_ID_RE = re.compile(r"(?:list=)([\w-]+)")


def extract_playlist_id(url: str) -> Optional[str]:
    """Extracts the playlist ID from a URL containing `list=<token>`."""
    match = _PLAYLIST_ID_RE.search(url or "")
    return match.group(1) if match else None


class YouTubeClient:
    """
    YouTube Data API client for playlist analysis.

    Every call is blocking. Error descriptors, whether raised by the
    discovery client as HttpError or embedded in the response payload,
    are surfaced as RemoteError.
    """

    def __init__(self, api_key: str):
        """Initialize the YouTube API service."""
        # static_discovery=False prevents the 'file_cache' warning in logs
        self._service = build('youtube', 'v3', developerKey=api_key, static_discovery=False)

    def fetch_playlist(self, playlist_id: str) -> Optional[PlaylistSummary]:
        """Looks up playlist metadata. Returns None if no playlist matches."""
        response = self._execute(
            self._service.playlists().list(part="snippet", id=playlist_id),
            "playlist details"
        )

        items = response.get("items", [])
        if not items:
            logger.warning(f"No playlist metadata found for {playlist_id}")
            return None

        return PlaylistSummary.from_api_item(items[0])

    def fetch_playlist_items(self, playlist_id: str, max_results: int = 50, page_token: Optional[str] = None) -> dict:
        """Low-level API call to playlistItems.list."""
        return self._execute(
            self._service.playlistItems().list(
                part="contentDetails",
                playlistId=playlist_id,
                maxResults=max_results,
                pageToken=page_token
            ),
            "playlist items"
        )

    def fetch_videos_details(self, video_ids: List[str]) -> List[VideoRecord]:
        """Low-level API call to videos.list for one batch of up to 50 IDs."""
        response = self._execute(
            self._service.videos().list(
                part="contentDetails,snippet,statistics",
                id=",".join(video_ids)
            ),
            "video details"
        )
        return [VideoRecord.from_api_item(item) for item in response.get("items", [])]

    def _execute(self, request, context: str) -> Dict[str, Any]:
        try:
            response = request.execute()
        except HttpError as e:
            reason = getattr(e, "reason", None) or str(e)
            raise RemoteError(f"Error fetching {context}: {reason}") from e

        if response.get("error"):
            error = response["error"]
            message = error.get("message", "unknown error") if isinstance(error, dict) else str(error)
            raise RemoteError(f"Error fetching {context}: {message}")

        return response
