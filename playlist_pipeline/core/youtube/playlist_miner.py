"""
Playlist Metadata Miner Service
Pagination over playlist items and batched video detail lookups.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

from .playlist_info import PlaylistSummary
from .video_info import VideoRecord
from .youtube_client import YouTubeClient

logger = logging.getLogger(__name__)


class PlaylistMiner:
    """
    Service responsible for mining all video metadata from a playlist.

    Responsibilities:
    - Iterate through the playlist items with pagination.
    - Batch video detail requests to the YouTube API.

    Each blocking API call runs in a worker thread and is awaited to
    completion before the next one starts. Any RemoteError propagates
    immediately and already-collected pages or batches are dropped.
    """

    PAGE_SIZE = 50
    BATCH_SIZE = 50

    def __init__(self, youtube_client: YouTubeClient):
        self._client = youtube_client

    async def fetch_playlist(self, playlist_id: str) -> Optional[PlaylistSummary]:
        return await asyncio.to_thread(self._client.fetch_playlist, playlist_id)

    async def fetch_playlist_items(self, playlist_id: str) -> List[Dict[str, Any]]:
        """
        Retrieves every item of the playlist, following nextPageToken.

        Returns:
            List[dict]: Raw playlist items in page order.
        """
        items: List[Dict[str, Any]] = []
        next_page_token = None
        page = 0

        while True:
            page += 1
            response = await asyncio.to_thread(
                self._client.fetch_playlist_items,
                playlist_id,
                self.PAGE_SIZE,
                next_page_token
            )

            page_items = response.get("items", [])
            items.extend(page_items)
            logger.debug(f"Page {page}: {len(page_items)} items")

            next_page_token = response.get("nextPageToken")
            if not next_page_token:
                break

        logger.info(f"Discovered {len(items)} items in playlist {playlist_id} ({page} pages)")
        return items

    async def fetch_video_details(self, video_ids: List[str]) -> List[VideoRecord]:
        """
        Fetches detailed metadata in batches of 50, preserving input order.

        Returns:
            List[VideoRecord]: Concatenated results of every batch.
        """
        all_videos: List[VideoRecord] = []
        total = len(video_ids)

        for i in range(0, total, self.BATCH_SIZE):
            batch_ids = video_ids[i:i + self.BATCH_SIZE]
            logger.info(f"Processing batch {i // self.BATCH_SIZE + 1}: Videos {i} to {min(i + self.BATCH_SIZE, total)}")

            batch_details = await asyncio.to_thread(self._client.fetch_videos_details, batch_ids)
            all_videos.extend(batch_details)

        return all_videos

    @staticmethod
    def video_ids_from_items(items: List[Dict[str, Any]]) -> List[str]:
        """Collects the video IDs of playlist items, skipping items without one."""
        video_ids = []
        for item in items:
            v_id = item.get("contentDetails", {}).get("videoId")
            if v_id:
                video_ids.append(v_id)
        return video_ids
