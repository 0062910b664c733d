"""
Video Information Domain Model
"""

from dataclasses import dataclass
from typing import Any, Dict

from .duration import parse_duration


@dataclass(frozen=True)
class VideoRecord:
    """
    Domain model representing a single playlist video's metadata.
    Immutable once fetched; owned by one analysis run.
    """
    video_id: str
    title: str
    thumbnail_url: str
    duration_seconds: int
    views: int
    likes: int

    @property
    def watch_url(self) -> str:
        return f"https://www.youtube.com/watch?v={self.video_id}"

    @classmethod
    def from_api_item(cls, item: Dict[str, Any]) -> "VideoRecord":
        """Build a record from one `videos.list` item."""
        snippet = item.get("snippet", {})
        stats = item.get("statistics", {})
        content_details = item.get("contentDetails", {})
        thumbnail = snippet.get("thumbnails", {}).get("default", {})

        return cls(
            video_id=item.get("id", ""),
            title=snippet.get("title", "Untitled"),
            thumbnail_url=thumbnail.get("url", ""),
            duration_seconds=parse_duration(content_details.get("duration")),
            views=int(stats.get("viewCount", 0)),
            likes=int(stats.get("likeCount", 0)),
        )
