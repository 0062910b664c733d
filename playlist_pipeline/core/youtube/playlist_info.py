"""
Playlist Information Domain Model
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class PlaylistSummary:
    """Resolved playlist metadata. Absent (None) when the lookup finds no match."""
    playlist_id: str
    title: str
    channel_title: str = ""
    description: str = ""

    @classmethod
    def from_api_item(cls, item: Dict[str, Any]) -> "PlaylistSummary":
        snippet = item.get("snippet", {})
        return cls(
            playlist_id=item.get("id", ""),
            title=snippet.get("title", "Untitled"),
            channel_title=snippet.get("channelTitle", ""),
            description=snippet.get("description", ""),
        )
