"""Shared pytest fixtures for playlist insights tests."""

from typing import Dict, List, Optional

import pytest

from playlist_pipeline.core.errors import RemoteError
from playlist_pipeline.core.youtube import PlaylistSummary, VideoRecord


def make_video(video_id: str, duration: int = 60, views: int = 0, likes: int = 0, title: Optional[str] = None) -> VideoRecord:
    return VideoRecord(
        video_id=video_id,
        title=title or f"Video {video_id}",
        thumbnail_url=f"https://i.ytimg.com/vi/{video_id}/default.jpg",
        duration_seconds=duration,
        views=views,
        likes=likes,
    )


def make_video_item(video_id: str, duration: str = "PT1M", views: str = "0", likes: Optional[str] = "0") -> Dict:
    """A raw `videos.list` item."""
    statistics = {"viewCount": views}
    if likes is not None:
        statistics["likeCount"] = likes
    return {
        "id": video_id,
        "snippet": {
            "title": f"Video {video_id}",
            "thumbnails": {"default": {"url": f"https://i.ytimg.com/vi/{video_id}/default.jpg"}},
        },
        "contentDetails": {"duration": duration},
        "statistics": statistics,
    }


class FakeYouTubeClient:
    """
    In-memory stand-in for YouTubeClient.

    Serves playlist items in pages of `page_size` and video details from
    `videos`, recording every call so tests can assert on request shapes.
    """

    def __init__(
        self,
        video_ids: List[str],
        videos: Optional[Dict[str, VideoRecord]] = None,
        playlist: Optional[PlaylistSummary] = None,
        page_sizes: Optional[List[int]] = None,
        fail_on_page: Optional[int] = None,
        fail_on_batch: Optional[int] = None,
    ):
        self.video_ids = list(video_ids)
        self.videos = videos if videos is not None else {v: make_video(v) for v in video_ids}
        self.playlist = playlist
        self.page_sizes = page_sizes
        self.fail_on_page = fail_on_page
        self.fail_on_batch = fail_on_batch
        self.page_calls: List[Dict] = []
        self.batch_calls: List[List[str]] = []

    def fetch_playlist(self, playlist_id: str) -> Optional[PlaylistSummary]:
        return self.playlist

    def fetch_playlist_items(self, playlist_id: str, max_results: int = 50, page_token: Optional[str] = None) -> dict:
        self.page_calls.append({"playlist_id": playlist_id, "max_results": max_results, "page_token": page_token})
        page_index = len(self.page_calls) - 1
        if self.fail_on_page == page_index:
            raise RemoteError("Error fetching playlist items: quota exceeded")

        start = int(page_token) if page_token else 0
        size = self.page_sizes[page_index] if self.page_sizes else max_results
        page_ids = self.video_ids[start:start + size]
        response = {"items": [{"contentDetails": {"videoId": v}} for v in page_ids]}
        if start + size < len(self.video_ids):
            response["nextPageToken"] = str(start + size)
        return response

    def fetch_videos_details(self, video_ids: List[str]) -> List[VideoRecord]:
        self.batch_calls.append(list(video_ids))
        if self.fail_on_batch == len(self.batch_calls) - 1:
            raise RemoteError("Error fetching video details: backend error")
        return [self.videos[v] for v in video_ids if v in self.videos]


@pytest.fixture
def playlist_url() -> str:
    return "https://www.youtube.com/playlist?list=PLabc_123-XYZ"


@pytest.fixture
def sample_playlist() -> PlaylistSummary:
    return PlaylistSummary(playlist_id="PLabc_123-XYZ", title="Python Basics", channel_title="Teaching Channel")


@pytest.fixture
def sample_videos() -> List[VideoRecord]:
    return [
        make_video("a", duration=300, views=10, likes=1, title="Intro"),
        make_video("b", duration=100, views=50, likes=7, title="Variables"),
        make_video("c", duration=100, views=50, likes=7, title="Loops"),
        make_video("d", duration=500, views=20, likes=3, title="Functions"),
    ]
