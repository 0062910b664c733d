"""
YouTube API integration module
"""

from .duration import parse_duration
from .playlist_info import PlaylistSummary
from .video_info import VideoRecord
from .playlist_miner import PlaylistMiner
from .youtube_client import YouTubeClient, extract_playlist_id

__all__ = ["PlaylistMiner", "PlaylistSummary", "VideoRecord", "YouTubeClient", "extract_playlist_id", "parse_duration"]
