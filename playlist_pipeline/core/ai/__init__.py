"""
Generative insights for analyzed playlists
"""

from .insight_generator import PlaylistInsightGenerator

__all__ = ["PlaylistInsightGenerator"]
