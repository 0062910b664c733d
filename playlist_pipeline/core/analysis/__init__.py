"""
Playlist statistics module
"""

from .binge_estimator import estimate_binge_days
from .playlist_analyzer import AggregateStats, HISTOGRAM_BUCKETS, aggregate

__all__ = ["AggregateStats", "HISTOGRAM_BUCKETS", "aggregate", "estimate_binge_days"]
