"""
Playlist Analyzer
Aggregate statistics over the videos of one analysis run.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..youtube.video_info import VideoRecord

logger = logging.getLogger(__name__)

# (label, exclusive upper bound in seconds); the last bucket is open-ended.
HISTOGRAM_BUCKETS: Tuple[Tuple[str, Optional[int]], ...] = (
    ("0-5m", 5 * 60),
    ("5-15m", 15 * 60),
    ("15-30m", 30 * 60),
    ("30-60m", 60 * 60),
    ("60m+", None),
)


@dataclass(frozen=True)
class AggregateStats:
    """
    Derived statistics for a set of videos.

    average_seconds is None for an empty set. The video references,
    when present, are members of the set the stats were computed from.
    """
    total_seconds: int
    video_count: int
    average_seconds: Optional[float]
    longest: Optional[VideoRecord]
    shortest: Optional[VideoRecord]
    most_viewed: Optional[VideoRecord]
    most_liked: Optional[VideoRecord]
    histogram: Tuple[Tuple[str, int], ...]


def bucket_label(duration_seconds: int) -> str:
    """Returns the histogram label of the first bucket whose upper bound exceeds the duration."""
    for label, upper in HISTOGRAM_BUCKETS:
        if upper is None or duration_seconds < upper:
            return label
    return HISTOGRAM_BUCKETS[-1][0]


def aggregate(videos: Sequence[VideoRecord]) -> AggregateStats:
    """
    Computes AggregateStats in a single pass.

    A later video only replaces the current leader when strictly greater
    (longest, most viewed, most liked) or strictly less (shortest), so on
    ties the earliest video in playlist order wins.
    """
    total_seconds = 0
    longest: Optional[VideoRecord] = None
    shortest: Optional[VideoRecord] = None
    most_viewed: Optional[VideoRecord] = None
    most_liked: Optional[VideoRecord] = None
    counts = {label: 0 for label, _ in HISTOGRAM_BUCKETS}

    for video in videos:
        duration = video.duration_seconds
        total_seconds += duration

        if longest is None or duration > longest.duration_seconds:
            longest = video
        if shortest is None or duration < shortest.duration_seconds:
            shortest = video
        if most_viewed is None or video.views > most_viewed.views:
            most_viewed = video
        if most_liked is None or video.likes > most_liked.likes:
            most_liked = video

        counts[bucket_label(duration)] += 1

    video_count = len(videos)
    average_seconds = total_seconds / video_count if video_count else None

    logger.info(f"Aggregated {video_count} videos, total {total_seconds}s")

    return AggregateStats(
        total_seconds=total_seconds,
        video_count=video_count,
        average_seconds=average_seconds,
        longest=longest,
        shortest=shortest,
        most_viewed=most_viewed,
        most_liked=most_liked,
        histogram=tuple((label, counts[label]) for label, _ in HISTOGRAM_BUCKETS),
    )
