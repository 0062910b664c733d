"""
Playlist Insights - Report Rendering
Plain-text rendering of an analysis result.
"""

import math
from typing import List, Optional, Sequence

import pandas as pd

from .core.session import AnalysisResult
from .core.youtube import VideoRecord


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_time(total_seconds: Optional[float]) -> str:
    """Formats seconds as HH:MM:SS. None or NaN renders as 00:00:00."""
    if total_seconds is None or (isinstance(total_seconds, float) and math.isnan(total_seconds)):
        return "00:00:00"

    total = _round_half_up(total_seconds)
    h, m, s = total // 3600, (total % 3600) // 60, total % 60
    return f"{h:02d}:{m:02d}:{s:02d}"


def format_average(average_seconds: Optional[float]) -> str:
    """Average rounds to whole seconds only at display time."""
    if average_seconds is None:
        return format_time(None)
    return format_time(_round_half_up(average_seconds))


def format_binge_message(days: int) -> str:
    return f"It will take you approx. {days} day(s) to finish."


TABLE_COLUMNS = ["#", "title", "duration", "views", "likes"]


def build_video_table(videos: Sequence[VideoRecord], include_thumbnails: bool = False) -> pd.DataFrame:
    """
    One row per video in playlist order, numbered from 1.
    The thumbnail column is meant for exports; the terminal table omits it.
    """
    df = pd.DataFrame(
        [
            {
                "#": index,
                "title": video.title,
                "duration": format_time(video.duration_seconds),
                "views": video.views,
                "likes": video.likes,
                "thumbnail_url": video.thumbnail_url,
            }
            for index, video in enumerate(videos, start=1)
        ],
        columns=TABLE_COLUMNS + ["thumbnail_url"],
    )
    if not include_thumbnails:
        df = df[TABLE_COLUMNS]
    return df


def _insight_card(title: str, video: Optional[VideoRecord], stat: str) -> List[str]:
    if video is None:
        return [f"{title}: Not available"]
    return [
        f"{title}: {video.title} ({stat})",
        f"    {video.watch_url}",
        f"    thumbnail: {video.thumbnail_url}",
    ]


def render_report(result: AnalysisResult) -> str:
    """Renders totals, insight cards, length distribution and the video list."""
    stats = result.stats
    lines = [
        "=" * 60,
        f"      PLAYLIST INSIGHTS - {result.playlist_title}",
        "=" * 60,
        f"Total Watch Time:   {format_time(stats.total_seconds)}",
        f"Total Videos:       {stats.video_count}",
        f"Average Length:     {format_average(stats.average_seconds)}",
        "-" * 60,
    ]

    longest = stats.longest
    shortest = stats.shortest
    lines += _insight_card("Longest Video", longest, format_time(longest.duration_seconds) if longest else "")
    lines += _insight_card("Shortest Video", shortest, format_time(shortest.duration_seconds) if shortest else "")
    lines += _insight_card("Most Popular", stats.most_viewed,
                           f"{stats.most_viewed.views:,} views" if stats.most_viewed else "")
    lines += _insight_card("Most Liked", stats.most_liked,
                           f"{stats.most_liked.likes:,} likes" if stats.most_liked else "")

    lines.append("-" * 60)
    lines.append("Length Distribution:")
    for label, count in stats.histogram:
        lines.append(f"  {label:>7} | {'#' * count} {count}")

    lines.append("-" * 60)
    table = build_video_table(result.videos)
    lines.append(table.to_string(index=False))
    lines.append("=" * 60)
    return "\n".join(lines)
