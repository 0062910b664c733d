"""
Prompt templates for playlist insights.
"""

from typing import Iterable


def format_video_titles(titles: Iterable[str]) -> str:
    return "\n".join(f'- "{title}"' for title in titles)


SUMMARY_PROMPT = """You are a helpful YouTube expert. Generate a concise summary of a playlist based on its title and video titles.

Playlist Title: "{playlist_title}"

Video Titles:
{video_titles}

Please provide:
1. A one-paragraph summary.
2. The likely target audience.
3. A bulleted list of 3-5 key topics.

Format your response clearly using Markdown."""


LEARNING_PATH_PROMPT = """You are an expert curriculum designer. Analyze the following list of video titles from a YouTube playlist and organize them into a logical learning path.

Playlist Title: "{playlist_title}"

Video Titles:
{video_titles}

Please:
1. Group videos into logical sections with clear headings (use ### for headings).
2. List relevant video titles in a sensible order within each section.
3. Provide a brief (1-2 sentence) explanation for your structure.

Format your response clearly using Markdown."""


FAQ_PROMPT = """You are a helpful content analyst. Based on the title and video titles of the following YouTube playlist, generate a list of 3-5 frequently asked questions (FAQs) that a potential viewer might have. For each question, provide a concise, one-sentence answer that could be inferred from the titles.

Playlist Title: "{playlist_title}"

Video Titles:
{video_titles}

Format the output as a list where each item starts with "**Q:**" followed by the question, and the next line starts with "A:" followed by the answer."""
