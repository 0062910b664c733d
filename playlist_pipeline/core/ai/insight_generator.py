"""
Playlist Insight Generator
Summaries, learning paths and FAQs generated with Gemini.
"""

import logging

from google.genai import Client

from .prompts import FAQ_PROMPT, LEARNING_PATH_PROMPT, SUMMARY_PROMPT, format_video_titles
from ..errors import RemoteError, ValidationError
from ..session import AnalysisResult

logger = logging.getLogger(__name__)


class PlaylistInsightGenerator:
    """
    Builds prompts from a playlist's title and video titles and sends them
    to the Gemini generateContent endpoint.
    """

    DEFAULT_MODEL = "gemini-2.0-flash"

    def __init__(self, api_key: str, model: str = DEFAULT_MODEL):
        if not api_key or not api_key.strip():
            raise ValidationError("Please provide a Google Cloud API key to use AI features.")
        self.model_name = model
        self.client = Client(api_key=api_key.strip())

    async def generate_summary(self, result: AnalysisResult) -> str:
        return await self._generate(SUMMARY_PROMPT, result)

    async def generate_learning_path(self, result: AnalysisResult) -> str:
        return await self._generate(LEARNING_PATH_PROMPT, result)

    async def generate_faqs(self, result: AnalysisResult) -> str:
        return await self._generate(FAQ_PROMPT, result)

    async def _generate(self, template: str, result: AnalysisResult) -> str:
        prompt = template.format(
            playlist_title=result.playlist_title,
            video_titles=format_video_titles(v.title for v in result.videos),
        )

        try:
            response = await self.client.aio.models.generate_content(
                model=self.model_name,
                contents=prompt,
            )
        except Exception as e:
            logger.error(f"Gemini API Error: {e}")
            raise RemoteError(f"The AI feature could not be executed: {e}") from e

        if not response.text:
            logger.error("AI response is empty")
            raise RemoteError("The AI returned an empty or invalid response.")

        return response.text
