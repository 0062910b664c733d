"""Tests for the analysis session orchestration."""

import pytest

from playlist_pipeline.core.errors import EmptyResultError, RemoteError, ValidationError
from playlist_pipeline.core.session import AnalysisSession
from tests.conftest import FakeYouTubeClient, make_video


def session_for(client: FakeYouTubeClient) -> AnalysisSession:
    return AnalysisSession(client_factory=lambda api_key: client)


@pytest.fixture
def video_ids():
    return [f"vid{i:03d}" for i in range(120)]


@pytest.fixture
def client(video_ids, sample_playlist):
    videos = {v: make_video(v, duration=60 * (i % 70), views=i, likes=i % 10) for i, v in enumerate(video_ids)}
    return FakeYouTubeClient(video_ids, videos=videos, playlist=sample_playlist)


class TestAnalyze:
    """Tests for AnalysisSession.analyze."""

    @pytest.mark.asyncio
    async def test_successful_run(self, client, playlist_url, video_ids):
        session = session_for(client)

        result = await session.analyze(playlist_url, "key")

        assert result.playlist_id == "PLabc_123-XYZ"
        assert result.playlist_title == "Python Basics"
        assert [v.video_id for v in result.videos] == video_ids
        assert result.stats.video_count == 120
        assert session.result is result
        assert [len(b) for b in client.batch_calls] == [50, 50, 20]

    @pytest.mark.asyncio
    async def test_client_receives_api_key(self, client, playlist_url):
        keys = []

        def factory(api_key):
            keys.append(api_key)
            return client

        await AnalysisSession(client_factory=factory).analyze(playlist_url, "  secret  ")
        assert keys == ["secret"]

    @pytest.mark.asyncio
    async def test_missing_playlist_metadata_is_allowed(self, video_ids, playlist_url):
        result = await session_for(FakeYouTubeClient(video_ids[:3])).analyze(playlist_url, "key")

        assert result.playlist is None
        assert result.playlist_title == "this playlist"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("url,key", [("", "key"), ("   ", "key"), ("https://www.youtube.com/playlist?list=PL1", "")])
    async def test_missing_inputs(self, client, url, key):
        with pytest.raises(ValidationError):
            await session_for(client).analyze(url, key)
        assert client.page_calls == []

    @pytest.mark.asyncio
    async def test_url_without_playlist_id(self, client):
        with pytest.raises(ValidationError, match="Invalid YouTube playlist URL"):
            await session_for(client).analyze("https://www.youtube.com/watch?v=abc", "key")

    @pytest.mark.asyncio
    async def test_empty_playlist(self, playlist_url):
        with pytest.raises(EmptyResultError, match="empty or private"):
            await session_for(FakeYouTubeClient([])).analyze(playlist_url, "key")

    @pytest.mark.asyncio
    async def test_no_video_details(self, playlist_url):
        client = FakeYouTubeClient(["gone1", "gone2"], videos={})
        with pytest.raises(EmptyResultError, match="Could not retrieve video details"):
            await session_for(client).analyze(playlist_url, "key")

    @pytest.mark.asyncio
    async def test_failed_run_keeps_previous_result(self, client, playlist_url, video_ids):
        session = session_for(client)
        first = await session.analyze(playlist_url, "key")

        client.fail_on_batch = len(client.batch_calls) + 1
        with pytest.raises(RemoteError):
            await session.analyze(playlist_url, "key")

        assert session.result is first

    @pytest.mark.asyncio
    async def test_identical_runs_give_identical_stats(self, client, playlist_url):
        session = session_for(client)

        first = await session.analyze(playlist_url, "key")
        second = await session.analyze(playlist_url, "key")

        assert first.stats == second.stats
        assert first.videos == second.videos

    @pytest.mark.asyncio
    async def test_clear(self, client, playlist_url):
        session = session_for(client)
        await session.analyze(playlist_url, "key")

        session.clear()

        assert session.result is None


class TestEstimateBinge:
    """Tests for AnalysisSession.estimate_binge."""

    @pytest.mark.asyncio
    async def test_uses_cached_total(self, playlist_url):
        videos = {"a": make_video("a", duration=3600), "b": make_video("b", duration=3600)}
        session = session_for(FakeYouTubeClient(["a", "b"], videos=videos))
        await session.analyze(playlist_url, "key")

        assert session.estimate_binge(hours=1, minutes=0) == 2

    def test_requires_completed_analysis(self):
        with pytest.raises(ValidationError):
            AnalysisSession(client_factory=lambda key: None).estimate_binge(hours=1)

    @pytest.mark.asyncio
    async def test_zero_budget(self, client, playlist_url):
        session = session_for(client)
        await session.analyze(playlist_url, "key")

        with pytest.raises(ValidationError):
            session.estimate_binge(0, 0)
