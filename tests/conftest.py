"""Shared test fixtures."""

import pytest

from youtube_mcp.cache import TranscriptCache
from youtube_mcp.errors import LanguageNotAvailable, UpstreamNotFoundError, VideoHasNoCaptions
from youtube_mcp.fetcher import TranscriptFetcher
from youtube_mcp.models import ChannelInfo, Cue, VideoMetadata
from youtube_mcp.providers.base import CaptionSource


class FakeCaptionSource(CaptionSource):
    """Serves cues from a {video_id: {language: cues}} table and records calls.

    Videos listed in ``no_captions`` raise VideoHasNoCaptions; a missing
    language raises LanguageNotAvailable.
    """

    def __init__(self, tracks=None, no_captions=()):
        self.tracks = tracks or {}
        self.no_captions = set(no_captions)
        self.calls: list[tuple[str, str]] = []

    async def get_captions(self, video_id, language):
        self.calls.append((video_id, language))
        if video_id in self.no_captions:
            raise VideoHasNoCaptions(video_id, language)
        try:
            return self.tracks[video_id][language]
        except KeyError:
            raise LanguageNotAvailable(video_id, language)

    async def close(self):
        pass


class FakeVideoData:
    def __init__(self, videos=None, channels=None):
        self.videos = videos or {}
        self.channels = channels or {}

    async def get_video(self, video_id):
        if video_id not in self.videos:
            raise UpstreamNotFoundError("video", video_id)
        return self.videos[video_id]

    async def get_channel(self, channel_id):
        if channel_id not in self.channels:
            raise UpstreamNotFoundError("channel", channel_id)
        return self.channels[channel_id]

    async def close(self):
        pass


def make_cues(count, spacing_ms=5000, duration_ms=5000, text="line {i}"):
    return [
        Cue(text=text.format(i=i), offset_ms=i * spacing_ms, duration_ms=duration_ms)
        for i in range(count)
    ]


@pytest.fixture
def sample_cues():
    return [
        Cue(text="Hello world", offset_ms=0, duration_ms=2500),
        Cue(text="this is a test", offset_ms=2500, duration_ms=3000),
        Cue(text="of the transcript", offset_ms=5500, duration_ms=2000),
        Cue(text="extraction system", offset_ms=7500, duration_ms=2500),
        Cue(text="goodbye world", offset_ms=10000, duration_ms=2000),
    ]


@pytest.fixture
def sample_metadata():
    return VideoMetadata(
        id="dQw4w9WgXcQ",
        title="Never Gonna Give You Up",
        channel_id="UCuAXFkgsw1L7xaCfnd5JJOw",
        channel_title="Rick Astley",
        published_at="2009-10-25T06:57:33Z",
        duration="PT3M33S",
        view_count=1500000000,
        like_count=17000000,
    )


@pytest.fixture
def fake_video_data(sample_metadata):
    return FakeVideoData(
        videos={sample_metadata.id: sample_metadata},
        channels={
            sample_metadata.channel_id: ChannelInfo(
                id=sample_metadata.channel_id, title="Rick Astley", country="GB"
            )
        },
    )


@pytest.fixture
def caption_source(sample_cues):
    return FakeCaptionSource({"dQw4w9WgXcQ": {"en": sample_cues}})


@pytest.fixture
def fetcher(caption_source):
    return TranscriptFetcher(caption_source, cache=TranscriptCache(max_size=100, ttl=3600))
