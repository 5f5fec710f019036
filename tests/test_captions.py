"""Tests for the caption source with mocked youtube-transcript-api."""

from unittest.mock import MagicMock, patch
import pytest

from youtube_transcript_api import (
    CouldNotRetrieveTranscript,
    NoTranscriptFound,
    TranscriptsDisabled,
    VideoUnavailable,
)

from youtube_mcp.errors import CaptionSourceError, LanguageNotAvailable, VideoHasNoCaptions
from youtube_mcp.providers.captions import YouTubeCaptionSource


class MockSnippet:
    def __init__(self, text, start, duration):
        self.text = text
        self.start = start
        self.duration = duration


@pytest.fixture
def mock_snippets():
    return [
        MockSnippet("Hello", 0.0, 2.0),
        MockSnippet("World", 2.0, 3.456),
    ]


class TestYouTubeCaptionSource:
    @pytest.mark.asyncio
    async def test_get_captions_success(self, mock_snippets):
        source = YouTubeCaptionSource()
        with patch.object(source, "_fetch", return_value=mock_snippets) as fetch:
            cues = await source.get_captions("dQw4w9WgXcQ", "en")
        fetch.assert_called_once_with("dQw4w9WgXcQ", "en")
        assert [c.text for c in cues] == ["Hello", "World"]
        assert cues[1].offset_ms == 2000
        assert cues[1].duration_ms == 3456

    @pytest.mark.asyncio
    async def test_requests_single_language(self):
        source = YouTubeCaptionSource()
        source._api = MagicMock()
        source._api.fetch.return_value = []
        await source.get_captions("dQw4w9WgXcQ", "ko")
        source._api.fetch.assert_called_once_with("dQw4w9WgXcQ", languages=["ko"])

    @pytest.mark.asyncio
    async def test_transcripts_disabled(self):
        source = YouTubeCaptionSource()
        with patch.object(source, "_fetch", side_effect=TranscriptsDisabled("vid123456789")):
            with pytest.raises(VideoHasNoCaptions, match="No captions available"):
                await source.get_captions("vid123456789", "en")

    @pytest.mark.asyncio
    async def test_video_unavailable(self):
        source = YouTubeCaptionSource()
        with patch.object(source, "_fetch", side_effect=VideoUnavailable("vid123456789")):
            with pytest.raises(VideoHasNoCaptions):
                await source.get_captions("vid123456789", "en")

    @pytest.mark.asyncio
    async def test_language_missing(self):
        source = YouTubeCaptionSource()
        error = NoTranscriptFound("vid123456789", ["fr"], MagicMock())
        with patch.object(source, "_fetch", side_effect=error):
            with pytest.raises(LanguageNotAvailable) as exc:
                await source.get_captions("vid123456789", "fr")
        assert exc.value.language == "fr"

    @pytest.mark.asyncio
    async def test_other_library_errors(self):
        source = YouTubeCaptionSource()
        with patch.object(
            source, "_fetch", side_effect=CouldNotRetrieveTranscript("vid123456789")
        ):
            with pytest.raises(CaptionSourceError) as exc:
                await source.get_captions("vid123456789", "en")
        assert not isinstance(exc.value, (VideoHasNoCaptions, LanguageNotAvailable))

    @pytest.mark.asyncio
    async def test_close(self):
        source = YouTubeCaptionSource()
        await source.close()  # Should not raise
