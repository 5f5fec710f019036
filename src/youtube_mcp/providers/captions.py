"""Caption source using youtube-transcript-api directly."""

import asyncio
import logging
from functools import partial

from youtube_transcript_api import (
    CouldNotRetrieveTranscript,
    NoTranscriptFound,
    TranscriptsDisabled,
    VideoUnavailable,
    YouTubeTranscriptApi,
)

from youtube_mcp.errors import CaptionSourceError, LanguageNotAvailable, VideoHasNoCaptions
from youtube_mcp.models import Cue
from .base import CaptionSource

logger = logging.getLogger(__name__)


class YouTubeCaptionSource(CaptionSource):
    def __init__(self):
        self._api = YouTubeTranscriptApi()

    async def get_captions(self, video_id: str, language: str) -> list[Cue]:
        loop = asyncio.get_event_loop()
        try:
            fetched = await loop.run_in_executor(
                None,
                partial(self._fetch, video_id, language),
            )
        except (TranscriptsDisabled, VideoUnavailable) as e:
            raise VideoHasNoCaptions(
                video_id, language, f"No captions available for video {video_id}"
            ) from e
        except NoTranscriptFound as e:
            raise LanguageNotAvailable(
                video_id, language, f"No {language} captions for video {video_id}"
            ) from e
        except CouldNotRetrieveTranscript as e:
            raise CaptionSourceError(
                video_id, language, f"Could not retrieve captions for {video_id}: {type(e).__name__}"
            ) from e

        return [
            Cue(
                text=s.text,
                offset_ms=int(round(s.start * 1000)),
                duration_ms=int(round(s.duration * 1000)),
            )
            for s in fetched
        ]

    def _fetch(self, video_id: str, language: str):
        """Synchronous fetch in executor."""
        return self._api.fetch(video_id, languages=[language])

    async def close(self) -> None:
        pass
