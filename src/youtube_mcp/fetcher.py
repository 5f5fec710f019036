"""Fetch raw caption cues for one video with language fallback and caching."""

import logging
from dataclasses import dataclass, field
from enum import Enum

from youtube_mcp.cache import TranscriptCache
from youtube_mcp.errors import (
    AllLanguagesFailedError,
    CaptionSourceError,
    NoCaptionsError,
    VideoHasNoCaptions,
)
from youtube_mcp.languages import resolve_languages
from youtube_mcp.models import Cue, TranscriptOptions
from youtube_mcp.providers.base import CaptionSource
from youtube_mcp.providers.data_api import VideoDataClient

logger = logging.getLogger(__name__)


class FetchState(Enum):
    TRYING_LANGUAGE = "trying_language"
    SUCCESS = "success"
    FAILED_ALL_LANGUAGES = "failed_all_languages"
    NO_CAPTIONS = "no_captions"


@dataclass
class FallbackRun:
    """Progress of one video's walk through its candidate languages."""

    candidates: list[str]
    state: FetchState = FetchState.TRYING_LANGUAGE
    index: int = 0
    cues: list[Cue] = field(default_factory=list)
    last_error: BaseException | None = None
    attempted: list[str] = field(default_factory=list)

    @property
    def language(self) -> str:
        return self.candidates[self.index]

    def succeeded(self, cues: list[Cue]) -> None:
        self.cues = cues
        self.state = FetchState.SUCCESS

    def no_captions(self, error: BaseException) -> None:
        self.last_error = error
        self.state = FetchState.NO_CAPTIONS

    def advance(self, error: BaseException | None) -> None:
        if error is not None:
            self.last_error = error
        self.index += 1
        if self.index >= len(self.candidates):
            self.state = FetchState.FAILED_ALL_LANGUAGES


class TranscriptFetcher:
    def __init__(
        self,
        source: CaptionSource,
        cache: TranscriptCache | None = None,
        video_data: VideoDataClient | None = None,
        detect_channel_language: bool = True,
    ):
        self._source = source
        self.cache = cache if cache is not None else TranscriptCache()
        self._video_data = video_data
        self._detect = detect_channel_language

    async def fetch(self, video_id: str, options: TranscriptOptions | None = None) -> list[Cue]:
        """Return the raw cues for ``video_id``.

        Filtering, search and segmentation are applied by the caller and are
        never cached.
        """
        options = options or TranscriptOptions()
        requested = options.language

        cached = self.cache.get(video_id, requested)
        if cached is not None:
            logger.debug(f"Cache hit for {video_id} ({requested or 'default'})")
            return cached

        country = None
        if not requested:
            country = await self._detect_country(video_id)
        candidates = resolve_languages(requested, country)

        run = await self._run_fallback(video_id, candidates)

        if run.state is FetchState.NO_CAPTIONS:
            raise NoCaptionsError(
                f"No captions available for video {video_id}",
                video_id=video_id,
                options=options,
                cause=run.last_error,
            )
        if run.state is FetchState.FAILED_ALL_LANGUAGES:
            raise AllLanguagesFailedError(
                f"Failed to fetch transcript for video {video_id} "
                f"(tried: {', '.join(run.attempted)})",
                video_id=video_id,
                options=options,
                cause=run.last_error,
            )

        self.cache.set(video_id, requested, run.cues)
        self.cache.set(video_id, run.language, run.cues)
        logger.info(f"Fetched {len(run.cues)} cues for {video_id} in {run.language}")
        return run.cues

    async def _run_fallback(self, video_id: str, candidates: list[str]) -> FallbackRun:
        run = FallbackRun(candidates=candidates)
        while run.state is FetchState.TRYING_LANGUAGE:
            language = run.language
            run.attempted.append(language)
            try:
                cues = await self._source.get_captions(video_id, language)
            except VideoHasNoCaptions as e:
                run.no_captions(e)
                continue
            except CaptionSourceError as e:
                logger.debug(f"{video_id}: {language} failed ({e})")
                run.advance(e)
                continue
            except Exception as e:
                # Network errors from the caption library arrive unwrapped
                logger.warning(f"{video_id}: {language} attempt errored: {e!r}")
                run.advance(e)
                continue

            if cues:
                run.succeeded(cues)
            else:
                logger.debug(f"{video_id}: {language} returned no cues")
                run.advance(None)
        return run

    async def _detect_country(self, video_id: str) -> str | None:
        """Channel country of the video's uploader, or None if unknown."""
        if not self._detect or self._video_data is None:
            return None
        try:
            video = await self._video_data.get_video(video_id)
            channel = await self._video_data.get_channel(video.channel_id)
        except Exception as e:
            logger.debug(f"Language detection skipped for {video_id}: {e}")
            return None
        return channel.country
