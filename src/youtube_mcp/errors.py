"""Exceptions raised by caption sources and the transcript pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from youtube_mcp.models import TranscriptOptions


class CaptionSourceError(Exception):
    """A caption source could not return cues for a (video, language) pair."""

    def __init__(self, video_id: str, language: str, message: str = ""):
        self.video_id = video_id
        self.language = language
        super().__init__(message or f"Captions unavailable for {video_id} ({language})")


class VideoHasNoCaptions(CaptionSourceError):
    """The video has no captions in any language."""


class LanguageNotAvailable(CaptionSourceError):
    """Captions exist, just not in the requested language."""


class TranscriptError(Exception):
    def __init__(
        self,
        message: str,
        video_id: str,
        options: "TranscriptOptions | None" = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.video_id = video_id
        self.options = options
        self.cause = cause


class NoCaptionsError(TranscriptError):
    pass


class AllLanguagesFailedError(TranscriptError):
    pass


class UpstreamNotFoundError(Exception):
    def __init__(self, kind: str, resource_id: str):
        self.kind = kind
        self.resource_id = resource_id
        super().__init__(f"{kind.capitalize()} with ID {resource_id} not found")


class MissingInputError(ValueError):
    """A required input was absent; raised before any network call."""
