"""Abstract base for caption sources."""

from abc import ABC, abstractmethod

from youtube_mcp.models import Cue


class CaptionSource(ABC):
    @abstractmethod
    async def get_captions(self, video_id: str, language: str) -> list[Cue]:
        """Fetch caption cues for one video in exactly one language.

        Raises VideoHasNoCaptions when the video carries no captions at all,
        LanguageNotAvailable when only this language is missing, and
        CaptionSourceError for anything else the source could not deliver.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Clean up resources."""
        ...
