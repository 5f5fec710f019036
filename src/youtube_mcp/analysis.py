"""Key-moment and fixed-window segment reports for a single video.

Both reports are simple heuristics: key moments are the longest paragraphs
of the transcript, segments are equal wall-clock windows.
"""

import logging

from youtube_mcp.errors import TranscriptError
from youtube_mcp.fetcher import TranscriptFetcher
from youtube_mcp.formatter import format_transcript, timestamped_text
from youtube_mcp.models import Cue, FormattedTranscript, TranscriptOptions, VideoMetadata
from youtube_mcp.providers.data_api import VideoDataClient, fetch_video_metadata
from youtube_mcp.utils import format_timestamp

logger = logging.getLogger(__name__)

MIN_PARAGRAPH_CUES = 5
MAX_PARAGRAPH_CUES = 8
MIN_MOMENT_CHARS = 100

_REPORT_OPTIONS = TranscriptOptions(format="timestamped", include_metadata=True)


def paragraph_size(cue_count: int) -> int:
    return max(MIN_PARAGRAPH_CUES, min(MAX_PARAGRAPH_CUES, cue_count // 15))


def group_paragraphs(cues: list[Cue]) -> list[list[Cue]]:
    size = paragraph_size(len(cues))
    return [cues[i:i + size] for i in range(0, len(cues), size)]


def select_key_moments(cues: list[Cue], max_moments: int) -> list[list[Cue]]:
    """Longest paragraphs of at least MIN_MOMENT_CHARS, in playback order."""
    ranked = [
        (index, paragraph)
        for index, paragraph in enumerate(group_paragraphs(cues))
        if len(_paragraph_text(paragraph)) >= MIN_MOMENT_CHARS
    ]
    ranked.sort(key=lambda item: len(_paragraph_text(item[1])), reverse=True)
    selected = sorted(ranked[:max(max_moments, 0)], key=lambda item: item[0])
    return [paragraph for _, paragraph in selected]


def _paragraph_text(paragraph: list[Cue]) -> str:
    return " ".join(cue.text for cue in paragraph)


def _title(video_id: str, metadata: VideoMetadata | None) -> str:
    return metadata.title if metadata and metadata.title else video_id


class _Report:
    def __init__(self, fetcher: TranscriptFetcher, video_data: VideoDataClient | None = None):
        self._fetcher = fetcher
        self._video_data = video_data

    async def _load(self, video_id: str) -> tuple[list[Cue], VideoMetadata | None]:
        cues = await self._fetcher.fetch(video_id, TranscriptOptions())
        if not cues:
            raise TranscriptError(
                f"No transcript available for video {video_id}", video_id=video_id
            )
        return cues, await fetch_video_metadata(self._video_data, video_id)

    def _result(
        self, cues: list[Cue], metadata: VideoMetadata | None, text: str
    ) -> FormattedTranscript:
        result = format_transcript(cues, [metadata], _REPORT_OPTIONS)
        result.text = text
        return result


class KeyMomentExtractor(_Report):
    async def extract(self, video_id: str, max_moments: int = 5) -> FormattedTranscript:
        cues, metadata = await self._load(video_id)
        moments = select_key_moments(cues, max_moments)
        logger.debug(f"{video_id}: {len(moments)} key moments from {len(cues)} cues")

        lines = [f"# Key Moments in: {_title(video_id, metadata)}", ""]
        for number, paragraph in enumerate(moments, start=1):
            lines.append(f"## {number}. [{format_timestamp(paragraph[0].offset_ms)}]")
            lines.append(_paragraph_text(paragraph))
            lines.append("")
        if not moments:
            lines.extend(["No key moments found.", ""])
        lines.extend(["## Full Transcript", timestamped_text(cues)])

        return self._result(cues, metadata, "\n".join(lines))


class SegmentAnalyzer(_Report):
    async def segment(self, video_id: str, segment_count: int = 4) -> FormattedTranscript:
        cues, metadata = await self._load(video_id)
        segment_count = max(segment_count, 1)

        last = cues[-1]
        total_ms = last.offset_ms + last.duration_ms
        window_ms = total_ms / segment_count

        windows: list[tuple[int, float, float, list[Cue]]] = []
        for index in range(segment_count):
            start = index * window_ms
            end = total_ms if index == segment_count - 1 else (index + 1) * window_ms
            final = index == segment_count - 1
            members = [
                cue for cue in cues
                if start <= cue.offset_ms < end or (final and cue.offset_ms == end)
            ]
            if members:
                windows.append((index, start, end, members))

        lines = [f"# Segmented Transcript: {_title(video_id, metadata)}", ""]
        tagged: list[Cue] = []
        for index, start, end, members in windows:
            lines.append(
                f"## Segment {index + 1} [{format_timestamp(start)} - {format_timestamp(end)}]"
            )
            lines.append(timestamped_text(members))
            lines.append("")
            tagged.extend(cue.model_copy(update={"segment": index}) for cue in members)

        return self._result(tagged, metadata, "\n".join(lines).rstrip("\n"))
