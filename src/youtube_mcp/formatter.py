"""Render processed cues into a FormattedTranscript."""

from youtube_mcp.models import Cue, FormattedTranscript, TranscriptOptions, VideoMetadata
from youtube_mcp.utils import format_timestamp


def timestamped_text(cues: list[Cue]) -> str:
    return "\n".join(f"[{format_timestamp(cue.offset_ms)}] {cue.text}" for cue in cues)


def merged_text(cues: list[Cue]) -> str:
    return " ".join(cue.text for cue in cues)


def total_duration(cues: list[Cue]) -> float:
    """Spoken duration in seconds (sum of cue durations, not the wall-clock span)."""
    return sum(cue.duration_ms for cue in cues) / 1000


def format_transcript(
    cues: list[Cue],
    metadata: list[VideoMetadata | None] | None,
    options: TranscriptOptions,
) -> FormattedTranscript:
    result = FormattedTranscript(
        segments=list(cues),
        total_segments=len(cues),
        duration=total_duration(cues),
        format=options.format,
    )

    if options.include_metadata:
        result.metadata = [m for m in metadata or [] if m is not None]

    if options.format == "timestamped":
        result.text = timestamped_text(cues)
    elif options.format == "merged":
        result.text = merged_text(cues)

    return result
