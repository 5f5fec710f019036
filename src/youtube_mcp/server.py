"""YouTube transcript MCP server."""

import json
import logging
import sys
from contextlib import asynccontextmanager
from typing import Annotated, Literal

import httpx
from pydantic import Field
from mcp.server.fastmcp import FastMCP

from youtube_mcp.cache import TranscriptCache
from youtube_mcp.config import Settings, Transport
from youtube_mcp.errors import (
    LanguageNotAvailable,
    MissingInputError,
    NoCaptionsError,
    TranscriptError,
    UpstreamNotFoundError,
)
from youtube_mcp.fetcher import TranscriptFetcher
from youtube_mcp.models import SearchOptions, SegmentOptions, TimeRange, TranscriptOptions
from youtube_mcp.providers.captions import YouTubeCaptionSource
from youtube_mcp.providers.data_api import VideoDataClient
from youtube_mcp.service import TranscriptService
from youtube_mcp.utils import extract_video_id

# Logging to stderr (MCP convention)
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger("youtube-mcp")

# Module-level state
_source = None
_service = None
_settings = None

# Tool annotations for read-only API tools
TOOL_ANNOTATIONS = {
    "readOnlyHint": True,
    "destructiveHint": False,
    "openWorldHint": True,
}


@asynccontextmanager
async def app_lifespan(server: FastMCP):
    global _source, _service, _settings
    _settings = Settings()
    cache = TranscriptCache(
        max_size=_settings.cache_max_size,
        ttl=_settings.cache_ttl_seconds,
    )
    _source = YouTubeCaptionSource()

    video_data = None
    if _settings.youtube_api_key:
        video_data = VideoDataClient(
            api_key=_settings.youtube_api_key,
            timeout=_settings.request_timeout,
        )
        logger.info("YouTube Data API enabled")
    else:
        logger.info("No YouTube Data API key: metadata and language detection disabled")

    fetcher = TranscriptFetcher(
        _source,
        cache=cache,
        video_data=video_data,
        detect_channel_language=_settings.detect_channel_language,
    )
    _service = TranscriptService(fetcher, video_data)

    logger.info("Server started")
    yield

    await _service.close()
    await _source.close()
    logger.info("Server stopped")


mcp = FastMCP(
    "YouTube MCP",
    instructions="Fetch, search, segment and format YouTube video transcripts",
    lifespan=app_lifespan,
)


def _describe_error(e: Exception, video_id: str) -> str:
    """Log at a level matching the failure and return the tool-facing message."""
    if isinstance(e, NoCaptionsError) or (
        isinstance(e, TranscriptError) and isinstance(e.cause, LanguageNotAvailable)
    ):
        # Missing captions are routine, not a server fault
        logger.info(f"Transcript not available for {video_id}: {e}")
    elif isinstance(e, (MissingInputError, UpstreamNotFoundError)):
        logger.info(f"Rejected request for {video_id}: {e}")
    else:
        logger.exception(f"Transcript request failed for {video_id}: {e!r}")
    return f"Error: {e}"


def _resolve_id(url: str) -> str:
    video_id = extract_video_id(url.strip())
    if not video_id:
        raise MissingInputError(f"Invalid YouTube URL or video ID: {url}")
    return video_id


_FAILURES = (TranscriptError, MissingInputError, UpstreamNotFoundError, httpx.HTTPError)


@mcp.tool(annotations=TOOL_ANNOTATIONS)
async def get_video_transcript(
    video_id: Annotated[str, Field(description="YouTube video URL or video ID (e.g. https://youtube.com/watch?v=dQw4w9WgXcQ or just dQw4w9WgXcQ)")],
    language: Annotated[str | None, Field(default=None, description="Language code for the transcript (e.g. en, ko, ja). Falls back through common languages when omitted or unavailable")] = None,
) -> str:
    """Get the full transcript of a YouTube video with each caption line preceded by its [M:SS] timestamp."""
    try:
        vid = _resolve_id(video_id)
        result = await _service.fetch_transcript(
            vid, TranscriptOptions(language=language or None, format="timestamped")
        )
    except _FAILURES as e:
        return _describe_error(e, video_id)

    return f"# Transcript: {vid}\n**Captions:** {result.total_segments}\n\n{result.text}"


@mcp.tool(annotations=TOOL_ANNOTATIONS)
async def enhanced_transcript(
    video_ids: Annotated[list[str], Field(min_length=1, max_length=5, description="YouTube video URLs or IDs (1-5). Cues of several videos are merged in this order and tagged with their videoId")],
    language: Annotated[str | None, Field(default=None, description="Preferred language code")] = None,
    format: Annotated[Literal["raw", "timestamped", "merged"], Field(default="raw", description="raw: cue list only; timestamped: adds [M:SS] lines; merged: adds plain text")] = "raw",
    include_metadata: Annotated[bool, Field(default=False, description="Include title, channel and statistics of each video")] = False,
    time_range: Annotated[TimeRange | None, Field(default=None, description="Keep cues inside {start, end} seconds")] = None,
    search: Annotated[SearchOptions | None, Field(default=None, description="Keep cues containing {query}, plus contextLines (0-5) neighbours")] = None,
    segment: Annotated[SegmentOptions | None, Field(default=None, description="Group cues into {count} (1-10) segments by the equal or smart method")] = None,
) -> str:
    """Transcripts of one or more videos with time-range filtering, search, segmentation and optional metadata, returned as JSON."""
    try:
        ids = [_resolve_id(v) for v in video_ids]
        limit = _settings.max_videos_per_request if _settings else 5
        if len(ids) > limit:
            raise MissingInputError(f"Maximum {limit} videos per request")
        options = TranscriptOptions(
            language=language or None,
            time_range=time_range,
            search=search,
            segment=segment,
            format=format,
            include_metadata=include_metadata,
        )
        result = await _service.fetch_enhanced_transcript(ids, options)
    except _FAILURES as e:
        return _describe_error(e, ", ".join(video_ids))

    return result.to_json()


@mcp.tool(annotations=TOOL_ANNOTATIONS)
async def get_key_moments(
    video_id: Annotated[str, Field(description="YouTube video URL or video ID")],
    max_moments: Annotated[int, Field(default=5, ge=1, le=10, description="Number of key moments to extract")] = 5,
) -> str:
    """Extract timestamped key moments (the densest paragraphs) of a video, followed by the full transcript."""
    try:
        result = await _service.extract_key_moments(_resolve_id(video_id), max_moments)
    except _FAILURES as e:
        return _describe_error(e, video_id)
    return result.text or "No key moments found"


@mcp.tool(annotations=TOOL_ANNOTATIONS)
async def get_segmented_transcript(
    video_id: Annotated[str, Field(description="YouTube video URL or video ID")],
    segment_count: Annotated[int, Field(default=4, ge=1, le=10, description="Number of equal time segments")] = 4,
) -> str:
    """Divide a video transcript into equal time segments, each labelled with its time range."""
    try:
        result = await _service.segment_transcript(_resolve_id(video_id), segment_count)
    except _FAILURES as e:
        return _describe_error(e, video_id)
    return result.text or "Failed to create segmented transcript"


# -- MCP Resources --


async def _transcript_text(video_id: str, language: str | None) -> str:
    try:
        result = await _service.fetch_transcript(
            video_id, TranscriptOptions(language=language, format="timestamped")
        )
    except _FAILURES as e:
        return f"Transcript not available for video ID {video_id}. {_describe_error(e, video_id)}"
    return f"# Transcript: {video_id}\n**Language:** {language or 'default'}\n\n{result.text}"


@mcp.resource("youtube://transcript/{video_id}")
async def transcript_resource(video_id: str) -> str:
    """Timestamped transcript of a video in its default language."""
    return await _transcript_text(video_id, None)


@mcp.resource("youtube://transcript/{video_id}/{language}")
async def transcript_language_resource(video_id: str, language: str) -> str:
    """Timestamped transcript of a video, trying ``language`` before the fallback languages."""
    return await _transcript_text(video_id, language)


@mcp.resource("youtube://video/{video_id}")
async def video_resource(video_id: str) -> str:
    """Title, channel, publish date, duration and statistics of a video."""
    try:
        video = await _service.get_video(video_id)
    except _FAILURES as e:
        return _describe_error(e, video_id)
    return video.model_dump_json(by_alias=True, indent=2)


@mcp.resource("youtube://channel/{channel_id}")
async def channel_resource(channel_id: str) -> str:
    """Title and country of a channel."""
    try:
        channel = await _service.get_channel(channel_id)
    except _FAILURES as e:
        return _describe_error(e, channel_id)
    return json.dumps(channel.model_dump(by_alias=True), indent=2)


# -- MCP Prompts --


_SUMMARY_INSTRUCTIONS = {
    "short": "Summarize the video in 3-5 sentences that capture the main idea.",
    "medium": """Provide:
1. A concise summary of the main topics and key points
2. Important details or facts presented
3. The overall tone and style of the content""",
    "detailed": """Provide a comprehensive summary including:
1. A detailed overview of the main topics
2. All important details, facts and arguments
3. How the content is structured and how ideas develop
4. Any conclusions or calls to action""",
}


@mcp.prompt()
def transcript_summary(
    video_id: Annotated[str, Field(description="YouTube video URL or video ID to summarize")],
    language: Annotated[str, Field(default="", description="Optional language code for the transcript")] = "",
    summary_length: Annotated[Literal["short", "medium", "detailed"], Field(default="medium", description="Level of detail")] = "medium",
    include_keywords: Annotated[bool, Field(default=False, description="Also list the key topics of the video")] = False,
) -> str:
    """Summarize a YouTube video from its transcript."""
    lang = f' with language="{language}"' if language else ""
    prompt = f"""Please use the get_video_transcript tool{lang} to fetch the transcript for this YouTube video: {video_id}

Then write a {summary_length} summary.
{_SUMMARY_INSTRUCTIONS[summary_length]}"""
    if include_keywords:
        prompt += """

Also extract and list 5-10 key topics, themes, or keywords from the content in the format:
KEY TOPICS: [comma-separated list of key topics/keywords]"""
    return prompt


@mcp.prompt()
def segment_analysis(
    video_id: Annotated[str, Field(description="YouTube video URL or video ID to analyze")],
    segment_count: Annotated[int, Field(default=4, ge=2, le=8, description="Number of segments")] = 4,
) -> str:
    """Analyze a video segment by segment."""
    return f"""Please use the get_segmented_transcript tool with segment_count={segment_count} for this YouTube video: {video_id}

For each segment, provide:
1. A brief summary of the key points
2. Any important quotes or statements
3. How the segment connects to the overall topic

Conclude with a short overall summary tying the segments together."""


@mcp.resource("youtube://help")
def help_resource() -> str:
    """Usage guide for the YouTube MCP server with examples for all tools."""
    return """# YouTube MCP Server - Help Guide

## Available Tools

### get_video_transcript
Full transcript with [M:SS] timestamps.
- Without a language, tries the channel's language (when a Data API key is set), then en, ko, ja, es, fr, de, zh, pt, ru, it, ar, hi
- Example: get_video_transcript(video_id="VIDEO_ID", language="ko")

### enhanced_transcript
Up to 5 videos at once, returned as JSON.
- time_range: {"start": 60, "end": 300} in seconds
- search: {"query": "machine learning", "caseSensitive": false, "contextLines": 2}
- segment: {"method": "equal" | "smart", "count": 4}
- format: raw, timestamped or merged; include_metadata for video details
- Example: enhanced_transcript(video_ids=["VIDEO1", "VIDEO2"], format="merged")

### get_key_moments
The longest paragraphs of a transcript with their timestamps.
- Example: get_key_moments(video_id="VIDEO_ID", max_moments=5)

### get_segmented_transcript
Transcript split into equal time windows.
- Example: get_segmented_transcript(video_id="VIDEO_ID", segment_count=4)

## Resources
- youtube://transcript/{video_id}
- youtube://transcript/{video_id}/{language}
- youtube://video/{video_id}
- youtube://channel/{channel_id}

## Tips
- Use video IDs or full YouTube URLs
- Many videos have no captions at all; these fail fast with "No captions available"
- Use search with contextLines to find topics in long videos
"""


def main():
    settings = Settings()
    if settings.transport == Transport.STREAMABLE_HTTP:
        mcp.settings.host = settings.http_host
        mcp.settings.port = settings.http_port
        mcp.run(transport="streamable-http")
    else:
        mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
