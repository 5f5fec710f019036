"""Transcript pipeline entry points used by the MCP server."""

import asyncio
import logging

from youtube_mcp.analysis import KeyMomentExtractor, SegmentAnalyzer
from youtube_mcp.errors import MissingInputError
from youtube_mcp.fetcher import TranscriptFetcher
from youtube_mcp.formatter import format_transcript
from youtube_mcp.models import ChannelInfo, Cue, FormattedTranscript, TranscriptOptions, VideoMetadata
from youtube_mcp.processor import process_cues
from youtube_mcp.providers.data_api import VideoDataClient, fetch_video_metadata

logger = logging.getLogger(__name__)


class TranscriptService:
    def __init__(self, fetcher: TranscriptFetcher, video_data: VideoDataClient | None = None):
        self.fetcher = fetcher
        self.video_data = video_data
        self._key_moments = KeyMomentExtractor(fetcher, video_data)
        self._segments = SegmentAnalyzer(fetcher, video_data)

    async def fetch_transcript(
        self, video_id: str, options: TranscriptOptions | None = None
    ) -> FormattedTranscript:
        return await self.fetch_enhanced_transcript([video_id], options, tag_videos=False)

    async def fetch_enhanced_transcript(
        self,
        video_ids: list[str],
        options: TranscriptOptions | None = None,
        tag_videos: bool = True,
    ) -> FormattedTranscript:
        """Fetch, merge (in input order), process and format several transcripts."""
        options = options or TranscriptOptions()
        if not video_ids:
            raise MissingInputError("At least one video ID is required")
        if options.search is not None and not options.search.query.strip():
            raise MissingInputError("Search query cannot be empty")

        fetched = await asyncio.gather(
            *(self.fetcher.fetch(video_id, options) for video_id in video_ids)
        )

        merged: list[Cue] = []
        for video_id, cues in zip(video_ids, fetched):
            if tag_videos:
                merged.extend(cue.model_copy(update={"video_id": video_id}) for cue in cues)
            else:
                merged.extend(cues)

        processed = process_cues(merged, options)

        metadata: list[VideoMetadata | None] = []
        if options.include_metadata:
            metadata = list(
                await asyncio.gather(
                    *(fetch_video_metadata(self.video_data, video_id) for video_id in video_ids)
                )
            )

        return format_transcript(processed, metadata, options)

    async def extract_key_moments(self, video_id: str, max_moments: int = 5) -> FormattedTranscript:
        return await self._key_moments.extract(video_id, max_moments)

    async def segment_transcript(self, video_id: str, segment_count: int = 4) -> FormattedTranscript:
        return await self._segments.segment(video_id, segment_count)

    async def get_video(self, video_id: str) -> VideoMetadata:
        return await self._require_video_data().get_video(video_id)

    async def get_channel(self, channel_id: str) -> ChannelInfo:
        return await self._require_video_data().get_channel(channel_id)

    def _require_video_data(self) -> VideoDataClient:
        if self.video_data is None:
            raise MissingInputError("YouTube Data API key is not configured (YT_MCP_YOUTUBE_API_KEY)")
        return self.video_data

    async def close(self) -> None:
        if self.video_data is not None:
            await self.video_data.close()
