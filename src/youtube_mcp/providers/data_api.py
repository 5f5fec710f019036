"""YouTube Data API v3 client for video and channel details."""

import logging

import httpx

from youtube_mcp.errors import UpstreamNotFoundError
from youtube_mcp.models import ChannelInfo, VideoMetadata

logger = logging.getLogger(__name__)

YOUTUBE_API_BASE = "https://www.googleapis.com/youtube/v3"


def _to_int(value) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class VideoDataClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = YOUTUBE_API_BASE,
        timeout: float = 30.0,
    ):
        self._api_key = api_key
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
        )

    async def _list(self, endpoint: str, **params) -> list[dict]:
        params["key"] = self._api_key
        resp = await self._client.get(f"/{endpoint}", params=params)
        resp.raise_for_status()
        return resp.json().get("items", [])

    async def get_video(self, video_id: str) -> VideoMetadata:
        items = await self._list(
            "videos", part="snippet,contentDetails,statistics", id=video_id
        )
        if not items:
            raise UpstreamNotFoundError("video", video_id)

        video = items[0]
        snippet = video.get("snippet", {})
        statistics = video.get("statistics", {})
        return VideoMetadata(
            id=video.get("id", video_id),
            title=snippet.get("title", ""),
            channel_id=snippet.get("channelId", ""),
            channel_title=snippet.get("channelTitle", ""),
            published_at=snippet.get("publishedAt", ""),
            duration=video.get("contentDetails", {}).get("duration", ""),
            view_count=_to_int(statistics.get("viewCount")),
            like_count=_to_int(statistics.get("likeCount")),
        )

    async def get_channel(self, channel_id: str) -> ChannelInfo:
        items = await self._list("channels", part="snippet", id=channel_id)
        if not items:
            raise UpstreamNotFoundError("channel", channel_id)

        channel = items[0]
        snippet = channel.get("snippet", {})
        return ChannelInfo(
            id=channel.get("id", channel_id),
            title=snippet.get("title", ""),
            country=snippet.get("country"),
        )

    async def close(self) -> None:
        await self._client.aclose()


async def fetch_video_metadata(
    client: VideoDataClient | None, video_id: str
) -> VideoMetadata | None:
    """Video details, or None when no client is configured or the lookup fails."""
    if client is None:
        return None
    try:
        return await client.get_video(video_id)
    except UpstreamNotFoundError:
        logger.info(f"No metadata for video {video_id}")
    except httpx.HTTPError as e:
        logger.error(f"Metadata lookup failed for {video_id}: {e}")
    return None
