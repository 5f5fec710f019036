"""Tests for server startup."""

import pytest
from unittest.mock import patch

from youtube_mcp.server import mcp, app_lifespan
from youtube_mcp.providers.data_api import VideoDataClient


def _configure(mock_settings, api_key=""):
    mock_settings.youtube_api_key = api_key
    mock_settings.cache_max_size = 10
    mock_settings.cache_ttl_seconds = 60
    mock_settings.detect_channel_language = True
    mock_settings.request_timeout = 5.0


class TestServerStartup:
    @pytest.mark.asyncio
    async def test_lifespan_without_api_key(self):
        with patch("youtube_mcp.server.Settings") as MockSettings:
            _configure(MockSettings.return_value)

            async with app_lifespan(mcp):
                from youtube_mcp import server
                assert server._source is not None
                assert server._service is not None
                assert server._service.video_data is None
                assert server._service.fetcher.cache.stats()["max_size"] == 10

    @pytest.mark.asyncio
    async def test_lifespan_with_api_key(self):
        with patch("youtube_mcp.server.Settings") as MockSettings:
            _configure(MockSettings.return_value, api_key="test")

            async with app_lifespan(mcp):
                from youtube_mcp import server
                assert isinstance(server._service.video_data, VideoDataClient)

    def test_mcp_created(self):
        assert mcp is not None
        assert mcp.name == "YouTube MCP"

    @pytest.mark.asyncio
    async def test_tools_registered(self):
        names = {tool.name for tool in await mcp.list_tools()}
        assert names == {
            "get_video_transcript",
            "enhanced_transcript",
            "get_key_moments",
            "get_segmented_transcript",
        }
