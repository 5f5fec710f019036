"""Configuration via environment variables."""

from enum import Enum
from pydantic_settings import BaseSettings


class Transport(str, Enum):
    STDIO = "stdio"
    STREAMABLE_HTTP = "streamable-http"


class Settings(BaseSettings):
    model_config = {"env_prefix": "YT_MCP_"}

    youtube_api_key: str = ""
    cache_max_size: int = 1000
    cache_ttl_seconds: int = 3600
    detect_channel_language: bool = True
    max_videos_per_request: int = 5
    request_timeout: float = 30.0
    transport: Transport = Transport.STDIO
    http_host: str = "0.0.0.0"
    http_port: int = 8401
