"""Caption sources and upstream metadata clients."""

from .base import CaptionSource
from .captions import YouTubeCaptionSource
from .data_api import VideoDataClient

__all__ = ["CaptionSource", "YouTubeCaptionSource", "VideoDataClient"]
