"""Data models for cues, options and formatted transcripts."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

SegmentMethod = Literal["equal", "smart"]
OutputFormat = Literal["raw", "timestamped", "merged"]


class _Model(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class _Value(_Model):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Cue(_Value):
    text: str
    offset_ms: int = Field(ge=0)
    duration_ms: int = Field(ge=0)
    video_id: str | None = None
    segment: int | None = None

    @property
    def start(self) -> float:
        return self.offset_ms / 1000

    @property
    def end(self) -> float:
        return (self.offset_ms + self.duration_ms) / 1000


class TimeRange(_Value):
    start: float = Field(default=0, ge=0)
    end: float | None = Field(default=None, ge=0)


class SearchOptions(_Value):
    query: str
    case_sensitive: bool = False
    context_lines: int = Field(default=0, ge=0, le=5)


class SegmentOptions(_Value):
    method: SegmentMethod = "equal"
    count: int = Field(default=4, ge=1, le=10)


class TranscriptOptions(_Value):
    language: str | None = None
    time_range: TimeRange | None = None
    search: SearchOptions | None = None
    segment: SegmentOptions | None = None
    format: OutputFormat = "raw"
    include_metadata: bool = False


class VideoMetadata(_Model):
    id: str
    title: str = ""
    channel_id: str = ""
    channel_title: str = ""
    published_at: str = ""
    duration: str = ""
    view_count: int | None = None
    like_count: int | None = None


class ChannelInfo(_Model):
    id: str
    title: str = ""
    country: str | None = None


class FormattedTranscript(_Model):
    segments: list[Cue] = []
    total_segments: int = 0
    duration: float = 0
    format: OutputFormat = "raw"
    text: str | None = None
    metadata: list[VideoMetadata] | None = None

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=2)
