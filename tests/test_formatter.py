"""Tests for FormattedTranscript rendering."""

import json

from youtube_mcp.formatter import format_transcript, total_duration
from youtube_mcp.models import Cue, TranscriptOptions


class TestFormatTranscript:
    def test_single_cue_timestamped(self):
        cues = [Cue(text="hello", offset_ms=0, duration_ms=2000)]
        result = format_transcript(cues, None, TranscriptOptions(format="timestamped"))
        assert result.text == "[0:00] hello"
        assert result.total_segments == 1
        assert result.duration == 2.0
        assert result.format == "timestamped"

    def test_merged_has_no_timestamps(self):
        cues = [
            Cue(text="first line", offset_ms=0, duration_ms=3000),
            Cue(text="second line", offset_ms=65000, duration_ms=3000),
        ]
        result = format_transcript(cues, None, TranscriptOptions(format="merged"))
        assert result.text == "first line second line"

    def test_timestamped_lines(self, sample_cues):
        result = format_transcript(sample_cues, None, TranscriptOptions(format="timestamped"))
        lines = result.text.split("\n")
        assert lines[0] == "[0:00] Hello world"
        assert lines[2] == "[0:05] of the transcript"
        assert lines[4] == "[0:10] goodbye world"

    def test_raw_has_no_text(self, sample_cues):
        result = format_transcript(sample_cues, None, TranscriptOptions())
        assert result.text is None
        assert result.segments == sample_cues
        assert result.metadata is None

    def test_duration_sums_cue_durations(self):
        cues = [
            Cue(text="a", offset_ms=0, duration_ms=1000),
            Cue(text="b", offset_ms=60000, duration_ms=1500),
        ]
        assert total_duration(cues) == 2.5

    def test_empty(self):
        result = format_transcript([], None, TranscriptOptions(format="merged"))
        assert result.total_segments == 0
        assert result.duration == 0
        assert result.text == ""

    def test_metadata_drops_missing(self, sample_cues, sample_metadata):
        result = format_transcript(
            sample_cues, [None, sample_metadata], TranscriptOptions(include_metadata=True)
        )
        assert result.metadata == [sample_metadata]

    def test_metadata_only_when_requested(self, sample_cues, sample_metadata):
        result = format_transcript(sample_cues, [sample_metadata], TranscriptOptions())
        assert result.metadata is None

    def test_json_uses_camel_case(self, sample_cues, sample_metadata):
        result = format_transcript(
            sample_cues, [sample_metadata], TranscriptOptions(include_metadata=True)
        )
        data = json.loads(result.to_json())
        assert data["totalSegments"] == 5
        assert data["segments"][1] == {"text": "this is a test", "offsetMs": 2500, "durationMs": 3000}
        assert data["metadata"][0]["channelTitle"] == "Rick Astley"
        assert data["metadata"][0]["viewCount"] == 1500000000
        assert "text" not in data
