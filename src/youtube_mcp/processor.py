"""Pure transforms over cue lists: time range, search and segmentation."""

import math

from youtube_mcp.models import Cue, SearchOptions, SegmentOptions, TimeRange, TranscriptOptions


def filter_time_range(cues: list[Cue], time_range: TimeRange) -> list[Cue]:
    start = time_range.start or 0
    end = time_range.end
    return [
        cue
        for cue in cues
        if cue.offset_ms / 1000 >= start
        and (end is None or cue.offset_ms / 1000 + cue.duration_ms / 1000 <= end)
    ]


def search_cues(cues: list[Cue], search: SearchOptions) -> list[Cue]:
    """Cues containing the query, each widened by ``context_lines`` neighbours."""
    query = search.query if search.case_sensitive else search.query.lower()
    matches = [
        i
        for i, cue in enumerate(cues)
        if query in (cue.text if search.case_sensitive else cue.text.lower())
    ]
    if not matches:
        return []

    k = search.context_lines
    included: set[int] = set()
    for i in matches:
        included.update(range(max(0, i - k), min(len(cues), i + k + 1)))
    return [cues[i] for i in sorted(included)]


def segment_equal(cues: list[Cue], count: int) -> list[list[Cue]]:
    size = math.ceil(len(cues) / count)
    return [cues[i:i + size] for i in range(0, len(cues), size)]


def segment_smart(cues: list[Cue], count: int) -> list[list[Cue]]:
    """Greedy duration-balanced grouping into exactly ``count`` segments.

    A segment closes once it holds its share of the total duration, or when
    the cues left are only just enough to give each remaining segment one.
    The last segment takes whatever is left.
    """
    total = sum(cue.duration_ms for cue in cues)
    target = total / count
    segments: list[list[Cue]] = []
    current: list[Cue] = []
    accumulated = 0

    for i, cue in enumerate(cues):
        current.append(cue)
        accumulated += cue.duration_ms
        if len(segments) >= count - 1:
            continue
        remaining = len(cues) - i - 1
        still_needed = count - len(segments) - 1
        if accumulated >= target or remaining == still_needed:
            segments.append(current)
            current = []
            accumulated = 0

    if current:
        segments.append(current)
    return segments


def segment_cues(cues: list[Cue], segment: SegmentOptions) -> list[list[Cue]]:
    """Group cues; a single group when segmentation does not apply."""
    count = segment.count
    if count <= 1 or count >= len(cues):
        return [list(cues)] if cues else []
    if segment.method == "smart":
        return segment_smart(cues, count)
    return segment_equal(cues, count)


def process_cues(cues: list[Cue], options: TranscriptOptions) -> list[Cue]:
    """Apply time range, search and segmentation, in that order."""
    result = list(cues)
    if options.time_range is not None:
        result = filter_time_range(result, options.time_range)
    if options.search is not None:
        result = search_cues(result, options.search)
    if options.segment is not None:
        count = options.segment.count
        if 1 < count < len(result):
            groups = segment_cues(result, options.segment)
            result = [
                cue.model_copy(update={"segment": index})
                for index, group in enumerate(groups)
                for cue in group
            ]
    return result
