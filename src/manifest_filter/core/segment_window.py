"""Pure segment windowing for media playlists.

Both operations drop segments from a
:class:`~manifest_filter.core.models.TimelineDocument` and advance its
``sequence_number`` by the number of segments dropped.

Pipeline order (enforced by :func:`transform_timeline`):

1. **Trailing window** — keep the newest segments fitting a duration budget.
2. **Range trim** — keep an explicit ``[start, end)`` index range.
"""

from __future__ import annotations

from dataclasses import replace

from manifest_filter.core.models import TimelineDocument
from manifest_filter.core.options import TimelineTransformOptions
from manifest_filter.exceptions import TrimRangeError


def apply_trailing_window(
    document: TimelineDocument,
    seconds: float | None,
) -> TimelineDocument:
    """Keep the trailing segments whose cumulative duration fits *seconds*.

    Segments are accumulated from the end backwards.  A segment is kept
    while the running total including it is ``<= seconds``; the first one
    that would exceed the budget stops the scan.  Every dropped segment
    comes off the front, so ``sequence_number`` advances by the number
    dropped.
    """
    if seconds is None:
        return document

    segments = document.segments
    kept = 0
    accumulated = 0.0
    for segment in reversed(segments):
        accumulated += segment.duration
        if accumulated > seconds:
            break
        kept += 1

    removed = len(segments) - kept
    if removed == 0:
        return document
    return replace(
        document,
        segments=segments[removed:],
        sequence_number=document.sequence_number + removed,
    )


def trim_range(
    document: TimelineDocument,
    start: int | None = None,
    end: int | None = None,
) -> TimelineDocument:
    """Keep the half-open segment range ``[start, end)``.

    ``start`` defaults to ``0`` and ``end`` to the number of segments.
    ``sequence_number`` advances by the total number of segments removed,
    counting both ends: trimming 20 segments to ``[5, 18)`` adds 7.

    Raises
    ------
    TrimRangeError
        When ``0 <= start <= end <= len(segments)`` does not hold.
        Bounds are never clamped.
    """
    count = len(document.segments)
    first = 0 if start is None else start
    last = count if end is None else end

    if not 0 <= first <= last <= count:
        raise TrimRangeError(
            f"Invalid trim range [{first}, {last}) for {count} segments.",
            hint=f"Use 0 <= trim_start <= trim_end <= {count}.",
        )
    if first == 0 and last == count:
        return document

    return replace(
        document,
        segments=document.segments[first:last],
        sequence_number=document.sequence_number + (count - (last - first)),
    )


def transform_timeline(
    document: TimelineDocument,
    options: TimelineTransformOptions,
) -> TimelineDocument:
    """Run the trailing window → range trim pipeline.

    Raises
    ------
    TrimRangeError
        Propagated from :func:`trim_range`.
    """
    document = apply_trailing_window(document, options.trailing_window_seconds)
    bounds = options.trim_range
    return trim_range(document, bounds.start, bounds.end)
