"""Domain models for manifest-filter.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  Transforms never mutate a document; they
return a new one built with :func:`dataclasses.replace`.

Each model carries an opaque ``source`` handle owned by the playlist
codec.  The core never inspects it; it only travels with the value so the
codec can re-emit every tag the transforms do not touch.  ``source`` is
excluded from equality and ``repr``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


# ---------------------------------------------------------------------------
# Master playlist
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Rendition:
    """One alternative encoding (variant stream) of a title."""

    bandwidth: int
    """Peak bits per second (``BANDWIDTH`` attribute)."""

    frame_rate: float | None = None
    """Frames per second, or ``None`` when the variant does not declare one."""

    uri: str | None = None
    """Media playlist URI.  Opaque."""

    resolution: tuple[int, int] | None = None
    """``(width, height)`` in pixels, or ``None``.  Opaque."""

    codecs: str | None = None
    """RFC 6381 codec string.  Opaque."""

    average_bandwidth: int | None = None
    """``AVERAGE-BANDWIDTH`` attribute, when present.  Opaque."""

    source: Any = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class MasterDocument:
    """Ordered list of renditions.  Position 0 is what players try first."""

    renditions: tuple[Rendition, ...]

    source: Any = field(default=None, compare=False, repr=False)

    def __len__(self) -> int:
        return len(self.renditions)


# ---------------------------------------------------------------------------
# Media playlist
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Segment:
    """One playable chunk of a timeline."""

    duration: float
    """Duration in seconds (``EXTINF``)."""

    uri: str | None = None
    """Segment URI.  Opaque."""

    discontinuity: bool = False
    """Whether an ``EXT-X-DISCONTINUITY`` precedes this segment.  Opaque."""

    source: Any = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class TimelineDocument:
    """Ordered segments plus the media sequence number of ``segments[0]``."""

    segments: tuple[Segment, ...]

    sequence_number: int = 0
    """``EXT-X-MEDIA-SEQUENCE``.  Advances by the number of segments a window or trim removes."""

    source: Any = field(default=None, compare=False, repr=False)

    def __len__(self) -> int:
        return len(self.segments)
