"""Option and range types shared by both transform engines.

Every field is optional: ``None`` means "not requested" and makes the
corresponding transform a no-op.  An explicit ``0`` is a real value and
is honoured as such.  Negative values are rejected at construction time
so that the transforms themselves stay total.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from manifest_filter.exceptions import InvalidOptionError

MAX_BANDWIDTH: int = 2**64 - 1
"""Upper bandwidth bound used when no maximum is given."""


def _require_non_negative(name: str, value: float | None) -> None:
    """Raise :class:`InvalidOptionError` for negative or NaN values."""
    if value is None:
        return
    if isinstance(value, float) and math.isnan(value):
        raise InvalidOptionError(f"{name} must be a number, got NaN")
    if value < 0:
        raise InvalidOptionError(
            f"{name} must not be negative, got {value}",
        )


# ---------------------------------------------------------------------------
# Ranges
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class BandwidthRange:
    """Inclusive bandwidth bounds in bits per second."""

    minimum: int | None = None
    maximum: int | None = None

    def __post_init__(self) -> None:
        _require_non_negative("minimum bandwidth", self.minimum)
        _require_non_negative("maximum bandwidth", self.maximum)

    @property
    def effective_minimum(self) -> int:
        return 0 if self.minimum is None else self.minimum

    @property
    def effective_maximum(self) -> int:
        return MAX_BANDWIDTH if self.maximum is None else self.maximum

    def __contains__(self, bandwidth: object) -> bool:
        if not isinstance(bandwidth, int):
            return False
        return self.effective_minimum <= bandwidth <= self.effective_maximum


@dataclass(frozen=True, slots=True)
class TrimRange:
    """Half-open segment index range ``[start, end)``.

    Validation against a concrete timeline length happens in
    :func:`~manifest_filter.core.segment_window.trim_range`.
    """

    start: int | None = None
    end: int | None = None

    def __post_init__(self) -> None:
        _require_non_negative("trim start", self.start)
        _require_non_negative("trim end", self.end)


# ---------------------------------------------------------------------------
# Per-document option sets
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class MasterTransformOptions:
    """Options recognised when transforming a master playlist.

    Applied in the fixed order: bandwidth filter → frame-rate filter →
    select-by-index → select-by-closest-bandwidth.
    """

    min_bandwidth: int | None = None
    max_bandwidth: int | None = None
    frame_rate: float | None = None
    first_by_index: int | None = None
    first_by_closest_bandwidth: int | None = None

    def __post_init__(self) -> None:
        _require_non_negative("min_bandwidth", self.min_bandwidth)
        _require_non_negative("max_bandwidth", self.max_bandwidth)
        _require_non_negative("frame_rate", self.frame_rate)
        _require_non_negative(
            "first_by_closest_bandwidth", self.first_by_closest_bandwidth,
        )

    @property
    def bandwidth_range(self) -> BandwidthRange:
        return BandwidthRange(self.min_bandwidth, self.max_bandwidth)


@dataclass(frozen=True, slots=True)
class TimelineTransformOptions:
    """Options recognised when transforming a media playlist.

    Applied in order: trailing window → range trim.
    """

    trailing_window_seconds: float | None = None
    trim_start: int | None = None
    trim_end: int | None = None

    def __post_init__(self) -> None:
        _require_non_negative(
            "trailing_window_seconds", self.trailing_window_seconds,
        )
        _require_non_negative("trim_start", self.trim_start)
        _require_non_negative("trim_end", self.trim_end)

    @property
    def trim_range(self) -> TrimRange:
        return TrimRange(self.trim_start, self.trim_end)
