"""Tests for option and range types (core/options.py)."""

from __future__ import annotations

import math

import pytest

from manifest_filter.core.options import (
    MAX_BANDWIDTH,
    BandwidthRange,
    MasterTransformOptions,
    TimelineTransformOptions,
    TrimRange,
)
from manifest_filter.exceptions import InvalidOptionError


class TestBandwidthRange:
    def test_defaults(self) -> None:
        bounds = BandwidthRange()
        assert bounds.effective_minimum == 0
        assert bounds.effective_maximum == MAX_BANDWIDTH

    def test_inclusive_membership(self) -> None:
        bounds = BandwidthRange(800000, 2000000)
        assert 800000 in bounds
        assert 2000000 in bounds
        assert 799999 not in bounds
        assert 2000001 not in bounds

    def test_explicit_zero_kept(self) -> None:
        assert BandwidthRange(maximum=0).effective_maximum == 0

    def test_negative_rejected(self) -> None:
        with pytest.raises(InvalidOptionError, match="negative"):
            BandwidthRange(minimum=-1)


class TestTrimRange:
    def test_defaults(self) -> None:
        assert TrimRange() == TrimRange(None, None)

    def test_negative_rejected(self) -> None:
        with pytest.raises(InvalidOptionError):
            TrimRange(start=-3)


class TestMasterTransformOptions:
    def test_all_absent_by_default(self) -> None:
        options = MasterTransformOptions()
        assert options.bandwidth_range == BandwidthRange()
        assert options.frame_rate is None
        assert options.first_by_index is None
        assert options.first_by_closest_bandwidth is None

    def test_negative_index_allowed(self) -> None:
        # out-of-range indexes are a no-op downstream, not an option error
        assert MasterTransformOptions(first_by_index=-1).first_by_index == -1

    @pytest.mark.parametrize(
        "field",
        ["min_bandwidth", "max_bandwidth", "frame_rate", "first_by_closest_bandwidth"],
    )
    def test_negative_rejected(self, field: str) -> None:
        with pytest.raises(InvalidOptionError, match=field):
            MasterTransformOptions(**{field: -1})

    def test_nan_frame_rate_rejected(self) -> None:
        with pytest.raises(InvalidOptionError, match="NaN"):
            MasterTransformOptions(frame_rate=math.nan)


class TestTimelineTransformOptions:
    def test_trim_range_property(self) -> None:
        options = TimelineTransformOptions(trim_start=5, trim_end=18)
        assert options.trim_range == TrimRange(5, 18)

    def test_infinite_window_allowed(self) -> None:
        options = TimelineTransformOptions(trailing_window_seconds=math.inf)
        assert options.trailing_window_seconds == math.inf

    def test_negative_window_rejected(self) -> None:
        with pytest.raises(InvalidOptionError):
            TimelineTransformOptions(trailing_window_seconds=-0.5)
