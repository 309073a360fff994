"""Tests for the pure rendition filters (core/rendition_filter.py).

Every test is a pure function call — no I/O, no mocking, no side
effects.  These tests exercise:

* Exact frame-rate filtering
* Inclusive bandwidth range filtering
* Swap-to-front by index, including out-of-range indexes
* Extract-and-prepend by closest bandwidth, including ties
* The fixed-order ``transform_master`` pipeline
"""

from __future__ import annotations

import pytest

from manifest_filter.core.models import MasterDocument, Rendition
from manifest_filter.core.options import MasterTransformOptions
from manifest_filter.core.rendition_filter import (
    filter_by_bandwidth,
    filter_by_frame_rate,
    select_first_by_closest_bandwidth,
    select_first_by_index,
    transform_master,
)


# ---------------------------------------------------------------------------
# Factory helpers
# ---------------------------------------------------------------------------

def _rendition(
    bandwidth: int,
    *,
    frame_rate: float | None = 30.0,
    uri: str | None = None,
) -> Rendition:
    return Rendition(
        bandwidth=bandwidth,
        frame_rate=frame_rate,
        uri=uri or f"variant-{bandwidth}.m3u8",
    )


def _master(*renditions: Rendition) -> MasterDocument:
    return MasterDocument(renditions=renditions)


def _sample() -> MasterDocument:
    return _master(
        _rendition(600000, uri="a"),
        _rendition(800000, uri="b"),
        _rendition(800000, frame_rate=60.0, uri="c"),
        _rendition(1200000, uri="d"),
        _rendition(1500000, frame_rate=60.0, uri="e"),
        _rendition(2000000, uri="f"),
    )


def _uris(document: MasterDocument) -> list[str | None]:
    return [r.uri for r in document.renditions]


def _bandwidths(document: MasterDocument) -> list[int]:
    return [r.bandwidth for r in document.renditions]


# ---------------------------------------------------------------------------
# filter_by_frame_rate
# ---------------------------------------------------------------------------

class TestFilterByFrameRate:
    def test_none_is_noop(self) -> None:
        doc = _sample()
        assert filter_by_frame_rate(doc, None) is doc

    def test_keeps_exact_matches_in_order(self) -> None:
        result = filter_by_frame_rate(_sample(), 60.0)
        assert _uris(result) == ["c", "e"]

    def test_no_tolerance(self) -> None:
        doc = _master(_rendition(1, frame_rate=29.97), _rendition(2, frame_rate=30.0))
        assert _bandwidths(filter_by_frame_rate(doc, 30.0)) == [2]

    def test_missing_frame_rate_never_matches(self) -> None:
        doc = _master(_rendition(1, frame_rate=None))
        assert filter_by_frame_rate(doc, 30.0).renditions == ()

    def test_does_not_mutate_input(self) -> None:
        doc = _sample()
        filter_by_frame_rate(doc, 60.0)
        assert len(doc) == 6


# ---------------------------------------------------------------------------
# filter_by_bandwidth
# ---------------------------------------------------------------------------

class TestFilterByBandwidth:
    def test_both_none_is_noop(self) -> None:
        doc = _sample()
        assert filter_by_bandwidth(doc) is doc

    def test_min_only(self) -> None:
        result = filter_by_bandwidth(_sample(), minimum=800000)
        assert _bandwidths(result) == [800000, 800000, 1200000, 1500000, 2000000]

    def test_max_only(self) -> None:
        result = filter_by_bandwidth(_sample(), maximum=800000)
        assert _bandwidths(result) == [600000, 800000, 800000]

    def test_min_and_max_are_inclusive(self) -> None:
        result = filter_by_bandwidth(_sample(), minimum=800000, maximum=2000000)
        assert all(r.bandwidth >= 800000 for r in result.renditions)
        assert _uris(result) == ["b", "c", "d", "e", "f"]

    def test_narrow_range(self) -> None:
        result = filter_by_bandwidth(_sample(), minimum=800001, maximum=1500000)
        assert _uris(result) == ["d", "e"]

    def test_explicit_zero_max_is_honoured(self) -> None:
        doc = _master(_rendition(0, uri="zero"), _rendition(1, uri="one"))
        assert _uris(filter_by_bandwidth(doc, maximum=0)) == ["zero"]

    def test_inverted_range_keeps_nothing(self) -> None:
        result = filter_by_bandwidth(_sample(), minimum=2000000, maximum=600000)
        assert result.renditions == ()

    def test_negative_minimum_keeps_everything(self) -> None:
        doc = _sample()
        result = filter_by_bandwidth(doc, -1, None)
        assert result.renditions == doc.renditions

    def test_negative_maximum_keeps_nothing(self) -> None:
        assert filter_by_bandwidth(_sample(), None, -1).renditions == ()

    def test_preserves_order_of_survivors(self) -> None:
        doc = _master(
            _rendition(900, uri="x"),
            _rendition(100, uri="y"),
            _rendition(500, uri="z"),
        )
        assert _uris(filter_by_bandwidth(doc, minimum=200)) == ["x", "z"]


# ---------------------------------------------------------------------------
# select_first_by_index
# ---------------------------------------------------------------------------

class TestSelectFirstByIndex:
    def test_none_is_noop(self) -> None:
        doc = _sample()
        assert select_first_by_index(doc, None) is doc

    def test_zero_is_noop(self) -> None:
        doc = _sample()
        assert select_first_by_index(doc, 0) == doc

    def test_swaps_with_first(self) -> None:
        result = select_first_by_index(_sample(), 1)
        assert _bandwidths(result)[:2] == [800000, 600000]

    def test_swap_is_two_element(self) -> None:
        result = select_first_by_index(_sample(), 4)
        assert _uris(result) == ["e", "b", "c", "d", "a", "f"]

    @pytest.mark.parametrize("index", [6, 7, 1_000_000, -1])
    def test_out_of_range_is_noop(self, index: int) -> None:
        doc = _sample()
        result = select_first_by_index(doc, index)
        assert _uris(result) == _uris(doc)

    def test_empty_document(self) -> None:
        assert select_first_by_index(_master(), 0).renditions == ()
        assert select_first_by_index(_master(), 3).renditions == ()


# ---------------------------------------------------------------------------
# select_first_by_closest_bandwidth
# ---------------------------------------------------------------------------

class TestSelectFirstByClosestBandwidth:
    def test_none_is_noop(self) -> None:
        doc = _sample()
        assert select_first_by_closest_bandwidth(doc, None) is doc

    def test_empty_document(self) -> None:
        doc = _master()
        assert select_first_by_closest_bandwidth(doc, 1000) is doc

    def test_two_renditions(self) -> None:
        doc = _master(_rendition(600000), _rendition(1500000))
        result = select_first_by_closest_bandwidth(doc, 1650000)
        assert _bandwidths(result) == [1500000, 600000]

    def test_extracts_and_prepends(self) -> None:
        result = select_first_by_closest_bandwidth(_sample(), 1650000)
        assert _uris(result) == ["e", "a", "b", "c", "d", "f"]

    def test_tie_picks_lowest_index(self) -> None:
        doc = _master(
            _rendition(100, uri="low"),
            _rendition(300, uri="high"),
            _rendition(300, uri="high-dup"),
        )
        # 200 is equidistant from 100 and 300: the first candidate wins.
        result = select_first_by_closest_bandwidth(doc, 200)
        assert _uris(result) == ["low", "high", "high-dup"]

    def test_duplicate_bandwidth_first_occurrence_wins(self) -> None:
        result = select_first_by_closest_bandwidth(_sample(), 800000)
        assert _uris(result) == ["b", "a", "c", "d", "e", "f"]

    def test_exact_match(self) -> None:
        result = select_first_by_closest_bandwidth(_sample(), 2000000)
        assert _uris(result)[0] == "f"

    def test_target_below_everything(self) -> None:
        doc = _sample()
        assert select_first_by_closest_bandwidth(doc, 0) == doc


# ---------------------------------------------------------------------------
# transform_master (full pipeline)
# ---------------------------------------------------------------------------

class TestTransformMaster:
    def test_no_options_is_identity(self) -> None:
        doc = _sample()
        assert transform_master(doc, MasterTransformOptions()) == doc

    def test_filters_before_selecting(self) -> None:
        options = MasterTransformOptions(
            min_bandwidth=800000,
            frame_rate=30.0,
            first_by_index=2,
        )
        # after filters: b, d, f — index 2 is f
        result = transform_master(_sample(), options)
        assert _uris(result) == ["f", "d", "b"]

    def test_index_then_closest(self) -> None:
        options = MasterTransformOptions(
            first_by_index=5,
            first_by_closest_bandwidth=1200000,
        )
        # swap → f b c d e a; closest to 1.2M is d at index 3 → d f b c e a
        result = transform_master(_sample(), options)
        assert _uris(result) == ["d", "f", "b", "c", "e", "a"]

    def test_everything_filtered_out(self) -> None:
        options = MasterTransformOptions(
            frame_rate=24.0,
            first_by_index=0,
            first_by_closest_bandwidth=1,
        )
        assert transform_master(_sample(), options).renditions == ()
