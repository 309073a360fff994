"""Pure rendition filtering and promotion for master playlists.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.  Each takes a
:class:`~manifest_filter.core.models.MasterDocument` and returns a new
one; an absent option returns the input unchanged.

Pipeline order (enforced by :func:`transform_master`):

1. **Bandwidth** — keep renditions inside an inclusive range.
2. **Frame rate** — keep renditions with an exact frame rate.
3. **Select by index** — swap a rendition into position 0.
4. **Select by closest bandwidth** — move the nearest rendition to position 0.
"""

from __future__ import annotations

from dataclasses import replace

from manifest_filter.core.models import MasterDocument, Rendition
from manifest_filter.core.options import MAX_BANDWIDTH, MasterTransformOptions


# ---------------------------------------------------------------------------
# 1. / 2. Filters
# ---------------------------------------------------------------------------

def filter_by_bandwidth(
    document: MasterDocument,
    minimum: int | None = None,
    maximum: int | None = None,
) -> MasterDocument:
    """Keep renditions with ``minimum <= bandwidth <= maximum``.

    A missing ``minimum`` defaults to zero and a missing ``maximum`` to
    :data:`~manifest_filter.core.options.MAX_BANDWIDTH`.  Relative order
    of the surviving renditions is preserved.
    Bounds are not validated here: a negative minimum admits everything
    and an inverted range admits nothing.
    """
    if minimum is None and maximum is None:
        return document
    low = 0 if minimum is None else minimum
    high = MAX_BANDWIDTH if maximum is None else maximum
    return replace(
        document,
        renditions=tuple(
            r for r in document.renditions if low <= r.bandwidth <= high
        ),
    )


def filter_by_frame_rate(
    document: MasterDocument,
    rate: float | None,
) -> MasterDocument:
    """Keep renditions whose frame rate equals *rate* exactly.

    No tolerance is applied: ``29.97`` does not match ``30.0``.
    Renditions without a declared frame rate never match.
    """
    if rate is None:
        return document
    return replace(
        document,
        renditions=tuple(r for r in document.renditions if r.frame_rate == rate),
    )


# ---------------------------------------------------------------------------
# 3. / 4. Promotion
# ---------------------------------------------------------------------------

def select_first_by_index(
    document: MasterDocument,
    index: int | None,
) -> MasterDocument:
    """Swap the rendition at *index* with the one at position 0.

    Out-of-range indexes (negative or ``>= len``) leave the document
    untouched; they are not an error.
    """
    renditions = document.renditions
    if index is None or index == 0 or not 0 <= index < len(renditions):
        return document
    swapped = list(renditions)
    swapped[0], swapped[index] = swapped[index], swapped[0]
    return replace(document, renditions=tuple(swapped))


def _closest_index(renditions: tuple[Rendition, ...], target: int) -> int:
    """Index of the rendition nearest to *target*; first occurrence wins ties."""
    return min(
        range(len(renditions)),
        key=lambda i: abs(target - renditions[i].bandwidth),
    )


def select_first_by_closest_bandwidth(
    document: MasterDocument,
    target: int | None,
) -> MasterDocument:
    """Move the rendition with bandwidth nearest *target* to position 0.

    The chosen rendition is extracted and prepended, so every rendition
    that preceded it shifts back by one.  This is deliberately different
    from :func:`select_first_by_index`, which swaps.
    """
    renditions = document.renditions
    if target is None or not renditions:
        return document
    index = _closest_index(renditions, target)
    if index == 0:
        return document
    reordered = (renditions[index], *renditions[:index], *renditions[index + 1:])
    return replace(document, renditions=reordered)


# ---------------------------------------------------------------------------
# Composite pipeline
# ---------------------------------------------------------------------------

def transform_master(
    document: MasterDocument,
    options: MasterTransformOptions,
) -> MasterDocument:
    """Run the full bandwidth → frame rate → index → closest pipeline."""
    bounds = options.bandwidth_range
    document = filter_by_bandwidth(document, bounds.minimum, bounds.maximum)
    document = filter_by_frame_rate(document, options.frame_rate)
    document = select_first_by_index(document, options.first_by_index)
    return select_first_by_closest_bandwidth(
        document, options.first_by_closest_bandwidth,
    )
