"""Core / service layer — pure playlist transforms and orchestration.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``, ``infra`` or ``web``.
* Transform functions never log; only the service does.
"""

from manifest_filter.core.manifest_service import ManifestService
from manifest_filter.core.models import (
    MasterDocument,
    Rendition,
    Segment,
    TimelineDocument,
)
from manifest_filter.core.options import (
    BandwidthRange,
    MasterTransformOptions,
    TimelineTransformOptions,
    TrimRange,
)
from manifest_filter.core.protocols import PlaylistCodec

__all__: list[str] = [
    "BandwidthRange",
    "ManifestService",
    "MasterDocument",
    "MasterTransformOptions",
    "PlaylistCodec",
    "Rendition",
    "Segment",
    "TimelineDocument",
    "TimelineTransformOptions",
    "TrimRange",
]
