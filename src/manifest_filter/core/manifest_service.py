"""Core manifest service — parse, transform, serialize.

This is the request-handling service consumed by the HTTP and CLI
layers.  It depends on a :class:`~manifest_filter.core.protocols.PlaylistCodec`
injected at construction time (dependency inversion), keeping the core
free of any parser imports.

Guarantees
----------
* Pure orchestration — no network or filesystem access.
* Only :class:`~manifest_filter.exceptions.ManifestFilterError` subclasses escape.
* One document per call; nothing is shared between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from manifest_filter.core.models import MasterDocument, TimelineDocument
from manifest_filter.core.options import (
    MasterTransformOptions,
    TimelineTransformOptions,
)
from manifest_filter.core.protocols import PlaylistCodec
from manifest_filter.core.rendition_filter import transform_master
from manifest_filter.core.segment_window import transform_timeline
from manifest_filter.exceptions import ManifestFilterError, PlaylistParseError

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class ManifestService:
    """Stateless service that applies transform options to raw playlists.

    Parameters
    ----------
    codec:
        Any object satisfying the :class:`PlaylistCodec` protocol.
    """

    def __init__(self, codec: PlaylistCodec) -> None:
        self._codec: PlaylistCodec = codec

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def transform_master(
        self,
        content: bytes,
        options: MasterTransformOptions,
    ) -> bytes:
        """Filter and reorder the variants of a master playlist.

        Raises
        ------
        PlaylistParseError
            If *content* cannot be parsed.
        PlaylistKindError
            If *content* is a media playlist.
        """
        document: MasterDocument = self._call(self._codec.parse_master, content)
        before = len(document)
        document = transform_master(document, options)
        logger.debug(
            "master playlist: %d of %d variants kept", len(document), before,
        )
        return self._call(self._codec.serialize, document)

    def transform_media(
        self,
        content: bytes,
        options: TimelineTransformOptions,
    ) -> bytes:
        """Window and trim the segments of a media playlist.

        Raises
        ------
        PlaylistParseError
            If *content* cannot be parsed.
        PlaylistKindError
            If *content* is a master playlist.
        TrimRangeError
            If the requested trim range falls outside the timeline.
        """
        document: TimelineDocument = self._call(self._codec.parse_media, content)
        before = len(document)
        document = transform_timeline(document, options)
        logger.debug(
            "media playlist: %d of %d segments kept, media sequence %d",
            len(document),
            before,
            document.sequence_number,
        )
        return self._call(self._codec.serialize, document)

    # ------------------------------------------------------------------
    # Codec delegation (safe boundary)
    # ------------------------------------------------------------------

    @staticmethod
    def _call(func: Callable[..., _T], *args: object) -> _T:
        """Call the codec and ensure only our exceptions escape."""
        try:
            return func(*args)
        except ManifestFilterError:
            # Already one of ours — let it propagate unchanged.
            raise
        except Exception as exc:
            raise PlaylistParseError(
                f"Unexpected codec error: {exc}",
            ) from exc
