"""``m3u8``-backed implementation of :class:`~manifest_filter.core.protocols.PlaylistCodec`.

This module is the **only** place in the codebase that imports ``m3u8``.
All ``m3u8`` exceptions are caught here and re-raised as typed
:class:`~manifest_filter.exceptions.ManifestFilterError` subclasses —
nothing raw escapes the infrastructure boundary.

Parsing is lenient: tags the ``m3u8`` library does not recognise are
kept where it can keep them rather than rejected, since attributes the
transforms never look at must pass through.
"""

from __future__ import annotations

import copy
import logging
from typing import Any

from manifest_filter.core.models import (
    MasterDocument,
    Rendition,
    Segment,
    TimelineDocument,
)
from manifest_filter.exceptions import (
    EnvironmentError,
    PlaylistKindError,
    PlaylistParseError,
)

logger = logging.getLogger(__name__)

_HEADER = "#EXTM3U"

MASTER_EXPECTED = "must be a master playlist"
MEDIA_EXPECTED = "must be a media playlist"


def _load_m3u8() -> Any:
    """Return the ``m3u8`` module or raise ``EnvironmentError``."""
    try:
        import m3u8
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "m3u8 is not installed. Install with: pip install m3u8",
        ) from exc
    return m3u8


class M3u8PlaylistCodec:
    """Concrete :class:`PlaylistCodec` backed by the ``m3u8`` library.

    Usage::

        codec = M3u8PlaylistCodec()
        master = codec.parse_master(body)
        body = codec.serialize(master)

    This class satisfies the :class:`~manifest_filter.core.protocols.PlaylistCodec`
    protocol structurally — no explicit inheritance required.
    """

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def parse(self, content: bytes) -> MasterDocument | TimelineDocument:
        """Parse *content* into a master or timeline document.

        Raises
        ------
        PlaylistParseError
            When *content* is not UTF-8, lacks the ``#EXTM3U`` header, or
            the ``m3u8`` parser rejects it.
        """
        playlist = self._load(content)
        if playlist.is_variant:
            return self._to_master(playlist)
        return self._to_timeline(playlist)

    def parse_master(self, content: bytes) -> MasterDocument:
        document = self.parse(content)
        if not isinstance(document, MasterDocument):
            raise PlaylistKindError(MASTER_EXPECTED)
        return document

    def parse_media(self, content: bytes) -> TimelineDocument:
        document = self.parse(content)
        if not isinstance(document, TimelineDocument):
            raise PlaylistKindError(MEDIA_EXPECTED)
        return document

    def serialize(self, document: MasterDocument | TimelineDocument) -> bytes:
        """Render *document* as UTF-8 playlist bytes.

        The parsed ``m3u8`` object carried in ``document.source`` is
        shallow-copied and only its variant list, segment list and media
        sequence are replaced, so every other tag is emitted as parsed.
        Documents built without a source get a fresh playlist.
        """
        m3u8 = _load_m3u8()

        if document.source is not None:
            playlist = copy.copy(document.source)
        else:
            playlist = m3u8.M3U8()

        if isinstance(document, MasterDocument):
            playlist.is_variant = True
            playlist.playlists = m3u8.PlaylistList(
                self._variant_for(m3u8, rendition, playlist)
                for rendition in document.renditions
            )
        else:
            playlist.segments = m3u8.SegmentList(
                self._segment_for(m3u8, segment) for segment in document.segments
            )
            playlist.media_sequence = document.sequence_number

        return playlist.dumps().encode("utf-8")

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    @staticmethod
    def _load(content: bytes) -> Any:
        """Decode and parse *content*, mapping every failure to ``PlaylistParseError``."""
        m3u8 = _load_m3u8()

        try:
            text = content.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise PlaylistParseError(
                f"Playlist is not valid UTF-8: {exc}",
            ) from exc

        if not text.lstrip().startswith(_HEADER):
            raise PlaylistParseError(
                "Playlist does not start with #EXTM3U.",
                hint="Send the raw .m3u8 body, not a URL or an HTML page.",
            )

        try:
            return m3u8.loads(text)
        except m3u8.ParseError as exc:
            raise PlaylistParseError(str(exc)) from exc
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            logger.debug("m3u8 rejected playlist", exc_info=True)
            raise PlaylistParseError(f"Malformed playlist: {exc}") from exc

    @staticmethod
    def _to_master(playlist: Any) -> MasterDocument:
        renditions = tuple(
            Rendition(
                bandwidth=variant.stream_info.bandwidth or 0,
                frame_rate=variant.stream_info.frame_rate,
                uri=variant.uri,
                resolution=variant.stream_info.resolution,
                codecs=variant.stream_info.codecs,
                average_bandwidth=variant.stream_info.average_bandwidth,
                source=variant,
            )
            for variant in playlist.playlists
        )
        return MasterDocument(renditions=renditions, source=playlist)

    @staticmethod
    def _to_timeline(playlist: Any) -> TimelineDocument:
        segments = tuple(
            Segment(
                duration=segment.duration or 0.0,
                uri=segment.uri,
                discontinuity=bool(segment.discontinuity),
                source=segment,
            )
            for segment in playlist.segments
        )
        return TimelineDocument(
            segments=segments,
            sequence_number=playlist.media_sequence or 0,
            source=playlist,
        )

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    @staticmethod
    def _variant_for(m3u8: Any, rendition: Rendition, playlist: Any) -> Any:
        """Return the parsed variant for *rendition*, or build one."""
        if rendition.source is not None:
            return rendition.source

        stream_info: dict[str, Any] = {"bandwidth": rendition.bandwidth}
        if rendition.frame_rate is not None:
            stream_info["frame_rate"] = rendition.frame_rate
        if rendition.resolution is not None:
            width, height = rendition.resolution
            stream_info["resolution"] = f"{width}x{height}"
        if rendition.codecs is not None:
            stream_info["codecs"] = rendition.codecs
        if rendition.average_bandwidth is not None:
            stream_info["average_bandwidth"] = rendition.average_bandwidth
        return m3u8.Playlist(
            uri=rendition.uri,
            stream_info=stream_info,
            media=playlist.media,
            base_uri=playlist.base_uri,
        )

    @staticmethod
    def _segment_for(m3u8: Any, segment: Segment) -> Any:
        """Return the parsed segment for *segment*, or build one."""
        if segment.source is not None:
            return segment.source
        return m3u8.Segment(
            uri=segment.uri,
            duration=segment.duration,
            discontinuity=segment.discontinuity,
        )
