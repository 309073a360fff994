"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Protocol

from manifest_filter.core.models import MasterDocument, TimelineDocument


class PlaylistCodec(Protocol):
    """Contract for playlist parsing / serialization backends.

    Any object that implements these methods with the correct signatures
    satisfies this protocol structurally (no explicit inheritance
    required).  Implementations must map all backend-specific exceptions
    to :class:`~manifest_filter.exceptions.ManifestFilterError` subclasses.
    """

    def parse(self, content: bytes) -> MasterDocument | TimelineDocument:
        """Parse raw playlist bytes, discriminating the document kind.

        Raises
        ------
        PlaylistParseError
            When *content* is not a decodable playlist.
        """
        ...  # pragma: no cover

    def parse_master(self, content: bytes) -> MasterDocument:
        """Parse *content*, which must be a master playlist.

        Raises
        ------
        PlaylistParseError
            When *content* is not a decodable playlist.
        PlaylistKindError
            When *content* is a media playlist.
        """
        ...  # pragma: no cover

    def parse_media(self, content: bytes) -> TimelineDocument:
        """Parse *content*, which must be a media playlist.

        Raises
        ------
        PlaylistParseError
            When *content* is not a decodable playlist.
        PlaylistKindError
            When *content* is a master playlist.
        """
        ...  # pragma: no cover

    def serialize(self, document: MasterDocument | TimelineDocument) -> bytes:
        """Render *document* back to playlist bytes.

        Every attribute the transforms did not touch must survive the
        round trip unchanged.
        """
        ...  # pragma: no cover
