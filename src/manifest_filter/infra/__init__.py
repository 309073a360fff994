"""Infrastructure layer — external library integration.

This layer wraps the ``m3u8`` parser.  Every raw third-party exception
must be caught here and re-raised as a
:class:`~manifest_filter.exceptions.ManifestFilterError` subclass.

Rules
-----
* No imports from ``cli`` or ``web``.
* No user-facing output.
* Must expose clean, typed interfaces consumed by the core layer.
"""

from manifest_filter.infra.m3u8_codec import M3u8PlaylistCodec

__all__: list[str] = ["M3u8PlaylistCodec"]
