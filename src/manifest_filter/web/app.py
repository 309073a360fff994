"""FastAPI application exposing the playlist transforms over HTTP.

Routes
------
* ``POST /master`` — filter / reorder the variants of a master playlist.
* ``POST /media``  — window / trim the segments of a media playlist.
* ``GET /health``  — liveness probe.

The playlist is the raw request body; options are query parameters and
all of them are optional, e.g.::

    POST /master?min_bitrate=800000&max_bitrate=2000000

Every :class:`~manifest_filter.exceptions.ManifestFilterError` becomes a
``400`` carrying the plain-text reason.
"""

from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import PlainTextResponse, Response

from manifest_filter.config import Settings, get_settings
from manifest_filter.core.manifest_service import ManifestService
from manifest_filter.core.options import (
    MasterTransformOptions,
    TimelineTransformOptions,
)
from manifest_filter.exceptions import ManifestFilterError
from manifest_filter.infra.m3u8_codec import M3u8PlaylistCodec
from manifest_filter.version import __version__

logger = logging.getLogger(__name__)

PLAYLIST_MEDIA_TYPE = "application/vnd.apple.mpegurl"


# ---------------------------------------------------------------------------
# Query parameters
# ---------------------------------------------------------------------------

def master_options(
    min_bitrate: int | None = Query(None, description="Min bandwidth kept in the master playlist"),
    max_bitrate: int | None = Query(None, description="Max bandwidth kept in the master playlist"),
    rate: float | None = Query(None, description="Frame rate allowed in the master playlist"),
    variant_index: int | None = Query(None, description="Index of the variant to swap into first position"),
    closest_bandwidth: int | None = Query(None, description="Bandwidth the first variant should be closest to"),
) -> MasterTransformOptions:
    return MasterTransformOptions(
        min_bandwidth=min_bitrate,
        max_bandwidth=max_bitrate,
        frame_rate=rate,
        first_by_index=variant_index,
        first_by_closest_bandwidth=closest_bandwidth,
    )


def media_options(
    dvr: float | None = Query(None, description="DVR window in seconds"),
    trim_start: int | None = Query(None, description="First segment index kept"),
    trim_end: int | None = Query(None, description="Segment index the trim stops before"),
) -> TimelineTransformOptions:
    return TimelineTransformOptions(
        trailing_window_seconds=dvr,
        trim_start=trim_start,
        trim_end=trim_end,
    )


def get_service() -> ManifestService:
    return ManifestService(M3u8PlaylistCodec())


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------

def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Filter HLS master playlists and trim media playlists",
        version=__version__,
    )

    @app.exception_handler(ManifestFilterError)
    async def client_error(request: Request, exc: ManifestFilterError) -> Response:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
        return PlainTextResponse(str(exc), status_code=400)

    @app.post("/master")
    async def modify_master(
        request: Request,
        options: MasterTransformOptions = Depends(master_options),
        service: ManifestService = Depends(get_service),
    ) -> Response:
        """Filter variants and choose the first one."""
        body = await request.body()
        return Response(
            service.transform_master(body, options),
            media_type=PLAYLIST_MEDIA_TYPE,
        )

    @app.post("/media")
    async def modify_media(
        request: Request,
        options: TimelineTransformOptions = Depends(media_options),
        service: ManifestService = Depends(get_service),
    ) -> Response:
        """Apply the DVR window and the segment trim."""
        body = await request.body()
        return Response(
            service.transform_media(body, options),
            media_type=PLAYLIST_MEDIA_TYPE,
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
