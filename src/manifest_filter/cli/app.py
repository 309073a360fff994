"""CLI application entry point and command routing for manifest-filter.

This module is the **sole error boundary** for the command line.  It
catches :class:`~manifest_filter.exceptions.ManifestFilterError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Commands
--------
* ``manifest-filter master PATH [options]`` — transform a master playlist
* ``manifest-filter media PATH [options]``  — transform a media playlist
* ``manifest-filter serve``                 — run the HTTP server
* ``manifest-filter doctor``                — environment diagnostics

``PATH`` may be ``-`` to read from stdin.  Transformed playlists are
written to stdout unless ``--output`` is given; diagnostics go to stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from manifest_filter.cli import exit_codes
from manifest_filter.cli.console import console, print_error
from manifest_filter.exceptions import ManifestFilterError
from manifest_filter.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text}")
    return value


def _add_io_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        help="Playlist file to transform, or '-' for stdin.",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write the result to this file instead of stdout.",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="manifest-filter",
        description="Filter HLS master playlists and trim media playlists.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    commands = parser.add_subparsers(dest="command")

    master = commands.add_parser(
        "master",
        help="Filter the variants of a master playlist.",
    )
    _add_io_arguments(master)
    master.add_argument("--min-bandwidth", type=_non_negative_int, default=None)
    master.add_argument("--max-bandwidth", type=_non_negative_int, default=None)
    master.add_argument(
        "--frame-rate",
        type=float,
        default=None,
        help="Keep only variants with exactly this frame rate.",
    )
    master.add_argument(
        "--first-index",
        type=int,
        default=None,
        help="Swap the variant at this index into first position.",
    )
    master.add_argument(
        "--closest-bandwidth",
        type=_non_negative_int,
        default=None,
        help="Move the variant closest to this bandwidth to first position.",
    )

    media = commands.add_parser(
        "media",
        help="Window and trim the segments of a media playlist.",
    )
    _add_io_arguments(media)
    media.add_argument(
        "--dvr",
        type=float,
        default=None,
        metavar="SECONDS",
        help="Keep only the trailing segments fitting this many seconds.",
    )
    media.add_argument("--trim-start", type=_non_negative_int, default=None)
    media.add_argument("--trim-end", type=_non_negative_int, default=None)

    serve = commands.add_parser("serve", help="Run the HTTP server.")
    serve.add_argument(
        "--listen",
        default=None,
        metavar="HOST:PORT",
        help="Overrides LISTEN_ADDRESS.",
    )

    commands.add_parser("doctor", help="Run environment diagnostics.")
    return parser


# ---------------------------------------------------------------------------
# Playlist I/O
# ---------------------------------------------------------------------------

def _read_input(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise ManifestFilterError(
            f"Cannot read playlist: {path}",
            hint=str(exc),
        ) from exc


def _write_output(content: bytes, output: str | None) -> None:
    if output is None:
        sys.stdout.buffer.write(content)
        sys.stdout.buffer.flush()
        return
    try:
        Path(output).write_bytes(content)
    except OSError as exc:
        raise ManifestFilterError(
            f"Cannot write playlist: {output}",
            hint=str(exc),
        ) from exc


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_master(args: argparse.Namespace) -> int:
    from manifest_filter.core.manifest_service import ManifestService
    from manifest_filter.core.options import MasterTransformOptions
    from manifest_filter.infra.m3u8_codec import M3u8PlaylistCodec

    options = MasterTransformOptions(
        min_bandwidth=args.min_bandwidth,
        max_bandwidth=args.max_bandwidth,
        frame_rate=args.frame_rate,
        first_by_index=args.first_index,
        first_by_closest_bandwidth=args.closest_bandwidth,
    )
    service = ManifestService(M3u8PlaylistCodec())
    _write_output(
        service.transform_master(_read_input(args.path), options),
        args.output,
    )
    return exit_codes.SUCCESS


def _handle_media(args: argparse.Namespace) -> int:
    from manifest_filter.core.manifest_service import ManifestService
    from manifest_filter.core.options import TimelineTransformOptions
    from manifest_filter.infra.m3u8_codec import M3u8PlaylistCodec

    options = TimelineTransformOptions(
        trailing_window_seconds=args.dvr,
        trim_start=args.trim_start,
        trim_end=args.trim_end,
    )
    service = ManifestService(M3u8PlaylistCodec())
    _write_output(
        service.transform_media(_read_input(args.path), options),
        args.output,
    )
    return exit_codes.SUCCESS


def _handle_serve(args: argparse.Namespace) -> int:
    """Run uvicorn until interrupted.  Ctrl+C triggers its graceful shutdown."""
    from manifest_filter.config import get_settings
    from manifest_filter.exceptions import EnvironmentError
    from manifest_filter.web.app import create_app

    settings = get_settings()
    if args.listen is not None:
        settings = settings.model_copy(update={"listen_address": args.listen})
    host, port = settings.socket_address()

    try:
        import uvicorn
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "uvicorn is not installed. Install with: pip install uvicorn",
        ) from exc

    logger.debug("listening on %s:%d", host, port)
    uvicorn.run(
        create_app(settings),
        host=host,
        port=port,
        log_level=settings.log_level.lower(),
    )
    return exit_codes.SUCCESS


def _handle_doctor(args: argparse.Namespace) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from manifest_filter.cli.doctor import run_doctor

    return run_doctor()


_HANDLERS = {
    "master": _handle_master,
    "media": _handle_media,
    "serve": _handle_serve,
    "doctor": _handle_doctor,
}


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the manifest-filter CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    from manifest_filter.utils.log import configure_logging

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)
    return _HANDLERS[args.command](args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except ManifestFilterError as exc:
        print_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
