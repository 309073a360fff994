"""Process exit codes returned by ``manifest-filter`` commands.

Scripts piping playlists through the CLI can rely on these values.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Playlist written, server stopped cleanly, or doctor checks passed."""

GENERAL_ERROR: int = 1
"""A ManifestFilterError (bad playlist, bad range, bad config) was reported."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""

UNEXPECTED_ERROR: int = 2
"""Any other exception reached the ``cli()`` boundary."""
