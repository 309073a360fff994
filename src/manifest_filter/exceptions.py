"""Custom exception hierarchy for manifest-filter.

All exceptions that cross layer boundaries must inherit from
:class:`ManifestFilterError`.  Raw third-party exceptions (e.g. from
``m3u8``) must NEVER propagate beyond the infrastructure layer — they
must be caught and re-raised as a typed subclass defined here.

Hierarchy
---------
ManifestFilterError
├── PlaylistParseError
│   └── PlaylistKindError
├── TrimRangeError
├── InvalidOptionError
├── ConfigurationError
└── EnvironmentError
"""

from __future__ import annotations


class ManifestFilterError(Exception):
    """Base exception for all manifest-filter errors.

    Every client-visible error condition maps to a subclass of this
    exception so that the HTTP and CLI boundaries can render a clean
    message without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Playlist decoding -----------------------------------------------------

class PlaylistParseError(ManifestFilterError):
    """Raised when playlist content cannot be decoded or parsed."""


class PlaylistKindError(PlaylistParseError):
    """Raised when a master playlist was expected but a media one was given, or vice versa."""


# --- Transforms ------------------------------------------------------------

class TrimRangeError(ManifestFilterError):
    """Raised when a segment range falls outside the timeline."""


class InvalidOptionError(ManifestFilterError):
    """Raised when a transform option carries an unusable value."""


# --- Environment / configuration -------------------------------------------

class ConfigurationError(ManifestFilterError):
    """Raised when runtime settings are malformed."""


class EnvironmentError(ManifestFilterError):
    """Raised when a required runtime dependency is not available."""
