"""manifest-filter — HLS playlist filtering and trimming.

Filters master playlist variants, promotes a preferred variant, and trims
media playlist segment timelines, with an HTTP server and CLI on top.
"""

from manifest_filter.version import __version__

__all__: list[str] = ["__version__"]
