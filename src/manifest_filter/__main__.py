"""Allow ``python -m manifest_filter`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m manifest_filter`` behaves identically to the
``manifest-filter`` console script.
"""

from __future__ import annotations

from manifest_filter.cli.app import cli

if __name__ == "__main__":
    cli()
