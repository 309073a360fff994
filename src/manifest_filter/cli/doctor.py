"""``manifest-filter doctor`` — environment diagnostics command.

Checks that the interpreter and the libraries behind the codec and the
HTTP server are importable, and renders the result as a Rich table (or a
plain table when Rich is missing).  ``m3u8`` is required; the server
stack is only needed for ``serve`` and is reported as a warning.
"""

from __future__ import annotations

import platform
import sys
from importlib import metadata

from manifest_filter.cli import exit_codes
from manifest_filter.cli.console import console
from manifest_filter.version import __version__

_OK = "[green]OK[/green]"
_WARN = "[yellow]WARN[/yellow]"
_FAIL = "[red]FAIL[/red]"

# (distribution name, import name, required)
_LIBRARIES: tuple[tuple[str, str, bool], ...] = (
    ("m3u8", "m3u8", True),
    ("fastapi", "fastapi", False),
    ("uvicorn", "uvicorn", False),
    ("pydantic-settings", "pydantic_settings", False),
)


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = _OK if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _library_check(dist: str, module: str, required: bool) -> tuple[str, str, str]:
    """Return (label, value, status) for one third-party library."""
    try:
        __import__(module)
    except ImportError:
        return dist, "NOT INSTALLED", _FAIL if required else _WARN
    try:
        version = metadata.version(dist)
    except metadata.PackageNotFoundError:
        version = "unknown"
    return dist, version, _OK


def _os_check() -> tuple[str, str, str]:
    system_raw = platform.system()
    system_display = {"Darwin": "macOS"}.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, _OK


def collect_checks() -> list[tuple[str, str, str]]:
    """Run every check and return ``(label, value, status)`` rows."""
    checks = [
        ("manifest-filter", __version__, _OK),
        _python_version_check(),
    ]
    checks.extend(_library_check(*spec) for spec in _LIBRARIES)
    checks.append(_os_check())
    return checks


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_table(checks: list[tuple[str, str, str]]) -> None:
    print("\nmanifest-filter doctor", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(f"{'Component':<18} {'Value':<30} {'Status':<8}", file=sys.stderr)
    print("-" * 60, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<18} {value:<30} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all required checks pass,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    checks = collect_checks()
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_table(checks)
        print(
            "Some checks failed." if has_failure else "All checks passed.",
            file=sys.stderr,
        )
    else:
        table = Table(
            title="manifest-filter doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=18)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
        if has_failure:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            console.print("[bold green]All checks passed.[/bold green]")

    return exit_codes.GENERAL_ERROR if has_failure else exit_codes.SUCCESS
