"""Output formatting utilities for the CLI."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Iterable, Mapping

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

_THEME = Theme(
    {
        "ok": "bold green",
        "warn": "yellow",
        "err": "bold red",
        "title": "bold cyan",
        "meta": "dim",
    }
)

console = Console(theme=_THEME)

_STATE_STYLES = {
    "success": "ok",
    "failure": "err",
    "pending": "warn",
}


def format_duration(duration: timedelta | None) -> str:
    """Render a duration as `1h02m03s`, `2m03s` or `3s`; `-` when unknown."""
    if duration is None:
        return "-"
    total = max(int(duration.total_seconds()), 0)
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    if hours:
        return f"{hours}h{minutes:02d}m{seconds:02d}s"
    if minutes:
        return f"{minutes}m{seconds:02d}s"
    return f"{seconds}s"


@dataclass(frozen=True)
class Out:
    """Output formatter for CLI messages and tables."""

    def info(self, msg: str) -> None:
        """Print an info message."""
        console.print(f"[title]›[/] {msg}")

    @contextmanager
    def status(self, msg: str):
        """Show a transient status spinner while work is in progress."""
        with console.status(msg, spinner="dots"):
            yield

    def success(self, msg: str) -> None:
        """Print a success message."""
        console.print(f"[ok]✓[/] {msg}")

    def warn(self, msg: str) -> None:
        """Print a warning message."""
        console.print(f"[warn]⚠[/] {msg}")

    def error(self, msg: str) -> None:
        """Print an error message."""
        console.print(f"[err]✗[/] {escape(msg)}")

    def kv(self, items: Mapping[str, Any]) -> None:
        """Print key-value pairs."""
        for k, v in items.items():
            console.print(f"[meta]{k}[/]: {escape(str(v))}")

    def job_status_table(
        self,
        results: Iterable[tuple[Any, str]],
        title: str = "Job status",
    ) -> None:
        """
        Expects tuples of (JobStatus, description)
        (e.g. cistatus.core.jobs.JobStatus plus its encoded description)
        """
        t = Table(title=title, show_lines=False)
        t.add_column("Job", style="title", no_wrap=True)
        t.add_column("State", no_wrap=True)
        t.add_column("Duration", style="meta", no_wrap=True)
        t.add_column("Description")

        for status, description in results:
            state = status.state.value
            style = _STATE_STYLES.get(state, "meta")
            t.add_row(
                status.name,
                f"[{style}]{state}[/{style}]",
                format_duration(status.duration),
                escape(description),
            )

        console.print(t)


out = Out()
