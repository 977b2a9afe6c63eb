"""Reporting sinks for the pipeline.

The pipeline never prints; it tells a ``Reporter`` what happened. The base
class discards everything, ``ConsoleReporter`` renders to a rich console.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape


class Reporter:
    """Silent reporter."""

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass


class ConsoleReporter(Reporter):
    """Reports progress on a rich console."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(stderr=True)

    def info(self, message: str) -> None:
        self.console.print(f"  {message}", markup=False, highlight=False)

    def success(self, message: str) -> None:
        self.console.print(f"  [green]v[/] {escape(message)}")

    def warning(self, message: str) -> None:
        self.console.print(f"  [yellow]![/] {escape(message)}")

    def error(self, message: str) -> None:
        self.console.print(f"  [red]x[/] {escape(message)}")
