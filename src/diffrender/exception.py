from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console(stderr=True)


class DiffRenderError(Exception):
    """Base exception class for diffrender."""

    def __init__(self, message: str):
        self.message = message
        console.print(f"[red]Error: {escape(self.message)}[/red]", highlight=False)
        super().__init__(self.message)


class ConfigError(DiffRenderError, ValueError):
    """Configuration error."""

    pass
