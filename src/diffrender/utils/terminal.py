"""Terminal theme detection utilities."""

import os
from typing import Literal

TerminalTheme = Literal["light", "dark"]

DARK_CODE_THEME = "monokai"
LIGHT_CODE_THEME = "github-light"


def detect_terminal_theme() -> TerminalTheme:
    """
    Detect whether the terminal is using a light or dark theme.

    Checks the COLORFGBG environment variable ("foreground;background"). Background
    colors 7 and 15 are light, everything else is treated as dark, as is a missing
    or malformed value.
    """
    colorfgbg = os.environ.get("COLORFGBG", "")
    parts = colorfgbg.split(";")
    if len(parts) < 2:
        return "dark"
    try:
        bg_color = int(parts[-1])
    except ValueError:
        return "dark"
    # See: https://en.wikipedia.org/wiki/ANSI_escape_code#Colors
    return "light" if bg_color in (7, 15) else "dark"


def resolve_code_theme(configured: str | None = None) -> str:
    """Return the Pygments theme for syntax highlighting.

    An explicitly configured theme wins; otherwise it follows the terminal background.
    """
    if configured:
        return configured
    return LIGHT_CODE_THEME if detect_terminal_theme() == "light" else DARK_CODE_THEME
