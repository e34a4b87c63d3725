"""Language detection and single-line syntax highlighting."""

from __future__ import annotations

from collections.abc import Callable
from functools import lru_cache

from loguru import logger
from pygments.lexers import get_lexer_for_filename
from pygments.util import ClassNotFound
from rich.style import Style
from rich.syntax import Syntax
from rich.text import Span, Text

from diffrender.utils.terminal import resolve_code_theme

LanguageResolver = Callable[[str], str | None]
LineHighlighter = Callable[[str, str], Text]

_TEXT_ATTRIBUTES = (
    "bold",
    "dim",
    "italic",
    "underline",
    "blink",
    "blink2",
    "reverse",
    "conceal",
    "strike",
    "underline2",
    "frame",
    "encircle",
    "overline",
)


@lru_cache(maxsize=256)
def language_for_path(file_path: str) -> str | None:
    """Return the Pygments lexer alias for a file path, or ``None`` if unknown."""
    try:
        lexer = get_lexer_for_filename(file_path)
    except ClassNotFound:
        logger.debug("No lexer for {path}", path=file_path)
        return None
    return lexer.aliases[0] if lexer.aliases else lexer.name.lower()


class SyntaxHighlighter:
    """Highlight one line of code at a time with a Pygments theme."""

    def __init__(self, code_theme: str | None = None) -> None:
        self.code_theme = resolve_code_theme(code_theme)

    def __call__(self, line: str, language: str) -> Text:
        if not language or not line:
            return Text(line)
        try:
            syntax = Syntax(line, language, theme=self.code_theme, tab_size=0)
            highlighted = syntax.highlight(line)
        except Exception as exc:
            logger.debug(
                "Highlighting failed for {language}: {error}", language=language, error=exc
            )
            return Text(line)
        # Keep token colors only, the theme background would cover the whole line.
        highlighted.style = ""
        highlighted.spans = _drop_backgrounds(highlighted.spans)
        if highlighted.plain == f"{line}\n":
            highlighted.right_crop(1)
        if highlighted.plain != line:
            logger.debug("Highlighter changed the line text, using plain text")
            return Text(line)
        return highlighted


def _drop_backgrounds(spans: list[Span]) -> list[Span]:
    result: list[Span] = []
    for span in spans:
        style = Style.parse(span.style) if isinstance(span.style, str) else span.style
        foreground = Style(
            color=style.color, **{name: getattr(style, name) for name in _TEXT_ATTRIBUTES}
        )
        if foreground:
            result.append(Span(span.start, span.end, foreground))
    return result
