"""Styling of rendered diff lines as rich ``Text``."""

from __future__ import annotations

from rich.text import Text

from diffrender.config import StyleConfig
from diffrender.parser import LineCategory


class DiffTheme:
    """Category colors and the change-inversion style.

    Styles are applied to whole spans only; callers combine styled spans by
    appending them, never by layering one style over another.
    """

    def __init__(self, styles: StyleConfig | None = None) -> None:
        self.styles = styles or StyleConfig()
        self._category_styles = {
            LineCategory.CONTEXT: self.styles.context,
            LineCategory.REMOVED: self.styles.removed,
            LineCategory.ADDED: self.styles.added,
        }

    def style_for(self, category: LineCategory) -> str:
        return self._category_styles[category]

    def fg(self, category: LineCategory, text: str) -> Text:
        """Color text with the style of a line category."""
        if not text:
            return Text()
        return Text(text, style=self.style_for(category))

    def inverse(self, text: str) -> Text:
        """Mark text as changed."""
        if not text:
            return Text()
        return Text(text, style=self.styles.inverse)
