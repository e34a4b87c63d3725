"""Rendering of a prefixed-line diff for terminal display.

- Context lines: dim prefix, syntax-highlighted content
- Removed/added blocks: red/green prefix, syntax-highlighted content
- A single removed line followed by a single added line: the whole pair in the
  category colors with the changed words inverted
- Anything else: passed through in the context color
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import NamedTuple

from loguru import logger
from pydantic import BaseModel, Field
from rich.text import Text

from diffrender.config import Config
from diffrender.grouping import (
    AddedBlock,
    Block,
    ChangeBlock,
    ContextBlock,
    RawBlock,
    RenderMode,
    choose_mode,
    group_lines,
)
from diffrender.highlight import render_intra_line
from diffrender.parser import DiffLine, LineCategory, replace_tabs
from diffrender.syntax import (
    LanguageResolver,
    LineHighlighter,
    SyntaxHighlighter,
    language_for_path,
)
from diffrender.theme import DiffTheme
from diffrender.worddiff import WordDiffer, diff_words


class RenderDiffOptions(BaseModel):
    file_path: str | None = Field(
        default=None, description="File path used to pick the syntax highlighting language"
    )


class RenderedLine(NamedTuple):
    mode: RenderMode
    text: Text


class DiffRenderer:
    """Render diffs with a theme and pluggable word-diff and highlighting collaborators."""

    def __init__(
        self,
        theme: DiffTheme | None = None,
        *,
        highlighter: LineHighlighter | None = None,
        word_diff: WordDiffer = diff_words,
        language_resolver: LanguageResolver = language_for_path,
        syntax: bool = True,
    ) -> None:
        self.theme = theme or DiffTheme()
        self.highlighter = highlighter or SyntaxHighlighter()
        self.word_diff = word_diff
        self.language_resolver = language_resolver
        self.syntax = syntax

    @classmethod
    def from_config(cls, config: Config) -> DiffRenderer:
        return cls(
            DiffTheme(config.styles),
            highlighter=SyntaxHighlighter(config.code_theme),
            syntax=config.syntax_highlight,
        )

    def render_lines(
        self, diff_text: str, options: RenderDiffOptions | None = None
    ) -> list[RenderedLine]:
        """Render every input line, in order, one output line per input line."""
        if not diff_text:
            return []
        language = self._resolve_language(options or RenderDiffOptions())
        return list(self._render_blocks(group_lines(diff_text.split("\n")), language))

    def render(self, diff_text: str, options: RenderDiffOptions | None = None) -> Text:
        return Text("\n").join(line.text for line in self.render_lines(diff_text, options))

    def _resolve_language(self, options: RenderDiffOptions) -> str | None:
        if not self.syntax or not options.file_path:
            return None
        language = self.language_resolver(options.file_path)
        logger.debug(
            "Resolved {path} to language {language}", path=options.file_path, language=language
        )
        return language

    def _render_blocks(
        self, blocks: Iterable[Block], language: str | None
    ) -> Iterator[RenderedLine]:
        for block in blocks:
            match block:
                case RawBlock(text=text):
                    yield RenderedLine(RenderMode.PLAIN, self.theme.fg(LineCategory.CONTEXT, text))
                case ContextBlock(line=line):
                    yield self._render_line(line, language)
                case AddedBlock(added=added):
                    for line in added:
                        yield self._render_line(line, language)
                case ChangeBlock() if choose_mode(block) is RenderMode.INTRA_LINE:
                    yield from self._render_intra_line(block.removed[0], block.added[0])
                case ChangeBlock(removed=removed, added=added):
                    # All removed lines first, then all added lines
                    for line in (*removed, *added):
                        yield self._render_line(line, language)

    def _render_line(self, line: DiffLine, language: str | None) -> RenderedLine:
        content = replace_tabs(line.content)
        highlighted = self.highlighter(content, language) if language else Text(content)
        prefix = self.theme.fg(line.category, f"{line.category.sign}{line.line_number}")
        return RenderedLine(RenderMode.SYNTAX, Text.assemble(prefix, " ", highlighted))

    def _render_intra_line(self, removed: DiffLine, added: DiffLine) -> Iterator[RenderedLine]:
        # Syntax colors can't be combined with the inverted words, only category colors apply.
        diff = render_intra_line(
            replace_tabs(removed.content),
            replace_tabs(added.content),
            theme=self.theme,
            word_diff=self.word_diff,
        )
        for line, body in ((removed, diff.removed_line), (added, diff.added_line)):
            text = Text(style=self.theme.style_for(line.category))
            text.append(f"{line.category.sign}{line.line_number} ")
            text.append_text(body)
            yield RenderedLine(RenderMode.INTRA_LINE, text)


def render_diff_text(
    diff_text: str,
    options: RenderDiffOptions | None = None,
    *,
    config: Config | None = None,
) -> Text:
    """Render a diff as a rich ``Text``."""
    return DiffRenderer.from_config(config or Config()).render(diff_text, options)


def render_diff(
    diff_text: str,
    options: RenderDiffOptions | None = None,
    *,
    config: Config | None = None,
) -> str:
    """Render a diff as console markup, one rendered line per input line."""
    return render_diff_text(diff_text, options, config=config).markup
