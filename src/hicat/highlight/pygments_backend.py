# topmark:header:start
#
#   project      : HiCat
#   file         : pygments_backend.py
#   file_relpath : src/hicat/highlight/pygments_backend.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Pygments implementation of the `LineHighlighter` capability.

Grammar selection prefers an explicit language name, then the file name, and
falls back to plain text. Theme selection falls back to `DEFAULT_THEME` when
the requested Pygments style is unknown.

Pygments pre-processes its input: it turns ``\r\n`` and ``\r`` into ``\n`` and
drops a leading BOM (and, unless told otherwise, strips and appends
newlines). Lexers are therefore created with ``stripnl=False`` and
``ensurenl=False``, and the resulting tokens are re-aligned against the
original text by `realign_spans` so the span texts always concatenate to the
exact input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pygments.lexers import get_all_lexers, get_lexer_by_name, get_lexer_for_filename
from pygments.lexers.special import TextLexer
from pygments.styles import get_all_styles, get_style_by_name
from pygments.util import ClassNotFound

from hicat.config.logging import get_logger
from hicat.constants import DEFAULT_THEME
from hicat.highlight.base import PLAIN_STYLE, SpanStyle, hex_to_rgb
from hicat.pipeline.source import is_stdin_path

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from pygments.lexer import Lexer
    from pygments.style import Style
    from pygments.token import _TokenType

    from hicat.config.logging import HicatLogger
    from hicat.highlight.base import Span

logger: HicatLogger = get_logger(__name__)

# Options that keep Pygments from adding or removing newlines
LEXER_OPTIONS: dict[str, Any] = {"stripnl": False, "ensurenl": False, "stripall": False}

BOM: str = "\ufeff"


def available_themes() -> list[str]:
    """Return the names of all installed Pygments styles, sorted."""
    return sorted(get_all_styles())


def available_languages() -> list[tuple[str, tuple[str, ...]]]:
    """Return ``(display name, aliases)`` for every lexer, sorted by name."""
    langs: list[tuple[str, tuple[str, ...]]] = [
        (name, tuple(aliases)) for name, aliases, _filenames, _mimetypes in get_all_lexers()
    ]
    return sorted(langs, key=lambda item: item[0].lower())


def is_known_theme(name: str) -> bool:
    """Return True if ``name`` is an installed Pygments style."""
    try:
        get_style_by_name(name)
    except ClassNotFound:
        return False
    return True


def resolve_theme(name: str | None) -> tuple[str, type[Style]]:
    """Return ``(effective name, style class)`` for ``name``.

    Unknown or empty names fall back to `DEFAULT_THEME` with a warning.
    """
    if name:
        try:
            return name, get_style_by_name(name)
        except ClassNotFound:
            logger.warning("Unknown theme %r; falling back to %r", name, DEFAULT_THEME)
    return DEFAULT_THEME, get_style_by_name(DEFAULT_THEME)


def resolve_lexer(file_name: str | None, language: str | None = None) -> Lexer:
    """Select a Pygments lexer for a file.

    Args:
        file_name (str | None): File name used for grammar detection.
        language (str | None): Explicit language name or alias; wins over
            ``file_name`` when known.

    Returns:
        Lexer: The selected lexer, plain text if nothing matched.
    """
    if language:
        try:
            return get_lexer_by_name(language, **LEXER_OPTIONS)
        except ClassNotFound:
            logger.warning("Unknown language %r; detecting from file name", language)

    if file_name and not is_stdin_path(file_name):
        try:
            return get_lexer_for_filename(Path(file_name).name, **LEXER_OPTIONS)
        except ClassNotFound:
            logger.debug("No grammar registered for %s; using plain text", file_name)

    return TextLexer(**LEXER_OPTIONS)


def realign_spans(tokens: Iterable[tuple[SpanStyle, str]], text: str) -> list[Span]:
    r"""Map lexer token texts back onto the original ``text``.

    Every ``\n`` produced by the lexer consumes either ``\r\n``, ``\r`` or
    ``\n`` from the original. Any original text left over is appended unstyled.

    Args:
        tokens (Iterable[tuple[SpanStyle, str]]): Styled token texts as produced
            from Pygments' normalized input.
        text (str): The exact text that was highlighted.

    Returns:
        list[Span]: Spans whose texts concatenate to ``text``.
    """
    spans: list[Span] = []
    pos: int = 0
    end: int = len(text)

    for style, value in tokens:
        start: int = pos
        for ch in value:
            if pos >= end:
                break
            if ch == "\n" and text[pos] == "\r":
                pos += 2 if text.startswith("\r\n", pos) else 1
            else:
                pos += 1
        if pos > start:
            spans.append((style, text[start:pos]))

    if pos < end:
        spans.append((PLAIN_STYLE, text[pos:]))
    return spans


@dataclass
class PygmentsHighlighter:
    """`LineHighlighter` backed by a Pygments lexer and style.

    Each call tokenizes its input independently, so multi-line constructs
    (block comments, triple-quoted strings) are colored line by line.

    Attributes:
        lexer (Lexer): Grammar used to tokenize lines.
        style (type[Style]): Pygments style providing the colors.
    """

    lexer: Lexer
    style: type[Style]
    _cache: dict[_TokenType, SpanStyle] = field(default_factory=dict, repr=False)

    @classmethod
    def for_file(
        cls,
        file_name: str | None,
        *,
        language: str | None = None,
        theme: str | None = None,
    ) -> PygmentsHighlighter:
        """Build a highlighter for ``file_name`` using the given language/theme hints."""
        lexer: Lexer = resolve_lexer(file_name, language)
        theme_name, style = resolve_theme(theme)
        logger.debug("highlighting %s with lexer %s, theme %s", file_name, lexer.name, theme_name)
        return cls(lexer=lexer, style=style)

    def span_style(self, ttype: _TokenType) -> SpanStyle:
        """Return the (cached) `SpanStyle` for a token type."""
        cached: SpanStyle | None = self._cache.get(ttype)
        if cached is not None:
            return cached
        info: dict[str, Any] = self.style.style_for_token(ttype)
        bg: str | None = info.get("bgcolor") or self.style.background_color
        style = SpanStyle(
            foreground=hex_to_rgb(info.get("color")),
            background=hex_to_rgb(bg),
            bold=bool(info.get("bold")),
            italic=bool(info.get("italic")),
            underline=bool(info.get("underline")),
        )
        self._cache[ttype] = style
        return style

    def highlight(self, line: str) -> Sequence[Span]:
        """Return styled spans covering ``line`` exactly."""
        # Pygments drops a leading BOM; keep it as an unstyled span
        prefix: str = ""
        if line.startswith(BOM):
            prefix, line = BOM, line[len(BOM) :]
        tokens = ((self.span_style(ttype), value) for ttype, value in self.lexer.get_tokens(line))
        spans: list[Span] = realign_spans(tokens, line)
        if prefix:
            spans.insert(0, (PLAIN_STYLE, prefix))
        return spans
