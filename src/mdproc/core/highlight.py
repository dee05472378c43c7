"""Fenced code highlighting with Pygments"""

import logging
from typing import Awaitable, Protocol, Union

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.lexers.special import TextLexer
from pygments.util import ClassNotFound

from mdproc.core.models import HighlightConfig


logger = logging.getLogger(__name__)


class Highlighter(Protocol):
    """Turn a code block into an HTML fragment; may return an awaitable."""

    def __call__(self, code: str, lang: str) -> Union[str, Awaitable[str]]: ...


class PygmentsHighlighter:
    """Synchronous highlighter rendering each block with one HtmlFormatter.

    An unknown Pygments style raises ClassNotFound at construction; an unknown
    block language falls back to plain text.
    """

    def __init__(self, config: HighlightConfig = None) -> None:
        self.config = config or HighlightConfig()
        self._formatter = HtmlFormatter(
            style=self.config.theme,
            cssclass=self.config.css_class,
            noclasses=self.config.inline_styles,
            linenos="table" if self.config.line_numbers else False,
            wrapcode=True,
        )

    def lexer_for(self, lang: str) -> Lexer:
        """Resolve a fence language to a lexer, falling back to plain text."""
        name = self.config.language_aliases.get(lang, lang) or self.config.default_language
        try:
            return get_lexer_by_name(name)
        except ClassNotFound:
            logger.debug("unknown code language %r, rendering as plain text", lang)
            return TextLexer()

    def __call__(self, code: str, lang: str) -> str:
        return highlight(code, self.lexer_for(lang), self._formatter)

    def style_defs(self) -> str:
        """CSS rules for class-based output (inline_styles=False)."""
        return self._formatter.get_style_defs(f".{self.config.css_class}")
