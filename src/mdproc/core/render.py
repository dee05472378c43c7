"""Markdown to HTML rendering: heading ids, typographer, and code highlighting"""

import inspect
import logging
from typing import Iterator

from markdown_it import MarkdownIt
from markdown_it.common.utils import unescapeAll
from markdown_it.rules_core import StateCore
from markdown_it.token import Token

from mdproc.core.highlight import Highlighter, PygmentsHighlighter
from mdproc.core.models import HighlightConfig
from mdproc.core.utils.slug import heading_id


logger = logging.getLogger(__name__)

HIGHLIGHTED = 'highlighted'     # token.meta key holding a fence's highlighted HTML


def _heading_ids(state: StateCore) -> None:
    """Core rule: set id on heading_open from the raw source of the following inline token."""
    tokens = state.tokens
    for i, tok in enumerate(tokens):
        if tok.type != 'heading_open':
            continue
        anchor = heading_id(tokens[i + 1].content)
        if anchor:
            tok.attrSet('id', anchor)


def _render_fence(self, tokens: list[Token], idx: int, options, env) -> str:
    """Fence render rule: emit the pre-highlighted fragment, else the default <pre><code>."""
    highlighted = tokens[idx].meta.get(HIGHLIGHTED)
    if highlighted is None:
        return self.fence(tokens, idx, options, env)
    return highlighted if highlighted.endswith('\n') else highlighted + '\n'


def _fences(tokens: list[Token]) -> Iterator[Token]:
    return (t for t in tokens if t.type == 'fence')


def fence_lang(token: Token) -> str:
    """Return the declared language of a fence (first word of its info string)."""
    info = unescapeAll(token.info).strip() if token.info else ''
    return info.split(maxsplit=1)[0] if info else ''


def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance with heading ids, typographer, and the fence hook."""
    md = MarkdownIt(preset, options_update={"linkify": False, "typographer": True})
    md.core.ruler.after('inline', 'heading_ids', _heading_ids)
    md.enable(['replacements', 'smartquotes'])
    md.add_render_rule('fence', _render_fence)
    return md


class RenderPipeline:
    """A configured renderer; holds no per-call state and may be shared across calls.

    The highlighter defaults to PygmentsHighlighter(config). render() needs a
    synchronous highlighter; arender() also awaits asynchronous ones.
    """

    def __init__(
        self,
        config: HighlightConfig = None,
        highlighter: Highlighter = None,
        preset: str = 'gfm-like',
        ):
        self.config = config or HighlightConfig()
        self.highlighter = highlighter or PygmentsHighlighter(self.config)
        self.md = _make_parser(preset)

    def _output(self, tokens: list[Token], env: dict) -> str:
        return self.md.renderer.render(tokens, self.md.options, env)

    def render(self, article: str) -> str:
        """Render article to HTML, highlighting fenced code synchronously."""
        env: dict = {}
        tokens = self.md.parse(article, env)
        count = 0
        for tok in _fences(tokens):
            result = self.highlighter(tok.content, fence_lang(tok))
            if inspect.isawaitable(result):
                if inspect.iscoroutine(result):
                    result.close()
                raise TypeError("highlighter returned an awaitable; use arender() instead")
            tok.meta[HIGHLIGHTED] = result
            count += 1
        logger.debug("rendered %d chars with %d highlighted block(s)", len(article), count)
        return self._output(tokens, env)

    async def arender(self, article: str) -> str:
        """Render article to HTML, awaiting each block's highlighting in document order."""
        env: dict = {}
        tokens = self.md.parse(article, env)
        count = 0
        for tok in _fences(tokens):
            result = self.highlighter(tok.content, fence_lang(tok))
            if inspect.isawaitable(result):
                result = await result
            tok.meta[HIGHLIGHTED] = result
            count += 1
        logger.debug("rendered %d chars with %d highlighted block(s)", len(article), count)
        return self._output(tokens, env)
