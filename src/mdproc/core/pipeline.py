"""Markdown processing entry points: split, validate, scan headings, render"""

import logging
from typing import Any, Mapping, Optional, Union

from mdproc.core.extract.headings import scan_headings
from mdproc.core.frontmatter import validate_metadata
from mdproc.core.models import HighlightConfig, ProcessedDocument
from mdproc.core.parse import split_metadata
from mdproc.core.render import RenderPipeline


logger = logging.getLogger(__name__)

HighlightOptions = Union[HighlightConfig, Mapping[str, Any], None]


def _highlight_config(highlight: HighlightOptions) -> HighlightConfig:
    """Merge partial highlight options over the defaults."""
    if highlight is None:
        return HighlightConfig()
    if isinstance(highlight, HighlightConfig):
        return highlight
    return HighlightConfig.model_validate(dict(highlight))


def _prepare(md: str, frontmatter_schema: Any, highlight: HighlightOptions,
             pipeline: Optional[RenderPipeline]):
    """Split and validate; the render pipeline is built only once validation has passed."""
    split = split_metadata(md)
    frontmatter = None
    if frontmatter_schema is not None:
        frontmatter = validate_metadata(split.metadata, frontmatter_schema)
    pipeline = pipeline or RenderPipeline(_highlight_config(highlight))
    return split.article, frontmatter, pipeline


def process_markdown(
    md: str,
    frontmatter_schema: Any = None,
    highlight: HighlightOptions = None,
    pipeline: Optional[RenderPipeline] = None,
    ) -> ProcessedDocument:
    """Process a markdown string into article, headings, html, and frontmatter.

    frontmatter_schema is optional; anything PydanticSchema accepts or a
    FrontmatterSchema implementation. highlight takes a HighlightConfig or a
    partial mapping of its fields and is ignored when a pipeline is injected.

        class Post(BaseModel):
            title: str
            date: datetime.date

        doc = process_markdown(text, frontmatter_schema=Post)
        doc.frontmatter.title, [h.id for h in doc.headings], doc.html
    """
    article, frontmatter, pipeline = _prepare(md, frontmatter_schema, highlight, pipeline)
    headings = scan_headings(article)
    html = pipeline.render(article)
    logger.debug("processed document: %d heading(s)", len(headings))
    return ProcessedDocument(article=article, headings=headings, html=html, frontmatter=frontmatter)


async def aprocess_markdown(
    md: str,
    frontmatter_schema: Any = None,
    highlight: HighlightOptions = None,
    pipeline: Optional[RenderPipeline] = None,
    ) -> ProcessedDocument:
    """Async variant of process_markdown; awaits asynchronous highlighters."""
    article, frontmatter, pipeline = _prepare(md, frontmatter_schema, highlight, pipeline)
    headings = scan_headings(article)
    html = await pipeline.arender(article)
    logger.debug("processed document: %d heading(s)", len(headings))
    return ProcessedDocument(article=article, headings=headings, html=html, frontmatter=frontmatter)
