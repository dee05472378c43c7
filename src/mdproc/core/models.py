"""Result models for markdown processing"""

from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field


T = TypeVar("T")


class Heading(BaseModel):
    """A heading line found outside fenced code."""
    model_config = ConfigDict(frozen=True)

    id:    str                      # anchor id, see core.utils.slug.heading_id
    level: int = Field(ge=1, le=6)  # number of leading '#'
    name:  str                      # trimmed heading text as written


class ProcessedDocument(BaseModel, Generic[T]):
    """Public result of process_markdown; frontmatter is None when no schema was given."""
    model_config = ConfigDict(frozen=True)

    article:     str                # markdown body without the metadata block
    headings:    list[Heading]
    html:        str
    frontmatter: Optional[T] = None


class HighlightConfig(BaseModel):
    """Options for the fenced code highlighter; the block language is supplied per call."""
    model_config = ConfigDict(frozen=True)

    theme:            str  = Field(default="github-dark", description="Pygments style name")
    css_class:        str  = Field(default="highlight",   description="CSS class of the wrapping div")
    inline_styles:    bool = Field(default=True,  description="Write theme colours as inline styles")
    line_numbers:     bool = Field(default=False, description="Render a line number column")
    default_language: str  = Field(default="text", description="Lexer for fences without a language")
    language_aliases: dict[str, str] = Field(
        default_factory=lambda: {"svelte": "html"},
        description="Fence languages mapped to another lexer name before lookup",
    )


@dataclass(frozen=True)
class MetadataSplit:
    """Lexical split of a raw document into metadata text and article body."""
    metadata: Optional[str]         # None when the document has no metadata block
    article:  str


@dataclass(frozen=True)
class SchemaResult:
    """Outcome of a non-throwing schema validation."""
    ok:     bool
    value:  Any = None
    issues: list[dict[str, Any]] = field(default_factory=list)
