"""CLI command implementations"""

import importlib
import json
import logging
from pathlib import Path
from typing import Annotated, Any, Optional

import typer

from mdproc.config import Settings, load_config
from mdproc.core.extract.headings import scan_headings
from mdproc.core.parse import split_metadata
from mdproc.core.pipeline import process_markdown
from mdproc.core.render import RenderPipeline


PathArg = Annotated[Path, typer.Argument(
    exists=True, dir_okay=False, readable=True, help="Markdown file to process",
)]
ThemeOpt = Annotated[Optional[str], typer.Option("--theme", help="Pygments style for code blocks")]
ParserOpt = Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _pipeline(settings: Settings) -> RenderPipeline:
    try:
        return RenderPipeline(settings.highlight_config(), preset=settings.parser_config)
    except (KeyError, ValueError) as e:
        _fail("Invalid highlight or parser configuration", e)


def _read(path: Path) -> str:
    """Read a markdown file as UTF-8 with standard CLI error handling."""
    try:
        return path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read {path}", e)


def _import_schema(spec: str) -> Any:
    """Resolve a 'package.module:Attr' string to the schema object it names."""
    module_name, _, attr = spec.partition(':')
    if not module_name or not attr:
        _fail(f"Schema must look like 'package.module:Name', got {spec!r}")
    try:
        return getattr(importlib.import_module(module_name), attr)
    except (ImportError, AttributeError) as e:
        _fail(f"Cannot import schema {spec!r}", e)


def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
    """Markdown processing: frontmatter, headings, and highlighted HTML."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def render_cmd(
    path: PathArg,
    out: Annotated[Optional[Path], typer.Option("--out", "-o", help="Write HTML here instead of stdout")] = None,
    theme: ThemeOpt = None,
    parser: ParserOpt = None,
    ):
    """Render the article body (metadata block removed) to HTML."""
    settings = _settings(overrides={"highlight_theme": theme, "parser_config": parser})
    pipeline = _pipeline(settings)
    article = split_metadata(_read(path)).article
    html = pipeline.render(article)
    if out is None:
        typer.echo(html, nl=False)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(html, encoding='utf-8')
    typer.echo(f"  {path} -> {out}")


def headings_cmd(path: PathArg):
    """List headings outside fenced code as 'level  id  name'."""
    article = split_metadata(_read(path)).article
    headings = scan_headings(article)
    if not headings:
        typer.echo("No headings found.")
        return
    for h in headings:
        typer.echo(f"{h.level}  {h.id}  {h.name}")


def inspect_cmd(
    path: PathArg,
    schema: Annotated[Optional[str], typer.Option("--schema", help="Frontmatter schema as module:Name")] = None,
    theme: ThemeOpt = None,
    parser: ParserOpt = None,
    ):
    """Process a document and print the full result as JSON."""
    settings = _settings(overrides={"highlight_theme": theme, "parser_config": parser})
    pipeline = _pipeline(settings)
    frontmatter_schema = _import_schema(schema) if schema else None
    try:
        doc = process_markdown(
            _read(path),
            frontmatter_schema=frontmatter_schema,
            pipeline=pipeline,
        )
    except ValueError as e:
        _fail("Processing failed", e)
    typer.echo(json.dumps(doc.model_dump(mode='json'), indent=2))
