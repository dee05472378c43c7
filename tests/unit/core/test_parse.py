"""Unit tests for core/parse.py"""

import pytest

from mdproc.core.parse import load_yaml, split_metadata


@pytest.mark.parametrize("doc", [
    "# No frontmatter\n\nBody.\n",
    "Intro\n\n---\n\nAfter a single rule.\n",
    "",
])
def test_split_without_block(doc):
    """Fewer than two '---' delimiters leaves the document untouched."""
    split = split_metadata(doc)
    assert split.metadata is None
    assert split.article == doc


def test_split_with_block():
    """Text between the first two delimiters is metadata; the rest is the article."""
    split = split_metadata("---\na: 1\n---\nbody")
    assert split.metadata == "\na: 1\n"
    assert split.article == "body"


def test_split_preserves_later_delimiters():
    """Delimiters after the metadata block stay in the article verbatim."""
    split = split_metadata("---\na: 1\n---\nintro\n\n---\n\nmore\n")
    assert split.article == "intro\n\n---\n\nmore\n"


def test_split_empty_block():
    """Two adjacent delimiters give an empty metadata string."""
    split = split_metadata("------\n# Title\n")
    assert split.metadata == ""
    assert split.article == "# Title\n"


def test_split_drops_leading_line_breaks_only():
    """Only line breaks after the closing delimiter are dropped, not indentation."""
    split = split_metadata("---\nx: 1\n---\r\n\n    code\n")
    assert split.article == "    code\n"


def test_split_sample(sample_fm_md):
    """Metadata text never leaks into the article."""
    split = split_metadata(sample_fm_md)
    assert "title: Test Doc" in split.metadata
    assert "title" not in split.article
    assert split.article.startswith("# Title")


def test_load_yaml_mapping():
    """load_yaml decodes block YAML into Python values."""
    assert load_yaml("title: Hello\ntags:\n  - a\n  - b\n") == {"title": "Hello", "tags": ["a", "b"]}


def test_load_yaml_invalid():
    """Malformed YAML raises ValueError chained from the YAML error."""
    with pytest.raises(ValueError, match="Invalid YAML frontmatter") as exc:
        load_yaml("key: [unclosed\n")
    assert exc.value.__cause__ is not None
