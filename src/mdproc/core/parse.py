"""Metadata block extraction and YAML decoding"""

import logging
from typing import Any

import yaml

from mdproc.core.models import MetadataSplit


logger = logging.getLogger(__name__)

DELIMITER = '---'


def split_metadata(doc: str) -> MetadataSplit:
    """Split doc on '---' into (metadata, article).

    At least two delimiters are needed; the text between the first two is the
    metadata and everything after the second is the article, later delimiters
    included verbatim. Leading line breaks of the article are dropped.
    """
    segments = doc.split(DELIMITER)
    if len(segments) < 3:
        return MetadataSplit(metadata=None, article=doc)

    article = DELIMITER.join(segments[2:]).lstrip('\r\n')
    logger.debug("metadata block found (%d chars)", len(segments[1]))
    return MetadataSplit(metadata=segments[1], article=article)


def load_yaml(text: str) -> Any:
    """Decode a metadata block with yaml.safe_load."""
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML frontmatter: {e}") from e
