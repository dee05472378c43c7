"""Heading id normalization shared by the scanner and the renderer"""

import re


_WHITESPACE_RE = re.compile(r'\s+')
_NON_ID_RE = re.compile(r'[^\w-]+', re.ASCII)


def heading_id(name: str) -> str:
    """Convert heading text to its anchor id (e.g. 'Hello, World!' -> 'hello-world').

    Duplicates are not disambiguated; two headings with the same text share an id.
    """
    text = name.strip().lower()
    text = _WHITESPACE_RE.sub('-', text)
    return _NON_ID_RE.sub('', text)
