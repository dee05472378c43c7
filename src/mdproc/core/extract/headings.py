"""Heading discovery over raw markdown lines, skipping fenced code"""

import re

from mdproc.core.models import Heading
from mdproc.core.utils.slug import heading_id


HEADING_RE = re.compile(r'^(#{1,6})\s*(.+)')
CODE_FENCE_RE = re.compile(r'^```')


def scan_headings(text: str) -> list[Heading]:
    """Return headings in document order, ignoring lines inside ``` fences.

    Every line starting with ``` toggles the fence state, whatever follows it,
    so an unterminated fence hides all remaining headings.
    """
    headings: list[Heading] = []
    in_fence = False

    for line in text.split('\n'):
        line = line.strip()

        if CODE_FENCE_RE.match(line):
            in_fence = not in_fence
            continue
        if in_fence:
            continue

        m = HEADING_RE.match(line)
        if m:
            name = m.group(2).strip()
            headings.append(Heading(id=heading_id(name), level=len(m.group(1)), name=name))

    return headings
