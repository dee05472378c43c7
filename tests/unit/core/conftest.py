"""Shared fixtures for core unit tests"""

import pytest

from mdproc.core.models import HighlightConfig
from mdproc.core.render import RenderPipeline


SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** text.

## Heading 2

- item one
- item two

```python
# not a heading
print(1)
```

### Heading 3
"""

SAMPLE_FM_MD = """\
---
title: Test Doc
tags: [a, b]
---

# Title

Body content.
"""


class RecordingHighlighter:
    """Synchronous highlighter stub that records (code, lang) calls."""

    def __init__(self):
        self.calls = []

    def __call__(self, code, lang):
        self.calls.append((code, lang))
        return f'<pre class="stub">{lang}</pre>'


@pytest.fixture(name="pipeline")
def pipeline_fixture():
    return RenderPipeline(HighlightConfig(inline_styles=False))


@pytest.fixture(name="recorder")
def recorder_fixture():
    return RecordingHighlighter()


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


@pytest.fixture(name="sample_fm_md")
def sample_fm_md_fixture():
    return SAMPLE_FM_MD
