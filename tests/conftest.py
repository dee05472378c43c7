"""Root test configuration: markdown file factory and isolated working directory"""

from pathlib import Path

import pytest


@pytest.fixture(name="write_md")
def write_md_fixture(tmp_path, monkeypatch):
    """Return a factory writing markdown files under tmp_path, with cwd set there.

    Running from tmp_path keeps a developer's config.yaml out of the tests.
    """
    monkeypatch.chdir(tmp_path)
    for name in ("PARSER_CONFIG", "HIGHLIGHT_THEME", "INLINE_STYLES", "LINE_NUMBERS", "DEFAULT_LANGUAGE"):
        monkeypatch.delenv(f"MDPROC_{name}", raising=False)

    def _write(text: str, name: str = "doc.md") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
