"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from mdproc.core.models import HighlightConfig


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    parser_config:    str  = Field(default="gfm-like",    description="MarkdownIt parser preset name")
    highlight_theme:  str  = Field(default="github-dark", description="Pygments style for code blocks")
    inline_styles:    bool = Field(default=True,  description="Inline theme colours instead of CSS classes")
    line_numbers:     bool = Field(default=False, description="Number lines in code blocks")
    default_language: str  = Field(default="text", description="Lexer for fences without a language")

    def highlight_config(self) -> HighlightConfig:
        return HighlightConfig(
            theme=self.highlight_theme,
            inline_styles=self.inline_styles,
            line_numbers=self.line_numbers,
            default_language=self.default_language,
        )


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDPROC_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"MDPROC_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
