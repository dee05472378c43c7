"""Frontmatter error taxonomy"""

import json
from typing import Any


class FrontmatterError(ValueError):
    """Base class for metadata block failures."""


class MissingMetadataError(FrontmatterError):
    """A frontmatter schema was supplied but the document has no metadata block."""

    def __init__(self) -> None:
        super().__init__(
            "No yaml frontmatter found. Ensure the frontmatter is at the beginning "
            "of the document and is surrounded by fences `---`"
        )


class MetadataValidationError(FrontmatterError):
    """The metadata block was decoded but failed schema validation.

    Only the first reported issue is carried; it is kept on `issue` and
    embedded in the message as indented JSON.
    """

    def __init__(self, issue: dict[str, Any]) -> None:
        self.issue = issue
        super().__init__(
            "Invalid frontmatter, please correct the document or update the schema:\n\n"
            + json.dumps(issue, indent=4, default=str)
        )
