"""Frontmatter validation against a caller-supplied schema"""

from typing import Any, Optional, Protocol, runtime_checkable

from pydantic import TypeAdapter, ValidationError

from mdproc.core.errors import MetadataValidationError, MissingMetadataError
from mdproc.core.models import SchemaResult
from mdproc.core.parse import load_yaml


@runtime_checkable
class FrontmatterSchema(Protocol):
    """Anything that can validate a decoded value without raising."""

    def safe_validate(self, value: Any) -> SchemaResult: ...


class PydanticSchema:
    """FrontmatterSchema backed by a pydantic TypeAdapter.

    Accepts any type pydantic can validate: BaseModel subclasses, TypedDicts,
    dataclasses, or plain annotations such as dict[str, int].
    """

    def __init__(self, type_: Any) -> None:
        self.type_ = type_
        self._adapter = TypeAdapter(type_)

    def safe_validate(self, value: Any) -> SchemaResult:
        try:
            return SchemaResult(ok=True, value=self._adapter.validate_python(value))
        except ValidationError as e:
            return SchemaResult(ok=False, issues=e.errors(include_url=False))

    def __repr__(self) -> str:
        return f"PydanticSchema({self.type_!r})"


def as_schema(schema: Any) -> FrontmatterSchema:
    """Return schema unchanged if it is a FrontmatterSchema instance, else wrap it for pydantic.

    Classes are always wrapped, even ones defining safe_validate.
    """
    if not isinstance(schema, type) and isinstance(schema, FrontmatterSchema):
        return schema
    return PydanticSchema(schema)


def validate_metadata(metadata: Optional[str], schema: Any) -> Any:
    """Decode the metadata block and validate it, returning the validated value.

    Raises MissingMetadataError when there is no (or only a blank) block and
    MetadataValidationError with the first issue when validation fails.
    """
    if metadata is None or not metadata.strip():
        raise MissingMetadataError()

    result = as_schema(schema).safe_validate(load_yaml(metadata))
    if not result.ok:
        raise MetadataValidationError(result.issues[0] if result.issues else {})
    return result.value
