"""Base model and JSON decoding for API records.

Every record inherits from ``RTModel``. Wire names that clash with Python
keywords or pydantic's private-attribute rules are renamed through
``FIELD_RENAMES``; the alias generator is derived from that table, so adding
a renamed field only needs a new entry there. Payloads are read by wire name
only: a document carrying ``kind`` instead of ``type`` fails decoding.

Required-vs-optional policy: fields are required unless declared
``X | None = None``. Only fields known to be missing from some real
responses are optional, so a field that silently disappears upstream fails
decoding instead of turning into a default value.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, ConfigDict, StringConstraints, ValidationError

from roosterteeth.api import SchemaError

# Wire name -> attribute name
FIELD_RENAMES: dict[str, str] = {
    "type": "kind",
    "self": "reference",
    "_index": "index",
    "_score": "score",
}

_WIRE_NAMES = {attribute: wire for wire, attribute in FIELD_RENAMES.items()}

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]

M = TypeVar("M", bound=BaseModel)


def wire_name(attribute: str) -> str:
    """Get the JSON field name for a model attribute."""
    return _WIRE_NAMES.get(attribute, attribute)


class RTModel(BaseModel):
    """Immutable record decoded from an API response."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=wire_name,
    )


def _error_path(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc)


def decode(model: type[M], payload: Mapping[str, Any] | str | bytes) -> M:
    """Decode a JSON document into a record.

    Args:
        model: The record type, e.g. ``ResultPage[Episode]``.
        payload: Parsed JSON (a mapping) or raw JSON text/bytes.

    Returns:
        The validated record.

    Raises:
        SchemaError: If a required field is missing or has the wrong type.
            ``paths`` lists the offending fields by their wire names.
    """
    try:
        if isinstance(payload, (str, bytes, bytearray)):
            return model.model_validate_json(payload)
        return model.model_validate(payload)
    except ValidationError as e:
        paths = [_error_path(err["loc"]) for err in e.errors()]
        raise SchemaError(
            f"Failed to decode {model.__name__}: {e.error_count()} error(s) at "
            + ", ".join(paths),
            paths=paths,
        ) from e


def encode(record: BaseModel) -> dict[str, Any]:
    """Dump a record back to its wire shape.

    ``decode(type(record), encode(record)) == record`` holds for every record.
    """
    return record.model_dump(mode="json", by_alias=True)
