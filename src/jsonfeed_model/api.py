"""Public API for jsonfeed_model.

Decode entrypoints wrap the ``json`` parser and hand back an owned Feed;
encode entrypoints emit an entity's backing object verbatim (extension
keys included). Neither runs schema validation: call ``validate`` or
``Feed.is_valid`` explicitly.
"""

import copy
import logging
from typing import Any, Dict, IO, Mapping, Union

from jsonfeed_model._internal import json_codec
from jsonfeed_model.codes import ValidationCode
from jsonfeed_model.contracts import ValidationIssue, ValidationReport
from jsonfeed_model.kernel.entities import Feed
from jsonfeed_model.kernel.errors import DecodeError, TypeMismatchError
from jsonfeed_model.kernel.fields import json_type_name
from jsonfeed_model.kernel.schema import SCHEMAS
from jsonfeed_model.kernel.validate import TargetVersion, validate_document
from jsonfeed_model.kernel.views import EntityView


logger = logging.getLogger(__name__)

Entity = Union[EntityView, Mapping[str, Any]]


def from_value(value: Any) -> Feed:
    """
    Wrap a decoded JSON value as a Feed.

    Raises:
        TypeMismatchError: If the value is not a JSON object. Callers that
            want to keep such values should check the shape first.
    """
    if not isinstance(value, dict):
        raise TypeMismatchError(None, "object", json_type_name(value))
    return Feed(value)


def _decode(data: Union[str, bytes, bytearray]) -> Any:
    try:
        value = json_codec.loads(data)
    except ValueError as e:
        logger.debug("Failed to decode JSON feed: %s", e)
        raise DecodeError(f"Invalid JSON: {e}") from e
    except RecursionError as e:
        logger.debug("JSON feed nested too deeply: %s", e)
        raise DecodeError("Invalid JSON: nesting too deep") from e
    logger.debug("Decoded JSON value of type %s", json_type_name(value))
    return value


def from_str(s: str) -> Feed:
    """
    Decode JSON text into a Feed.

    Raises:
        DecodeError: If the text is not valid JSON.
        TypeMismatchError: If the decoded value is not a JSON object.
    """
    return from_value(_decode(s))


def from_slice(data: Union[bytes, bytearray, memoryview]) -> Feed:
    """
    Decode a UTF-8 byte buffer into a Feed.

    Raises:
        DecodeError: If the bytes are not valid UTF-8 JSON.
        TypeMismatchError: If the decoded value is not a JSON object.
    """
    if isinstance(data, memoryview):
        data = data.tobytes()
    return from_value(_decode(data))


def from_reader(reader: IO) -> Feed:
    """
    Decode a text or binary stream into a Feed.

    Raises:
        DecodeError: If the stream content is not valid JSON.
        TypeMismatchError: If the decoded value is not a JSON object.
    """
    return from_value(_decode(reader.read()))


def _document(entity: Entity) -> Mapping[str, Any]:
    if isinstance(entity, EntityView):
        return entity.as_map()
    if isinstance(entity, Mapping):
        return entity
    raise TypeMismatchError(None, "object", json_type_name(entity))


def to_value(entity: Entity) -> Dict[str, Any]:
    """Deep copy of an entity's JSON object."""
    return copy.deepcopy(dict(_document(entity)))


def to_string(entity: Entity, canonical: bool = False) -> str:
    """Serialize an entity's JSON object, extension keys included."""
    return json_codec.dumps(dict(_document(entity)), canonical=canonical)


def to_bytes(entity: Entity, canonical: bool = False) -> bytes:
    """UTF-8 encoded ``to_string``."""
    return to_string(entity, canonical=canonical).encode("utf-8")


def to_writer(entity: Entity, writer: IO, canonical: bool = False) -> None:
    """Write the serialized entity to a text stream."""
    writer.write(to_string(entity, canonical=canonical))


def validate(
    entity: Entity,
    version: TargetVersion,
    kind: str = "Feed",
) -> ValidationReport:
    """
    Pure validation of an entity against a target JSON Feed revision.

    Args:
        entity: A view (Feed, ItemRef, ...) or a raw JSON object
        version: Target revision (Version or identifier string)
        kind: Entity kind for raw objects; views use their own kind

    Returns:
        ValidationReport with ok=True iff the entity complies.

    This is READ-ONLY - no side effects, no mutations. Malformed input is
    reported as issues, never raised.
    """
    if isinstance(entity, EntityView):
        return entity.validate(version)
    schema = SCHEMAS[kind]
    if not isinstance(entity, Mapping):
        return ValidationReport(
            ok=False,
            entity=schema.kind,
            target_version=str(version),
            issues=[ValidationIssue(
                code=ValidationCode.TYPE_MISMATCH.value,
                message=f"Expected object for {schema.kind}, found {json_type_name(entity)}",
            )],
        )
    return validate_document(entity, schema, version)
