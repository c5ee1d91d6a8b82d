"""Field-kind accessor contract.

Every declared field of every entity is one of six kinds. Each kind has a
single reader and writer here, parametrized only by the key, so the
entity classes never re-implement coercion rules:

- Absent keys read as None and are never an error.
- Present values of the wrong shape raise TypeMismatchError.
- Array readers are all-or-nothing: one bad element discards the list.
- Writers replace the keyed entry and return the prior raw value (or None).

The readers and writers work on plain mappings, so they also apply to
extension keys reached through ``as_map()`` / ``as_map_mut()``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, MutableMapping, Optional, Tuple

from .errors import TypeMismatchError
from .version import VERSION_1, Version


EXTENSION_PREFIX = "_"
U64_MAX = 2 ** 64 - 1


class FieldKind(str, Enum):
    """Shape of a declared field."""

    STRING = "string"
    STRING_ARRAY = "string array"
    BOOLEAN = "boolean"
    UNSIGNED_INTEGER = "unsigned integer"
    OBJECT = "object"
    OBJECT_ARRAY = "object array"


@dataclass(frozen=True)
class FieldSpec:
    """One row of an entity's field table."""
    key: str  # Wire key, e.g. "content_html"
    kind: FieldKind
    attr: Optional[str] = None  # Accessor name when it differs from the key
    target: Optional[str] = None  # Nested entity kind for OBJECT / OBJECT_ARRAY
    required: bool = False
    since: str = VERSION_1  # First revision in which the key is permitted
    doc: str = ""

    @property
    def name(self) -> str:
        return self.attr or self.key

    @property
    def is_nested(self) -> bool:
        return self.kind in (FieldKind.OBJECT, FieldKind.OBJECT_ARRAY)


@dataclass(frozen=True)
class EntitySchema:
    """Declarative description of an entity kind."""
    kind: str  # "Feed", "Item", ...
    fields: Tuple[FieldSpec, ...]
    one_of: Tuple[Tuple[str, ...], ...] = ()  # Groups where at least one key is required

    def field(self, key: str) -> FieldSpec:
        for spec in self.fields:
            if spec.key == key:
                return spec
        raise KeyError(key)

    def permitted_keys(self, version: Version) -> FrozenSet[str]:
        """Keys allowed on this entity under a recognized target revision."""
        return frozenset(
            spec.key for spec in self.fields
            if Version.parse(spec.since).rank <= version.rank
        )


def is_extension_key(key: str) -> bool:
    """Extension keys start with an underscore and are exempt from key checks."""
    return key.startswith(EXTENSION_PREFIX)


def json_type_name(value: Any) -> str:
    """Name of the JSON shape of a decoded value, for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def is_u64(value: Any) -> bool:
    # bool is an int subclass but a distinct JSON type
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= U64_MAX


# Readers

def read_str(mapping: Mapping[str, Any], key: str) -> Optional[str]:
    if key not in mapping:
        return None
    value = mapping[key]
    if not isinstance(value, str):
        raise TypeMismatchError(key, FieldKind.STRING.value, json_type_name(value))
    return value


def read_str_array(mapping: Mapping[str, Any], key: str) -> Optional[List[str]]:
    if key not in mapping:
        return None
    value = mapping[key]
    if not isinstance(value, list):
        raise TypeMismatchError(key, FieldKind.STRING_ARRAY.value, json_type_name(value))
    for index, element in enumerate(value):
        if not isinstance(element, str):
            raise TypeMismatchError(key, FieldKind.STRING.value, json_type_name(element), index=index)
    return list(value)


def read_bool(mapping: Mapping[str, Any], key: str) -> Optional[bool]:
    if key not in mapping:
        return None
    value = mapping[key]
    if not isinstance(value, bool):
        raise TypeMismatchError(key, FieldKind.BOOLEAN.value, json_type_name(value))
    return value


def read_u64(mapping: Mapping[str, Any], key: str) -> Optional[int]:
    """Read a non-negative integer that fits in 64 bits.

    Negative, fractional (including ``1.0``) and overflowing numbers are
    mismatches.
    """
    if key not in mapping:
        return None
    value = mapping[key]
    if not is_u64(value):
        raise TypeMismatchError(key, FieldKind.UNSIGNED_INTEGER.value, json_type_name(value))
    return value


def read_object(mapping: Mapping[str, Any], key: str) -> Optional[Dict[str, Any]]:
    """Return the nested dict itself (not a copy) so views can borrow it."""
    if key not in mapping:
        return None
    value = mapping[key]
    if not isinstance(value, dict):
        raise TypeMismatchError(key, FieldKind.OBJECT.value, json_type_name(value))
    return value


def read_object_array(mapping: Mapping[str, Any], key: str) -> Optional[List[Dict[str, Any]]]:
    if key not in mapping:
        return None
    value = mapping[key]
    if not isinstance(value, list):
        raise TypeMismatchError(key, FieldKind.OBJECT_ARRAY.value, json_type_name(value))
    for index, element in enumerate(value):
        if not isinstance(element, dict):
            raise TypeMismatchError(key, FieldKind.OBJECT.value, json_type_name(element), index=index)
    return list(value)


READERS = {
    FieldKind.STRING: read_str,
    FieldKind.STRING_ARRAY: read_str_array,
    FieldKind.BOOLEAN: read_bool,
    FieldKind.UNSIGNED_INTEGER: read_u64,
    FieldKind.OBJECT: read_object,
    FieldKind.OBJECT_ARRAY: read_object_array,
}


def read_field(mapping: Mapping[str, Any], spec: FieldSpec) -> Any:
    """Read a declared field with its kind's reader."""
    return READERS[spec.kind](mapping, spec.key)


# Writers

def _replace(mapping: MutableMapping[str, Any], key: str, value: Any) -> Any:
    prior = mapping.get(key)
    mapping[key] = value
    return prior


def write_str(mapping: MutableMapping[str, Any], key: str, value: Any) -> Any:
    """Store ``str(value)``. ``None`` and bytes are rejected; use ``remove_field`` to clear."""
    if value is None or isinstance(value, (bytes, bytearray)):
        raise TypeMismatchError(key, FieldKind.STRING.value, json_type_name(value))
    return _replace(mapping, key, str(value))


def write_str_array(mapping: MutableMapping[str, Any], key: str, values: Iterable[Any]) -> Any:
    if isinstance(values, (str, bytes)):
        raise TypeMismatchError(key, FieldKind.STRING_ARRAY.value, "string")
    values = list(values)
    for index, value in enumerate(values):
        if value is None or isinstance(value, (bytes, bytearray)):
            raise TypeMismatchError(key, FieldKind.STRING.value, json_type_name(value), index=index)
    return _replace(mapping, key, [str(v) for v in values])


def write_bool(mapping: MutableMapping[str, Any], key: str, value: bool) -> Any:
    if not isinstance(value, bool):
        raise TypeMismatchError(key, FieldKind.BOOLEAN.value, type(value).__name__)
    return _replace(mapping, key, value)


def write_u64(mapping: MutableMapping[str, Any], key: str, value: int) -> Any:
    if not is_u64(value):
        raise TypeMismatchError(key, FieldKind.UNSIGNED_INTEGER.value, repr(value))
    return _replace(mapping, key, value)


def write_object(mapping: MutableMapping[str, Any], key: str, document: Dict[str, Any]) -> Any:
    if not isinstance(document, dict):
        raise TypeMismatchError(key, FieldKind.OBJECT.value, type(document).__name__)
    return _replace(mapping, key, document)


def write_object_array(mapping: MutableMapping[str, Any], key: str, documents: Iterable[Dict[str, Any]]) -> Any:
    documents = list(documents)
    for index, document in enumerate(documents):
        if not isinstance(document, dict):
            raise TypeMismatchError(key, FieldKind.OBJECT.value, type(document).__name__, index=index)
    return _replace(mapping, key, documents)


def remove_field(mapping: MutableMapping[str, Any], key: str) -> Any:
    return mapping.pop(key, None)
