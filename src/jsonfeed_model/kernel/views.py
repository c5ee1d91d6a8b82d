"""Owned, shared and mutable views over a JSON object.

Each entity kind has three classes built on the bases here:

- ``Owned`` (e.g. ``Feed``): exclusively holds its dict. ``into_inner()``
  hands the dict back and marks the entity consumed; any later use raises
  BorrowError. Passing an owned entity to a nested setter consumes it too.
- ``RefView`` (e.g. ``FeedRef``): read-only view of a dict that belongs to
  someone else, typically a slot inside an ancestor document.
- ``MutView`` (e.g. ``FeedMut``): read-write view of a borrowed dict.

Borrow contract (not enforced at runtime): do not use a view after the
ancestor has replaced or removed the container it was produced from, and
do not mutate a subtree through one view while another view of it is in
use. Stale views keep reading the detached dict rather than the ancestor.

Accessor methods are generated from an entity's field table by
``bind_fields``; see ``fields`` for the per-kind get/set/remove rules.
"""

import copy
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, ClassVar, Dict, Mapping, Optional, Type

from .errors import BorrowError, TypeMismatchError
from .fields import (
    EntitySchema,
    FieldKind,
    FieldSpec,
    READERS,
    read_object,
    read_object_array,
    remove_field,
    write_bool,
    write_object,
    write_object_array,
    write_str,
    write_str_array,
    write_u64,
)
from .validate import TargetVersion, validate_document


class EntityView:
    """Common behavior of all views: backing dict, equality, validation."""

    __slots__ = ("_value",)
    schema: ClassVar[EntitySchema]

    def __init__(self, value: Mapping[str, Any]):
        if not isinstance(value, Mapping):
            raise TypeMismatchError(None, "object", type(value).__name__)
        self._value = value

    def _map(self):
        return self._value

    def as_map(self) -> Mapping[str, Any]:
        """Read-only view of the backing JSON object, including extension keys."""
        return MappingProxyType(self._map())

    def to_owned(self):
        """Deep-copy the backing object into a new owned entity."""
        return family(self.schema.kind).owned(copy.deepcopy(dict(self._map())))

    def validate(self, version: TargetVersion):
        """Return a ValidationReport against a target revision."""
        return validate_document(self._map(), self.schema, version)

    def is_valid(self, version: TargetVersion) -> bool:
        """Whether the data complies with a specific revision of JSON Feed."""
        return self.validate(version).ok

    def __eq__(self, other):
        if isinstance(other, EntityView):
            # A consumed entity equals nothing, itself included
            if self._value is None or other._value is None:
                return False
            return self._value == other._value
        if isinstance(other, Mapping):
            if self._value is None:
                return False
            return self._value == dict(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._map())!r})"


class RefView(EntityView):
    """Shared read-only borrow of a JSON object."""
    __slots__ = ()


class MutView(EntityView):
    """Exclusive mutable borrow of a JSON object."""
    __slots__ = ()

    def __init__(self, value: Dict[str, Any]):
        if not isinstance(value, dict):
            raise TypeMismatchError(None, "object", type(value).__name__)
        super().__init__(value)

    def as_map_mut(self) -> Dict[str, Any]:
        """The backing JSON object itself, for extension fields."""
        return self._map()


class Owned(EntityView):
    """Exclusive holder of a JSON object."""
    __slots__ = ()

    def __init__(self, value: Optional[Dict[str, Any]] = None):
        if value is None:
            value = {}
        if not isinstance(value, dict):
            raise TypeMismatchError(None, "object", type(value).__name__)
        super().__init__(value)

    @classmethod
    def new(cls):
        """Create an entity backed by an empty JSON object."""
        return cls()

    @classmethod
    def from_value(cls, value: Any):
        """Take ownership of a decoded JSON value, which must be an object."""
        if not isinstance(value, dict):
            raise TypeMismatchError(None, "object", type(value).__name__)
        return cls(value)

    def _map(self):
        if self._value is None:
            raise BorrowError(type(self).__name__)
        return self._value

    @property
    def consumed(self) -> bool:
        return self._value is None

    def as_map_mut(self) -> Dict[str, Any]:
        """The backing JSON object itself, for extension fields."""
        return self._map()

    def into_inner(self) -> Dict[str, Any]:
        """Consume the entity and return its JSON object."""
        value = self._map()
        self._value = None
        return value

    def copy(self):
        return type(self)(copy.deepcopy(self._map()))

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def __repr__(self) -> str:
        if self._value is None:
            return f"<{type(self).__name__} (consumed)>"
        return super().__repr__()


@dataclass
class EntityFamily:
    """The three view classes of one entity kind."""
    owned: Optional[Type[Owned]] = None
    ref: Optional[Type[RefView]] = None
    mut: Optional[Type[MutView]] = None


_FAMILIES: Dict[str, EntityFamily] = {}


def family(kind: str) -> EntityFamily:
    """Look up the view classes registered for an entity kind."""
    return _FAMILIES[kind]


def _consume(spec: FieldSpec, entity: Any) -> Dict[str, Any]:
    owned_cls = family(spec.target).owned
    if not isinstance(entity, owned_cls):
        raise TypeMismatchError(spec.key, owned_cls.__name__, type(entity).__name__)
    return entity.into_inner()


def _make_getter(spec: FieldSpec):
    if spec.kind is FieldKind.OBJECT:
        def getter(self):
            value = read_object(self._map(), spec.key)
            return None if value is None else family(spec.target).ref(value)
    elif spec.kind is FieldKind.OBJECT_ARRAY:
        def getter(self):
            values = read_object_array(self._map(), spec.key)
            if values is None:
                return None
            ref_cls = family(spec.target).ref
            return [ref_cls(value) for value in values]
    else:
        reader = READERS[spec.kind]

        def getter(self):
            return reader(self._map(), spec.key)
    return getter


def _make_mut_getter(spec: FieldSpec):
    if spec.kind is FieldKind.OBJECT:
        def getter(self):
            value = read_object(self._map(), spec.key)
            return None if value is None else family(spec.target).mut(value)
    else:
        def getter(self):
            values = read_object_array(self._map(), spec.key)
            if values is None:
                return None
            mut_cls = family(spec.target).mut
            return [mut_cls(value) for value in values]
    return getter


_SCALAR_WRITERS = {
    FieldKind.STRING: write_str,
    FieldKind.STRING_ARRAY: write_str_array,
    FieldKind.BOOLEAN: write_bool,
    FieldKind.UNSIGNED_INTEGER: write_u64,
}


def _make_setter(spec: FieldSpec):
    if spec.kind is FieldKind.OBJECT:
        def setter(self, value):
            mapping = self._map()
            return write_object(mapping, spec.key, _consume(spec, value))
    elif spec.kind is FieldKind.OBJECT_ARRAY:
        def setter(self, values):
            mapping = self._map()
            values = list(values)
            owned_cls = family(spec.target).owned
            # Check every element before consuming any of them
            for index, entity in enumerate(values):
                if not isinstance(entity, owned_cls):
                    raise TypeMismatchError(spec.key, owned_cls.__name__, type(entity).__name__, index=index)
                if entity.consumed:
                    raise BorrowError(type(entity).__name__)
            return write_object_array(mapping, spec.key, [entity.into_inner() for entity in values])
    else:
        writer = _SCALAR_WRITERS[spec.kind]

        def setter(self, value):
            return writer(self._map(), spec.key, value)
    return setter


def _make_remover(spec: FieldSpec):
    def remover(self):
        return remove_field(self._map(), spec.key)
    return remover


def _install(cls, name: str, func, doc: str) -> None:
    func.__name__ = name
    func.__qualname__ = f"{cls.__name__}.{name}"
    func.__doc__ = doc
    setattr(cls, name, func)


def bind_fields(schema: EntitySchema):
    """Class decorator: generate accessors for ``schema`` and register the class.

    Every view gets ``<name>()``. Owned and MutView classes also get
    ``set_<name>()``, ``remove_<name>()`` and, for nested kinds,
    ``<name>_mut()``.
    """
    def decorate(cls):
        cls.schema = schema
        writable = issubclass(cls, (Owned, MutView))
        for spec in schema.fields:
            _install(cls, spec.name, _make_getter(spec), spec.doc)
            if not writable:
                continue
            if spec.is_nested:
                _install(cls, f"{spec.name}_mut", _make_mut_getter(spec), spec.doc)
            _install(cls, f"set_{spec.name}", _make_setter(spec), f"Sets '{spec.key}'. Returns the prior value.")
            _install(cls, f"remove_{spec.name}", _make_remover(spec), f"Removes '{spec.key}'. Returns the prior value.")

        entry = _FAMILIES.setdefault(schema.kind, EntityFamily())
        if issubclass(cls, Owned):
            entry.owned = cls
        elif issubclass(cls, MutView):
            entry.mut = cls
        else:
            entry.ref = cls
        return cls
    return decorate
