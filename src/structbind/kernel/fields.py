"""Field layout of a schema class: declared fields, style and structure guard.

A schema declares its fields in exactly one of two styles:

- Fixed: ``__init__`` takes the fields as parameters (annotations give types,
  defaults make a field optional)
- Open: public class-level annotations, no constructor parameters (class
  attribute values are defaults)

The layout is computed once per class and stored on the class itself; the
shape of a class does not change at runtime.
"""

import inspect
import typing
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from structbind._internal.messages import MIXED_STRUCTURE_TEMPLATE
from .errors import MixedStructureError
from .types import UNTYPED, TypeDescriptor, describe


class _Missing:
    """Sentinel for a field without a default."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()

_LAYOUT_ATTR = "_structbind_layouts"

_FIELD_PARAMETER_KINDS = (
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.KEYWORD_ONLY,
)


class Style(str, Enum):
    """Schema declaration style."""
    FIXED = "fixed"
    OPEN = "open"


@dataclass(frozen=True)
class FieldSpec:
    """A declared field."""
    name: str
    type: TypeDescriptor
    default: Any = MISSING
    annotation: Any = field(default=None, compare=False)  # resolved declared annotation

    @property
    def required(self) -> bool:
        return self.default is MISSING


@dataclass(frozen=True)
class SchemaLayout:
    """Static descriptor table of one schema class."""
    schema_id: str  # "<module>.<qualname>", keys the diagnostic context
    name: str  # qualname, used in messages
    style: Style
    fields: Dict[str, FieldSpec]  # declaration order
    constructor_params: Tuple[str, ...] = ()
    open_fields: Tuple[str, ...] = ()
    mixed: bool = False
    signature: Optional[inspect.Signature] = field(default=None, compare=False)

    def has_field(self, name: str) -> bool:
        return name in self.fields

    def descriptor(self, name: str) -> TypeDescriptor:
        return self.fields[name].type

    def assert_no_mixed_structure(self) -> None:
        """Raise if the class mixes constructor-based and open declarations."""
        if self.mixed:
            raise MixedStructureError(MIXED_STRUCTURE_TEMPLATE.format(schema=self.name))


def _type_hints(obj: Any) -> Dict[str, Any]:
    """Resolved annotations, falling back to the raw ones on unresolved names."""
    try:
        return typing.get_type_hints(obj)
    except (NameError, TypeError):
        hints: Dict[str, Any] = {}
        targets = reversed(obj.__mro__) if isinstance(obj, type) else [obj]
        for target in targets:
            hints.update(inspect.get_annotations(target))
        return hints


def _is_class_var(annotation: Any) -> bool:
    if annotation is typing.ClassVar or typing.get_origin(annotation) is typing.ClassVar:
        return True
    return isinstance(annotation, str) and annotation.startswith(("ClassVar", "typing.ClassVar"))


def _constructor(cls: type) -> Optional[Any]:
    """The user-defined ``__init__`` of ``cls``, None if it only inherits object's."""
    init = cls.__init__
    if init is object.__init__:
        return None
    return init


def _constructor_fields(init: Any) -> Tuple[inspect.Signature, Dict[str, FieldSpec]]:
    signature = inspect.signature(init)
    hints = _type_hints(init)
    params = list(signature.parameters.values())[1:]  # drop self
    fields: Dict[str, FieldSpec] = {}
    for param in params:
        if param.kind not in _FIELD_PARAMETER_KINDS:
            continue
        descriptor = describe(hints[param.name]) if param.name in hints else UNTYPED
        default = MISSING if param.default is inspect.Parameter.empty else param.default
        fields[param.name] = FieldSpec(
            name=param.name,
            type=descriptor,
            default=default,
            annotation=hints.get(param.name),
        )
    return signature.replace(parameters=params), fields


def _open_fields(cls: type, stop: type) -> Dict[str, FieldSpec]:
    hints = _type_hints(cls)
    own_hints = set()
    for klass in cls.__mro__:
        if klass is stop:
            break
        own_hints.update(inspect.get_annotations(klass))

    fields: Dict[str, FieldSpec] = {}
    for name, annotation in hints.items():
        if name.startswith("_") or name not in own_hints or _is_class_var(annotation):
            continue
        fields[name] = FieldSpec(
            name=name,
            type=describe(annotation),
            default=getattr(cls, name, MISSING),
            annotation=annotation,
        )
    return fields


def layout_of(cls: type, stop: type = object) -> SchemaLayout:
    """Layout of schema class ``cls``, computed on first use.

    ``stop`` is the base class whose own annotations are not fields (the
    ``Schema`` base itself). The result is kept in the class's own namespace,
    so it is released together with the class.
    """
    cache = cls.__dict__.get(_LAYOUT_ATTR)
    if cache is None:
        cache = {}
        setattr(cls, _LAYOUT_ATTR, cache)
    layout = cache.get(stop)
    if layout is None:
        layout = cache[stop] = _compute_layout(cls, stop)
    return layout


def _compute_layout(cls: type, stop: type) -> SchemaLayout:
    schema_id = f"{cls.__module__}.{cls.__qualname__}"
    open_fields = _open_fields(cls, stop)
    init = _constructor(cls)

    if init is not None:
        signature, fixed_fields = _constructor_fields(init)
        if fixed_fields:
            return SchemaLayout(
                schema_id=schema_id,
                name=cls.__qualname__,
                style=Style.FIXED,
                fields=fixed_fields,
                constructor_params=tuple(fixed_fields),
                open_fields=tuple(open_fields),
                # Open annotations not backed by a constructor parameter.
                mixed=bool(set(open_fields) - set(fixed_fields)),
                signature=signature,
            )

    return SchemaLayout(
        schema_id=schema_id,
        name=cls.__qualname__,
        style=Style.OPEN,
        fields=open_fields,
        open_fields=tuple(open_fields),
    )
