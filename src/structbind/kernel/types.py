"""Field type descriptors and runtime type discovery.

Declared annotations and runtime values are both reduced to nominal type
names from one canonical vocabulary, then compared exactly:

- A class maps to its ``__name__``
- ``None`` / ``NoneType`` maps to ``"None"``
- A parametrized generic maps to its origin (``list[int]`` -> ``"list"``)
- ``Optional[X]``, ``Union[X, Y]`` and ``X | Y`` become unions
- ``typing.Any`` and missing annotations are untyped and never mismatch

There is no assignability or coercion: a ``bool`` does not satisfy ``int``
and an ``int`` does not satisfy ``float``.
"""

import types
import typing
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from structbind._internal.messages import UNION_SEPARATOR

# Spellings that other runtimes and hand-written descriptors use for the
# same primitive categories.
TYPE_ALIASES = {
    "integer": "int",
    "boolean": "bool",
    "double": "float",
    "string": "str",
    "array": "list",
    "NoneType": "None",
    "null": "None",
    "NULL": "None",
}

_UNION_ORIGINS = (typing.Union, types.UnionType)


def normalize_type(name: str) -> str:
    """Map a nominal type name onto the canonical vocabulary."""
    return TYPE_ALIASES.get(name, name)


def runtime_type_name(value: Any) -> str:
    """Canonical name of the runtime type of ``value``."""
    return normalize_type(type(value).__name__)


@dataclass(frozen=True)
class TypeDescriptor:
    """Declared type of a field: one name, or an ordered union of names.

    ``names`` is empty for untyped fields.
    """
    names: Tuple[str, ...]
    is_union: bool = False

    @property
    def is_untyped(self) -> bool:
        return not self.names

    @property
    def expected(self) -> str:
        """Human-readable expected type, alternatives joined in declaration order."""
        return UNION_SEPARATOR.join(self.names)

    def accepts(self, value: Any) -> bool:
        """Exact nominal match of the runtime type against the descriptor."""
        if self.is_untyped:
            return True
        actual = runtime_type_name(value)
        return any(normalize_type(name) == actual for name in self.names)


UNTYPED = TypeDescriptor(names=())


def _annotation_name(annotation: Any) -> Optional[str]:
    """Nominal name of a single (non-union) annotation, None if untyped."""
    if annotation is Any:
        return None
    if annotation is None or annotation is type(None):
        return "None"
    if isinstance(annotation, str):
        return normalize_type(annotation)
    origin = typing.get_origin(annotation)
    if origin is typing.Literal:
        # Nominal type of a Literal is the type of its first value.
        args = typing.get_args(annotation)
        return runtime_type_name(args[0]) if args else None
    if origin is typing.Annotated:
        return _annotation_name(typing.get_args(annotation)[0])
    if origin is not None:
        annotation = origin
    name = getattr(annotation, "__name__", None)
    if name is None:
        return None
    return normalize_type(name)


def describe(annotation: Any) -> TypeDescriptor:
    """Build a descriptor from a resolved type annotation."""
    origin = typing.get_origin(annotation)
    if origin in _UNION_ORIGINS:
        names = []
        for arg in typing.get_args(annotation):
            name = _annotation_name(arg)
            if name is None:
                # A union containing Any accepts anything.
                return UNTYPED
            if name not in names:
                names.append(name)
        return TypeDescriptor(names=tuple(names), is_union=True)
    name = _annotation_name(annotation)
    if name is None:
        return UNTYPED
    return TypeDescriptor(names=(name,))
