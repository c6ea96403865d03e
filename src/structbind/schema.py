"""Schema base class: the composition root of the binding engine.

Concrete schemas subclass ``Schema`` in one of two styles::

    class Money(Schema):                    # fixed style
        def __init__(self, amount: float, currency: str = "EUR"):
            self.amount = amount
            self.currency = currency

    class Order(Schema):                    # open style
        id: int
        amount: float
        note: Optional[str] = None

and are built with ``Order.make(data, strict=...)``.
"""

import json
import logging
import types
import typing
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Type

from structbind._internal.messages import DIAGNOSTICS_DISABLED_KEY, DIAGNOSTICS_DISABLED_TEMPLATE
from structbind.contracts import DebugSnapshot, PropertySets
from structbind.kernel.binder import bind
from structbind.kernel.context import DiagnosticContext, default_context
from structbind.kernel.errors import ConstructionError, StrictBindError
from structbind.kernel.fields import FieldSpec, SchemaLayout, Style, layout_of
from structbind.kernel.flatten import to_plain

_LOGGER = logging.getLogger(__name__)

_CONTEXT_ATTR = "_structbind_context"
_SEALED_ATTR = "_structbind_sealed"


def _is_schema(value: Any) -> bool:
    return isinstance(value, Schema)


def _expand(value: Any) -> Optional[Dict[str, Any]]:
    return value._field_values() if isinstance(value, Schema) else None


def _nested_schema(annotation: Any) -> Optional[Type["Schema"]]:
    """Schema class named by a field annotation, directly or inside a union."""
    if typing.get_origin(annotation) in (typing.Union, types.UnionType):
        candidates = typing.get_args(annotation)
    else:
        candidates = (annotation,)
    for candidate in candidates:
        if isinstance(candidate, type) and issubclass(candidate, Schema):
            return candidate
    return None


class Schema:
    """Base class of every schema.

    Diagnostics of the last bind of each schema are kept in a shared
    ``DiagnosticContext`` (see ``structbind.kernel.context`` for the sharing
    hazard this implies). Set ``diagnostic_context`` on a subclass to give
    it a private context.
    """

    diagnostic_context: ClassVar[Optional[DiagnosticContext]] = None

    @classmethod
    def schema_id(cls) -> str:
        return cls._layout().schema_id

    @classmethod
    def _layout(cls) -> SchemaLayout:
        return layout_of(cls, Schema)

    @classmethod
    def _resolve_context(cls, context: Optional[DiagnosticContext]) -> DiagnosticContext:
        if context is not None:
            return context
        if cls.diagnostic_context is not None:
            return cls.diagnostic_context
        return default_context

    @classmethod
    def make(
        cls,
        data: Mapping[str, Any],
        strict: bool = True,
        context: Optional[DiagnosticContext] = None,
    ) -> "Schema":
        """
        Build an instance of this schema from an untyped mapping.

        Args:
            data: Field name -> value; suspended computations are forced first
                  and mappings given for schema-typed fields are bound into
                  nested instances with the same mode and context
            strict: Raise on unknown fields or type mismatches instead of
                    recording them
            context: Diagnostic context override

        Returns:
            A populated instance

        Raises:
            MixedStructureError: If the schema mixes declaration styles (any mode)
            StrictBindError: In strict mode, if any field is unknown or mistyped
            ConstructionError: If a fixed-style constructor cannot take the values
        """
        layout = cls._layout()
        context = cls._resolve_context(context)
        _LOGGER.debug("make %s (strict=%s)", layout.schema_id, strict)

        layout.assert_no_mixed_structure()

        def nest(spec: FieldSpec, value: Any) -> Any:
            nested_cls = _nested_schema(spec.annotation)
            if nested_cls is None or not isinstance(value, Mapping):
                return value
            return nested_cls.make(value, strict=strict, context=context)

        values = bind(layout, data, strict, context=context, is_nested=_is_schema, nest=nest)

        if strict:
            errors = context.get_errors(layout.schema_id)
            if errors:
                raise StrictBindError(errors)

        if layout.style is Style.FIXED:
            try:
                arguments = layout.signature.bind(**values)
            except TypeError as e:
                raise ConstructionError(f"Cannot construct {layout.name}: {e}") from e
            instance = cls(*arguments.args, **arguments.kwargs)
            object.__setattr__(instance, _SEALED_ATTR, True)
        else:
            instance = cls.__new__(cls)
            for key, value in values.items():
                setattr(instance, key, value)

        object.__setattr__(instance, _CONTEXT_ATTR, context)
        return instance

    def __setattr__(self, name: str, value: Any) -> None:
        if self.__dict__.get(_SEALED_ATTR) and self._layout().has_field(name):
            raise AttributeError(
                f"Cannot assign to field '{name}' of fixed schema {type(self).__qualname__}"
            )
        super().__setattr__(name, value)

    def _context(self) -> DiagnosticContext:
        context = self.__dict__.get(_CONTEXT_ATTR)
        return context if context is not None else type(self)._resolve_context(None)

    def _field_values(self) -> Dict[str, Any]:
        """Declared fields currently set on this instance (own value or class default)."""
        return {
            name: getattr(self, name)
            for name in self._layout().fields
            if hasattr(self, name)
        }

    def to_dict(self) -> Dict[str, Any]:
        """Plain-value snapshot of this instance; nested schemas become dicts.

        Raises:
            FlattenError: If a field holds a value with no plain representation
        """
        return to_plain(self, type(self).__qualname__, _expand)

    def is_valid(self) -> bool:
        """True iff no schema bound through this context has recorded errors.

        This is a context-wide check, not specific to this instance.
        """
        return self._context().get_all_errors_count() == 0

    def get_errors(self) -> Dict[str, List[str]]:
        """All recorded errors keyed by schema id.

        Carries an extra ``warnings`` entry when diagnostics were never
        enabled for this schema (only lenient binds enable them).
        """
        context = self._context()
        schema_id = self._layout().schema_id
        errors = context.get_all_errors()
        if not context.is_enabled(schema_id):
            errors[DIAGNOSTICS_DISABLED_KEY] = [
                DIAGNOSTICS_DISABLED_TEMPLATE.format(schema_id=schema_id)
            ]
        return errors

    def debug_info(self) -> DebugSnapshot:
        context = self._context()
        schema_id = self._layout().schema_id
        available = list(self._field_values())
        if context.isset(schema_id, "properties"):
            passed = list(context.get_properties(schema_id))
            difference = [name for name in passed if name not in available]
        else:
            passed = list(available)
            difference = []
        return DebugSnapshot(
            schema_id=schema_id,
            properties=PropertySets(available=available, passed=passed, difference=difference),
            strict=context.get_strict(schema_id),
            diagnostics_enabled=context.is_enabled(schema_id),
            errors=context.get_errors(schema_id),
        )

    def debug(self) -> "Schema":
        """Log the debug snapshot at DEBUG level and return self."""
        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug("%s", json.dumps(self.debug_info().model_dump(), sort_keys=True))
        return self

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in self._field_values().items())
        return f"{type(self).__qualname__}({fields})"
