"""Binder: reconcile an untyped input mapping against a schema's fields.

The binder never raises for bad input. It forces suspended values, builds
nested schemas through the caller's ``nest`` hook (which may raise for a failed
strict nested bind), compares every input key against the schema layout,
records unknown fields and type mismatches in the diagnostic context, and
returns the mapping that feeds instance construction.

Mode asymmetry:
- Lenient: diagnostics enabled, the resolved input is kept as the property
  snapshot, unknown keys are dropped from the result
- Strict: diagnostics enablement untouched, no property snapshot, unknown
  keys are retained (the caller fails the bind before construction)
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional

from structbind._internal.messages import TYPE_MISMATCH_TEMPLATE, UNKNOWN_FIELD_TEMPLATE
from structbind.codes import DiagnosticCode
from .context import DiagnosticContext, default_context
from .fields import FieldSpec, SchemaLayout
from .lazy import resolve_values
from .types import runtime_type_name

_LOGGER = logging.getLogger(__name__)


def _record(
    context: DiagnosticContext,
    layout: SchemaLayout,
    code: DiagnosticCode,
    message: str,
) -> None:
    context.append_error(layout.schema_id, message)
    _LOGGER.debug("%s %s: %s", code.value, layout.schema_id, message)


def bind(
    layout: SchemaLayout,
    data: Mapping[str, Any],
    strict: bool,
    context: Optional[DiagnosticContext] = None,
    is_nested: Callable[[Any], bool] = lambda value: False,
    nest: Callable[[FieldSpec, Any], Any] = lambda spec, value: value,
) -> Dict[str, Any]:
    """
    Reconcile ``data`` against ``layout``.

    Args:
        layout: Field layout of the target schema
        data: Raw input mapping (field name -> value)
        strict: Strict or lenient mode
        context: Diagnostic context to write to (defaults to the process-wide one)
        is_nested: Predicate recognizing nested schema instances, which are
                   exempt from type comparison
        nest: Builds the nested schema instance for a declared field from a
              raw value, returning the value unchanged when it does not apply

    Returns:
        The resolved mapping, with unknown keys removed in lenient mode
    """
    context = context if context is not None else default_context
    schema_id = layout.schema_id

    resolved = resolve_values(data)
    # Nested schemas are built before this schema's entry is reset, so for a
    # recursive schema the outer bind's diagnostics are the ones kept.
    built = {
        key: nest(layout.fields[key], value) if layout.has_field(key) else value
        for key, value in resolved.items()
    }

    if not strict:
        context.enable(schema_id)
        context.reset(schema_id)
        context.set(schema_id, "strict", False)
        # Snapshot before pruning so the debug view can show dropped keys.
        context.set(schema_id, "properties", dict(resolved))
    else:
        context.reset(schema_id)
        context.set(schema_id, "strict", True)

    _LOGGER.debug("binding %s (strict=%s, keys=%d)", schema_id, strict, len(resolved))

    result = dict(built)
    for key, value in built.items():
        if not layout.has_field(key):
            _record(
                context,
                layout,
                DiagnosticCode.UNKNOWN_FIELD,
                UNKNOWN_FIELD_TEMPLATE.format(schema=layout.name, field=key),
            )
            if not strict:
                del result[key]
            continue

        if is_nested(value):
            continue

        descriptor = layout.descriptor(key)
        if not descriptor.accepts(value):
            _record(
                context,
                layout,
                DiagnosticCode.TYPE_MISMATCH,
                TYPE_MISMATCH_TEMPLATE.format(
                    schema=layout.name,
                    field=key,
                    expected=descriptor.expected,
                    actual=runtime_type_name(value),
                ),
            )

    _LOGGER.debug(
        "bound %s: %d kept, %d error(s)",
        schema_id,
        len(result),
        len(context.get_errors(schema_id)),
    )
    return result
