"""Public API for structbind.

High-level functions that return complete, structured results.
Tooling (the CLI, service handlers) should use these instead of importing
from the kernel.
"""

import importlib
from typing import Any, Dict, List, Mapping, Optional, Type, Union

from pydantic import BaseModel, Field

from structbind._internal.messages import DIAGNOSTICS_DISABLED_KEY
from structbind.kernel.context import DiagnosticContext
from structbind.kernel.errors import SchemaLoadError, StrictBindError
from structbind.schema import Schema


class BindResult(BaseModel):
    """Stable result model for a bind."""
    ok: bool  # True if the bind recorded no errors for this schema
    schema_id: str
    strict: bool
    values: Optional[Dict[str, Any]] = None  # to_dict() of the instance; None when no instance was produced
    errors: List[str] = Field(default_factory=list)  # messages of this bind, in field order
    warnings: List[str] = Field(default_factory=list)


def load_schema(ref: str) -> Type[Schema]:
    """
    Resolve a ``"package.module:ClassName"`` reference to a schema class.

    Nested classes are addressed with dots after the colon
    (``"pkg.mod:Outer.Inner"``).

    Raises:
        SchemaLoadError: If the reference is malformed, cannot be imported,
                         or does not name a Schema subclass
    """
    module_name, sep, qualname = ref.partition(":")
    if not sep or not module_name or not qualname:
        raise SchemaLoadError(
            f"Invalid schema reference '{ref}': expected 'package.module:ClassName'"
        )
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise SchemaLoadError(f"Cannot import module '{module_name}': {e}") from e

    target: Any = module
    for part in qualname.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise SchemaLoadError(f"'{module_name}' has no attribute '{qualname}'") from e

    if not (isinstance(target, type) and issubclass(target, Schema)) or target is Schema:
        raise SchemaLoadError(f"'{ref}' is not a Schema subclass")
    return target


def bind(
    schema: Union[str, Type[Schema]],
    data: Mapping[str, Any],
    strict: bool = False,
    context: Optional[DiagnosticContext] = None,
) -> BindResult:
    """
    Bind ``data`` to ``schema`` and report the outcome as a BindResult.

    Strict-mode failures are captured into the result (``ok=False``,
    ``values=None``). Configuration, construction and flatten errors
    propagate.

    Args:
        schema: Schema class or ``"package.module:ClassName"`` reference
        data: Untyped input mapping
        strict: Bind mode
        context: Diagnostic context override

    Returns:
        BindResult with the flattened instance and this schema's errors
    """
    schema_cls = load_schema(schema) if isinstance(schema, str) else schema
    schema_id = schema_cls.schema_id()

    try:
        instance = schema_cls.make(data, strict=strict, context=context)
    except StrictBindError as e:
        return BindResult(ok=False, schema_id=schema_id, strict=strict, errors=e.errors)

    errors = instance.get_errors()
    own_errors = errors.get(schema_id, [])
    return BindResult(
        ok=not own_errors,
        schema_id=schema_id,
        strict=strict,
        values=instance.to_dict(),
        errors=own_errors,
        warnings=errors.get(DIAGNOSTICS_DISABLED_KEY, []),
    )
