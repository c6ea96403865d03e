"""structbind: typed schema instances from untyped mappings, with per-schema diagnostics."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("structbind")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
# Note: the kernel-level bind() lives in structbind.kernel.binder; the root
# exports the result-returning bind() from structbind.api.
from structbind.api import bind, load_schema, BindResult
from structbind.codes import DiagnosticCode
from structbind.contracts import DebugSnapshot, PropertySets
from structbind.kernel.context import DiagnosticContext, default_context
from structbind.kernel.errors import (
    StructureError,
    MixedStructureError,
    StrictBindError,
    ConstructionError,
    FlattenError,
    SchemaLoadError,
)
from structbind.kernel.lazy import Lazy
from structbind.schema import Schema

__all__ = [
    "__version__",
    "Schema",
    "Lazy",
    "bind",
    "load_schema",
    "BindResult",
    "DebugSnapshot",
    "PropertySets",
    "DiagnosticCode",
    "DiagnosticContext",
    "default_context",
    "StructureError",
    "MixedStructureError",
    "StrictBindError",
    "ConstructionError",
    "FlattenError",
    "SchemaLoadError",
]
