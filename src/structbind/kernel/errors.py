"""Exceptions raised by the binding kernel."""

from typing import List, Optional

from structbind.codes import DiagnosticCode


class StructureError(ValueError):
    """Base class for every error raised by structbind."""

    code: DiagnosticCode

    def __init__(self, message: str, code: Optional[DiagnosticCode] = None):
        super().__init__(message)
        if code is not None:
            self.code = code


class MixedStructureError(StructureError):
    """A schema declares both constructor parameters and extra open fields.

    This is a configuration error: it describes the schema class, not the
    input, and is raised regardless of strictness.
    """

    code = DiagnosticCode.MIXED_STRUCTURE


class StrictBindError(StructureError):
    """A strict bind found unknown fields or type mismatches."""

    code = DiagnosticCode.STRICT_BIND_FAILED

    def __init__(self, errors: List[str]):
        super().__init__("\n".join(errors))
        self.errors = list(errors)


class ConstructionError(StructureError):
    """The reconciled values could not be bound to a fixed-style constructor."""

    code = DiagnosticCode.CONSTRUCTION_FAILED


class FlattenError(StructureError):
    """A field value cannot be represented as a plain value."""

    code = DiagnosticCode.FLATTEN_FAILED


class SchemaLoadError(StructureError):
    """A schema reference could not be resolved to a Schema subclass."""

    code = DiagnosticCode.SCHEMA_LOAD_FAILED
