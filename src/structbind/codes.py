"""Diagnostic code constants for structbind errors.

These constants prevent stringly-typed error codes and ensure
client code matches on the correct codes.
"""

from enum import Enum


class DiagnosticCode(str, Enum):
    """Error and diagnostic codes."""

    # Raised (fatal)
    MIXED_STRUCTURE = "MIXED_STRUCTURE"
    STRICT_BIND_FAILED = "STRICT_BIND_FAILED"
    CONSTRUCTION_FAILED = "CONSTRUCTION_FAILED"
    FLATTEN_FAILED = "FLATTEN_FAILED"
    SCHEMA_LOAD_FAILED = "SCHEMA_LOAD_FAILED"

    # Accumulated per field (lenient mode)
    UNKNOWN_FIELD = "UNKNOWN_FIELD"
    TYPE_MISMATCH = "TYPE_MISMATCH"
