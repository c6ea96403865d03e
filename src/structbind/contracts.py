"""Public inspection models for structbind."""

from typing import List
from pydantic import BaseModel, ConfigDict


class PropertySets(BaseModel):
    """Field names of an instance compared with its last recorded bind input."""
    available: List[str]  # fields currently set on the instance
    passed: List[str]  # keys of the last lenient bind input (or available when none recorded)
    difference: List[str]  # passed - available, in passed order

    model_config = ConfigDict(frozen=True)


class DebugSnapshot(BaseModel):
    """Read-only diagnostic view of a schema instance.

    Presentation (console dump, structured log) is up to the caller.
    """
    schema_id: str
    properties: PropertySets
    strict: bool  # strictness of the last bind of this schema
    diagnostics_enabled: bool
    errors: List[str]  # errors of the last bind of this schema

    model_config = ConfigDict(frozen=True)
