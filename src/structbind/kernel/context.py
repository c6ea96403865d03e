"""Diagnostic context: per-schema record of the last bind.

Entries are keyed by schema identity and describe the *last* bind of that
schema, not the history of any one instance. Every instance of a schema
shares its entry, so two binds of the same schema in overlapping flows
overwrite each other: ``is_valid()`` and ``get_errors()`` then report the
later bind. No locking is applied. Callers that need isolation pass their
own ``DiagnosticContext`` to ``bind`` / ``Schema.make`` or set
``diagnostic_context`` on the schema class.
"""

from dataclasses import dataclass, field, fields as dataclass_fields
from typing import Any, Dict, List


@dataclass
class DiagnosticEntry:
    """Diagnostics of the last bind of one schema."""
    strict: bool = False
    properties: Dict[str, Any] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)


_ENTRY_FIELDS = frozenset(f.name for f in dataclass_fields(DiagnosticEntry))


class DiagnosticContext:
    """Keyed store of diagnostic entries plus a per-schema enablement flag.

    All operations are plain map reads and writes; last write per id wins.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, DiagnosticEntry] = {}
        self._enabled: Dict[str, bool] = {}
        # Fields explicitly written since the last reset, for isset().
        self._written: Dict[str, set] = {}

    def reset(self, schema_id: str) -> None:
        self._entries[schema_id] = DiagnosticEntry()
        self._written[schema_id] = set()

    def enable(self, schema_id: str) -> None:
        self._enabled[schema_id] = True

    def disable(self, schema_id: str) -> None:
        self._enabled[schema_id] = False

    def is_enabled(self, schema_id: str) -> bool:
        return self._enabled.get(schema_id, False)

    def _entry(self, schema_id: str) -> DiagnosticEntry:
        if schema_id not in self._entries:
            self.reset(schema_id)
        return self._entries[schema_id]

    def set(self, schema_id: str, key: str, value: Any) -> None:
        if key not in _ENTRY_FIELDS:
            raise KeyError(f"Unknown diagnostic field: {key}")
        setattr(self._entry(schema_id), key, value)
        self._written[schema_id].add(key)

    def get(self, schema_id: str, key: str) -> Any:
        entry = self._entries.get(schema_id)
        if entry is None or key not in _ENTRY_FIELDS:
            return None
        return getattr(entry, key)

    def isset(self, schema_id: str, key: str) -> bool:
        """True if ``key`` was written for ``schema_id`` since its last reset."""
        return key in self._written.get(schema_id, ())

    def append_error(self, schema_id: str, message: str) -> None:
        self._entry(schema_id).errors.append(message)
        self._written[schema_id].add("errors")

    def get_errors(self, schema_id: str) -> List[str]:
        entry = self._entries.get(schema_id)
        return list(entry.errors) if entry is not None else []

    def get_all_errors(self) -> Dict[str, List[str]]:
        """Error lists of every schema ever touched, including empty ones."""
        return {schema_id: list(entry.errors) for schema_id, entry in self._entries.items()}

    def get_all_errors_count(self) -> int:
        """Total number of recorded error messages across all schemas."""
        return sum(len(entry.errors) for entry in self._entries.values())

    def get_strict(self, schema_id: str) -> bool:
        entry = self._entries.get(schema_id)
        return entry.strict if entry is not None else False

    def get_properties(self, schema_id: str) -> Dict[str, Any]:
        entry = self._entries.get(schema_id)
        return dict(entry.properties) if entry is not None else {}

    def get_all(self) -> Dict[str, DiagnosticEntry]:
        return dict(self._entries)

    def clear(self) -> None:
        """Forget every entry and enablement flag."""
        self._entries.clear()
        self._enabled.clear()
        self._written.clear()


# Process-wide context used unless a schema or caller supplies another.
default_context = DiagnosticContext()
