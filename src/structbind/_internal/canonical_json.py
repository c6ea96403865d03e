"""Canonical JSON output for CLI results and debug snapshots."""

import json
from typing import Any, Optional


def canonical_dumps(obj: Any, indent: Optional[int] = None) -> str:
    """
    Serialize ``obj`` with sorted keys and stable separators.

    Compact (``","``, ``":"``) when ``indent`` is None, pretty-printed
    otherwise. Non-ASCII characters are written as UTF-8, not escaped.
    """
    if indent is None:
        return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return json.dumps(obj, sort_keys=True, indent=indent, ensure_ascii=False)
