"""Conversion of schema instances to plain values.

Plain values are the JSON-compatible ones: None, bool, int, finite float,
str, mappings with string keys, and lists. Tuples become lists; nested
schema instances become nested dicts. Anything else is a hard error.
"""

import math
from collections.abc import Mapping
from typing import Any, Callable, Dict

from .errors import FlattenError
from .lazy import is_suspended


def to_plain(
    value: Any,
    path: str,
    expand: Callable[[Any], Any],
) -> Any:
    """Convert ``value`` to a plain value.

    Args:
        value: The value to convert
        path: Dotted location of ``value``, used in error messages
        expand: Returns the field mapping of a nested schema instance, or
                None if ``value`` is not one

    Raises:
        FlattenError: If ``value`` (or anything inside it) is not representable
    """
    if value is None or isinstance(value, (bool, int, str)):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            raise FlattenError(f"Non-finite float at {path}: {value!r}")
        return value
    if is_suspended(value):
        raise FlattenError(
            f"Unforced suspended computation at {path}; values must be bound through make()"
        )

    nested = expand(value)
    if nested is not None:
        return {key: to_plain(item, f"{path}.{key}", expand) for key, item in nested.items()}

    if isinstance(value, Mapping):
        result: Dict[str, Any] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise FlattenError(
                    f"Mapping keys must be strings at {path}, got {type(key).__name__}"
                )
            result[key] = to_plain(item, f"{path}.{key}", expand)
        return result
    if isinstance(value, (list, tuple)):
        return [to_plain(item, f"{path}[{i}]", expand) for i, item in enumerate(value)]

    raise FlattenError(
        f"Cannot flatten {type(value).__name__} at {path}. "
        f"Only None, bool, int, float, str, mappings, lists and schemas are allowed."
    )
