"""Suspended computations accepted in place of concrete field values.

The binder only needs two things from a suspended value: a predicate that
recognizes it and a zero-argument forcing step. ``Lazy`` is the explicit
wrapper; plain functions, lambdas and ``functools.partial`` objects are
accepted as well when they can be called without arguments. A function that
requires arguments is an ordinary value.
"""

import functools
import inspect
import types
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")

_UNSET = object()


class Lazy(Generic[T]):
    """A deferred value producer, forced at most once."""

    __slots__ = ("_producer", "_value")

    def __init__(self, producer: Callable[[], T]):
        if not callable(producer):
            raise TypeError(f"Lazy producer must be callable, got {type(producer).__name__}")
        self._producer = producer
        self._value: Any = _UNSET

    @property
    def forced(self) -> bool:
        return self._value is not _UNSET

    def force(self) -> T:
        if self._value is _UNSET:
            self._value = self._producer()
        return self._value

    def __repr__(self) -> str:
        if self.forced:
            return f"Lazy(forced={self._value!r})"
        return "Lazy(<pending>)"


def is_suspended(value: Any) -> bool:
    """Return True if ``value`` is a suspended computation.

    Classes, bound methods, builtins and functions that require arguments are
    ordinary values, not suspended computations.
    """
    if isinstance(value, Lazy):
        return True
    if isinstance(value, (types.FunctionType, functools.partial)):
        return _callable_without_arguments(value)
    return False


def _callable_without_arguments(func: Callable[..., Any]) -> bool:
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # No introspectable signature (a partial over a builtin); assume it is.
        return True
    return all(
        param.default is not param.empty
        or param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD)
        for param in signature.parameters.values()
    )


def force(value: Any) -> Any:
    """Produce the final value of a suspended computation."""
    if isinstance(value, Lazy):
        return value.force()
    return value()


def resolve_values(data: dict) -> dict:
    """Force every suspended value, preserving input order.

    Every key is visited, including keys the target schema does not declare.
    """
    resolved = {}
    for key, value in data.items():
        resolved[key] = force(value) if is_suspended(value) else value
    return resolved
