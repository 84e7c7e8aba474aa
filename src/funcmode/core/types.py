"""Reusable type definitions for the funcmode package.

This module provides the type aliases, capability protocols and
construction-time validators shared by the functional adapters.

Type Aliases:
    Predicate: A single-argument function returning a boolean.
    Duplicator: A function producing an independent copy of its argument.
    Operation: A method name or a ``(receiver, argument)`` callable.

Protocols:
    Deref: A wrapper exposing one level of indirection through ``deref()``.
    DerefMut: A wrapper exposing a mutable target through ``deref_mut()``.
"""

import typing as tp

from pydantic import TypeAdapter, ValidationError

__all__ = [
    "Predicate",
    "Duplicator",
    "Operation",
    "Deref",
    "DerefMut",
    "ensure_callable",
    "ensure_operation",
]

T = tp.TypeVar("T")
T_co = tp.TypeVar("T_co", covariant=True)

Predicate = tp.Callable[[T], bool]
Duplicator = tp.Callable[[T], T]
Operation = tp.Union[str, tp.Callable[[tp.Any, tp.Any], tp.Any]]


@tp.runtime_checkable
class Deref(tp.Protocol[T_co]):
    """Capability of a wrapper to expose its underlying target."""

    def deref(self) -> T_co: ...


@tp.runtime_checkable
class DerefMut(tp.Protocol[T_co]):
    """Capability of a wrapper to expose its underlying target for mutation."""

    def deref_mut(self) -> T_co: ...


_callable_adapter = TypeAdapter(tp.Callable[..., tp.Any])


def ensure_callable(value: tp.Any, name: str = "func") -> tp.Callable[..., tp.Any]:
    """Validator to ensure a function argument is callable.

    Args:
        value: The object supplied by the caller.
        name: Argument name used in the error message.
    Returns:
        The original object if validation passes.
    Raises:
        TypeError: If the object is not callable.
    """
    try:
        return _callable_adapter.validate_python(value)
    except ValidationError as err:
        raise TypeError(
            f"{name} must be callable, got {type(value).__name__!r}."
        ) from err


def ensure_operation(value: tp.Any) -> Operation:
    """Validator for bound operations: a non-empty method name or a callable.

    Raises:
        TypeError: If the operation is neither.
    """
    if isinstance(value, str):
        if not value.isidentifier():
            raise TypeError(f"Operation name must be an identifier, got {value!r}.")
        return value
    return ensure_callable(value, name="operation")
