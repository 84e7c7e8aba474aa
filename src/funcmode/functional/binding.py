"""Operations with a receiver pre-bound, usable as unary functions.

A bound method turns "receiver + operation" into a function of the one
remaining argument, ready for ``map``, ``filter`` or a ``for`` loop.

The receiver comes from one of two places:
    - **bind_variable**: a :class:`~funcmode.core.indirection.Slot` (or any
      other ``deref()`` holder). The holder is re-read on every call, so
      assigning a new value to it changes what later calls operate on.
    - **bind_expression**: a value the caller has already computed. It is
      evaluated exactly once, at the call site, and every call operates on
      that single value.

The operation is either a method name, looked up on the receiver at call time,
or a two-argument callable invoked as ``operation(receiver, argument)``.

Examples:
    Binding variables::

        >>> from funcmode.core.indirection import Slot
        >>> v = Slot([])
        >>> for x in (1, 2, 3):
        ...     bind_variable(v, "append")(x)
        >>> v.get()
        [1, 2, 3]

    Binding expressions::

        >>> import operator
        >>> list(map(bind_expression(1 + 1, operator.mul), [1, 2, 3]))
        [2, 4, 6]
"""

import typing as tp

from funcmode.core.indirection import deref, supports_deref
from funcmode.core.types import Operation, ensure_callable, ensure_operation
from funcmode.logger.logger import logger

__all__ = [
    "BoundMethod",
    "bind_variable",
    "bind_expression",
    "bind_expression_lazy",
]

R = tp.TypeVar("R")


class BoundMethod:
    """A unary function invoking ``operation`` on a pre-bound receiver.

    Attributes:
        operation: Method name or ``(receiver, argument)`` callable.
        rebinding: True when the receiver is re-read from a holder on every
            call, False when it was captured once.
    """

    __slots__ = ("_receiver", "operation", "rebinding")

    def __init__(self, receiver: tp.Any, operation: Operation, rebinding: bool) -> None:
        self._receiver = receiver
        self.operation = ensure_operation(operation)
        self.rebinding = rebinding

    @property
    def receiver(self) -> tp.Any:
        """The value the next call will operate on."""
        if self.rebinding:
            return deref(self._receiver)
        return self._receiver

    def __call__(self, argument: tp.Any) -> tp.Any:
        receiver = self.receiver
        if isinstance(self.operation, str):
            return getattr(receiver, self.operation)(argument)
        return self.operation(receiver, argument)

    def __repr__(self) -> str:
        operation = (
            self.operation
            if isinstance(self.operation, str)
            else getattr(self.operation, "__name__", repr(self.operation))
        )
        kind = "variable" if self.rebinding else "expression"
        return f"BoundMethod({kind}={self._receiver!r}, operation={operation!r})"


def bind_variable(variable: tp.Any, operation: Operation) -> BoundMethod:
    """Bind an operation to a variable, re-read on every call.

    Args:
        variable: A :class:`~funcmode.core.indirection.Slot` or any object
            exposing ``deref()``.
        operation: Method name or ``(receiver, argument)`` callable.

    Returns:
        A unary function observing the variable's value at call time.

    Raises:
        TypeError: If ``variable`` has no indirection target or the operation
            is invalid.
    """
    if not supports_deref(variable):
        raise TypeError(
            f"bind_variable needs a Slot or deref() holder, got {type(variable).__name__!r}."
        )
    bound = BoundMethod(variable, operation, rebinding=True)
    logger.debug(f"Created {bound!r}")
    return bound


def bind_expression(value: tp.Any, operation: Operation) -> BoundMethod:
    """Bind an operation to an already evaluated value.

    Args:
        value: The receiver, captured as-is.
        operation: Method name or ``(receiver, argument)`` callable.

    Returns:
        A unary function operating on ``value`` for every call.
    """
    bound = BoundMethod(value, operation, rebinding=False)
    logger.debug(f"Created {bound!r}")
    return bound


def bind_expression_lazy(factory: tp.Callable[[], R], operation: Operation) -> BoundMethod:
    """Bind an operation to the result of ``factory()``, evaluated once now.

    Args:
        factory: Zero-argument callable producing the receiver.
        operation: Method name or ``(receiver, argument)`` callable.
    """
    factory = ensure_callable(factory, name="factory")
    ensure_operation(operation)
    return bind_expression(factory(), operation)
