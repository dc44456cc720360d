"""Result sum type with error-accumulating applicative combination.

A ``Result`` is either ``Ok(value)`` or ``Err(errors)``. Validation code
returns results instead of raising, so several independent checks can be
combined with :func:`apply` and every failure is reported at once.

INVARIANT: an ``Err`` always carries at least one message.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result holding a value."""

    value: T


@dataclass(frozen=True, slots=True)
class Err:
    """Failed result holding the list of human-readable error messages."""

    errors: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.errors:
            raise ValueError("Err requires at least one error message")


Result = Union[Ok[T], Err]


def err(*messages: str) -> Err:
    """Build an ``Err`` from one or more messages."""
    return Err(tuple(messages))


def succeed(value: T) -> Ok[T]:
    """Lift a plain value into a successful result."""
    return Ok(value)


def is_ok(result: Result[Any]) -> bool:
    return isinstance(result, Ok)


def errors_of(result: Result[Any]) -> tuple[str, ...]:
    """Return the error messages of *result*, or ``()`` when it succeeded."""
    if isinstance(result, Err):
        return result.errors
    return ()

def apply(acc: Result[Callable[[T], U]], field: Result[T]) -> Result[U]:
    """Apply a pending function to a validated value, accumulating errors.

    ========  ========  ==========================================
    acc       field     result
    ========  ========  ==========================================
    Ok(f)     Ok(x)     ``Ok(f(x))``
    Err(a)    Ok(x)     ``Err(a)``
    Ok(f)     Err(b)    ``Err(b)``
    Err(a)    Err(b)    ``Err(a + b)``
    ========  ========  ==========================================
    """
    if isinstance(acc, Ok):
        if isinstance(field, Ok):
            return Ok(acc.value(field.value))
        return field
    if isinstance(field, Err):
        return Err(acc.errors + field.errors)
    return acc


def apply_all(acc: Result[Any], fields: Iterable[Result[Any]]) -> Result[Any]:
    """Left-fold :func:`apply` over *fields* in order."""
    for field in fields:
        acc = apply(acc, field)
    return acc


def curry(fn: Callable[..., U], arity: int) -> Any:
    """Turn an *arity*-argument function into a chain of one-argument calls.

    >>> curry(lambda a, b: a - b, 2)(5)(3)
    2
    """
    if arity < 1:
        raise ValueError("curry requires arity >= 1")

    def step(collected: tuple[Any, ...]) -> Any:
        def take(value: Any) -> Any:
            args = (*collected, value)
            if len(args) == arity:
                return fn(*args)
            return step(args)

        return take

    return step(())
