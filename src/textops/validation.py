"""Argument validation shared by every public text operation.

All checks run before any work begins. Public functions declare what they
need through :func:`guarded`; the ``ensure_*`` helpers are available for
checks that depend on runtime values, such as counts measured against a
length.
"""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, Iterable, Optional, TypeVar

F = TypeVar("F", bound=Callable[..., Any])
T = TypeVar("T")


class ArgumentValidationError(ValueError):
    """Base class for rejected arguments; ``parameter`` names the culprit."""

    def __init__(self, message: str, *, parameter: str) -> None:
        super().__init__(message)
        self.parameter = parameter


class NullArgumentError(ArgumentValidationError):
    """Raised when a required argument is ``None``."""

    def __init__(self, parameter: str) -> None:
        super().__init__(f"'{parameter}' cannot be None", parameter=parameter)


class EmptyArgumentError(ArgumentValidationError):
    """Raised when a string argument that must carry text is empty."""

    def __init__(self, parameter: str) -> None:
        super().__init__(f"'{parameter}' cannot be empty", parameter=parameter)


class OutOfRangeError(ArgumentValidationError):
    """Raised when a count falls outside ``0..length``.

    ``bound`` is ``"negative"`` or ``"length"`` depending on which side was
    crossed.
    """

    def __init__(
        self, parameter: str, *, value: int, bound: str, length: Optional[int] = None
    ) -> None:
        if bound == "negative":
            message = f"'{parameter}' must be non-negative, got {value}"
        else:
            message = f"'{parameter}' ({value}) exceeds available length {length}"
        super().__init__(message, parameter=parameter)
        self.value = value
        self.bound = bound
        self.length = length


def ensure_not_none(value: Optional[T], name: str) -> T:
    if value is None:
        raise NullArgumentError(name)
    return value


def ensure_not_empty(value: Optional[str], name: str) -> str:
    text = ensure_not_none(value, name)
    if len(text) == 0:
        raise EmptyArgumentError(name)
    return text


def ensure_count(count: int, length: int, name: str) -> int:
    if count < 0:
        raise OutOfRangeError(name, value=count, bound="negative")
    if count > length:
        raise OutOfRangeError(name, value=count, bound="length", length=length)
    return count


def guarded(*required: str, non_empty: Iterable[str] = ()) -> Callable[[F], F]:
    """Validate named parameters before the decorated function runs.

    ``required`` parameters must not be ``None``; ``non_empty`` parameters
    must additionally hold at least one character. Checks run in the order
    the parameters appear in the function signature.
    """

    must_fill = frozenset(non_empty)
    checked = frozenset(required) | must_fill

    def decorator(func: F) -> F:
        signature = inspect.signature(func)
        unknown = checked - set(signature.parameters)
        if unknown:
            raise TypeError(
                f"{func.__qualname__} has no parameters named {sorted(unknown)}"
            )
        order = [name for name in signature.parameters if name in checked]

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            bound = signature.bind(*args, **kwargs)
            bound.apply_defaults()
            for name in order:
                if name in must_fill:
                    ensure_not_empty(bound.arguments[name], name)
                else:
                    ensure_not_none(bound.arguments[name], name)
            return func(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator


def is_null_or_empty(value: Optional[str]) -> bool:
    return value is None or len(value) == 0


def is_not_null_or_empty(value: Optional[str]) -> bool:
    return not is_null_or_empty(value)


__all__ = [
    "ArgumentValidationError",
    "NullArgumentError",
    "EmptyArgumentError",
    "OutOfRangeError",
    "ensure_not_none",
    "ensure_not_empty",
    "ensure_count",
    "guarded",
    "is_null_or_empty",
    "is_not_null_or_empty",
]
