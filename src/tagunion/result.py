"""Functional API over `Result`.

Every function takes the result as its first argument and returns a new value;
the result itself is never modified. `Err` values pass through untouched
wherever an operation only concerns `Ok`, and the other way around.

Example:
```python
>>> from tagunion import result
>>> def parse(s: str) -> result.Result[int, str]:
...     return result.ok(int(s)) if s.isdigit() else result.err(f"not a number: {s}")
>>> result.all([parse("1"), parse("x"), parse("y")])
Err(error='not a number: x')
>>> result.unwrap(result.then(parse("20"), lambda n: result.ok(n + 1)), 0)
21

```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeIs

from ._results._result import Err, Ok, Result

__all__ = [
    "Result",
    "all",
    "err",
    "is_err",
    "is_ok",
    "map",
    "map_error",
    "ok",
    "or_",
    "replace",
    "replace_error",
    "then",
    "unwrap",
    "unwrap_error",
]


def ok[T, E](value: T) -> Result[T, E]:
    """Wrap `value` in an `Ok`."""
    return Ok(value)


def err[T, E](value: E) -> Result[T, E]:
    """Wrap `value` in an `Err`."""
    return Err(value)


def is_ok[T, E](r: Result[T, E]) -> TypeIs[Ok[T, E]]:
    """Return `True` if `r` is a success."""
    return r.is_ok()


def is_err[T, E](r: Result[T, E]) -> TypeIs[Err[T, E]]:
    """Return `True` if `r` is a failure."""
    return not is_ok(r)


def unwrap[T, E](r: Result[T, E], default: T) -> T:
    """Return the success value, or `default` if `r` is an `Err`."""
    return r.unwrap_or(default)


def unwrap_error[T, E](r: Result[T, E], default: E) -> E:
    """Return the error value, or `default` if `r` is an `Ok`."""
    return r.unwrap_err_or(default)


def map[T, E, U](r: Result[T, E], f: Callable[[T], U]) -> Result[U, E]:  # noqa: A001
    """Apply `f` to the success value. `f` is not called on `Err`."""
    return r.map(f)


def map_error[T, E, F](r: Result[T, E], f: Callable[[E], F]) -> Result[T, F]:
    """Apply `f` to the error value. `f` is not called on `Ok`."""
    return r.map_err(f)


def replace[T, E, U](r: Result[T, E], value: U) -> Result[U, E]:
    """Swap the success value for `value`."""
    return r.replace(value)


def replace_error[T, E, F](r: Result[T, E], value: F) -> Result[T, F]:
    """Swap the error value for `value`."""
    return r.replace_err(value)


def or_[T, E](left: Result[T, E], right: Result[T, E]) -> Result[T, E]:
    """Return `left` if it is `Ok`, `right` otherwise.

    ```python
    >>> from tagunion import result
    >>> result.or_(result.err("e"), result.ok(100))
    Ok(value=100)

    ```
    """
    return left.or_(right)


def then[T, E, U](r: Result[T, E], f: Callable[[T], Result[U, E]]) -> Result[U, E]:
    """Chain `f`, which returns a result itself, onto the success value.

    The error type stays the same across the chain.
    """
    return r.and_then(f)


def all[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:  # noqa: A001
    """Collect results into `Ok` of their values, or the first `Err` in order."""
    return Result.all(results)
