"""Functional API over `Option`.

Every function takes the option as its first argument and returns a new value;
the option itself is never modified.

Example:
```python
>>> from tagunion import option
>>> opt = option.then(option.some("42"), lambda s: option.some(int(s)))
>>> option.unwrap(option.map(opt, lambda x: x + 1), 0)
43
>>> option.unwrap(option.none(), 0)
0

```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeIs

from ._results._option import NONE, NoneOption, Option, Some

__all__ = [
    "Option",
    "all",
    "is_none",
    "is_some",
    "map",
    "none",
    "some",
    "then",
    "unwrap",
]


def some[T](value: T) -> Option[T]:
    """Wrap `value` in a `Some`."""
    return Some(value)


def none[T]() -> Option[T]:
    """Return the `None` option."""
    return NONE


def is_some[T](opt: Option[T]) -> TypeIs[Some[T]]:
    """Return `True` if `opt` holds a value."""
    return opt.is_some()


def is_none[T](opt: Option[T]) -> TypeIs[NoneOption]:
    """Return `True` if `opt` holds nothing."""
    return not is_some(opt)


def unwrap[T](opt: Option[T], default: T) -> T:
    """Return the held value, or `default` unchanged if `opt` is `None`."""
    return opt.unwrap_or(default)


def map[T, U](opt: Option[T], f: Callable[[T], U]) -> Option[U]:  # noqa: A001
    """Apply `f` to the held value. `f` is not called on `None`."""
    return opt.map(f)


def then[T, U](opt: Option[T], f: Callable[[T], Option[U]]) -> Option[U]:
    """Chain `f`, which returns an option itself, onto the held value.

    `f` is not called on `None`.
    """
    return opt.and_then(f)


def all[T](options: Iterable[Option[T]]) -> Option[list[T]]:  # noqa: A001
    """Collect options into `Some` of their values, or `None` if any is `None`.

    ```python
    >>> from tagunion import option
    >>> option.all([option.some(1), option.some(2)])
    Some(value=[1, 2])
    >>> option.all([option.some(1), option.none()])
    NONE

    ```
    """
    return Option.all(options)
