from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, TypeIs

from .._core import Pipeable


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC, Pipeable):
    """A value that may or may not be present.

    Exactly two variants exist: `Some`, holding one value, and `NoneOption`, holding nothing.
    `NONE` is the shared, immutable instance of the latter.
    """

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """
        Returns `True` if the option is a `Some` value.

        Returns:
            `True` if the option is a `Some` variant, `False` otherwise.

        Example:
            ```python
            >>> from tagunion import Some, NONE, Option
            >>> x: Option[int] = Some(2)
            >>> x.is_some()
            True
            >>> y: Option[int] = NONE
            >>> y.is_some()
            False

            ```
        """
        ...

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """
        Returns `True` if the option is a `None` value.

        Always the negation of `is_some`.

        Example:
            ```python
            >>> from tagunion import Some, NONE
            >>> Some(2).is_none()
            False
            >>> NONE.is_none()
            True

            ```
        """
        return not self.is_some()

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained `Some` value or a provided default.

        Args:
            default: The value to return if the option is `None`.

        Returns:
            The contained `Some` value or the provided default, unchanged.

        Example:
            ```python
            >>> from tagunion import Some, NONE
            >>> Some("car").unwrap_or("bike")
            'car'
            >>> NONE.unwrap_or("bike")
            'bike'

            ```
        """
        return self.value if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """
        Returns the contained `Some` value or computes it from a function.

        Args:
            f: A function that returns a default value if the option is `None`.

        Returns:
            The contained `Some` value or the result of the function.

        Example:
            ```python
            >>> from tagunion import Some, NONE
            >>> k = 10
            >>> Some(4).unwrap_or_else(lambda: 2 * k)
            4
            >>> NONE.unwrap_or_else(lambda: 2 * k)
            20

            ```
        """
        return self.value if self.is_some() else f()

    def expect(self, msg: str) -> T:
        """
        Returns the contained `Some` value.
        Raises an exception with a provided message if the value is `None`.

        Args:
            msg: The message to include in the exception if the option is `None`.

        Returns:
            The contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `None`.

        Example:
            ```python
            >>> from tagunion import Some, NONE
            >>> Some("value").expect("fruits are healthy")
            'value'
            >>> NONE.expect("fruits are healthy")
            Traceback (most recent call last):
                ...
            tagunion._results._option.OptionUnwrapError: fruits are healthy (called `expect` on a `None`)

            ```
        """
        if self.is_some():
            return self.value
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """
        Maps an `Option[T]` to `Option[U]` by applying a function to a contained `Some` value,
        leaving a `None` value untouched.

        `f` is never called on `None`.

        Args:
            f: The function to apply to the `Some` value.

        Returns:
            A new `Option` with the mapped value if `Some`, otherwise `None`.

        Example:
            ```python
            >>> from tagunion import Some, NONE
            >>> Some("Hello, World!").map(len)
            Some(value=13)
            >>> NONE.map(len)
            NONE

            ```
        """
        if self.is_some():
            return Some(f(self.value))
        return NONE

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """
        Calls a function if the option is `Some`, otherwise returns `None`.
        Some languages call this operation flatmap.

        The result of `f` is returned as is, without being wrapped again.

        Args:
            f: The function to call with the `Some` value.

        Returns:
            The result of the function if `Some`, otherwise `None`.

        Example:
            ```python
            >>> from tagunion import Some, NONE, Option
            >>> def sq(x: int) -> Option[int]:
            ...     return Some(x * x)
            >>> def nope(x: int) -> Option[int]:
            ...     return NONE
            >>> Some(2).and_then(sq).and_then(sq)
            Some(value=16)
            >>> Some(2).and_then(sq).and_then(nope)
            NONE
            >>> Some(2).and_then(nope).and_then(sq)
            NONE
            >>> NONE.and_then(sq).and_then(sq)
            NONE

            ```
        """
        if self.is_some():
            return f(self.value)
        return NONE

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """
        Returns the option if it contains a value, otherwise calls a function and returns the result.

        Args:
            f: The function to call if the option is `None`.

        Returns:
            The original `Option` if it is `Some`, otherwise the result of the function.

        Example:
            ```python
            >>> from tagunion import Some, NONE, Option
            >>> def nobody() -> Option[str]:
            ...     return NONE
            >>> def vikings() -> Option[str]:
            ...     return Some("vikings")
            >>> Some("barbarians").or_else(vikings)
            Some(value='barbarians')
            >>> NONE.or_else(vikings)
            Some(value='vikings')
            >>> NONE.or_else(nobody)
            NONE

            ```
        """
        return self if self.is_some() else f()

    @staticmethod
    def all[V](options: Iterable[Option[V]]) -> Option[list[V]]:
        """
        Collects an iterable of options into an option of a list.

        Options are read from left to right.
        The first `None` makes the whole result `None`, and nothing after it is consumed.

        Args:
            options: The options to collect.

        Returns:
            `Some` of every contained value in input order, or `None`.

        Example:
            ```python
            >>> from tagunion import Some, NONE, Option
            >>> Option.all([Some(1), Some(2), Some(3)])
            Some(value=[1, 2, 3])
            >>> Option.all([Some(1), NONE, Some(3)])
            NONE
            >>> Option.all([])
            Some(value=[])

            ```
        """
        values: list[V] = []
        for option in options:
            if option.is_none():
                return NONE
            values.append(option.value)
        return Some(values)


@dataclass(frozen=True, slots=True)
class Some[T](Option[T]):
    """Option variant representing the presence of a value.

    Args:
        value (T): The contained value.

    Example:
    ```python
    >>> from tagunion import Some
    >>> Some(42)
    Some(value=42)

    ```
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """Returns `True` for `Some`."""
        return True


@dataclass(frozen=True, slots=True)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value."""

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        """Returns `False` for `None`."""
        return False


NONE: Option[Any] = NoneOption()
"""Shared instance representing the absence of a value."""
