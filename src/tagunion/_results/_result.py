from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TypeIs, cast

from .._core import Pipeable


class ResultUnwrapError(RuntimeError): ...


class Result[T, E](ABC, Pipeable):
    """The outcome of an operation: a success value (`Ok`) or an error value (`Err`).

    The error payload is whatever the caller chooses to store; it is never inspected.
    """

    __slots__ = ()

    @abstractmethod
    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """
        Returns True if the result is Ok.

        Equivalent to Rust's Result::is_ok().
        """
        ...

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """
        Returns True if the result is Err.

        Always the negation of `is_ok`.

        Equivalent to Rust's Result::is_err().
        """
        return not self.is_ok()

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained Ok value or a provided default.

        Args:
            default: The value to return if the result is Err.

        Returns:
            The contained Ok value or the default.

        Example:
        ```python
        >>> from tagunion import Ok, Err
        >>> Ok(42).unwrap_or(0)
        42
        >>> Err("boom").unwrap_or(0)
        0

        ```

        Equivalent to Rust's Result::unwrap_or().
        """
        return self.value if self.is_ok() else default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """
        Returns the contained Ok value or computes it from a function if Err.

        Args:
            f: Callable that takes the Err value and returns a T.

        Returns:
            The contained Ok value or the result of f(error).

        Equivalent to Rust's Result::unwrap_or_else().
        """
        return self.value if self.is_ok() else f(self.error)

    def unwrap_err_or(self, default: E) -> E:
        """
        Returns the contained Err value or a provided default.

        Args:
            default: The value to return if the result is Ok.

        Returns:
            The contained Err value or the default.

        Example:
        ```python
        >>> from tagunion import Ok, Err
        >>> Err("boom").unwrap_err_or("fine")
        'boom'
        >>> Ok(42).unwrap_err_or("fine")
        'fine'

        ```
        """
        return self.error if self.is_err() else default

    def expect(self, msg: str) -> T:
        """
        Returns the contained Ok value, or raises ResultUnwrapError with a custom message if the result is Err.

        Args:
            msg: The message to display if the result is Err.

        Returns:
            The contained Ok value.

        Raises:
            ResultUnwrapError: If the result is Err, with the provided message and error.

        Equivalent to Rust's Result::expect().
        """
        if self.is_ok():
            return self.value
        raise ResultUnwrapError(f"{msg}: {self.error!r}")

    def expect_err(self, msg: str) -> E:
        """
        Returns the contained Err value, or raises ResultUnwrapError with a custom message if the result is Ok.

        Args:
            msg: The message to display if the result is Ok.

        Returns:
            The contained Err value.

        Raises:
            ResultUnwrapError: If the result is Ok, with the provided message and value.

        Equivalent to Rust's Result::expect_err().
        """
        if self.is_err():
            return self.error
        raise ResultUnwrapError(f"{msg}: expected Err, got Ok({self.value!r})")

    def map_or_else[U](self, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """
        Pattern matches on the result, calling ok if Ok, or err if Err.

        Args:
            ok: Callable to handle the Ok value.
            err: Callable to handle the Err value.

        Returns:
            The result of the called function.

        Equivalent to Rust's Result::map_or_else()
        """
        match self:
            case Ok(value):
                return ok(value)
            case Err(error):
                return err(error)
            case _:
                raise RuntimeError("unreachable")

    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        """
        Maps a Result[T, E] to Result[U, E] by applying a function to a contained Ok value, leaving Err untouched.

        Args:
            f: Callable to apply to the Ok value. Not called on Err.

        Returns:
            Result[U, E]: Ok(f(value)) if Ok, otherwise the same Err.

        Example:
        ```python
        >>> from tagunion import Ok, Err
        >>> Ok(21).map(lambda x: x * 2)
        Ok(value=42)
        >>> Err("boom").map(lambda x: x * 2)
        Err(error='boom')

        ```

        Equivalent to Rust's Result::map().
        """
        if self.is_ok():
            return Ok(f(self.value))
        return cast(Result[U, E], self)

    def map_err[F](self, f: Callable[[E], F]) -> Result[T, F]:
        """
        Maps a Result[T, E] to Result[T, F] by applying a function to a contained Err value, leaving Ok untouched.

        Args:
            f: Callable to apply to the Err value. Not called on Ok.

        Returns:
            Result[T, F]: Err(f(error)) if Err, otherwise the same Ok.

        Equivalent to Rust's Result::map_err().
        """
        if self.is_err():
            return Err(f(self.error))
        return cast(Result[T, F], self)

    def replace[U](self, value: U) -> Result[U, E]:
        """
        Substitutes a constant for the Ok value, leaving Err untouched.

        Args:
            value: The new success value.

        Returns:
            Result[U, E]: Ok(value) if Ok, otherwise the same Err.

        Example:
        ```python
        >>> from tagunion import Ok, Err
        >>> Ok(1).replace("a")
        Ok(value='a')
        >>> Err("e").replace("a")
        Err(error='e')

        ```
        """
        if self.is_ok():
            return Ok(value)
        return cast(Result[U, E], self)

    def replace_err[F](self, value: F) -> Result[T, F]:
        """
        Substitutes a constant for the Err value, leaving Ok untouched.

        Args:
            value: The new error value.

        Returns:
            Result[T, F]: Err(value) if Err, otherwise the same Ok.
        """
        if self.is_err():
            return Err(value)
        return cast(Result[T, F], self)

    def or_(self, other: Result[T, E]) -> Result[T, E]:
        """
        Returns self if Ok, otherwise other, whatever its variant.

        Args:
            other: The fallback result.

        Returns:
            Result[T, E]: self if Ok, otherwise other.

        Example:
        ```python
        >>> from tagunion import Ok, Err
        >>> Ok(42).or_(Ok(100))
        Ok(value=42)
        >>> Err("e").or_(Ok(100))
        Ok(value=100)
        >>> Err("e").or_(Err("late"))
        Err(error='late')

        ```

        Equivalent to Rust's Result::or().
        """
        return self if self.is_ok() else other

    def and_then[U](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """
        Calls f if the result is Ok, otherwise returns Err.

        Args:
            f: Callable that takes the Ok value and returns a Result.

        Returns:
            Result[U, E]: The result of f(value) if Ok, otherwise the same Err.

        Equivalent to Rust's Result::and_then().
        """
        if self.is_ok():
            return f(self.value)
        return cast(Result[U, E], self)

    def or_else(self, f: Callable[[E], Result[T, E]]) -> Result[T, E]:
        """
        Calls f if the result is Err, otherwise returns Ok.

        Args:
            f: Callable that takes the Err value and returns a Result.

        Returns:
            Result[T, E]: self if Ok, otherwise the result of f(error).

        Equivalent to Rust's Result::or_else().
        """
        return self if self.is_ok() else f(self.error)

    @staticmethod
    def all[V, F](results: Iterable[Result[V, F]]) -> Result[list[V], F]:
        """
        Collects an iterable of results into a result of a list.

        Results are read from left to right.
        The first Err is returned as is, and nothing after it is consumed.

        Args:
            results: The results to collect.

        Returns:
            Result[list[V], F]: Ok of every value in input order, or the first Err.

        Example:
        ```python
        >>> from tagunion import Ok, Err, Result
        >>> Result.all([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> Result.all([Ok(1), Err("x"), Err("y")])
        Err(error='x')
        >>> Result.all([])
        Ok(value=[])

        ```
        """
        values: list[V] = []
        for result in results:
            if result.is_err():
                return cast(Result[list[V], F], result)
            values.append(result.value)
        return Ok(values)


@dataclass(frozen=True, slots=True)
class Ok[T, E](Result[T, E]):
    """Represents a successful value."""

    value: T

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """
        Always returns True for Ok.

        Equivalent to Rust's Result::is_ok().
        """
        return True


@dataclass(frozen=True, slots=True)
class Err[T, E](Result[T, E]):
    """Represents an error value."""

    error: E

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """
        Always returns False for Err.

        Equivalent to Rust's Result::is_ok().
        """
        return False
