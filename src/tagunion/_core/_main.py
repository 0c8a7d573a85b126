from __future__ import annotations

from collections.abc import Callable
from typing import Concatenate, Self


class Pipeable:
    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Convert `Self` to `R`.

        This method allows to pipe the container into a function that converts it into another type.

        Conceptually, this allow to do x.into(f) instead of f(x), hence keeping a functional chaining style.

        Args:
            func (Callable[Concatenate[Self, P], R]): Function for conversion.
            *args (P.args): Positional arguments to pass to the function.
            **kwargs (P.kwargs): Keyword arguments to pass to the function.

        Returns:
            R: The converted value.

        Example:
        ```python
        >>> import tagunion as tu
        >>> def describe(opt: tu.Option[int]) -> str:
        ...     match opt:
        ...         case tu.Some(value):
        ...             return f"got {value}"
        ...         case _:
        ...             return "nothing"
        >>> tu.Some(3).into(describe)
        'got 3'
        >>> tu.NONE.into(describe)
        'nothing'

        ```
        """
        return func(self, *args, **kwargs)

    def inspect[**P](
        self,
        func: Callable[Concatenate[Self, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        """Pass the container to a function to perform side effects without altering it.

        Args:
            func (Callable[Concatenate[Self, P], object]): Function to apply to the container for side effects.
            *args (P.args): Positional arguments to pass to the function.
            **kwargs (P.kwargs): Keyword arguments to pass to the function.

        Returns:
            Self: The container itself for chaining.

        Example:
        ```python
        >>> import tagunion as tu
        >>> tu.Ok(4).inspect(print).map(lambda x: x + 1)
        Ok(value=4)
        Ok(value=5)

        ```
        """
        func(self, *args, **kwargs)
        return self
