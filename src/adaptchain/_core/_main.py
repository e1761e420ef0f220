from __future__ import annotations

from abc import ABC
from collections.abc import Callable
from typing import Concatenate, Self


class Pipeable:
    """Mixin letting any sequence be handed to a plain function without breaking a left-to-right chain."""

    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Call `func(self, *args, **kwargs)` and return its result.

        Typically used to end a pipeline with a consumer that is not a method, such as `sorted` or `sum`.

        Args:
            func (Callable[Concatenate[Self, P], R]): Consumer receiving the sequence first.
            *args (P.args): Extra positional arguments for **func**.
            **kwargs (P.kwargs): Extra keyword arguments for **func**.

        Returns:
            R: Whatever **func** returns.

        Example:
        ```python
        >>> import adaptchain as ac
        >>> ac.Seq([3, 1, 2]).into(sorted)
        [1, 2, 3]
        >>> ac.Seq([1, 1, 2, 3, 3]).dedup().into(sum)
        6
        >>> ac.Seq("ab").into(ac.Product, [0, 1]).collect()
        [('a', 0), ('a', 1), ('b', 0), ('b', 1)]

        ```
        """
        return func(self, *args, **kwargs)

    def inspect[**P](
        self,
        func: Callable[Concatenate[Self, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        """Call `func(self, *args, **kwargs)` for its side effect, then return `self` unchanged.

        **func** sees the sequence before any of it is pulled, so it should not consume it.

        Example:
        ```python
        >>> import adaptchain as ac
        >>> ac.Seq([1, 2, 3]).inspect(print).collect()
        Seq(1, 2, 3)
        [1, 2, 3]

        ```
        """
        func(self, *args, **kwargs)
        return self


class CommonBase[T](ABC, Pipeable):
    """Base of the primitive sources (`Iter`, `Seq`, `Stride`), holding the Python object they walk."""

    _inner: T

    __slots__ = ("_inner",)

    def __init__(self, data: T) -> None:
        self._inner = data

    def inner(self) -> T:
        """Get the wrapped Python object."""
        return self._inner
