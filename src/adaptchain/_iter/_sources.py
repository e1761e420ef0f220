from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Final, overload, override

import cytoolz as cz

from .._core import CommonBase, ConfigurationError, Source, get_config
from .._results import NONE, Option, Some
from ._base import Adaptor

type IntoSource[T] = Source[T] | Iterable[T]
"""Anything an adaptor accepts as an operand: a `Source`, or any Python `Iterable`."""

_MISSING: Final = object()


class Iter[T](CommonBase[Iterator[T]], Adaptor[T]):
    """A source over a Python `Iterator`/`Generator`.

    - Once an `Iter` is exhausted, it stays exhausted, even if the wrapped iterator would resume.
    - An `Iter` cannot be restarted: it does not own the data it walks. Use `Seq` for that.

    Args:
        data (Iterable[T]): Any object that can be iterated over.

    Example:
    ```python
    >>> import adaptchain as ac
    >>> it = ac.Iter(x * x for x in range(3))
    >>> it.pull()
    Some(value=0)
    >>> it.collect()
    [1, 4]
    >>> it.pull()
    NONE

    ```
    """

    __slots__ = ("_done",)

    def __init__(self, data: Iterable[T]) -> None:
        self._inner = iter(data)
        self._done = False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._inner!r})"

    @override
    def pull(self) -> Option[T]:
        if self._done:
            return NONE
        value = next(self._inner, _MISSING)
        if value is _MISSING:
            self._done = True
            return NONE
        return Some(value)  # type: ignore[arg-type]


class Seq[T](CommonBase[Sequence[T]], Adaptor[T]):
    """A restartable source backed by owned storage.

    A `Sequence` (list, tuple, range, str...) is held as-is, without copying.
    Any other `Iterable` is materialized into a tuple.

    The length is fixed at construction.

    `restart()` returns a new `Seq` sharing the same storage, positioned where this one is.

    Args:
        data (Iterable[T]): The elements to walk.

    Example:
    ```python
    >>> import adaptchain as ac
    >>> seq = ac.Seq([1, 2, 3])
    >>> seq.pull()
    Some(value=1)
    >>> seq
    Seq(2, 3)
    >>> len(seq)
    2
    >>> seq.restart().collect()
    [2, 3]
    >>> seq.collect()
    [2, 3]

    ```
    """

    __slots__ = ("_end", "_pos")

    def __init__(self, data: Iterable[T]) -> None:
        self._inner = data if isinstance(data, Sequence) else tuple(data)
        self._end = len(self._inner)
        self._pos = 0

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Seq[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Seq[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Seq[U]:
        """Create a `Seq` from any Iterable, or from unpacked values.

        Args:
            data (Iterable[U] | U): Iterable to walk, or a single value.
            *more_data (U): Additional values to include if **data** is not an Iterable.

        Returns:
            Seq[U]: A new Seq instance containing the provided data.

        Example:
        ```python
        >>> import adaptchain as ac
        >>> ac.Seq.from_(1, 2, 3)
        Seq(1, 2, 3)
        >>> ac.Seq.from_([4, 5])
        Seq(4, 5)

        ```
        """
        if cz.itertoolz.isiterable(data):
            return Seq(data)  # type: ignore[arg-type]
        return Seq((data, *more_data))  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._end - self._pos

    def __repr__(self) -> str:
        remaining = (self._inner[idx] for idx in range(self._pos, self._end))
        return f"{self.__class__.__name__}({get_config().iter_repr(remaining)})"

    @override
    def pull(self) -> Option[T]:
        if self._pos >= self._end:
            return NONE
        value = self._inner[self._pos]
        self._pos += 1
        return Some(value)

    @override
    def can_restart(self) -> bool:
        return True

    @override
    def restart(self) -> Seq[T]:
        fresh = Seq(self._inner)
        fresh._pos = self._pos
        return fresh


class Stride[T](CommonBase[Sequence[T]], Adaptor[T]):
    """A restartable source walking a `Sequence` with a fixed stride.

    A negative **step** walks the sequence backwards, starting from its last element.

    Args:
        data (Sequence[T]): The sequence to walk. It is not copied.
        step (int): Distance between two consecutive elements. Must not be 0.

    Raises:
        ConfigurationError: If **step** is 0, or not an integer.

    Example:
    ```python
    >>> import adaptchain as ac
    >>> ac.Stride([0, 1, 2, 3, 4, 5, 6], 3).collect()
    [0, 3, 6]
    >>> ac.Stride("abcde", -2).collect("".join)
    'eca'

    ```
    """

    __slots__ = ("_indices", "_pos")

    def __init__(self, data: Sequence[T], step: int) -> None:
        if not isinstance(step, int) or isinstance(step, bool) or step == 0:
            msg = f"Stride expects a non-zero integer step, got {step!r}"
            raise ConfigurationError(msg)
        self._inner = data
        if step > 0:
            self._indices = range(0, len(data), step)
        else:
            self._indices = range(len(data) - 1, -1, step)
        self._pos = 0

    def __len__(self) -> int:
        return len(self._indices) - self._pos

    @override
    def pull(self) -> Option[T]:
        if self._pos >= len(self._indices):
            return NONE
        value = self._inner[self._indices[self._pos]]
        self._pos += 1
        return Some(value)

    @override
    def can_restart(self) -> bool:
        return True

    @override
    def restart(self) -> Stride[T]:
        fresh = Stride(self._inner, self._indices.step)
        fresh._pos = self._pos
        return fresh


def times(n: int) -> Seq[int]:
    """Create a restartable source yielding the counter `0 .. n - 1`.

    Args:
        n (int): How many elements to yield.

    Returns:
        Seq[int]: The counter, backed by a `range`.

    Raises:
        ConfigurationError: If **n** is negative, or not an integer.

    Example:
    ```python
    >>> import adaptchain as ac
    >>> ac.times(3).collect()
    [0, 1, 2]
    >>> ac.times(0).pull()
    NONE

    ```
    """
    if not isinstance(n, int) or isinstance(n, bool) or n < 0:
        msg = f"times expects a non-negative integer count, got {n!r}"
        raise ConfigurationError(msg)
    return Seq(range(n))


def into_source[T](data: IntoSource[T]) -> Source[T]:
    """Convert an adaptor operand into a `Source`.

    - Anything implementing `pull()` is returned unchanged.
    - A `Sequence` is wrapped in a (restartable) `Seq`.
    - Any other `Iterable` is wrapped in an `Iter`.

    Raises:
        ConfigurationError: If **data** is neither a `Source` nor an `Iterable`.

    Example:
    ```python
    >>> import adaptchain as ac
    >>> ac.into_source([1, 2])
    Seq(1, 2)
    >>> ac.into_source(iter([1, 2])).__class__.__name__
    'Iter'
    >>> ac.into_source(42)
    Traceback (most recent call last):
        ...
    adaptchain._core._errors.ConfigurationError: cannot pull from a int

    ```
    """
    if isinstance(data, Source):
        return data  # type: ignore[return-value]
    if isinstance(data, Sequence):
        return Seq(data)
    if isinstance(data, Iterable):
        return Iter(data)
    msg = f"cannot pull from a {data.__class__.__name__}"
    raise ConfigurationError(msg)
