from __future__ import annotations

from collections.abc import Callable
from typing import override

from .._core import ConfigurationError, Source, can_restart
from .._iter import Adaptor, IntoSource, into_source
from .._results import NONE, Option, Some


class FnMap[T, R](Adaptor[R]):
    """Map each element of **source** through **func**.

    **func** is stored and reused as-is, never copied: when **source** can be restarted, so can the `FnMap`,
    which makes it usable as the inner operand of a `Product`.

    **func** is expected to be pure, since a restarted `FnMap` calls it again on the same elements.

    Args:
        source (IntoSource[T]): The sequence to map.
        func (Callable[[T], R]): Function applied to each element.

    Example:
    ```python
    >>> import adaptchain as ac
    >>> doubled = ac.FnMap([1, 2, 3], lambda x: x * 2)
    >>> doubled.pull()
    Some(value=2)
    >>> doubled.restart().collect()
    [4, 6]
    >>> doubled.collect()
    [4, 6]

    ```
    """

    __slots__ = ("_func", "_source")

    def __init__(self, source: IntoSource[T], func: Callable[[T], R]) -> None:
        self._source: Source[T] = into_source(source)
        self._func = func

    @override
    def pull(self) -> Option[R]:
        match self._source.pull():
            case Some(value):
                return Some(self._func(value))
            case _:
                return NONE

    @override
    def can_restart(self) -> bool:
        return can_restart(self._source)

    @override
    def restart(self) -> FnMap[T, R]:
        if not self.can_restart():
            return super().restart()
        return FnMap(self._source.restart(), self._func)  # type: ignore[attr-defined]


class Step[T](Adaptor[T]):
    """Yield the first element of **source**, then every **n**-th element after it.

    Each pull after the first discards `n - 1` elements, and stops as soon as **source** runs out,
    even in the middle of a discard.

    Args:
        source (IntoSource[T]): The sequence to step through.
        n (int): Distance between two yielded elements. Must be at least 1.

    Raises:
        ConfigurationError: If **n** is not an integer, or is lower than 1.

    Example:
    ```python
    >>> import adaptchain as ac
    >>> ac.Step([1, 2, 3, 4, 5, 6], 2).collect()
    [1, 3, 5]
    >>> ac.Step([1, 2, 3], 0)
    Traceback (most recent call last):
        ...
    adaptchain._core._errors.ConfigurationError: Step expects an integer n >= 1, got 0

    ```
    """

    __slots__ = ("_n", "_skip", "_source")

    def __init__(self, source: IntoSource[T], n: int) -> None:
        if not isinstance(n, int) or isinstance(n, bool) or n < 1:
            msg = f"Step expects an integer n >= 1, got {n!r}"
            raise ConfigurationError(msg)
        self._source: Source[T] = into_source(source)
        self._n = n
        self._skip = 0

    @override
    def pull(self) -> Option[T]:
        for _ in range(self._skip):
            if self._source.pull().is_none():
                return NONE
        self._skip = self._n - 1
        return self._source.pull()

    @override
    def can_restart(self) -> bool:
        return can_restart(self._source)

    @override
    def restart(self) -> Step[T]:
        if not self.can_restart():
            return super().restart()
        fresh = Step(self._source.restart(), self._n)  # type: ignore[attr-defined]
        fresh._skip = self._skip
        return fresh


class PutBack[T](Adaptor[T]):
    """Allow a single element to be put back in front of **source**.

    The slot holds one element: pushing twice before pulling keeps only the most recent value.

    Pushing after exhaustion yields that one value, then the exhaustion again.

    Args:
        source (IntoSource[T]): The sequence to wrap.

    Example:
    ```python
    >>> import adaptchain as ac
    >>> it = ac.PutBack([1, 2, 3])
    >>> it.push(0)
    >>> it.collect()
    [0, 1, 2, 3]
    >>> it.push(9)
    >>> it.pull()
    Some(value=9)
    >>> it.pull()
    NONE

    ```
    """

    __slots__ = ("_slot", "_source")

    def __init__(self, source: IntoSource[T]) -> None:
        self._source: Source[T] = into_source(source)
        self._slot: Option[T] = NONE

    def push(self, value: T) -> None:
        """Put **value** back, so that the next pull returns it.

        Args:
            value (T): The element to put back. Replaces any element already put back and not yet pulled.

        Example:
        ```python
        >>> import adaptchain as ac
        >>> it = ac.PutBack([3])
        >>> it.push(1)
        >>> it.push(2)
        >>> it.collect()
        [2, 3]

        ```
        """
        self._slot = Some(value)

    @override
    def pull(self) -> Option[T]:
        if self._slot.is_some():
            value, self._slot = self._slot, NONE
            return value
        return self._source.pull()


class Interleave[T](Adaptor[T]):
    """Alternate elements from two sequences until both run out.

    Elements are taken from **a** and **b** in turn, starting with **a**.
    Once one of them is exhausted, the other is drained in its own order.

    Args:
        a (IntoSource[T]): The first sequence, pulled first.
        b (IntoSource[T]): The second sequence.

    Example:
    ```python
    >>> import adaptchain as ac
    >>> ac.Interleave([1, 2, 3], [4, 5]).collect()
    [1, 4, 2, 5, 3]
    >>> ac.Interleave([1], "abc").collect()
    [1, 'a', 'b', 'c']

    ```
    """

    __slots__ = ("_a", "_b", "_b_due")

    def __init__(self, a: IntoSource[T], b: IntoSource[T]) -> None:
        self._a: Source[T] = into_source(a)
        self._b: Source[T] = into_source(b)
        self._b_due = False

    @override
    def pull(self) -> Option[T]:
        due, other = (self._b, self._a) if self._b_due else (self._a, self._b)
        match due.pull():
            case Some() as value:
                self._b_due = not self._b_due
                return value
            case _:
                return other.pull()

    @override
    def can_restart(self) -> bool:
        return can_restart(self._a) and can_restart(self._b)

    @override
    def restart(self) -> Interleave[T]:
        if not self.can_restart():
            return super().restart()
        fresh = Interleave(self._a.restart(), self._b.restart())  # type: ignore[attr-defined]
        fresh._b_due = self._b_due
        return fresh
