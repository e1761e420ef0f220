from __future__ import annotations

from collections import deque
from typing import override

from .._core import Source, can_restart, get_config
from .._iter import Adaptor, IntoSource, into_source
from .._results import NONE, Option, Some


class Dedup[T](Adaptor[T]):
    """Remove consecutive duplicates from **source**.

    Only runs of equal (`==`) adjacent elements are collapsed: a value reappearing later is yielded again.

    If **source** is sorted, every element of the output is unique.

    Args:
        source (IntoSource[T]): The sequence to deduplicate.

    Example:
    ```python
    >>> import adaptchain as ac
    >>> ac.Dedup([1, 1, 2, 2, 3, 1]).collect()
    [1, 2, 3, 1]
    >>> ac.Dedup(sorted([3, 1, 2, 3, 1])).collect()
    [1, 2, 3]

    ```
    """

    __slots__ = ("_last", "_source")

    def __init__(self, source: IntoSource[T]) -> None:
        self._source: Source[T] = into_source(source)
        self._last: Option[T] = NONE

    @override
    def pull(self) -> Option[T]:
        while True:
            match self._source.pull():
                case Some(value) as current:
                    match self._last:
                        case Some(last) if last == value:
                            continue
                        case _:
                            self._last = current
                            return current
                case _:
                    return NONE

    @override
    def can_restart(self) -> bool:
        return can_restart(self._source)

    @override
    def restart(self) -> Dedup[T]:
        if not self.can_restart():
            return super().restart()
        fresh = Dedup(self._source.restart())  # type: ignore[attr-defined]
        fresh._last = self._last
        return fresh


class MultiPeek[T](Adaptor[T]):
    """Look at any number of upcoming elements of **source** without consuming them.

    Peeked elements are pulled from **source** once, kept in a FIFO buffer, and handed back by `pull()` in their original order.

    Two ways to peek are provided:

    - `peek(n)` looks at the element **n** positions ahead (`0` is the next one).
    - `peek_next()` walks the buffer with a cursor, one element further on each call. The cursor goes back to the front on every `pull()`, and on `reset_peek()`.

    Args:
        source (IntoSource[T]): The sequence to wrap.

    Example:
    ```python
    >>> import adaptchain as ac
    >>> it = ac.MultiPeek([1, 2, 3])
    >>> it.peek(1)
    Some(value=2)
    >>> it
    MultiPeek(peeked=[1, 2])
    >>> it.pull()
    Some(value=1)
    >>> it.peek_next(), it.peek_next(), it.peek_next()
    (Some(value=2), Some(value=3), NONE)
    >>> it.collect()
    [2, 3]

    ```
    """

    __slots__ = ("_buffer", "_cursor", "_source")

    def __init__(self, source: IntoSource[T]) -> None:
        self._source: Source[T] = into_source(source)
        self._buffer: deque[T] = deque()
        self._cursor = 0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(peeked=[{get_config().iter_repr(self._buffer)}])"

    def _fill(self, size: int) -> bool:
        while len(self._buffer) < size:
            match self._source.pull():
                case Some(value):
                    self._buffer.append(value)
                case _:
                    return False
        return True

    def peek(self, n: int = 0) -> Option[T]:
        """Return the element **n** positions ahead, without consuming it.

        Args:
            n (int): Zero-based distance from the next element. Defaults to 0.

        Returns:
            Option[T]: The element, or `NONE` if **source** runs out before reaching it.

        Raises:
            ValueError: If **n** is negative, or not an integer.

        Example:
        ```python
        >>> import adaptchain as ac
        >>> it = ac.MultiPeek("ab")
        >>> it.peek(), it.peek(), it.peek(1), it.peek(2)
        (Some(value='a'), Some(value='a'), Some(value='b'), NONE)

        ```
        """
        if not isinstance(n, int) or n < 0:
            msg = f"peek expects a non-negative integer index, got {n!r}"
            raise ValueError(msg)
        if self._fill(n + 1):
            return Some(self._buffer[n])
        return NONE

    def peek_next(self) -> Option[T]:
        """Peek one element further than the previous call to `peek_next()`.

        Returns:
            Option[T]: The element under the cursor, or `NONE` if **source** runs out before reaching it.
        """
        peeked = self.peek(self._cursor)
        if peeked.is_some():
            self._cursor += 1
        return peeked

    def reset_peek(self) -> None:
        """Move the `peek_next()` cursor back to the next element."""
        self._cursor = 0

    @override
    def pull(self) -> Option[T]:
        self._cursor = 0
        if self._buffer:
            return Some(self._buffer.popleft())
        return self._source.pull()
