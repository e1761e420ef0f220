from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable, Iterable, Iterator, MutableSequence
from typing import TYPE_CHECKING, Self

import more_itertools as mit

from .._core import ConfigurationError, Pipeable, SupportsRichComparison
from .._results import Option, Some

if TYPE_CHECKING:
    from .._adaptors import (
        Batching,
        BatchSource,
        Dedup,
        FnMap,
        GroupBy,
        Interleave,
        Merge,
        MultiPeek,
        Product,
        PutBack,
        Step,
    )
    from ._sources import IntoSource


class Adaptor[T](Pipeable, Iterator[T]):
    """Base class of every sequence in the package, sources and adaptors alike.

    Subclasses implement `pull()`, which returns `Some(element)` or `NONE` once exhausted.

    On top of it, `Adaptor` implements the Python `Iterator` protocol, so any adaptor can be used in a for-loop,
    or passed to any function expecting an `Iterable`.

    It also provides a chainable constructor for each adaptor of the package, so pipelines read left to right.

    Example:
    ```python
    >>> import adaptchain as ac
    >>> ac.Seq([1, 1, 2, 3, 3, 4, 5, 6]).dedup().step(2).fn_map(lambda x: x * 10).collect()
    [10, 30, 50]

    ```
    """

    __slots__ = ()

    @abstractmethod
    def pull(self) -> Option[T]:
        """Pull the next element.

        Returns:
            Option[T]: `Some(element)`, or `NONE` if the sequence is exhausted.
        """
        ...

    def __next__(self) -> T:
        match self.pull():
            case Some(value):
                return value
            case _:
                raise StopIteration

    def next(self) -> Option[T]:
        """Alias of `pull()`, for symmetry with Python's `next` builtin.

        Example:
        ```python
        >>> import adaptchain as ac
        >>> it = ac.Seq([1, 2])
        >>> it.next()
        Some(value=1)
        >>> it.next()
        Some(value=2)
        >>> it.next()
        NONE

        ```
        """
        return self.pull()

    def can_restart(self) -> bool:
        """Whether `restart()` is currently supported.

        Returns:
            bool: `False` unless the concrete adaptor and all the sources it wraps support restarting.
        """
        return False

    def restart(self) -> Self:
        """Create an independent copy of this sequence, positioned where this one currently is.

        Elements already pulled are not replayed: the copy yields exactly what this sequence has left.

        Raises:
            ConfigurationError: If `can_restart()` is `False`.
        """
        msg = f"{self.__class__.__name__} cannot be restarted"
        raise ConfigurationError(msg)

    def collect[R](self, collector: Callable[[Iterable[T]], R] = list) -> R:  # type: ignore[assignment]
        """Consume the sequence into a collection.

        Args:
            collector (Callable[[Iterable[T]], R]): Any callable accepting an `Iterable`. Defaults to `list`.

        Returns:
            R: The collected elements.

        Example:
        ```python
        >>> import adaptchain as ac
        >>> ac.Seq([1, 2, 3]).collect()
        [1, 2, 3]
        >>> ac.Seq([1, 2, 2]).collect(set)
        {1, 2}

        ```
        """
        return collector(self)

    def drain(self) -> None:
        """Run the sequence to the end and discard all its elements.

        Example:
        ```python
        >>> import adaptchain as ac
        >>> it = ac.Seq([1, 2, 3])
        >>> it.drain()
        >>> it.next()
        NONE

        ```
        """
        mit.consume(self)

    def count(self) -> int:
        """Consume the sequence and return how many elements it held.

        Example:
        ```python
        >>> import adaptchain as ac
        >>> ac.Seq([1, 1, 2, 1]).dedup().count()
        3

        ```
        """
        return mit.ilen(self)

    def write_to(self, target: MutableSequence[T]) -> int:
        """Assign successive elements to the slots of **target**, stopping at the shortest of the two.

        No element is pulled once **target** is full.

        Args:
            target (MutableSequence[T]): The sequence to write into, starting at index 0.

        Returns:
            int: The number of elements written.

        Example:
        ```python
        >>> import adaptchain as ac
        >>> buf = [0, 0, 0]
        >>> it = ac.Seq([7, 8, 9, 10])
        >>> it.write_to(buf)
        3
        >>> buf
        [7, 8, 9]
        >>> it.next()
        Some(value=10)
        >>> ac.Seq([1]).write_to(buf)
        1
        >>> buf
        [1, 8, 9]

        ```
        """
        written = 0
        for idx in range(len(target)):
            match self.pull():
                case Some(value):
                    target[idx] = value
                    written += 1
                case _:
                    break
        return written

    def fn_map[R](self, func: Callable[[T], R]) -> FnMap[T, R]:
        """Map each element through **func**, lazily.

        Unlike a generator expression, the result can be restarted whenever this sequence can.

        See `FnMap`.

        Example:
        ```python
        >>> import adaptchain as ac
        >>> ac.Seq([1, 2, 3]).fn_map(str).collect()
        ['1', '2', '3']

        ```
        """
        from .._adaptors import FnMap

        return FnMap(self, func)

    def step(self, n: int) -> Step[T]:
        """Yield the first element, then every **n**-th element after it.

        See `Step`.

        Example:
        ```python
        >>> import adaptchain as ac
        >>> ac.Seq(range(10)).step(3).collect()
        [0, 3, 6, 9]

        ```
        """
        from .._adaptors import Step

        return Step(self, n)

    def put_back(self) -> PutBack[T]:
        """Wrap the sequence so that a single element can be pushed back in front of it.

        See `PutBack`.
        """
        from .._adaptors import PutBack

        return PutBack(self)

    def interleave(self, other: IntoSource[T]) -> Interleave[T]:
        """Alternate elements from this sequence and **other** until both run out.

        See `Interleave`.

        Example:
        ```python
        >>> import adaptchain as ac
        >>> ac.Seq([1, 2, 3]).interleave([-1, -2]).collect()
        [1, -1, 2, -2, 3]

        ```
        """
        from .._adaptors import Interleave

        return Interleave(self, other)

    def dedup(self) -> Dedup[T]:
        """Remove consecutive duplicates.

        See `Dedup`.

        Example:
        ```python
        >>> import adaptchain as ac
        >>> ac.Seq("aaabbca").dedup().collect("".join)
        'abca'

        ```
        """
        from .._adaptors import Dedup

        return Dedup(self)

    def multipeek(self) -> MultiPeek[T]:
        """Wrap the sequence so that any number of upcoming elements can be peeked at.

        See `MultiPeek`.
        """
        from .._adaptors import MultiPeek

        return MultiPeek(self)

    def merge(
        self,
        other: IntoSource[T],
        key: Callable[[T], SupportsRichComparison] | None = None,
    ) -> Merge[T]:
        """Merge this sequence and **other** in ascending order.

        See `Merge`.

        Example:
        ```python
        >>> import adaptchain as ac
        >>> ac.Seq([1, 4, 7]).merge([2, 3, 9]).collect()
        [1, 2, 3, 4, 7, 9]

        ```
        """
        from .._adaptors import Merge

        return Merge(self, other, key)

    def batching[R](self, func: Callable[[BatchSource[T]], Option[R]]) -> Batching[T, R]:
        """Let **func** pull as many elements as it likes to build each output element.

        See `Batching`.
        """
        from .._adaptors import Batching

        return Batching(self, func)

    def group_by[K](self, key: Callable[[T], K]) -> GroupBy[K, T]:
        """Group consecutive elements sharing the same key.

        See `GroupBy`.

        Example:
        ```python
        >>> import adaptchain as ac
        >>> for k, group in ac.Seq([1, 3, 2, 4, 5]).group_by(lambda x: x % 2):
        ...     print(k, group.collect())
        1 [1, 3]
        0 [2, 4]
        1 [5]

        ```
        """
        from .._adaptors import GroupBy

        return GroupBy(self, key)

    def product[U](self, other: IntoSource[U]) -> Product[T, U]:
        """Iterate over the cartesian product of this sequence and **other**.

        **other** must support restarting.

        See `Product`.

        Example:
        ```python
        >>> import adaptchain as ac
        >>> ac.Seq([1, 2]).product("ab").collect()
        [(1, 'a'), (1, 'b'), (2, 'a'), (2, 'b')]

        ```
        """
        from .._adaptors import Product

        return Product(self, other)
