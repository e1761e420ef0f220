from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, override

from .._core import Source
from .._iter import Adaptor, IntoSource, into_source
from .._results import NONE, Option, Some

logger = logging.getLogger(__name__)


class Group[K, T](Adaptor[T]):
    """The elements of one run of a `GroupBy`, pulled lazily from the shared source.

    A group is only live until its `GroupBy` is pulled again: from then on, it reports exhaustion.

    Attributes:
        key (K): The key shared by every element of the run.
    """

    __slots__ = ("_generation", "_parent", "key")

    def __init__(self, parent: GroupBy[K, T], generation: int, key: K) -> None:
        self._parent = parent
        self._generation = generation
        self.key = key

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(key={self.key!r})"

    def is_live(self) -> bool:
        """Whether the `GroupBy` still points at this group."""
        return self._parent._generation == self._generation  # noqa: SLF001

    @override
    def pull(self) -> Option[T]:
        if not self.is_live():
            logger.debug("pull on stale group %r", self.key)
            return NONE
        return self._parent._pull_group()  # noqa: SLF001


class GroupBy[K, T](Adaptor[tuple[K, Group[K, T]]]):
    """Group consecutive elements of **source** sharing the same key.

    Each pull yields a `(key, group)` tuple, where `group` is a `Group` yielding the elements of the run, lazily.

    A new run starts whenever **key** returns a value different (`!=`) from the current key.
    Elements with equal keys that are not adjacent land in separate groups.

    All groups share the single source: pulling the `GroupBy` again skips whatever is left of the current run,
    and makes every previous group report exhaustion.
    Collect a group first if its elements are needed later.

    **key** is called exactly once per element.

    Args:
        source (IntoSource[T]): The sequence to group.
        key (Callable[[T], K]): Function computing the key of each element.

    Example:
    ```python
    >>> import adaptchain as ac
    >>> groups = ac.GroupBy("aabccc", lambda c: c)
    >>> [(k, group.collect("".join)) for k, group in groups]
    [('a', 'aa'), ('b', 'b'), ('c', 'ccc')]
    >>> groups = ac.GroupBy([1, 2, 11, 3], lambda x: x < 10)
    >>> _, first = groups.pull().unwrap()
    >>> first.pull()
    Some(value=1)
    >>> key, second = groups.pull().unwrap()
    >>> key, second.collect(), first.pull()
    (False, [11], NONE)

    ```
    """

    __slots__ = (
        "_current_key",
        "_exhausted",
        "_generation",
        "_group_done",
        "_key",
        "_pending",
        "_pending_key",
        "_source",
    )

    def __init__(self, source: IntoSource[T], key: Callable[[T], K]) -> None:
        self._source: Source[T] = into_source(source)
        self._key = key
        self._generation = 0
        self._current_key: Any = None
        # Holds the head of the current run until its group pulls it,
        # then the head of the next run once the boundary was read.
        self._pending: Option[T] = NONE
        self._pending_key: Any = None
        self._group_done = True
        self._exhausted = False

    def _pull_group(self) -> Option[T]:
        if self._group_done:
            return NONE
        if self._pending.is_some():
            value, self._pending = self._pending, NONE
            return value
        match self._source.pull():
            case Some(value) as current:
                key = self._key(value)
                if key == self._current_key:
                    return current
                self._pending = current
                self._pending_key = key
            case _:
                self._exhausted = True
        self._group_done = True
        return NONE

    @override
    def pull(self) -> Option[tuple[K, Group[K, T]]]:
        self._generation += 1
        while self._pull_group().is_some():
            pass
        if self._pending.is_none() and not self._exhausted:
            match self._source.pull():
                case Some(value) as current:
                    self._pending = current
                    self._pending_key = self._key(value)
                case _:
                    self._exhausted = True
        if self._pending.is_none():
            return NONE
        self._current_key = self._pending_key
        self._group_done = False
        return Some((self._current_key, Group(self, self._generation, self._current_key)))
