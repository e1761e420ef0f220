from __future__ import annotations

from collections.abc import Callable
from typing import override

from .._core import Source, SupportsRichComparison, can_restart
from .._iter import Adaptor, IntoSource, into_source
from .._results import NONE, Option


class Merge[T](Adaptor[T]):
    """Merge two sequences in ascending order.

    One element of lookahead is kept for each side.
    On each pull, the smaller of the two pending elements is yielded.
    Ties go to **a**, so the merge is stable: equal elements keep their **a**-before-**b** order.

    If both **a** and **b** are sorted in ascending order, so is the output.
    Unsorted inputs are merged all the same, only the output is not sorted.

    Args:
        a (IntoSource[T]): The left sequence, which wins ties.
        b (IntoSource[T]): The right sequence.
        key (Callable[[T], SupportsRichComparison] | None): Function computing the comparison key of each element.
            Defaults to comparing elements directly.

    Example:
    ```python
    >>> import adaptchain as ac
    >>> ac.Merge([1, 3, 5], [2, 4, 6]).collect()
    [1, 2, 3, 4, 5, 6]
    >>> ac.Merge([(1, "a"), (2, "a")], [(1, "b")], key=lambda p: p[0]).collect()
    [(1, 'a'), (1, 'b'), (2, 'a')]
    >>> ac.Merge(["bb", "dddd"], ["a", "ccc"], key=len).collect()
    ['a', 'bb', 'ccc', 'dddd']

    ```
    """

    __slots__ = ("_a", "_b", "_key", "_pending_a", "_pending_b")

    def __init__(
        self,
        a: IntoSource[T],
        b: IntoSource[T],
        key: Callable[[T], SupportsRichComparison] | None = None,
    ) -> None:
        self._a: Source[T] = into_source(a)
        self._b: Source[T] = into_source(b)
        self._key = key
        self._pending_a: Option[T] = NONE
        self._pending_b: Option[T] = NONE

    def _b_first(self, a: T, b: T) -> bool:
        if self._key is None:
            return b < a  # type: ignore[operator]
        return self._key(b) < self._key(a)

    @override
    def pull(self) -> Option[T]:
        if self._pending_a.is_none():
            self._pending_a = self._a.pull()
        if self._pending_b.is_none():
            self._pending_b = self._b.pull()
        if self._pending_b.is_none():
            out, self._pending_a = self._pending_a, NONE
            return out
        if self._pending_a.is_some() and not self._b_first(
            self._pending_a.unwrap(), self._pending_b.unwrap()
        ):
            out, self._pending_a = self._pending_a, NONE
            return out
        out, self._pending_b = self._pending_b, NONE
        return out

    @override
    def can_restart(self) -> bool:
        return can_restart(self._a) and can_restart(self._b)

    @override
    def restart(self) -> Merge[T]:
        if not self.can_restart():
            return super().restart()
        fresh = Merge(self._a.restart(), self._b.restart(), self._key)  # type: ignore[attr-defined]
        fresh._pending_a = self._pending_a
        fresh._pending_b = self._pending_b
        return fresh
