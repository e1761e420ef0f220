from __future__ import annotations

import logging
from collections.abc import Callable
from typing import override

from .._core import ContractViolationError, Source
from .._iter import Adaptor, IntoSource, into_source
from .._results import NONE, Option

logger = logging.getLogger(__name__)


class BatchSource[T](Adaptor[T]):
    """The view of the wrapped source handed to a `Batching` function.

    It pulls from the source in order, and counts the elements it hands out.
    """

    __slots__ = ("_consumed", "_exhausted", "_lookahead", "_source")

    def __init__(self, source: Source[T]) -> None:
        self._source = source
        self._lookahead: Option[T] = NONE
        self._consumed = 0
        self._exhausted = False

    @property
    def consumed(self) -> int:
        """How many elements were pulled during the current call of the batching function."""
        return self._consumed

    @override
    def pull(self) -> Option[T]:
        if self._lookahead.is_some():
            value, self._lookahead = self._lookahead, NONE
            self._consumed += 1
            return value
        if self._exhausted:
            return NONE
        value = self._source.pull()
        if value.is_none():
            self._exhausted = True
            return NONE
        self._consumed += 1
        return value

    def _has_more(self) -> bool:
        if self._lookahead.is_some():
            return True
        if not self._exhausted:
            self._lookahead = self._source.pull()
            self._exhausted = self._lookahead.is_none()
        return self._lookahead.is_some()


class Batching[T, R](Adaptor[R]):
    """A "meta adaptor": **func** receives the source and picks off as many elements as it likes to build each output.

    On each pull, **func** is called once with a `BatchSource`, and returns:

    - `Some(output)`, which is yielded.
    - `NONE`, which ends the sequence for good.

    **func** must pull at least one element per call, unless the source is exhausted.
    Returning `NONE` without pulling anything while elements remain would stall the sequence:
    this is detected, and raises a `ContractViolationError`.
    The element read to detect it is not lost.

    Args:
        source (IntoSource[T]): The sequence to batch.
        func (Callable[[BatchSource[T]], Option[R]]): Function building one output from the source.

    Example:
    ```python
    >>> import adaptchain as ac
    >>> def pairs(src: ac.BatchSource[int]) -> ac.Option[tuple[int, int]]:
    ...     return src.pull().and_then(lambda a: src.pull().map(lambda b: (a, b)))
    >>> ac.Batching([1, 2, 3, 4, 5], pairs).collect()
    [(1, 2), (3, 4)]

    ```
    """

    __slots__ = ("_done", "_func", "_source")

    def __init__(
        self, source: IntoSource[T], func: Callable[[BatchSource[T]], Option[R]]
    ) -> None:
        self._source = BatchSource(into_source(source))
        self._func = func
        self._done = False

    @override
    def pull(self) -> Option[R]:
        if self._done:
            return NONE
        self._source._consumed = 0  # noqa: SLF001
        output = self._func(self._source)
        if output.is_some():
            return output
        if self._source.consumed == 0 and self._source._has_more():  # noqa: SLF001
            msg = "batching function returned NONE without consuming an element while the source has more"
            raise ContractViolationError(msg)
        logger.debug("batching function %r ended the sequence", self._func)
        self._done = True
        return NONE
