from __future__ import annotations

import copy
import logging
from typing import Any, override

from .._core import ConfigurationError, Restartable, Source, can_restart
from .._iter import Adaptor, IntoSource, into_source
from .._results import NONE, Option, Some
from ._structural import FnMap

logger = logging.getLogger(__name__)


class Product[A, B](Adaptor[tuple[A, B]]):
    """Iterate over the cartesian product of the elements of **a** and **b**.

    The output is outer-major: every pair for the first element of **a**, in the order of **b**,
    then every pair for the second element of **a**, and so on.

    **b** is walked once per element of **a**, so it must support restarting:
    a `Seq`, a `Stride`, any `Sequence` (wrapped in a `Seq`), or an adaptor built on top of those, such as `FnMap`.
    **b** itself is never pulled: it is kept as a snapshot, and each walk pulls from a fresh restart of it.
    Elements already pulled from **b** before construction are not part of the product.

    The first element of **a** is pulled at construction.

    Args:
        a (IntoSource[A]): The outer sequence, walked once.
        b (IntoSource[B]): The inner sequence, walked once per element of **a**.

    Raises:
        ConfigurationError: If **b** cannot be restarted.

    Example:
    ```python
    >>> import adaptchain as ac
    >>> ac.Product([1, 2], ["a", "b"]).collect()
    [(1, 'a'), (1, 'b'), (2, 'a'), (2, 'b')]
    >>> ac.Product(iter([1, 2]), ac.Seq([3]).fn_map(str)).collect()
    [(1, '3'), (2, '3')]
    >>> ac.Product([1, 2], iter("ab"))
    Traceback (most recent call last):
        ...
    adaptchain._core._errors.ConfigurationError: Product's inner source must support restarting, got Iter

    ```
    """

    __slots__ = ("_a", "_a_cur", "_b", "_b_fresh", "_b_orig")

    def __init__(self, a: IntoSource[A], b: IntoSource[B]) -> None:
        inner = into_source(b)
        if not can_restart(inner):
            msg = f"Product's inner source must support restarting, got {inner.__class__.__name__}"
            raise ConfigurationError(msg)
        self._a: Source[A] = into_source(a)
        self._b_orig: Restartable[B] = inner  # type: ignore[assignment]
        self._b = self._b_orig.restart()
        self._b_fresh = True
        self._a_cur: Option[A] = self._a.pull()

    @override
    def pull(self) -> Option[tuple[A, B]]:
        while self._a_cur.is_some():
            match self._b.pull():
                case Some(value):
                    self._b_fresh = False
                    return Some((self._a_cur.unwrap(), value))
                case _ if self._b_fresh:
                    logger.debug("inner source of %r is empty", self)
                    self._a_cur = NONE
                case _:
                    self._a_cur = self._a.pull()
                    self._b = self._b_orig.restart()
                    self._b_fresh = True
        return NONE

    @override
    def can_restart(self) -> bool:
        return can_restart(self._a)

    @override
    def restart(self) -> Product[A, B]:
        if not self.can_restart():
            return super().restart()
        fresh = copy.copy(self)
        fresh._a = self._a.restart()  # type: ignore[attr-defined]
        fresh._b = self._b.restart()
        return fresh


def append_tuple[*Ts, X](pair: tuple[tuple[*Ts], X]) -> tuple[*Ts, X]:
    """Flatten a `(tuple, element)` pair: `((x, y, z), w) => (x, y, z, w)`.

    Example:
    ```python
    >>> import adaptchain as ac
    >>> ac.append_tuple(((1, 2), 3))
    (1, 2, 3)
    >>> ac.append_tuple(((), "a"))
    ('a',)

    ```
    """
    head, last = pair
    return (*head, last)


def _singleton[T](value: T) -> tuple[T]:
    return (value,)


def iproduct(*sources: IntoSource[Any]) -> Adaptor[tuple[Any, ...]]:
    """Iterate over the cartesian product of any number of sequences, as flat tuples.

    Built by chaining `Product` and `FnMap(append_tuple)`: every source after the first must support restarting.

    Args:
        *sources (IntoSource[Any]): The sequences to combine, outermost first.

    Returns:
        Adaptor[tuple[Any, ...]]: The product, as tuples of `len(sources)` elements.

    Raises:
        ConfigurationError: If no source is given, or if a source after the first cannot be restarted.

    Example:
    ```python
    >>> import adaptchain as ac
    >>> ac.iproduct(range(2), "ab", [True]).collect()
    [(0, 'a', True), (0, 'b', True), (1, 'a', True), (1, 'b', True)]
    >>> ac.iproduct([1, 2]).collect()
    [(1,), (2,)]

    ```
    """
    if not sources:
        msg = "iproduct expects at least one source"
        raise ConfigurationError(msg)
    first, *rest = sources
    combined: Adaptor[tuple[Any, ...]] = FnMap(first, _singleton)
    for source in rest:
        combined = FnMap(Product(combined, source), append_tuple)
    return combined
