from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, Self, runtime_checkable

if TYPE_CHECKING:
    from .._results import Option


class SupportsRichComparison(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...  # noqa: ANN401


@runtime_checkable
class Source[T](Protocol):
    """Anything that can be pulled from.

    `pull()` returns `Some(element)` or `NONE` once the sequence is exhausted.
    """

    def pull(self) -> Option[T]: ...


@runtime_checkable
class Restartable[T](Source[T], Protocol):
    """A source able to produce an independent copy of its iteration state, positioned where it currently is."""

    def can_restart(self) -> bool: ...

    def restart(self) -> Self: ...


def can_restart(source: object) -> bool:
    """Check whether **source** can currently be restarted.

    Adaptors implement `restart` unconditionally but only support it when the sources they wrap do,
    so the capability is both structural and reported at runtime.

    Example:
    ```python
    >>> import adaptchain as ac
    >>> ac.can_restart(ac.Seq([1, 2]))
    True
    >>> ac.can_restart(ac.Iter(iter([1, 2])))
    False
    >>> ac.can_restart(ac.Seq([1, 2]).fn_map(str))
    True
    >>> ac.can_restart(ac.Iter([1, 2]).fn_map(str))
    False

    ```
    """
    return isinstance(source, Restartable) and source.can_restart()
