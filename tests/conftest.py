"""Shared fixtures for adaptchain tests."""

from collections.abc import Callable, Sequence
from typing import override

import pytest

import adaptchain as ac


class CountingSource[T](ac.Adaptor[T]):
    """A restartable source recording how many times it was pulled."""

    __slots__ = ("_data", "_pos", "pulls")

    def __init__(self, data: Sequence[T]) -> None:
        self._data = data
        self._pos = 0
        self.pulls = 0

    @override
    def pull(self) -> ac.Option[T]:
        self.pulls += 1
        if self._pos >= len(self._data):
            return ac.NONE
        value = self._data[self._pos]
        self._pos += 1
        return ac.Some(value)

    @override
    def can_restart(self) -> bool:
        return True

    @override
    def restart(self) -> "CountingSource[T]":
        fresh = CountingSource(self._data)
        fresh._pos = self._pos
        return fresh


type MakeCounting = Callable[[Sequence[object]], CountingSource[object]]


@pytest.fixture
def counting() -> MakeCounting:
    """Factory building `CountingSource` instances."""
    return CountingSource
