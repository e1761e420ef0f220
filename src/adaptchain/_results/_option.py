from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Never

if TYPE_CHECKING:
    from typing import TypeIs


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """The result of a single `pull()`: either `Some(value)` or `NONE` (exhaustion).

    Pattern matching is supported on the `Some` variant:

    ```python
    >>> from adaptchain import NONE, Some
    >>> match Some(3):
    ...     case Some(value):
    ...         print(value)
    ...     case _:
    ...         print("exhausted")
    3

    ```
    """

    __slots__ = ()

    @staticmethod
    def from_[V](value: V | None) -> Option[V]:
        """Create an `Option` from a value that may be `None`.

        Args:
            value (V | None): The value to wrap.

        Returns:
            Option[V]: `Some(value)` if the value is not `None`, otherwise `NONE`.

        Example:
        ```python
        >>> from adaptchain import Option
        >>> Option.from_(2)
        Some(value=2)
        >>> Option.from_(None)
        NONE

        ```
        """
        return NONE if value is None else Some(value)

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """Returns `True` if the option is a `Some` value.

        Example:
        ```python
        >>> from adaptchain import NONE, Some
        >>> Some(2).is_some()
        True
        >>> NONE.is_some()
        False

        ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Returns `True` if the option is `NONE`."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained `Some` value.

        Returns:
            T: The contained value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> from adaptchain import NONE, Some
        >>> Some("car").unwrap()
        'car'
        >>> NONE.unwrap()
        Traceback (most recent call last):
            ...
        adaptchain._results._option.OptionUnwrapError: called `unwrap` on a `None`

        ```
        """
        ...

    def expect(self, msg: str) -> T:
        """Returns the contained `Some` value, or raises with a provided message.

        Args:
            msg (str): The message to include in the exception if the option is `NONE`.

        Returns:
            T: The contained value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> from adaptchain import NONE, Some
        >>> Some("value").expect("fruits are healthy")
        'value'
        >>> NONE.expect("fruits are healthy")
        Traceback (most recent call last):
            ...
        adaptchain._results._option.OptionUnwrapError: fruits are healthy (called `expect` on a `None`)

        ```
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """Returns the contained `Some` value or a provided default.

        Example:
        ```python
        >>> from adaptchain import NONE, Some
        >>> Some("car").unwrap_or("bike")
        'car'
        >>> NONE.unwrap_or("bike")
        'bike'

        ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Returns the contained `Some` value or computes it from a function.

        Args:
            f (Callable[[], T]): Called to produce a default if the option is `NONE`.

        Returns:
            T: The contained value or the result of `f`.
        """
        return self.unwrap() if self.is_some() else f()

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """Maps an `Option[T]` to `Option[U]` by applying a function to a contained value.

        Example:
        ```python
        >>> from adaptchain import NONE, Some
        >>> Some("Hello, World!").map(len)
        Some(value=13)
        >>> NONE.map(len)
        NONE

        ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Calls a function with the contained value if `Some`, otherwise returns `NONE`.

        Some languages call this operation flatmap.

        Example:
        ```python
        >>> from adaptchain import NONE, Some
        >>> Some(2).and_then(lambda x: Some(x * x))
        Some(value=4)
        >>> Some(2).and_then(lambda x: NONE)
        NONE

        ```
        """
        if self.is_some():
            return f(self.unwrap())
        return NONE

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """Returns the option if it contains a value, otherwise calls `f` and returns its result."""
        return self if self.is_some() else f()


@dataclass(slots=True)
class Some[T](Option[T]):
    """Option variant representing the presence of a value.

    Args:
        value (T): The contained value.
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value."""

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on a `None`")


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""
