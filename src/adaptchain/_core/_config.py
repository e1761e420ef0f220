from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, fields, replace
from typing import Any

import cytoolz as cz

from ._errors import ConfigurationError


@dataclass(slots=True, frozen=True)
class Config:
    """Process-wide display settings.

    Args:
        repr_max_items (int): How many elements a repr shows before eliding the rest.
        repr_width (int): Character budget for a single element repr.
    """

    repr_max_items: int = 10
    repr_width: int = 40

    def iter_repr(self, data: Iterable[Any]) -> str:
        """Render at most `repr_max_items` elements of **data**, comma separated.

        Only `repr_max_items + 1` elements are read from **data**.

        Example:
        ```python
        >>> from adaptchain import Config
        >>> Config(repr_max_items=3).iter_repr(range(10))
        '0, 1, 2, ...'
        >>> Config().iter_repr(["a", "b"])
        "'a', 'b'"

        ```
        """
        shown = tuple(cz.itertoolz.take(self.repr_max_items + 1, data))
        parts = [self._item_repr(x) for x in shown[: self.repr_max_items]]
        if len(shown) > self.repr_max_items:
            parts.append("...")
        return ", ".join(parts)

    def _item_repr(self, value: object) -> str:
        text = repr(value)
        if len(text) > self.repr_width:
            return f"{text[: self.repr_width - 3]}..."
        return text


_CONFIG = [Config()]


def get_config() -> Config:
    """Get the current configuration."""
    return _CONFIG[0]


def set_config(**changes: int) -> Config:
    """Update the current configuration.

    Args:
        **changes (int): Fields of `Config` to replace.

    Returns:
        Config: The new configuration.

    Raises:
        ConfigurationError: If a field is unknown or a value is not a positive integer.

    Example:
    ```python
    >>> import adaptchain as ac
    >>> previous = ac.get_config()
    >>> ac.set_config(repr_max_items=2).repr_max_items
    2
    >>> ac.Seq(range(5))
    Seq(0, 1, ...)
    >>> ac.set_config(repr_max_items=previous.repr_max_items).repr_max_items
    10
    >>> ac.set_config(colour=3)
    Traceback (most recent call last):
        ...
    adaptchain._core._errors.ConfigurationError: unknown config field 'colour'

    ```
    """
    known = {f.name for f in fields(Config)}
    for name, value in changes.items():
        if name not in known:
            msg = f"unknown config field {name!r}"
            raise ConfigurationError(msg)
        if not isinstance(value, int) or isinstance(value, bool) or value < 1:
            msg = f"{name} must be a positive integer, got {value!r}"
            raise ConfigurationError(msg)
    _CONFIG[0] = replace(_CONFIG[0], **changes)
    return _CONFIG[0]
