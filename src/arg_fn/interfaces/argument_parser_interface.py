from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Protocol, TypeVar, runtime_checkable

ConfigT = TypeVar("ConfigT")


@runtime_checkable
class IArgumentParser(Protocol[ConfigT]):
    """Dispatches literal argument strings to callbacks that mutate a config.

    Implementations own the configuration value and hand it back from
    ``parse``. Unrecognized arguments go to a fallback handler rather than
    raising.
    """

    def arg(
        self, key: str, handler: Callable[[ConfigT], None]
    ) -> IArgumentParser[ConfigT]:
        """Register ``handler`` for the literal argument ``key``.

        Returns:
            The same parser, so registrations can be chained.
        """
        ...

    def parse(self, args: Iterable[str]) -> ConfigT:
        """Apply the handlers for ``args`` in order and return the config."""
        ...
