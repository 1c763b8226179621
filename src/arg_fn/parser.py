"""
Argument parser that lets the caller decide what each argument does.

Each literal argument string is mapped to a callback that mutates a
caller-owned configuration value. Arguments without a registered callback are
handed to a fallback along with the raw string.

Example::

    @dataclass
    class Config:
        foo: bool = False
        bar: bool = False

    cfg = (
        Parser(Config(), lambda cfg, arg: None)
        .arg("-foo", lambda cfg: setattr(cfg, "foo", True))
        .arg("-nofoo", lambda cfg: setattr(cfg, "foo", False))
        .arg("-bar", lambda cfg: setattr(cfg, "bar", True))
        .arg("-nobar", lambda cfg: setattr(cfg, "bar", False))
        .parse(["-bar", "-nofoo", "-foo", "-nobar", "-foo"])
    )
    assert cfg == Config(foo=True, bar=False)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from arg_fn.common.exceptions import ArgumentRegistrationError, ParserConsumedError
from arg_fn.interfaces.argument_parser_interface import ConfigT, IArgumentParser

logger = logging.getLogger(__name__)

Mutator = Callable[[ConfigT], None]
DefaultHandler = Callable[[ConfigT, str], None]


def _ignore_unknown(config: Any, argument: str) -> None:
    return None


class Parser(IArgumentParser[ConfigT]):
    """Parser holding the config, a map of arguments to callbacks, and a
    fallback called for arguments that are not in the map.

    Registering the same argument twice replaces the earlier callback, and the
    empty string is an ordinary key.
    """

    def __init__(self, config: ConfigT, unknown: DefaultHandler[ConfigT]) -> None:
        if not callable(unknown):
            raise ArgumentRegistrationError(
                "Fallback handler must be callable", argument=unknown
            )
        self._config = config
        self._arguments: dict[str, Mutator[ConfigT]] = {}
        self._unknown = unknown
        self._consumed = False

    @classmethod
    def with_arguments(
        cls,
        config: ConfigT,
        arguments: Mapping[str, Mutator[ConfigT]],
        unknown: DefaultHandler[ConfigT],
    ) -> Parser[ConfigT]:
        """Build a parser from an existing argument-to-callback mapping.

        The mapping is copied; later registrations do not touch ``arguments``.
        """
        parser = cls(config, unknown)
        for key, handler in arguments.items():
            parser.arg(key, handler)
        return parser

    @classmethod
    def default(cls, config_factory: Callable[[], ConfigT] | None = None) -> Parser[Any]:
        """Build a parser over ``config_factory()`` that ignores unknown arguments.

        Without a factory the config is an empty ``dict``.
        """
        factory: Callable[[], Any] = config_factory if config_factory is not None else dict
        return cls(factory(), _ignore_unknown)

    @property
    def consumed(self) -> bool:
        return self._consumed

    def get_arguments(self) -> dict[str, Mutator[ConfigT]]:
        """Return a copy of the registered argument handlers."""
        return self._arguments.copy()

    def arg(self, key: str, handler: Mutator[ConfigT]) -> Parser[ConfigT]:
        """Register ``handler`` for the literal argument ``key``.

        Args:
            key: Exact argument string to match
            handler: Callback receiving the config to mutate

        Returns:
            This parser, for chaining

        Raises:
            ArgumentRegistrationError: If ``key`` is not a string or ``handler``
                is not callable
            ParserConsumedError: If ``parse`` has already run
        """
        self._ensure_not_consumed()
        if not isinstance(key, str):
            raise ArgumentRegistrationError(
                "Argument key must be a string", argument=key
            )
        if not callable(handler):
            raise ArgumentRegistrationError(
                f"Handler for argument {key!r} must be callable", argument=key
            )
        if key in self._arguments:
            logger.debug(f"Replacing handler for argument {key!r}")
        self._arguments[key] = handler
        return self

    def parse(self, args: Iterable[str]) -> ConfigT:
        """Apply the callbacks for ``args`` in order and return the config.

        ``args`` is consumed lazily. The parser cannot be used again afterwards,
        even if a callback raises.

        Raises:
            ParserConsumedError: If ``parse`` has already run
        """
        self._ensure_not_consumed()
        self._consumed = True

        debug = logger.isEnabledFor(logging.DEBUG)
        config = self._config
        for argument in args:
            handler = self._arguments.get(argument)
            if handler is not None:
                if debug:
                    logger.debug(f"Dispatching argument {argument!r}")
                handler(config)
            else:
                if debug:
                    logger.debug(f"Unrecognized argument {argument!r}; using fallback")
                self._unknown(config, argument)

        return config

    def _ensure_not_consumed(self) -> None:
        if self._consumed:
            raise ParserConsumedError()
