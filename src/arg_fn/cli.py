"""
Demo command-line entry point built on :class:`arg_fn.parser.Parser`.

Toggles a couple of boolean flags and prints the resulting configuration as
JSON. Unrecognized arguments are collected and reported with exit code 2.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from pydantic import BaseModel, Field

from arg_fn.common.logging import LogFormat, configure_logging, get_logger
from arg_fn.parser import Parser

EXIT_OK = 0
EXIT_USAGE = 2


class ToggleConfig(BaseModel):
    """Configuration populated by the demo CLI."""

    foo: bool = False
    bar: bool = False
    verbose: bool = False
    unknown: list[str] = Field(default_factory=list)


def _collect_unknown(config: ToggleConfig, argument: str) -> None:
    config.unknown.append(argument)


def _setter(field: str, value: bool):
    def apply(config: ToggleConfig) -> None:
        setattr(config, field, value)

    return apply


def build_parser(config: ToggleConfig | None = None) -> Parser[ToggleConfig]:
    """Build the demo parser with its flag handlers registered."""
    return (
        Parser(config if config is not None else ToggleConfig(), _collect_unknown)
        .arg("-foo", _setter("foo", True))
        .arg("-nofoo", _setter("foo", False))
        .arg("-bar", _setter("bar", True))
        .arg("-nobar", _setter("bar", False))
        .arg("-verbose", _setter("verbose", True))
        .arg("-quiet", _setter("verbose", False))
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demo CLI and return its exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    config = build_parser().parse(args)

    configure_logging(
        logging.DEBUG if config.verbose else logging.WARNING, LogFormat.PLAIN
    )
    logger = get_logger(__name__)
    logger.debug("Parsed arguments", argument_count=len(args))

    if config.unknown:
        logger.error("Unrecognized arguments", arguments=config.unknown)
        for argument in config.unknown:
            sys.stderr.write(f"unrecognized argument: {argument}\n")
        return EXIT_USAGE

    sys.stdout.write(config.model_dump_json(exclude={"unknown"}) + "\n")
    return EXIT_OK
