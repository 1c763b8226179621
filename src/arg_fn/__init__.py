"""Argument parsing that lets the caller specify what to do for each argument."""

from arg_fn.common.exceptions import (
    ArgFnError,
    ArgumentRegistrationError,
    ParserConsumedError,
)
from arg_fn.parser import DefaultHandler, Mutator, Parser

__all__ = [
    "ArgFnError",
    "ArgumentRegistrationError",
    "DefaultHandler",
    "Mutator",
    "Parser",
    "ParserConsumedError",
]

__version__ = "0.1.0"
