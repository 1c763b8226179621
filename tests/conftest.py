import logging
from collections.abc import Iterator

import pytest
import structlog
from arg_fn.common.logging import reset_logging


@pytest.fixture(autouse=True)
def _isolate_logging() -> Iterator[None]:
    """Undo logging configuration made by a test."""
    root = logging.getLogger()
    level = root.level
    try:
        yield
    finally:
        reset_logging()
        root.setLevel(level)
        structlog.reset_defaults()
