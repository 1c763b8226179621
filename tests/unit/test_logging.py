import json
import logging

import pytest
from arg_fn import Parser
from arg_fn.common.logging import LogFormat, configure_logging, get_logger, reset_logging


def _our_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if h.get_name() == "arg_fn"]


def test_json_format_renders_structlog_events(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("info", LogFormat.JSON)
    get_logger("demo").info("hello", answer=42)

    line = capsys.readouterr().err.strip().splitlines()[-1]
    payload = json.loads(line)
    assert payload["event"] == "hello"
    assert payload["answer"] == 42
    assert payload["level"] == "info"


def test_stdlib_records_go_through_same_handler(
    capsys: pytest.CaptureFixture[str],
) -> None:
    configure_logging(logging.DEBUG, "plain")
    Parser([], lambda cfg, arg: None).parse(["-x"])

    assert "Unrecognized argument '-x'" in capsys.readouterr().err


def test_level_filters_records(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(logging.WARNING, LogFormat.CONSOLE)
    get_logger("demo").info("hidden")
    get_logger("demo").warning("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err


def test_reconfigure_keeps_single_handler() -> None:
    configure_logging()
    configure_logging()
    assert len(_our_handlers()) == 1

    reset_logging()
    assert _our_handlers() == []


def test_unknown_level_rejected() -> None:
    with pytest.raises(ValueError, match="nope"):
        configure_logging("nope")


def test_unknown_format_rejected() -> None:
    with pytest.raises(ValueError):
        configure_logging(logging.INFO, "xml")
