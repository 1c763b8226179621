import json

import pytest
from arg_fn.cli import EXIT_OK, EXIT_USAGE, ToggleConfig, build_parser, main


class TestBuildParser:
    def test_flags_toggle_fields(self) -> None:
        cfg = build_parser().parse(["-foo", "-bar", "-nobar", "-verbose"])
        assert cfg == ToggleConfig(foo=True, bar=False, verbose=True)

    def test_unknown_arguments_collected(self) -> None:
        cfg = build_parser().parse(["-foo", "-what", "file.txt"])
        assert cfg.foo is True
        assert cfg.unknown == ["-what", "file.txt"]

    def test_uses_supplied_config(self) -> None:
        initial = ToggleConfig(bar=True)
        assert build_parser(initial).parse(["-quiet"]) is initial


class TestMain:
    def test_prints_config_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["-bar", "-nofoo", "-foo", "-nobar", "-foo"]) == EXIT_OK

        out = capsys.readouterr().out
        assert json.loads(out) == {"foo": True, "bar": False, "verbose": False}

    def test_no_arguments(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == EXIT_OK
        assert json.loads(capsys.readouterr().out) == {
            "foo": False,
            "bar": False,
            "verbose": False,
        }

    def test_unknown_argument_exit_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["-foo", "-baz", "-qux"]) == EXIT_USAGE

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "unrecognized argument: -baz" in captured.err
        assert "unrecognized argument: -qux" in captured.err

    def test_reads_sys_argv_by_default(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.argv", ["arg-fn", "-bar"])
        assert main() == EXIT_OK
        assert json.loads(capsys.readouterr().out)["bar"] is True

    def test_verbose_emits_debug_logs(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["-verbose"]) == EXIT_OK
        assert "Parsed arguments" in capsys.readouterr().err
