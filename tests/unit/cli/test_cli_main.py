"""Tests for the protoutline command-line interface."""

import io
import json
import logging
from pathlib import Path

import pytest
from rich.console import Console

from protoutline.cli.arg_parser import parse_args
from protoutline.cli.bootstrap import LOGGER_NAME, configure_logging
from protoutline.cli.main import main, outline_file, run
from protoutline.display.console import set_console


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.json"
    path.write_text("{}", encoding="utf-8")
    return path


@pytest.fixture
def console() -> Console:
    """Install a wide recording console that keeps output off stdout."""
    console = Console(width=200, record=True, color_system=None, file=io.StringIO())
    set_console(console)
    return console


@pytest.fixture
def proto_file(tmp_path: Path, proto3_text: str) -> Path:
    path = tmp_path / "proto3.proto"
    path.write_text(proto3_text, encoding="utf-8")
    return path


class TestParseArgs:
    def test_defaults(self) -> None:
        args = parse_args(["a.proto"])
        assert args.files == [Path("a.proto")]
        assert args.json is False
        assert args.lenient is False
        assert args.config is None
        assert args.verbose is False

    def test_flags(self) -> None:
        args = parse_args(["--json", "--lenient", "-v", "--config", "c.json", "a.proto", "b.proto"])
        assert args.files == [Path("a.proto"), Path("b.proto")]
        assert args.json and args.lenient and args.verbose
        assert args.config == Path("c.json")

    def test_requires_a_file(self) -> None:
        with pytest.raises(SystemExit):
            parse_args([])


class TestRun:
    def test_tree_output(self, proto_file: Path, config_file: Path, console: Console) -> None:
        assert run(parse_args(["--config", str(config_file), str(proto_file)])) == 0
        output = console.export_text()
        assert str(proto_file) in output
        assert "FooService" in output
        assert "rpc(Foo) returns (Baz)" in output
        assert "oneval_b" in output

    def test_json_output(
        self, proto_file: Path, config_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert run(parse_args(["--json", "--config", str(config_file), str(proto_file)])) == 0
        (outline,) = json.loads(capsys.readouterr().out)
        assert outline["file"] == str(proto_file)
        service = outline["symbols"][0]
        assert service["name"] == "FooService"
        assert service["kind"] == "CLASS"
        assert service["range"] == [7, 12]
        assert service["selection_line"] == 7
        assert service["children"][0]["detail"] == "rpc(Foo) returns (Bar)"

    def test_parse_error_exit_code(
        self, tmp_path: Path, config_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        bad = tmp_path / "bad.proto"
        bad.write_text("message A {\n  int32 x = 1;\n)\n", encoding="utf-8")
        assert run(parse_args(["--config", str(config_file), str(bad)])) == 1
        assert "Bracket mismatch at line 3" in capsys.readouterr().err

    def test_missing_file(
        self, tmp_path: Path, config_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        missing = tmp_path / "missing.proto"
        assert run(parse_args(["--config", str(config_file), str(missing)])) == 1
        assert "cannot read file" in capsys.readouterr().err

    def test_file_not_utf8(
        self, tmp_path: Path, config_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        latin1 = tmp_path / "latin1.proto"
        latin1.write_bytes(b"message A { \xff }")
        assert run(parse_args(["--config", str(config_file), str(latin1)])) == 1
        assert f"{latin1}: cannot read file: not valid UTF-8" in capsys.readouterr().err

    def test_good_files_still_printed_after_failure(
        self,
        tmp_path: Path,
        proto_file: Path,
        config_file: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Errors go to stderr, so stdout stays valid JSON."""
        bad = tmp_path / "bad.proto"
        bad.write_text("message A {", encoding="utf-8")
        exit_code = run(parse_args(["--json", "--config", str(config_file), str(bad), str(proto_file)]))
        assert exit_code == 1
        captured = capsys.readouterr()
        outlines = json.loads(captured.out)
        assert [o["file"] for o in outlines] == [str(proto_file)]
        assert "Unexpected end of input" in captured.err

    def test_tree_errors_kept_off_stdout(
        self,
        tmp_path: Path,
        proto_file: Path,
        config_file: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        bad = tmp_path / "bad.proto"
        bad.write_text("message A { ) }", encoding="utf-8")
        assert run(parse_args(["--config", str(config_file), str(bad), str(proto_file)])) == 1
        captured = capsys.readouterr()
        assert "FooService" in captured.out
        assert "Bracket mismatch" not in captured.out
        assert f"{bad}: Bracket mismatch at line 1" in captured.err

    def test_lenient_flag(
        self, tmp_path: Path, config_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        truncated = tmp_path / "t.proto"
        truncated.write_text("message A {\n  int32 x = 1;\n", encoding="utf-8")
        assert run(parse_args(["--json", "--lenient", "--config", str(config_file), str(truncated)])) == 0
        (outline,) = json.loads(capsys.readouterr().out)
        assert outline["symbols"][0]["children"][0]["name"] == "x"

    def test_lenient_from_config(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config = tmp_path / "lenient.json"
        config.write_text(json.dumps({"parser": {"strict_end_of_input": False}}), encoding="utf-8")
        truncated = tmp_path / "t.proto"
        truncated.write_text("message A {\n", encoding="utf-8")
        assert run(parse_args(["--json", "--config", str(config), str(truncated)])) == 0

    def test_config_error(
        self, tmp_path: Path, proto_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config = tmp_path / "bad.json"
        config.write_text('{"cache": {"max_documents": 0}}', encoding="utf-8")
        assert run(parse_args(["--config", str(config), str(proto_file)])) == 1
        assert "Config error" in capsys.readouterr().err

    def test_verbose_enables_debug_logging(self, proto_file: Path, config_file: Path, console: Console) -> None:
        run(parse_args(["-v", "--config", str(config_file), str(proto_file)]))
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG


class TestMain:
    def test_main_exits_with_code(
        self, proto_file: Path, config_file: Path, monkeypatch: pytest.MonkeyPatch, console: Console
    ) -> None:
        monkeypatch.setattr("sys.argv", ["protoutline", "--config", str(config_file), str(proto_file)])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 0


class TestOutlineFile:
    def test_reads_and_parses(self, proto_file: Path) -> None:
        names = [node.name for node in outline_file(proto_file, strict=True)]
        assert names == ["FooService", "Foo", "Bar", "Baz"]


class TestConfigureLogging:
    def test_replaces_handlers(self) -> None:
        configure_logging("INFO")
        logger = configure_logging(logging.DEBUG)
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
