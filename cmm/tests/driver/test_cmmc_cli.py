# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import io
import logging
from pathlib import Path

import pytest

from cmm.cmmc import LOG_LEVEL_ENV, _configure_logging, compile_source, emit, main


def _write(tmp_path: Path, text: str, name: str = "prog.cmm") -> Path:
	path = tmp_path / name
	path.write_text(text, encoding="utf-8")
	return path


def test_valid_program_prints_tree(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
	path = _write(tmp_path, "int main() {\n  return 0;\n}\n")
	rc = main([str(path)])
	out, err = capsys.readouterr()
	assert rc == 0
	assert out.splitlines()[0] == "Program (1)"
	assert "      FunDec (1)" in out.splitlines()
	assert "RETURN" in out
	assert err == ""


def test_errors_print_diagnostics_only(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
	path = _write(tmp_path, "int main() {\n  int a = 019;\n  a = 1 @ 2;\n}\n")
	rc = main([str(path)])
	out, _err = capsys.readouterr()
	assert rc == 1
	assert out == (
		"Error type A at Line 2: Illegal octal number '019'.\n"
		"Error type A at Line 3: Mysterious character '@'.\n"
	)


def test_missing_file_reports_on_stderr(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
	missing = tmp_path / "nope.cmm"
	rc = main([str(missing)])
	out, err = capsys.readouterr()
	assert rc == 1
	assert out == ""
	assert err.startswith(f"{missing}: error: cannot read file: ")


def test_undecodable_file_reports_on_stderr(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
	path = tmp_path / "bad.cmm"
	path.write_bytes(b"int x\xff;\n")
	rc = main([str(path)])
	out, err = capsys.readouterr()
	assert rc == 1
	assert out == ""
	assert "cannot read file" in err


def test_empty_file_prints_nothing(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
	path = _write(tmp_path, "")
	rc = main([str(path)])
	out, _err = capsys.readouterr()
	assert rc == 0
	assert out == ""


def test_source_argument_is_required(capsys: pytest.CaptureFixture[str]) -> None:
	with pytest.raises(SystemExit) as exc:
		main([])
	assert exc.value.code == 2


def test_compile_and_emit_without_files() -> None:
	result, diags = compile_source("int x;\n}\n")
	buf = io.StringIO()
	assert emit(result, diags, buf) == 1
	assert buf.getvalue() == "Error type B at Line 2: Extra token RC.\n"


def test_log_level_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
	root = logging.getLogger()
	saved_handlers, saved_level = root.handlers[:], root.level
	try:
		root.handlers = []
		monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
		_configure_logging()
		assert root.level == logging.DEBUG
		root.handlers = []
		monkeypatch.setenv(LOG_LEVEL_ENV, "nonsense")
		_configure_logging()
		assert root.level == logging.WARNING
	finally:
		root.handlers = saved_handlers
		root.setLevel(saved_level)
