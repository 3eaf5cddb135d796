# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
cmmc: C-- front-end driver.

Reads one source file, scans and parses it, then prints either the syntax
tree (no errors) or one Type A/B diagnostic per line in discovery order, both
on stdout. An unreadable file is reported on stderr before anything else
happens.

The log level for stderr logging comes from `CMMC_LOG_LEVEL` (default
WARNING).
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import TextIO

from cmm.core.diagnostics import Diagnostic, diagnostics_from_errors
from cmm.parser.parser import ParseResult, parse_source
from cmm.parser.printer import format_ast

LOG_LEVEL_ENV = "CMMC_LOG_LEVEL"

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
	level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
	level = getattr(logging, level_name, None)
	if not isinstance(level, int):
		level = logging.WARNING
	logging.basicConfig(level=level, format="%(levelname)s: %(name)s: %(message)s", stream=sys.stderr)


def read_source(path: Path) -> str:
	"""Read the whole file as UTF-8; raises OSError/UnicodeDecodeError."""
	return path.read_text(encoding="utf-8")


def compile_source(source: str) -> tuple[ParseResult, list[Diagnostic]]:
	"""Run scanner and parser over `source` in recovering mode."""
	result = parse_source(source, recover=True)
	return result, diagnostics_from_errors(result.errors)


def emit(result: ParseResult, diagnostics: list[Diagnostic], out: TextIO) -> int:
	"""Write the tree or the diagnostics; returns the process exit code."""
	if diagnostics:
		for diag in diagnostics:
			print(diag.render(), file=out)
		return 1
	out.write(format_ast(result.root))
	return 0


def main(argv: list[str] | None = None) -> int:
	"""
	Entry point for the cmmc command.

	Exit code 0 when the tree was printed, 1 when diagnostics were printed or
	the source could not be read.
	"""
	parser = argparse.ArgumentParser(prog="cmmc", description="Parse a C-- source file and print its syntax tree")
	parser.add_argument("source", type=Path, help="Path to C-- source file")
	args = parser.parse_args(argv)

	_configure_logging()

	source_path: Path = args.source
	try:
		source = read_source(source_path)
	except (OSError, UnicodeDecodeError) as err:
		print(f"{source_path}: error: cannot read file: {err}", file=sys.stderr)
		return 1

	logger.debug("parsing %s (%d chars)", source_path, len(source))
	result, diagnostics = compile_source(source)
	logger.debug("%s: %d diagnostic(s)", source_path, len(diagnostics))
	return emit(result, diagnostics, sys.stdout)


__all__ = ["compile_source", "emit", "main", "read_source"]
