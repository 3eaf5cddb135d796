# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
cmm package: front end for the C-- teaching language.

Stages:
  parser: scanner, grammar tables and AST construction
  core:   source locations and diagnostics shared by the stages

The CLI entrypoint is `cmm.cmmc:main`.
"""

__version__ = "0.1.0"

__all__ = ["core", "parser"]
