# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Structured parse errors.

These are the shapes any grammar engine behind `cmm.parser` reports. They are
plain values collected in discovery order; `cmm.core.diagnostics` turns them
into user-facing messages. `expected` keeps the terminal names the parser
would have accepted, for tooling only (messages do not show it).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from cmm.core.span import Location

from .tokens import Token


class ParseError:
	"""Base class for parse error shapes."""

	location: Location


@dataclass(frozen=True)
class InvalidToken(ParseError):
	"""The token stream held something the grammar engine could not use at all."""

	location: Location


@dataclass(frozen=True)
class UnrecognizedEof(ParseError):
	"""Input ended while a construct was still open."""

	location: Location
	expected: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class UnrecognizedToken(ParseError):
	"""No rule allows shifting `token` here (malformed tokens surface this way too)."""

	location: Location
	token: Token
	end: Location
	expected: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class ExtraToken(ParseError):
	"""A token arrived where the input could already have ended."""

	location: Location
	token: Token
	end: Location


__all__ = ["ExtraToken", "InvalidToken", "ParseError", "UnrecognizedEof", "UnrecognizedToken"]
