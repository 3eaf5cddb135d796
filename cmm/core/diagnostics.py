# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
User-facing diagnostics.

There are exactly two categories, chosen by what the offending item is rather
than by where the parser noticed it:

- Type A (lexical): the offending token is `UnknownChar`, `IllegalOct` or
  `IllegalHex`, whatever error shape carried it.
- Type B (syntactic): everything else.

Classification happens here, at reporting time; the scanner only produces
malformed tokens as ordinary values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from cmm.parser.errors import ExtraToken, InvalidToken, ParseError, UnrecognizedEof, UnrecognizedToken
from cmm.parser.tokens import Token, TokenKind

from .span import Location

LEXICAL = "A"
SYNTACTIC = "B"

_MALFORMED_DETAILS = {
	TokenKind.UNKNOWN_CHAR: "Mysterious character '{}'",
	TokenKind.ILLEGAL_OCT: "Illegal octal number '{}'",
	TokenKind.ILLEGAL_HEX: "Illegal hexadecimal number '{}'",
}


@dataclass
class Diagnostic:
	"""Represents one reported front-end error."""

	message: str
	# "A" (lexical) or "B" (syntactic).
	code: str = SYNTACTIC
	phase: str | None = None
	severity: str = "error"
	span: Location = field(default_factory=Location)  # Location() denotes unknown.
	notes: list[str] = field(default_factory=list)

	def __post_init__(self) -> None:
		if self.span is None:  # type: ignore[unreachable]
			self.span = Location()

	@property
	def line(self) -> int:
		return self.span.line

	def render(self) -> str:
		"""`Error type {code} at Line {line}: {message}.`"""
		return f"Error type {self.code} at Line {self.span.line}: {self.message}."


def _offending_token(err: ParseError) -> Token | None:
	if isinstance(err, (UnrecognizedToken, ExtraToken)):
		return err.token
	return None


def diagnostic_from_error(err: ParseError) -> Diagnostic:
	"""Classify one parse error into a Type A or Type B diagnostic."""
	token = _offending_token(err)
	if token is not None and token.is_malformed:
		return Diagnostic(
			message=_MALFORMED_DETAILS[token.kind].format(token.value),
			code=LEXICAL,
			phase="lexer",
			span=err.location,
		)
	if isinstance(err, InvalidToken):
		message = "Invalid Token"
	elif isinstance(err, UnrecognizedEof):
		message = "Unrecognized EOF"
	elif isinstance(err, UnrecognizedToken):
		message = f"Unexpected token {err.token}"
	elif isinstance(err, ExtraToken):
		message = f"Extra token {err.token}"
	else:
		raise TypeError(f"unsupported parse error: {err!r}")
	return Diagnostic(message=message, code=SYNTACTIC, phase="parser", span=err.location)


def diagnostics_from_errors(errors: Iterable[ParseError]) -> list[Diagnostic]:
	"""Classify errors, keeping discovery order."""
	return [diagnostic_from_error(err) for err in errors]


__all__ = ["Diagnostic", "LEXICAL", "SYNTACTIC", "diagnostic_from_error", "diagnostics_from_errors"]
