# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
C-- scanner.

The scanner is a single left-to-right pass over the source driven by a fixed
pattern table. It is total: input that matches no pattern becomes an
`UnknownChar` token, and malformed octal/hexadecimal literals become
`IllegalOct`/`IllegalHex` tokens carrying the raw lexeme. Nothing in the
source text can make the scanner raise.

`Lexer` is a lazy, single-use iterator of `(start, Token, end)` triples that
always ends with exactly one `EOI` token.
"""

from __future__ import annotations

import re
from typing import Iterator

from cmm.core.span import LineIndex, Location

from .tokens import EOI, Token, TokenKind

# Largest value an INT literal may take (signed 32-bit).
INT_MAX = 2**31 - 1

Triple = tuple[Location, Token, Location]

# Order matters: the first alternative that matches wins, so longer or more
# specific spellings come before their prefixes (floats before integers, hex
# and octal prefixes before plain decimals, `<=` before `<`, `&&` before `&`).
TOKEN_SPEC: tuple[tuple[str, str], ...] = (
	("WS", r"[ \t\r\n]+"),
	("LINE_COMMENT", r"//[^\n]*"),
	("BLOCK_COMMENT", r"/\*.*?\*/"),
	("FLOAT", r"[0-9]+\.[0-9]+(?:[eE][+-]?[0-9]+)?"),
	("HEX", r"0[xX][0-9A-Za-z]*"),
	("OCT", r"0[0-9]+"),
	("DEC", r"[1-9][0-9]*|0"),
	("WORD", r"[A-Za-z_][A-Za-z0-9_]*"),
	("RELOP", r"<=|>=|==|!=|<|>"),
	("AND", r"&&"),
	("OR", r"\|\|"),
	("PUNCT", r"[;,=+\-*/.!()\[\]{}]"),
)

_MASTER_RE = re.compile("|".join(f"(?P<{name}>{pattern})" for name, pattern in TOKEN_SPEC), re.S)

_SKIPPED = frozenset({"WS", "LINE_COMMENT", "BLOCK_COMMENT"})

_DIGITS: dict[int, frozenset[str]] = {
	8: frozenset("01234567"),
	16: frozenset("0123456789abcdefABCDEF"),
}

TYPE_NAMES = frozenset({"int", "float"})

KEYWORDS: dict[str, TokenKind] = {
	"struct": TokenKind.STRUCT,
	"return": TokenKind.RETURN,
	"if": TokenKind.IF,
	"else": TokenKind.ELSE,
	"while": TokenKind.WHILE,
}

PUNCTUATION: dict[str, TokenKind] = {
	";": TokenKind.SEMI,
	",": TokenKind.COMMA,
	"=": TokenKind.ASSIGNOP,
	"+": TokenKind.PLUS,
	"-": TokenKind.MINUS,
	"*": TokenKind.STAR,
	"/": TokenKind.DIV,
	".": TokenKind.DOT,
	"!": TokenKind.NOT,
	"(": TokenKind.LP,
	")": TokenKind.RP,
	"[": TokenKind.LB,
	"]": TokenKind.RB,
	"{": TokenKind.LC,
	"}": TokenKind.RC,
}


def _radix_literal(digits: str, base: int) -> int | None:
	"""Interpret `digits` in `base`; None when empty, out of range, or too large."""
	# int() alone would also accept "0x"-prefixed and underscored digit strings.
	if not digits or not _DIGITS[base].issuperset(digits):
		return None
	value = int(digits, base)
	if value > INT_MAX:
		return None
	return value


def _word_token(text: str) -> Token:
	if text in TYPE_NAMES:
		return Token(TokenKind.TYPE, text)
	kind = KEYWORDS.get(text)
	if kind is not None:
		return Token(kind)
	return Token(TokenKind.ID, text)


def _make_token(group: str, text: str) -> Token:
	if group == "FLOAT":
		return Token(TokenKind.FLOAT, float(text))
	if group == "HEX":
		value = _radix_literal(text[2:], 16)
		return Token(TokenKind.ILLEGAL_HEX, text) if value is None else Token(TokenKind.INT, value)
	if group == "OCT":
		value = _radix_literal(text[1:], 8)
		return Token(TokenKind.ILLEGAL_OCT, text) if value is None else Token(TokenKind.INT, value)
	if group == "DEC":
		return Token(TokenKind.INT, int(text))
	if group == "WORD":
		return _word_token(text)
	if group == "RELOP":
		return Token(TokenKind.RELOP, text)
	if group == "AND":
		return Token(TokenKind.AND)
	if group == "OR":
		return Token(TokenKind.OR)
	return Token(PUNCTUATION[text])


class Lexer:
	"""
	Pull-based scanner over one source string.

	Iterating yields `(start, token, end)` triples. The final triple carries
	`EOI` located at the end of the text; after it the iterator is exhausted
	and cannot be rewound (scan a fresh `Lexer` to start over).
	"""

	def __init__(self, source: str) -> None:
		self.source = source
		self._index = LineIndex(source)
		self._pos = 0
		self._done = False

	def __iter__(self) -> "Lexer":
		return self

	def __next__(self) -> Triple:
		if self._done:
			raise StopIteration
		text = self.source
		while self._pos < len(text):
			start = self._pos
			m = _MASTER_RE.match(text, start)
			if m is None:
				self._pos = start + 1
				return self._triple(Token(TokenKind.UNKNOWN_CHAR, text[start]), start, start + 1)
			self._pos = m.end()
			group = m.lastgroup
			if group in _SKIPPED:
				continue
			return self._triple(_make_token(group, m.group()), start, m.end())
		self._done = True
		end = len(text)
		return self._triple(EOI, end, end)

	def _triple(self, token: Token, start: int, end: int) -> Triple:
		start_loc, end_loc = self._index.span(start, end)
		return start_loc, token, end_loc


def tokenize(source: str) -> list[Triple]:
	"""Scan the whole of `source` eagerly (handy for tests and debugging)."""
	return list(Lexer(source))


def token_stream(source: str) -> Iterator[Token]:
	"""Tokens only, without locations."""
	for _start, token, _end in Lexer(source):
		yield token


__all__ = ["INT_MAX", "KEYWORDS", "Lexer", "TOKEN_SPEC", "TYPE_NAMES", "Triple", "token_stream", "tokenize"]
