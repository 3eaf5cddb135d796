# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Token model for the C-- scanner.

`Token` is a closed variant: a `TokenKind` tag plus a payload that is present
only on the data-bearing kinds (identifiers, type names, literals, relational
operators and the three malformed-input kinds). Everything downstream
(printing, diagnostics, the grammar adapter) dispatches on `kind`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
	# Punctuation and operators with a single spelling.
	SEMI = auto()
	COMMA = auto()
	ASSIGNOP = auto()
	PLUS = auto()
	MINUS = auto()
	STAR = auto()
	DIV = auto()
	AND = auto()
	OR = auto()
	DOT = auto()
	NOT = auto()
	LP = auto()
	RP = auto()
	LB = auto()
	RB = auto()
	LC = auto()
	RC = auto()

	# Keywords.
	STRUCT = auto()
	RETURN = auto()
	IF = auto()
	ELSE = auto()
	WHILE = auto()

	# Data-bearing kinds.
	RELOP = auto()   # one of < <= > >= == !=
	TYPE = auto()    # builtin type keyword
	ID = auto()
	INT = auto()
	FLOAT = auto()

	# Malformed input, kept in the stream as ordinary tokens.
	UNKNOWN_CHAR = auto()
	ILLEGAL_OCT = auto()
	ILLEGAL_HEX = auto()

	EOI = auto()


FIXED_SPELLINGS: dict[TokenKind, str] = {
	TokenKind.SEMI: ";",
	TokenKind.COMMA: ",",
	TokenKind.ASSIGNOP: "=",
	TokenKind.PLUS: "+",
	TokenKind.MINUS: "-",
	TokenKind.STAR: "*",
	TokenKind.DIV: "/",
	TokenKind.AND: "&&",
	TokenKind.OR: "||",
	TokenKind.DOT: ".",
	TokenKind.NOT: "!",
	TokenKind.LP: "(",
	TokenKind.RP: ")",
	TokenKind.LB: "[",
	TokenKind.RB: "]",
	TokenKind.LC: "{",
	TokenKind.RC: "}",
	TokenKind.STRUCT: "struct",
	TokenKind.RETURN: "return",
	TokenKind.IF: "if",
	TokenKind.ELSE: "else",
	TokenKind.WHILE: "while",
}

RELATIONAL_OPERATORS = frozenset({"<", "<=", ">", ">=", "==", "!="})

MALFORMED_KINDS = frozenset({TokenKind.UNKNOWN_CHAR, TokenKind.ILLEGAL_OCT, TokenKind.ILLEGAL_HEX})

_PAYLOAD_TYPES: dict[TokenKind, type] = {
	TokenKind.RELOP: str,
	TokenKind.TYPE: str,
	TokenKind.ID: str,
	TokenKind.INT: int,
	TokenKind.FLOAT: float,
	TokenKind.UNKNOWN_CHAR: str,
	TokenKind.ILLEGAL_OCT: str,
	TokenKind.ILLEGAL_HEX: str,
}

# Debug names differ from the enum member for the malformed kinds.
_DEBUG_NAMES: dict[TokenKind, str] = {
	TokenKind.UNKNOWN_CHAR: "UnknownChar",
	TokenKind.ILLEGAL_OCT: "IllegalOct",
	TokenKind.ILLEGAL_HEX: "IllegalHex",
}

Payload = str | int | float | None


@dataclass(frozen=True)
class Token:
	"""One lexical unit. `value` is None for fixed-spelling kinds and `EOI`."""

	kind: TokenKind
	value: Payload = None

	def __post_init__(self) -> None:
		expected = _PAYLOAD_TYPES.get(self.kind)
		if expected is None:
			if self.value is not None:
				raise TypeError(f"{self.kind.name} carries no payload, got {self.value!r}")
			return
		# bool is an int subclass; a literal never carries one.
		if not isinstance(self.value, expected) or isinstance(self.value, bool):
			raise TypeError(f"{self.kind.name} payload must be {expected.__name__}, got {self.value!r}")
		if self.kind is TokenKind.RELOP and self.value not in RELATIONAL_OPERATORS:
			raise ValueError(f"not a relational operator: {self.value!r}")
		if self.kind is TokenKind.UNKNOWN_CHAR and len(self.value) != 1:
			raise ValueError(f"UnknownChar wraps exactly one character, got {self.value!r}")

	def __deepcopy__(self, memo: dict) -> "Token":
		return self

	@property
	def is_malformed(self) -> bool:
		return self.kind in MALFORMED_KINDS

	@property
	def name(self) -> str:
		"""Symbolic name of the token's category (e.g. `SEMI`, `UnknownChar`)."""
		return _DEBUG_NAMES.get(self.kind, self.kind.name)

	def __str__(self) -> str:
		"""Render like `SEMI`, `ID("x")`, `INT(3)` or `UnknownChar('@')`."""
		if self.value is None:
			return self.name
		if self.kind is TokenKind.UNKNOWN_CHAR:
			return f"{self.name}('{self.value}')"
		if isinstance(self.value, str):
			return f'{self.name}("{self.value}")'
		return f"{self.name}({self.value!r})"


EOI = Token(TokenKind.EOI)


__all__ = [
	"EOI",
	"FIXED_SPELLINGS",
	"MALFORMED_KINDS",
	"RELATIONAL_OPERATORS",
	"Token",
	"TokenKind",
]
