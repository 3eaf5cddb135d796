# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
C-- parser: lark LALR(1) tables driven token by token.

The grammar lives in `grammar.lark` and only declares its terminals; tokens
come from `cmm.parser.lexer` and are fed to lark's interactive parser one at a
time, so malformed tokens reach the grammar like any other token and surface
as parse errors. Tree construction runs inline during reductions
(`_TreeBuilder`), producing `cmm.parser.ast` nodes directly.

Two modes:
- recovering (default): panic-mode recovery, collecting every error in one
  pass. The parser state is checkpointed after each `;`, `{` and `}` it
  shifts. On an error the offending token and everything up to the next `;`
  or `}` is discarded, the checkpoint is restored and the synchronizing token
  is offered again (and dropped if still unacceptable).
- fail-fast (`recover=False`): the first error ends the parse.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator

from lark import Lark, Transformer
from lark import Token as LarkToken
from lark.exceptions import UnexpectedInput, UnexpectedToken
from lark.lexer import Lexer as LarkLexer

from cmm.core.span import Location

from . import ast as A
from .errors import ExtraToken, InvalidToken, ParseError, UnrecognizedEof, UnrecognizedToken
from .lexer import Lexer, Triple
from .tokens import TokenKind

logger = logging.getLogger(__name__)

_GRAMMAR_PATH = Path(__file__).with_name("grammar.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

# Grammar rule -> node name shown in the tree.
_NODE_NAMES: dict[str, str] = {
	"program": "Program",
	"ext_def_list": "ExtDefList",
	"ext_def": "ExtDef",
	"ext_dec_list": "ExtDecList",
	"specifier": "Specifier",
	"struct_specifier": "StructSpecifier",
	"opt_tag": "OptTag",
	"tag": "Tag",
	"var_dec": "VarDec",
	"fun_dec": "FunDec",
	"var_list": "VarList",
	"param_dec": "ParamDec",
	"comp_st": "CompSt",
	"stmt_list": "StmtList",
	"matched_stmt": "Stmt",
	"open_stmt": "Stmt",
	"def_list": "DefList",
	"def": "Def",
	"dec_list": "DecList",
	"dec": "Dec",
	"exp": "Exp",
	"exp_or": "Exp",
	"exp_and": "Exp",
	"exp_rel": "Exp",
	"exp_add": "Exp",
	"exp_mul": "Exp",
	"exp_unary": "Exp",
	"exp_postfix": "Exp",
	"exp_primary": "Exp",
	"args": "Args",
}

# lark's name for the end-of-input terminal.
_LARK_END = "$END"

_CHECKPOINT_TERMINALS = frozenset({"SEMI", "LC", "RC"})
_SYNC_TERMINALS = frozenset({"SEMI", "RC"})


def _to_lark(triple: Triple) -> LarkToken:
	start, token, end = triple
	return LarkToken(
		token.kind.name,
		token,
		line=start.line,
		column=start.column,
		end_line=end.line,
		end_column=end.column,
	)


def _start_of(tok: LarkToken) -> Location:
	return Location(line=tok.line, column=tok.column)


def _end_of(tok: LarkToken) -> Location:
	if tok.end_line is None:
		return _start_of(tok)
	return Location(line=tok.end_line, column=tok.end_column)


def _expected_names(names: Iterable[str] | None) -> frozenset[str]:
	return frozenset("EOI" if n == _LARK_END else n for n in (names or ()))


def error_from_lark(err: UnexpectedInput) -> ParseError:
	"""Translate a lark parse exception into one of the `cmm.parser.errors` shapes."""
	if not isinstance(err, UnexpectedToken):
		line = err.line if isinstance(getattr(err, "line", None), int) else 0
		column = err.column if isinstance(getattr(err, "column", None), int) else 0
		return InvalidToken(location=Location(line=line, column=column))
	tok = err.token
	expected = _expected_names(err.expected)
	if tok.type == _LARK_END:
		return UnrecognizedEof(location=_end_of(tok), expected=expected)
	if "EOI" in expected:
		return ExtraToken(location=_start_of(tok), token=tok.value, end=_end_of(tok))
	return UnrecognizedToken(location=_start_of(tok), token=tok.value, end=_end_of(tok), expected=expected)


class _TreeBuilder(Transformer):
	"""Semantic actions: every reduction becomes a `cmm.parser.ast` node."""

	def __default__(self, data, children, meta):
		if not children:
			# Only `program` can derive nothing (empty source).
			return A.ASTNode.empty()
		kids = [A.leaf(c.value, _start_of(c)) if isinstance(c, LarkToken) else c for c in children]
		return A.node(_NODE_NAMES[str(data)], kids)


class _ScannerLexer(LarkLexer):
	"""
	Custom-lexer hook for lark.

	lark requires a lexer for its declared terminals; this one runs the C--
	scanner so `_PARSER.parse(text)` also works. The parse session below feeds
	tokens itself and never calls it.
	"""

	def __init__(self, lexer_conf) -> None:
		pass

	def lex(self, data) -> Iterator[LarkToken]:
		text = data if isinstance(data, str) else getattr(data, "text", data)
		for triple in Lexer(text):
			if triple[1].kind is TokenKind.EOI:
				return
			yield _to_lark(triple)


_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	lexer=_ScannerLexer,
	start="program",
	transformer=_TreeBuilder(),
	keep_all_tokens=True,
	maybe_placeholders=False,
)


@dataclass
class ParseResult:
	"""
	Outcome of one parse.

	`root` is the program tree when the parse reached end of input (partial if
	errors were recovered from) and the empty placeholder otherwise.
	"""

	root: A.ASTNode
	errors: list[ParseError] = field(default_factory=list)

	@property
	def ok(self) -> bool:
		return not self.errors


class _ParseSession:
	"""One pass over one token stream."""

	def __init__(self, *, recover: bool) -> None:
		self.recover = recover
		self.errors: list[ParseError] = []
		self._ip = _PARSER.parse_interactive("")
		self._checkpoint = self._ip.copy()
		# End of the last real token pulled from the stream, shifted or discarded.
		self._last_seen: Location | None = None
		self._pending: UnexpectedToken | None = None

	def run(self, tokens: Iterable[Triple]) -> ParseResult:
		stream = iter(tokens)
		for triple in stream:
			if triple[1].kind is TokenKind.EOI:
				return self._finish(triple[0])
			self._last_seen = triple[2]
			tok = _to_lark(triple)
			if self._feed(tok):
				continue
			self._record(tok)
			if not self.recover:
				return ParseResult(root=A.ASTNode.empty(), errors=self.errors)
			eoi = self._recover(tok, stream)
			if eoi is not None:
				return self._finish(eoi)
		# Stream ended without EOI; treat its end as end of input.
		return self._finish(self._last_seen or Location())

	def _feed(self, tok: LarkToken) -> bool:
		try:
			self._ip.feed_token(tok)
		except UnexpectedToken as err:
			self._pending = err
			return False
		if tok.type in _CHECKPOINT_TERMINALS:
			self._checkpoint = self._ip.copy()
		return True

	def _record(self, tok: LarkToken) -> None:
		if self._pending is None:
			raise RuntimeError("no pending parse error to record")
		error = error_from_lark(self._pending)
		self._pending = None
		logger.debug("parse error at %s: %s", _start_of(tok), error)
		self.errors.append(error)

	def _recover(self, offending: LarkToken, stream: Iterator[Triple]) -> Location | None:
		"""Skip to a synchronizing token and resume; returns the EOI location if input ran out."""
		tok = offending
		while tok.type not in _SYNC_TERMINALS:
			triple = next(stream, None)
			if triple is None:
				self._ip = self._checkpoint.copy()
				return self._last_seen or Location()
			if triple[1].kind is TokenKind.EOI:
				self._ip = self._checkpoint.copy()
				return triple[0]
			self._last_seen = triple[2]
			logger.debug("recovery: discarding %s", triple[1])
			tok = _to_lark(triple)
		self._ip = self._checkpoint.copy()
		if not self._feed(tok):
			logger.debug("recovery: dropping %s", tok.value)
			self._ip = self._checkpoint.copy()
		return None

	def _finish(self, eoi: Location) -> ParseResult:
		where = self._last_seen or eoi
		eof = LarkToken(_LARK_END, "", line=where.line, column=where.column, end_line=where.line, end_column=where.column)
		try:
			root = self._ip.feed_eof(eof)
		except UnexpectedToken as err:
			self.errors.append(error_from_lark(err))
			return ParseResult(root=A.ASTNode.empty(), errors=self.errors)
		return ParseResult(root=root, errors=self.errors)


def parse_tokens(tokens: Iterable[Triple], *, recover: bool = True) -> ParseResult:
	"""Parse a `(start, token, end)` stream such as the one `Lexer` produces."""
	return _ParseSession(recover=recover).run(tokens)


def parse_source(source: str, *, recover: bool = True) -> ParseResult:
	"""Scan and parse C-- source text."""
	return parse_tokens(Lexer(source), recover=recover)


__all__ = ["ParseResult", "error_from_lark", "parse_source", "parse_tokens"]
