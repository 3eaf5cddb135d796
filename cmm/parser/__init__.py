# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
C-- parser package.

Scanner (`lexer`), token model (`tokens`), syntax tree (`ast`), grammar-driven
parser (`parser`) and tree printer (`printer`).
"""

from __future__ import annotations

from .ast import ASTNode, Leaf, Node
from .errors import ExtraToken, InvalidToken, ParseError, UnrecognizedEof, UnrecognizedToken
from .lexer import Lexer, tokenize
from .parser import ParseResult, parse_source, parse_tokens
from .printer import format_ast, print_ast
from .tokens import Token, TokenKind

__all__ = [
	"ASTNode",
	"ExtraToken",
	"InvalidToken",
	"Leaf",
	"Lexer",
	"Node",
	"ParseError",
	"ParseResult",
	"Token",
	"TokenKind",
	"UnrecognizedEof",
	"UnrecognizedToken",
	"format_ast",
	"parse_source",
	"parse_tokens",
	"print_ast",
	"tokenize",
]
