# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Indented text rendering of a C-- syntax tree.

Pre-order, two spaces per level. Interior nodes print as `Name (line)`;
leaves print by token category (`ID: x`, `TYPE: int`, `INT: 8`,
`FLOAT: 1.500000`, `RELOP`, otherwise the token's symbolic name).

An `Exp` whose only child is another `Exp` prints no line of its own; its
child is rendered at the same depth instead. This affects only the text, the
tree is left as built. The empty placeholder prints nothing.
"""

from __future__ import annotations

import sys
from typing import TextIO

from .ast import ASTNode, Leaf, Node
from .tokens import Token, TokenKind

INDENT = "  "


def format_leaf(token: Token) -> str:
	kind = token.kind
	if kind is TokenKind.ID:
		return f"ID: {token.value}"
	if kind is TokenKind.TYPE:
		return f"TYPE: {token.value}"
	if kind is TokenKind.INT:
		return f"INT: {token.value}"
	if kind is TokenKind.FLOAT:
		return f"FLOAT: {token.value:.6f}"
	if kind is TokenKind.RELOP:
		return "RELOP"
	return token.name


def _is_redundant_exp(current: Node) -> bool:
	if current.name != "Exp" or len(current.children) != 1:
		return False
	only = current.children[0]
	return isinstance(only, Node) and only.name == "Exp"


def ast_lines(root: ASTNode) -> list[str]:
	lines: list[str] = []
	stack = [(root, 0)]
	while stack:
		current, depth = stack.pop()
		if isinstance(current, Leaf):
			lines.append(INDENT * depth + format_leaf(current.token))
			continue
		if not isinstance(current, Node):
			raise TypeError(f"cannot print {type(current).__name__} as a syntax tree node")
		if current.is_empty:
			continue
		if _is_redundant_exp(current):
			stack.append((current.children[0], depth))
			continue
		lines.append(f"{INDENT * depth}{current.name} ({current.location.line})")
		for child in reversed(current.children):
			stack.append((child, depth + 1))
	return lines


def format_ast(root: ASTNode) -> str:
	"""Render `root` as text, one line per printed node, newline-terminated."""
	return "".join(line + "\n" for line in ast_lines(root))


def print_ast(root: ASTNode, file: TextIO | None = None) -> None:
	(file or sys.stdout).write(format_ast(root))


__all__ = ["INDENT", "ast_lines", "format_ast", "format_leaf", "print_ast"]
