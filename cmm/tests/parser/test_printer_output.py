# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import io

import pytest

from cmm.core.span import Location
from cmm.parser import ast as A
from cmm.parser.printer import INDENT, ast_lines, format_ast, format_leaf, print_ast
from cmm.parser.tokens import Token, TokenKind


def _kw(kind: TokenKind, line: int = 1) -> A.Leaf:
	return A.keyword(Token(kind), Location(line, 1))


def test_leaf_labels_by_category() -> None:
	assert format_leaf(Token(TokenKind.ID, "count")) == "ID: count"
	assert format_leaf(Token(TokenKind.TYPE, "float")) == "TYPE: float"
	assert format_leaf(Token(TokenKind.INT, 8)) == "INT: 8"
	assert format_leaf(Token(TokenKind.RELOP, "!=")) == "RELOP"
	assert format_leaf(Token(TokenKind.ASSIGNOP)) == "ASSIGNOP"
	assert format_leaf(Token(TokenKind.WHILE)) == "WHILE"


def test_float_leaf_uses_six_decimals() -> None:
	assert format_leaf(Token(TokenKind.FLOAT, 1.5)) == "FLOAT: 1.500000"
	assert format_leaf(Token(TokenKind.FLOAT, 0.0)) == "FLOAT: 0.000000"
	assert format_leaf(Token(TokenKind.FLOAT, 1.05e2)) == "FLOAT: 105.000000"


def test_interior_nodes_show_their_line() -> None:
	dec = A.node("VarDec", [A.ident("x", Location(7, 5))])
	assert ast_lines(dec) == ["VarDec (7)", INDENT + "ID: x"]


def test_exp_wrapping_exp_prints_once() -> None:
	inner = A.node("Exp", [A.ident("a", Location(2, 3))])
	wrapped = A.node("Exp", [A.node("Exp", [inner])])
	assert format_ast(wrapped) == "Exp (2)\n  ID: a\n"


def test_collapse_keeps_depth_of_siblings() -> None:
	left = A.node("Exp", [A.node("Exp", [A.int_lit(1, Location(1, 1))])])
	right = A.node("Exp", [A.int_lit(2, Location(1, 5))])
	sum_exp = A.node("Exp", [left, _kw(TokenKind.PLUS), right])
	assert ast_lines(sum_exp) == [
		"Exp (1)",
		"  Exp (1)",
		"    INT: 1",
		"  PLUS",
		"  Exp (1)",
		"    INT: 2",
	]


def test_non_exp_single_child_chain_is_kept() -> None:
	tree = A.node("Specifier", [A.node("StructSpecifier", [_kw(TokenKind.STRUCT), A.node("Tag", [A.ident("P", Location(1, 8))])])])
	assert ast_lines(tree) == [
		"Specifier (1)",
		"  StructSpecifier (1)",
		"    STRUCT",
		"    Tag (1)",
		"      ID: P",
	]


def test_empty_tree_prints_nothing() -> None:
	assert format_ast(A.ASTNode.empty()) == ""


def test_deep_tree_does_not_recurse() -> None:
	current = A.node("Exp", [A.ident("x", Location(1, 1))])
	for _ in range(5000):
		current = A.node("Exp", [_kw(TokenKind.MINUS), current])
	lines = ast_lines(current)
	assert lines[-1].strip() == "ID: x"
	assert len(lines) == 5000 * 2 + 2


def test_print_ast_writes_to_file() -> None:
	buf = io.StringIO()
	print_ast(A.node("Tag", [A.ident("P", Location(4, 1))]), file=buf)
	assert buf.getvalue() == "Tag (4)\n  ID: P\n"


def test_formatting_is_repeatable() -> None:
	tree = A.node("Exp", [A.float_lit(2.5, Location(3, 1)), _kw(TokenKind.STAR, 3), A.relop("<", Location(3, 7))])
	assert format_ast(tree) == format_ast(tree)
	assert format_ast(tree) == "Exp (3)\n  FLOAT: 2.500000\n  STAR\n  RELOP\n"


def test_non_node_values_are_rejected() -> None:
	with pytest.raises(TypeError):
		ast_lines("Exp")  # type: ignore[arg-type]
