# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import copy
import dataclasses

import pytest

from cmm.core.span import Location
from cmm.parser import ast as A
from cmm.parser.tokens import Token, TokenKind


def test_leaf_constructors_stamp_token_and_location() -> None:
	loc = Location(3, 7)
	assert A.ident("x", loc) == A.Leaf(Token(TokenKind.ID, "x"), loc)
	assert A.type_name("float", loc).token == Token(TokenKind.TYPE, "float")
	assert A.int_lit(8, loc).token == Token(TokenKind.INT, 8)
	assert A.float_lit(2, loc).token == Token(TokenKind.FLOAT, 2.0)
	assert A.relop(">=", loc).token == Token(TokenKind.RELOP, ">=")
	assert A.keyword(Token(TokenKind.SEMI), loc).location == loc


def test_keyword_constructor_rejects_data_tokens() -> None:
	with pytest.raises(ValueError):
		A.keyword(Token(TokenKind.ID, "x"), Location(1, 1))


def test_leaf_routes_by_token_kind() -> None:
	loc = Location(1, 1)
	assert A.leaf(Token(TokenKind.RELOP, "<"), loc) == A.relop("<", loc)
	assert A.leaf(Token(TokenKind.LC), loc) == A.keyword(Token(TokenKind.LC), loc)


def test_interior_location_is_leftmost_leaf() -> None:
	inner = A.node("Exp", [A.ident("a", Location(4, 9)), A.keyword(Token(TokenKind.PLUS), Location(4, 11))])
	outer = A.node("Exp", [inner, A.keyword(Token(TokenKind.STAR), Location(5, 1)), A.int_lit(2, Location(5, 3))])
	assert outer.location == Location(4, 9)
	assert outer.children[0] is inner


def test_interior_node_needs_children() -> None:
	with pytest.raises(ValueError):
		A.node("Exp", [])


def test_empty_placeholder_is_never_a_child() -> None:
	with pytest.raises(ValueError):
		A.node("Program", [A.ASTNode.empty()])


def test_empty_placeholder_shape() -> None:
	empty = A.ASTNode.empty()
	assert empty.is_empty
	assert empty.name == ""
	assert empty.children == ()
	assert empty.location == Location()
	assert list(A.leaves(empty)) == []


def test_nodes_are_immutable() -> None:
	leaf = A.ident("x", Location(1, 1))
	tree = A.node("Exp", [leaf])
	with pytest.raises(dataclasses.FrozenInstanceError):
		tree.name = "Stmt"  # type: ignore[misc]
	with pytest.raises(dataclasses.FrozenInstanceError):
		leaf.location = Location(2, 2)  # type: ignore[misc]
	assert isinstance(tree.children, tuple)


def test_deepcopy_shares_immutable_nodes() -> None:
	tree = A.node("Exp", [A.ident("x", Location(1, 1))])
	assert copy.deepcopy([tree])[0] is tree


def test_walk_is_preorder_with_depth() -> None:
	x = A.ident("x", Location(1, 1))
	y = A.ident("y", Location(1, 3))
	args = A.node("Args", [x, A.keyword(Token(TokenKind.COMMA), Location(1, 2)), y])
	names = [(getattr(n, "name", None) or str(n.token), d) for n, d in A.walk(args)]
	assert names == [("Args", 0), ('ID("x")', 1), ("COMMA", 1), ('ID("y")', 1)]
	assert [l.token.value for l in A.leaves(args) if l.token.kind is TokenKind.ID] == ["x", "y"]


def test_walk_handles_deep_trees() -> None:
	tree: A.ASTNode = A.ident("x", Location(1, 1))
	for _ in range(5000):
		tree = A.node("Exp", [tree])
	assert len(list(A.leaves(tree))) == 1
