# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
C-- syntax tree.

A tree node is either a `Leaf` (one token and where it started) or a `Node`
(a grammar category name and its ordered, non-empty children). Nodes are
immutable and own their children outright; there are no parent links.

An interior node's location is its first child's location, which by
induction is the location of its leftmost leaf. `ASTNode.empty()` is the
placeholder returned when there is no tree to show; it is never a child of a
real node.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from cmm.core.span import Location

from .tokens import FIXED_SPELLINGS, Token, TokenKind


class ASTNode:
	"""Base class for syntax tree nodes."""

	location: Location

	@staticmethod
	def empty() -> "Node":
		return _EMPTY

	@property
	def is_empty(self) -> bool:
		return False

	def __deepcopy__(self, memo: dict) -> "ASTNode":
		# Immutable; sharing is safe.
		return self


@dataclass(frozen=True, eq=True)
class Leaf(ASTNode):
	token: Token
	location: Location


@dataclass(frozen=True, eq=True)
class Node(ASTNode):
	name: str
	children: tuple[ASTNode, ...]
	location: Location

	@property
	def is_empty(self) -> bool:
		return self.name == "" and not self.children


_EMPTY = Node(name="", children=(), location=Location())


def node(name: str, children: Sequence[ASTNode]) -> Node:
	"""Build an interior node; `children` must be non-empty."""
	if not children:
		raise ValueError(f"interior node '{name}' needs at least one child")
	if not name:
		raise ValueError("interior node needs a name")
	kids = tuple(children)
	for child in kids:
		if child.is_empty:
			raise ValueError(f"empty placeholder cannot be a child of '{name}'")
	return Node(name=name, children=kids, location=kids[0].location)


def keyword(token: Token, location: Location) -> Leaf:
	if token.kind not in FIXED_SPELLINGS:
		raise ValueError(f"{token.name} is not a keyword token")
	return Leaf(token=token, location=location)


def ident(text: str, location: Location) -> Leaf:
	return Leaf(token=Token(TokenKind.ID, text), location=location)


def type_name(text: str, location: Location) -> Leaf:
	return Leaf(token=Token(TokenKind.TYPE, text), location=location)


def int_lit(value: int, location: Location) -> Leaf:
	return Leaf(token=Token(TokenKind.INT, value), location=location)


def float_lit(value: float, location: Location) -> Leaf:
	return Leaf(token=Token(TokenKind.FLOAT, float(value)), location=location)


def relop(op: str, location: Location) -> Leaf:
	return Leaf(token=Token(TokenKind.RELOP, op), location=location)


_LEAF_BUILDERS = {
	TokenKind.ID: ident,
	TokenKind.TYPE: type_name,
	TokenKind.INT: int_lit,
	TokenKind.FLOAT: float_lit,
	TokenKind.RELOP: relop,
}


def leaf(token: Token, location: Location) -> Leaf:
	"""Wrap any grammar token, routing through the matching constructor."""
	build = _LEAF_BUILDERS.get(token.kind)
	if build is not None:
		return build(token.value, location)
	return keyword(token, location)


def walk(root: ASTNode) -> Iterator[tuple[ASTNode, int]]:
	"""Pre-order traversal yielding `(node, depth)`; iterative, so deep lists are fine."""
	stack = [(root, 0)]
	while stack:
		current, depth = stack.pop()
		yield current, depth
		if isinstance(current, Node):
			for child in reversed(current.children):
				stack.append((child, depth + 1))


def leaves(root: ASTNode) -> Iterator[Leaf]:
	"""Leaves of `root` in source order."""
	for current, _depth in walk(root):
		if isinstance(current, Leaf):
			yield current


__all__ = [
	"ASTNode",
	"Leaf",
	"Node",
	"float_lit",
	"ident",
	"int_lit",
	"keyword",
	"leaf",
	"leaves",
	"node",
	"relop",
	"type_name",
	"walk",
]
