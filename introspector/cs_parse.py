"""C# declaration parsing on top of tree-sitter.

The report code only needs `SourceParser.parse`; anything producing a
`ParsedSource` can stand in for the tree-sitter implementation (tests build
`ParsedSource` values by hand).
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, List, Optional, Protocol

import tree_sitter_c_sharp
from tree_sitter import Language, Node, Parser

from .model import Constructor, Field, Member, Method, ParsedSource, Property, TypeDeclaration


logger = logging.getLogger(__name__)

CSHARP_LANGUAGE = Language(tree_sitter_c_sharp.language())

TYPE_NODE_TYPES = {
	"class_declaration",
	"struct_declaration",
	"interface_declaration",
	"enum_declaration",
	"record_declaration",
	"record_struct_declaration",
}

_SUMMARY_RE = re.compile(r"<summary(?:\s[^>]*)?>(.*?)</summary\s*>", re.DOTALL)
_BLOCK_LINE_PREFIX_RE = re.compile(r"^\s*\*(?!/)")
_LINE_BREAK_RE = re.compile(r"[ \t]*[\r\n]+\s*")


class SourceParser(Protocol):
	def parse(self, source_text: str) -> ParsedSource:
		...


def _node_text(source: bytes, node: Optional[Node], default: str = "") -> str:
	if node is None:
		return default
	return source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def _iter_type_nodes(root: Node) -> Iterator[Node]:
	# pre-order, so a nested type follows its enclosing type
	stack = [root]
	while stack:
		node = stack.pop()
		if node.type in TYPE_NODE_TYPES:
			yield node
		stack.extend(reversed(node.children))


def _modifiers(source: bytes, node: Node) -> List[str]:
	return [_node_text(source, c) for c in node.children if c.type == "modifier"]


def _field_or_first(node: Node, field_name: str, child_type: str) -> Optional[Node]:
	child = node.child_by_field_name(field_name)
	if child is not None:
		return child
	for c in node.children:
		if c.type == child_type:
			return c
	return None


def _leading_comments(source: bytes, node: Node) -> List[str]:
	comments: List[str] = []
	sibling = node.prev_sibling
	while sibling is not None and sibling.type == "comment":
		comments.append(_node_text(source, sibling))
		sibling = sibling.prev_sibling
	comments.reverse()
	# comments that ended up inside the node, ahead of its first token
	for child in node.children:
		if child.type == "comment":
			comments.append(_node_text(source, child))
		elif child.type != "attribute_list":
			break
	return comments


def extract_summary(comments: List[str]) -> Optional[str]:
	"""Raw inner text of the first <summary> element in a doc comment run.

	Accepts `///` line comments and `/** */` blocks; other comments are
	ignored. Whitespace is returned as written.
	"""
	doc_lines: List[str] = []
	for text in comments:
		if text.startswith("///") and not text.startswith("////"):
			doc_lines.append(text[3:])
		elif text.startswith("/**") and text != "/**/":
			body = text[3:-2] if text.endswith("*/") else text[3:]
			doc_lines.extend(_BLOCK_LINE_PREFIX_RE.sub("", line) for line in body.splitlines())
	if not doc_lines:
		return None
	match = _SUMMARY_RE.search("\n".join(doc_lines))
	return match.group(1) if match else None


def _parameters(source: bytes, node: Node) -> List[str]:
	param_list = _field_or_first(node, "parameters", "parameter_list")
	if param_list is None:
		return []
	groups: List[List[Node]] = [[]]
	for child in param_list.children:
		if child.type == ",":
			groups.append([])
		elif child.type not in ("(", ")", "comment"):
			groups[-1].append(child)
	params: List[str] = []
	for group in groups:
		if group:
			text = source[group[0].start_byte:group[-1].end_byte].decode("utf-8", errors="replace")
			params.append(_LINE_BREAK_RE.sub(" ", text))
	return params


def _member(source: bytes, node: Node) -> Optional[Member]:
	summary = extract_summary(_leading_comments(source, node))
	if node.type == "constructor_declaration":
		return Constructor(
			modifiers=_modifiers(source, node),
			name=_node_text(source, node.child_by_field_name("name")),
			parameters=_parameters(source, node),
			summary=summary,
		)
	if node.type == "method_declaration":
		return_type = node.child_by_field_name("returns")
		if return_type is None:
			return_type = node.child_by_field_name("type")
		return Method(
			modifiers=_modifiers(source, node),
			return_type=_node_text(source, return_type),
			name=_node_text(source, node.child_by_field_name("name")),
			parameters=_parameters(source, node),
			summary=summary,
		)
	if node.type == "field_declaration":
		declaration = _field_or_first(node, "declaration", "variable_declaration")
		if declaration is None:
			return None
		names = [
			_node_text(source, _field_or_first(d, "name", "identifier"))
			for d in declaration.children
			if d.type == "variable_declarator"
		]
		return Field(
			modifiers=_modifiers(source, node),
			type=_node_text(source, declaration.child_by_field_name("type")),
			names=names,
			summary=summary,
		)
	if node.type == "property_declaration":
		return Property(
			modifiers=_modifiers(source, node),
			type=_node_text(source, node.child_by_field_name("type")),
			name=_node_text(source, node.child_by_field_name("name")),
			summary=summary,
		)
	return None


def _type_declaration(source: bytes, node: Node) -> TypeDeclaration:
	members: List[Member] = []
	body = _field_or_first(node, "body", "declaration_list")
	if body is not None:
		for child in body.children:
			member = _member(source, child)
			if member is not None:
				members.append(member)
	kind = node.type[: -len("_declaration")].replace("_", "")
	if node.type == "record_declaration" and any(c.type == "struct" for c in node.children):
		kind = "recordstruct"
	return TypeDeclaration(
		kind=kind,
		modifiers=_modifiers(source, node),
		name=_node_text(source, node.child_by_field_name("name")),
		summary=extract_summary(_leading_comments(source, node)),
		members=members,
	)


class TreeSitterCSharpParser:
	"""Best-effort C# parser: syntax errors yield a partial tree, never an exception."""

	def __init__(self) -> None:
		self._parser = Parser(CSHARP_LANGUAGE)

	def parse(self, source_text: str) -> ParsedSource:
		source = source_text.encode("utf-8")
		tree = self._parser.parse(source)
		if tree.root_node.has_error:
			logger.debug("Syntax errors in source; declarations are best effort")
		return ParsedSource(types=[_type_declaration(source, n) for n in _iter_type_nodes(tree.root_node)])
