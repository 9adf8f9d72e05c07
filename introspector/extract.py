from __future__ import annotations

import re
from typing import List, Optional, Union

from .model import Constructor, Field, Member, Method, ParsedSource, Property, TypeDeclaration


MEMBER_INDENT = "    "
CODE_FENCE_LANGUAGE = "csharp"


def normalize_summary(summary: Optional[str]) -> str:
	"""Collapse a doc summary to one line; empty when there is nothing to show."""
	if not summary:
		return ""
	return re.sub(r"\s+", " ", summary).strip()


def _annotate(line: str, summary: Optional[str]) -> str:
	text = normalize_summary(summary)
	return f"{line} // {text}" if text else line


def _join(*parts: str) -> str:
	return " ".join(p for p in parts if p)


def format_type_header(decl: TypeDeclaration) -> str:
	return _annotate(_join(*decl.modifiers, decl.kind.lower(), decl.name), decl.summary)


def format_signature(member: Union[Constructor, Method]) -> str:
	return_type = member.return_type if isinstance(member, Method) else ""
	signature = _join(*member.modifiers, return_type, f"{member.name}({', '.join(member.parameters)});")
	return _annotate(signature, member.summary)


def format_member(member: Member, detailed: bool) -> List[str]:
	if isinstance(member, (Constructor, Method)):
		return [format_signature(member)]
	if not detailed:
		return []
	if isinstance(member, Field):
		return [_join(*member.modifiers, member.type, f"{name};") for name in member.names]
	if isinstance(member, Property):
		return [_annotate(_join(*member.modifiers, member.type, member.name, "{ get; set; };"), member.summary)]
	return []


def extract_declarations(parsed: ParsedSource, detailed: bool = False) -> str:
	"""One line per type and member, in source order.

	Constructors and methods are always listed; fields and properties only
	when `detailed` is set.
	"""
	lines: List[str] = []
	for decl in parsed.types:
		lines.append(format_type_header(decl))
		for member in decl.members:
			lines.extend(MEMBER_INDENT + line for line in format_member(member, detailed))
	return "\n".join(lines)


def format_file_block(rel_path: str, body: str) -> str:
	lines = [f"#### File: {rel_path}", f"```{CODE_FENCE_LANGUAGE}"]
	if body:
		lines.append(body)
	lines.append("```")
	lines.append("")
	return "\n".join(lines)
