from __future__ import annotations

from typing import List

from .fs_scan import IgnoreFilter
from .model import DirectoryEntry


BRANCH = "├──"
LAST_BRANCH = "└──"
PIPE_INDENT = "│   "
SPACE_INDENT = "    "


def _render(entry: DirectoryEntry, ignore: IgnoreFilter, indent: str, is_last: bool, out: List[str]) -> None:
	if ignore.is_ignored(entry.name):
		return
	out.append(f"{indent}{LAST_BRANCH if is_last else BRANCH}{entry.name}/")
	child_indent = indent + (SPACE_INDENT if is_last else PIPE_INDENT)

	files = sorted(entry.files)
	for i, name in enumerate(files):
		out.append(f"{child_indent}{LAST_BRANCH if i == len(files) - 1 else BRANCH}{name}")

	subdirs = sorted((d for d in entry.directories if not ignore.is_ignored(d.name)), key=lambda d: d.name)
	for i, sub in enumerate(subdirs):
		_render(sub, ignore, child_indent, i == len(subdirs) - 1, out)


def render_tree(root: DirectoryEntry, ignore: IgnoreFilter) -> str:
	"""Render `root` as an indented box-drawing tree.

	Source files of a directory are listed before its subdirectories. The
	root is always drawn as a last sibling. An ignored root renders as the
	empty string.
	"""
	lines: List[str] = []
	_render(root, ignore, "", True, lines)
	return "\n".join(lines)
