from __future__ import annotations

import logging
import os
import tempfile
from typing import List, Optional

from .config import OUTPUT_FILENAME, RunConfig
from .cs_parse import SourceParser, TreeSitterCSharpParser
from .extract import extract_declarations, format_file_block
from .fs_scan import IgnoreFilter, iter_source_files, snapshot_directory
from .model import Report
from .tree import render_tree


logger = logging.getLogger(__name__)

TREE_HEADING = "# Project structure (filtered)"
STRUCTURE_HEADING = "## Types and members"
ENTITIES_HEADING = "### Entity fields and properties"


def read_source(path: str) -> str:
	with open(path, "r", encoding="utf-8-sig", errors="replace") as fh:
		return fh.read()


def _tree_section(root: str, ignore: IgnoreFilter) -> str:
	tree = render_tree(snapshot_directory(root, ignore), ignore)
	lines = [TREE_HEADING, ""]
	if tree:
		lines.append(tree)
	return "\n".join(lines) + "\n"


def _file_blocks(root: str, base: str, ignore: IgnoreFilter, parser: SourceParser, detailed: bool) -> List[str]:
	blocks: List[str] = []
	for path in iter_source_files(base, ignore):
		rel_path = os.path.relpath(path, root)
		# `base` may sit below an ignored directory of the root
		if rel_path.split(os.sep)[0] != os.pardir and ignore.is_path_ignored(os.path.dirname(rel_path)):
			continue
		rel_path = rel_path.replace(os.sep, "/")
		parsed = parser.parse(read_source(path))
		blocks.append(format_file_block(rel_path, extract_declarations(parsed, detailed=detailed)))
	return blocks


def build_report(config: RunConfig, parser: Optional[SourceParser] = None) -> Report:
	"""Assemble the tree, structural listing and optional entity listing.

	Files under the entities directory are listed twice when it lies inside
	the root: once in the structural section and once in detail.
	"""
	ignore = IgnoreFilter(config.filter_pattern)
	parser = parser or TreeSitterCSharpParser()

	sections: List[str] = [_tree_section(config.root, ignore)]
	logger.debug("Rendered directory tree for %s", config.root)

	sections.append(STRUCTURE_HEADING + "\n")
	blocks = _file_blocks(config.root, config.root, ignore, parser, detailed=False)
	sections.extend(blocks)
	logger.info("Listed declarations from %d source files", len(blocks))

	entities = config.entities_dir()
	if entities is not None:
		sections.append(ENTITIES_HEADING + "\n")
		entity_blocks = _file_blocks(config.root, entities, ignore, parser, detailed=True)
		sections.extend(entity_blocks)
		logger.info("Listed fields and properties from %d entity files", len(entity_blocks))
	elif config.entities:
		logger.warning("Entities directory %s does not exist; skipping detailed listing", config.entities)

	return Report(sections=tuple(sections))


def write_report(report: Report, path: str) -> None:
	# written to a sibling temp file, then renamed over `path`
	directory = os.path.dirname(os.path.abspath(path))
	fd, tmp_path = tempfile.mkstemp(prefix=f".{OUTPUT_FILENAME}.", suffix=".tmp", dir=directory)
	try:
		with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as fh:
			fh.write(report.render())
		os.chmod(tmp_path, 0o644)
		os.replace(tmp_path, path)
	except BaseException:
		if os.path.exists(tmp_path):
			os.unlink(tmp_path)
		raise


def generate_report(config: RunConfig, parser: Optional[SourceParser] = None) -> str:
	report = build_report(config, parser)
	write_report(report, config.output_path)
	logger.info("Report written to %s", config.output_path)
	return config.output_path
