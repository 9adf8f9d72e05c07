from __future__ import annotations

import logging
import os
import re
from typing import List, Tuple

from .config import DEFAULT_FILTER_PATTERN, SOURCE_EXTENSION
from .errors import ConfigurationError
from .model import DirectoryEntry


logger = logging.getLogger(__name__)


class IgnoreFilter:
	"""Whole-segment, case-insensitive match against a pipe-delimited pattern.

	The pattern is used as written (no escaping), so `.git` also matches
	`xgit`. An empty or invalid pattern is rejected here rather than left to
	match everything or nothing.
	"""

	def __init__(self, pattern: str = DEFAULT_FILTER_PATTERN):
		if not pattern or not pattern.strip():
			raise ConfigurationError("Filter pattern must not be empty.")
		try:
			self._regex = re.compile(f"(?:{pattern})", re.IGNORECASE)
		except re.error as exc:
			raise ConfigurationError(f"Invalid filter pattern {pattern!r}: {exc}") from exc
		self.pattern = pattern

	def is_ignored(self, segment: str) -> bool:
		return self._regex.fullmatch(segment) is not None

	def is_path_ignored(self, rel_dir: str) -> bool:
		# any segment of the directory part, not just the leaf
		if rel_dir in ("", os.curdir):
			return False
		return any(self.is_ignored(part) for part in rel_dir.split(os.sep) if part)


def is_source_file(filename: str) -> bool:
	return os.path.splitext(filename)[1].lower() == SOURCE_EXTENSION


def snapshot_directory(path: str, ignore: IgnoreFilter) -> DirectoryEntry:
	# Ignored directories are kept as bare names so the renderer decides what to skip,
	# but their contents are never read.
	name = os.path.basename(os.path.normpath(os.path.abspath(path)))
	if ignore.is_ignored(name):
		return DirectoryEntry(name=name)
	files: List[str] = []
	directories: List[DirectoryEntry] = []
	with os.scandir(path) as it:
		for entry in sorted(it, key=lambda e: e.name):
			if entry.is_dir(follow_symlinks=False):
				if ignore.is_ignored(entry.name):
					directories.append(DirectoryEntry(name=entry.name))
				else:
					directories.append(snapshot_directory(entry.path, ignore))
			elif entry.is_file() and is_source_file(entry.name):
				files.append(entry.name)
	return DirectoryEntry(name=name, files=files, directories=directories)


def iter_source_files(base: str, ignore: IgnoreFilter) -> List[str]:
	"""Absolute paths of source files under `base`, sorted by relative path.

	A file is dropped when any directory between `base` and the file matches
	the filter.
	"""
	if ignore.is_ignored(os.path.basename(os.path.normpath(os.path.abspath(base)))):
		return []
	found: List[Tuple[str, str]] = []
	for dirpath, dirnames, filenames in os.walk(base):
		rel_dir = os.path.relpath(dirpath, base)
		if ignore.is_path_ignored(rel_dir):
			dirnames[:] = []
			continue
		dirnames[:] = [d for d in dirnames if not ignore.is_ignored(d)]
		for filename in filenames:
			if is_source_file(filename):
				rel_path = os.path.normpath(os.path.join(rel_dir, filename))
				found.append((rel_path.replace(os.sep, "/"), os.path.join(dirpath, filename)))
	found.sort()
	logger.debug("Found %d source files under %s", len(found), base)
	return [path for _, path in found]
