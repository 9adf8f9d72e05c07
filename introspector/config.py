from __future__ import annotations

import os
from typing import Optional

from pydantic import BaseModel

from .errors import ConfigurationError


DEFAULT_FILTER_PATTERN = "bin|obj|.git|.vs|node_modules|TestResults|packages"
OUTPUT_FILENAME = "project_structure.md"
SOURCE_EXTENSION = ".cs"


class RunConfig(BaseModel):
	"""Inputs for a single report run.

	Nothing here outlives the run: the CLI and the HTTP API both build a
	fresh instance from their arguments.
	"""

	root: str
	entities: Optional[str] = None
	filter_pattern: str = DEFAULT_FILTER_PATTERN

	@classmethod
	def from_inputs(
		cls,
		root: Optional[str],
		entities: Optional[str] = None,
		filter_pattern: Optional[str] = None,
	) -> "RunConfig":
		if not root:
			raise ConfigurationError("A project root directory is required.")
		root = os.path.abspath(root)
		if not os.path.isdir(root):
			raise ConfigurationError(f"Directory does not exist: {root}")
		return cls(
			root=root,
			entities=os.path.abspath(entities) if entities else None,
			filter_pattern=DEFAULT_FILTER_PATTERN if filter_pattern is None else filter_pattern,
		)

	@property
	def output_path(self) -> str:
		return os.path.join(self.root, OUTPUT_FILENAME)

	def entities_dir(self) -> Optional[str]:
		"""Entities directory if one was given and exists, else None."""
		if self.entities and os.path.isdir(self.entities):
			return self.entities
		return None
