"""Introspector package for producing a markdown snapshot of a C# project.

Modules:
- fs_scan.py: Ignore filter, directory snapshots and source enumeration.
- tree.py: Box-drawing rendering of the filtered directory tree.
- cs_parse.py: tree-sitter C# parsing into declaration models.
- extract.py: Formatting of declarations and members as listing lines.
- report.py: Assembly and atomic writing of the final report.
- model.py: Data structures for directories, declarations and reports.
- config.py: Per-run configuration and defaults.
"""

__all__ = [
	"fs_scan",
	"tree",
	"cs_parse",
	"extract",
	"report",
	"model",
	"config",
	"errors",
]
