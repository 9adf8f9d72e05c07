from introspector.fs_scan import IgnoreFilter
from introspector.model import DirectoryEntry
from introspector.tree import render_tree


def _sample_tree():
	return DirectoryEntry(
		name="proj",
		files=["Program.cs", "App.cs"],
		directories=[
			DirectoryEntry(name="Services", directories=[DirectoryEntry(name="Impl", files=["A.cs"])]),
			DirectoryEntry(name="bin", files=["Ignored.cs"]),
			DirectoryEntry(name="Models", files=["User.cs"]),
		],
	)


def test_render_tree_layout():
	expected = "\n".join(
		[
			"└──proj/",
			"    ├──App.cs",
			"    └──Program.cs",
			"    ├──Models/",
			"    │   └──User.cs",
			"    └──Services/",
			"        └──Impl/",
			"            └──A.cs",
		]
	)
	assert render_tree(_sample_tree(), IgnoreFilter()) == expected


def test_render_tree_is_deterministic():
	f = IgnoreFilter()
	assert render_tree(_sample_tree(), f) == render_tree(_sample_tree(), f)


def test_ignored_dirs_never_appear():
	text = render_tree(_sample_tree(), IgnoreFilter())
	assert "bin" not in text
	assert "Ignored.cs" not in text


def test_filter_is_case_insensitive_and_whole_segment():
	root = DirectoryEntry(
		name="proj",
		directories=[
			DirectoryEntry(name="Bin", files=["A.cs"]),
			DirectoryEntry(name="binary", files=["B.cs"]),
		],
	)
	text = render_tree(root, IgnoreFilter("bin"))
	assert text.splitlines() == ["└──proj/", "    └──binary/", "        └──B.cs"]


def test_ignored_root_renders_nothing():
	assert render_tree(DirectoryEntry(name="node_modules", files=["x.cs"]), IgnoreFilter()) == ""


def test_empty_root_renders_single_line():
	assert render_tree(DirectoryEntry(name="empty"), IgnoreFilter()) == "└──empty/"
