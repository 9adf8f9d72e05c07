from textwrap import dedent

from introspector.cs_parse import TreeSitterCSharpParser, extract_summary
from introspector.extract import normalize_summary


SAMPLE = dedent(
	"""
	using System;
	using System.Collections.Generic;

	namespace Demo
	{
	    /// <summary>
	    /// A sample
	    /// type.
	    /// </summary>
	    public sealed class Foo : IDisposable
	    {
	        private int _a, _b;

	        /// <summary>Creates it.</summary>
	        public Foo(int a, string name = "x") { }

	        /// <summary>Adds one.</summary>
	        public int Bar(int x) => x + 1;

	        // not a doc comment
	        public string Name { get; set; }

	        public void Dispose() { }

	        internal class Inner
	        {
	            protected virtual Task<List<int>> LoadAsync(Dictionary<string, int> map, CancellationToken token = default)
	            {
	                return null;
	            }
	        }
	    }

	    public interface IThing
	    {
	        void Run();
	    }

	    public record Person
	    {
	        public string First { get; init; }
	    }
	}
	"""
)


def _parse():
	return TreeSitterCSharpParser().parse(SAMPLE)


def test_types_in_preorder():
	parsed = _parse()
	assert [t.name for t in parsed.types] == ["Foo", "Inner", "IThing", "Person"]
	assert [t.kind for t in parsed.types] == ["class", "class", "interface", "record"]
	assert parsed.types[0].modifiers == ["public", "sealed"]
	assert normalize_summary(parsed.types[0].summary) == "A sample type."


def test_members_in_source_order():
	foo = _parse().types[0]
	assert [m.member_kind for m in foo.members] == ["field", "constructor", "method", "property", "method"]

	field, ctor, bar, prop, dispose = foo.members
	assert field.type == "int"
	assert field.names == ["_a", "_b"]
	assert field.modifiers == ["private"]
	assert ctor.name == "Foo"
	assert ctor.parameters == ["int a", 'string name = "x"']
	assert ctor.summary == "Creates it."
	assert bar.return_type == "int"
	assert bar.parameters == ["int x"]
	assert bar.summary == "Adds one."
	assert prop.type == "string"
	assert prop.name == "Name"
	assert prop.summary is None
	assert dispose.name == "Dispose"
	assert dispose.parameters == []


def test_generic_signatures_kept_verbatim():
	inner = _parse().types[1]
	(load,) = inner.members
	assert load.modifiers == ["protected", "virtual"]
	assert load.return_type == "Task<List<int>>"
	assert load.parameters == ["Dictionary<string, int> map", "CancellationToken token = default"]


def test_interface_method_without_modifiers():
	thing = _parse().types[2]
	(run,) = thing.members
	assert run.modifiers == []
	assert run.return_type == "void"
	assert run.name == "Run"


def test_malformed_source_does_not_raise():
	parsed = TreeSitterCSharpParser().parse("public class Broken { public void M( }")
	assert isinstance(parsed.types, list)


def test_extract_summary_variants():
	assert extract_summary(["/// <summary>Line doc.</summary>"]) == "Line doc."
	block = "/**\n * <summary>Block doc.</summary>\n */"
	assert normalize_summary(extract_summary([block])) == "Block doc."
	assert extract_summary(["// <summary>plain</summary>"]) is None
	assert extract_summary(["//// <summary>four slashes</summary>"]) is None
	assert extract_summary(["/// <remarks>no summary</remarks>"]) is None
	assert extract_summary([]) is None


def test_parameter_text_kept_as_written():
	source = dedent(
		"""
		public class Fmt
		{
		    public string Pad(string s = "a   b", int  width = 4) { return s; }

		    public void Many(int a,
		                     int b) { }
		}
		"""
	)
	pad, many = TreeSitterCSharpParser().parse(source).types[0].members
	assert pad.parameters == ['string s = "a   b"', "int  width = 4"]
	assert many.parameters == ["int a", "int b"]


def test_record_struct_kind():
	parsed = TreeSitterCSharpParser().parse("public record struct P(int X);\npublic record R(int Y);\n")
	assert [(t.kind, t.name) for t in parsed.types] == [("recordstruct", "P"), ("record", "R")]
	assert parsed.types[0].modifiers == ["public"]
