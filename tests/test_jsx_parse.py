from textwrap import dedent

import pytest

from component_usage.errors import ParseError
from component_usage.jsx_parse import extract_facts, is_pascal_case


def _refs(facts):
	return [(r.used_component, r.using_component, r.line) for r in facts.references]


@pytest.mark.parametrize(
	"name,expected",
	[
		("Button", True),
		("A1", True),
		("X", True),
		("button", False),
		("My_Button", False),
		("Über", False),
		("", False),
		(None, False),
	],
)
def test_is_pascal_case(name, expected):
	assert is_pascal_case(name) is expected


def test_function_and_arrow_definitions():
	code = dedent(
		"""
		export function Card({ title }) {
		  return <Panel title={title} />;
		}

		const Badge = function (props) {
		  return <Icon />;
		};
		"""
	)
	facts = extract_facts("c.tsx", code)
	assert [d.component_name for d in facts.definitions] == ["Card", "Badge"]
	assert all(d.file_path == "c.tsx" for d in facts.definitions)
	assert _refs(facts) == [("Panel", "Card", 3), ("Icon", "Badge", 7)]


def test_function_with_two_parameters_is_not_a_component():
	code = dedent(
		"""
		function Header() {
		  return <Logo />;
		}

		function Helper(a, b) {
		  return <Tooltip />;
		}
		"""
	)
	facts = extract_facts("h.jsx", code)
	assert [d.component_name for d in facts.definitions] == ["Header"]
	# The single cursor still points at Header
	assert _refs(facts) == [("Logo", "Header", 3), ("Tooltip", "Header", 7)]


def test_nested_function_declaration_is_not_top_level():
	code = dedent(
		"""
		export function Outer() {
		  function Inner() {
		    return <Leaf />;
		  }
		  return <Inner />;
		}
		"""
	)
	facts = extract_facts("o.tsx", code)
	assert [d.component_name for d in facts.definitions] == ["Outer"]
	assert _refs(facts) == [("Leaf", "Outer", 4), ("Inner", "Outer", 6)]


def test_usages_follow_most_recent_definition_not_lexical_scope():
	code = dedent(
		"""
		export function Page() {
		  const Row = () => <Cell />;
		  return <Table />;
		}
		"""
	)
	facts = extract_facts("p.tsx", code)
	assert [d.component_name for d in facts.definitions] == ["Page", "Row"]
	# Table is lexically inside Page but Row was opened last
	assert _refs(facts) == [("Cell", "Row", 3), ("Table", "Row", 4)]


def test_reference_before_any_definition_is_unattributed():
	code = dedent(
		"""
		const banner = <Banner />;

		export const App = () => <Shell />;
		"""
	)
	facts = extract_facts("app.tsx", code)
	assert [d.component_name for d in facts.definitions] == ["App"]
	assert _refs(facts) == [("Banner", None, 2), ("Shell", "App", 4)]


def test_intrinsic_and_member_tags_are_ignored():
	code = dedent(
		"""
		export const Menu = () => (
		  <div>
		    <Dropdown.Item />
		    <span />
		    <Entry />
		  </div>
		);
		"""
	)
	facts = extract_facts("m.tsx", code)
	assert _refs(facts) == [("Entry", "Menu", 6)]


def test_lowercase_arrow_is_not_a_component():
	facts = extract_facts("u.ts", "export const useThing = () => 1;\n", language="typescript")
	assert facts.definitions == []


def test_typescript_grammar_accepts_type_assertions():
	code = dedent(
		"""
		export function Parse(input: unknown) {
		  const value = <number>input;
		  return value;
		}
		"""
	)
	facts = extract_facts("parse.ts", code, language="typescript")
	assert [d.component_name for d in facts.definitions] == ["Parse"]
	assert facts.references == []


def test_syntax_error_raises_parse_error():
	code = dedent(
		"""
		export function Broken() {
		  return <div>;
		"""
	)
	with pytest.raises(ParseError) as info:
		extract_facts("broken.tsx", code)
	assert info.value.path == "broken.tsx"
	assert info.value.line >= 1
