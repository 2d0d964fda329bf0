from __future__ import annotations

import logging
import re
import threading
from typing import Dict, List, Optional

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser

from .errors import ParseError
from .model import Definition, FileFacts, Reference


logger = logging.getLogger(__name__)

_PASCAL_CASE = re.compile(r"[A-Z][A-Za-z0-9]*")

_FUNCTION_VALUES = {"arrow_function", "function_expression", "function"}
_TOP_LEVEL_PARENTS = {"program", "export_statement"}
_JSX_TAGS = {"jsx_opening_element", "jsx_self_closing_element"}

# Parsers are not thread-safe; keep one per thread
_local = threading.local()


def is_pascal_case(name: Optional[str]) -> bool:
	return bool(name) and _PASCAL_CASE.fullmatch(name) is not None


def get_parser(language: str) -> Parser:
	parsers: Optional[Dict[str, Parser]] = getattr(_local, "parsers", None)
	if parsers is None:
		parsers = _local.parsers = {}
	if language not in parsers:
		if language == "typescript":
			lang = Language(tree_sitter_typescript.language_typescript())
		else:
			lang = Language(tree_sitter_typescript.language_tsx())
		parsers[language] = Parser(lang)
		logger.debug("Loaded %s grammar", language)
	return parsers[language]


def _text(node: Optional[Node]) -> Optional[str]:
	if node is None or node.text is None:
		return None
	return node.text.decode("utf-8")


def _first_error_line(root: Node) -> int:
	stack = [root]
	while stack:
		node = stack.pop()
		if node.type == "ERROR" or node.is_missing:
			return node.start_point[0] + 1
		stack.extend(reversed(node.children))
	return root.start_point[0] + 1


def _parameter_count(node: Node) -> int:
	params = node.child_by_field_name("parameters")
	if params is None:
		return 0
	return len([p for p in params.named_children if p.type != "comment"])


def _component_definition(node: Node) -> Optional[str]:
	"""Name of the component `node` declares, if it declares one."""
	if node.type == "function_declaration":
		name = _text(node.child_by_field_name("name"))
		parent = node.parent
		if (
			parent is not None
			and parent.type in _TOP_LEVEL_PARENTS
			and is_pascal_case(name)
			and _parameter_count(node) <= 1
		):
			return name
	elif node.type == "variable_declarator":
		ident = node.child_by_field_name("name")
		value = node.child_by_field_name("value")
		if (
			ident is not None
			and ident.type == "identifier"
			and value is not None
			and value.type in _FUNCTION_VALUES
			and is_pascal_case(_text(ident))
		):
			return _text(ident)
	return None


def _tag_name(node: Node) -> Optional[str]:
	name = node.child_by_field_name("name")
	# Member (Foo.Bar) and namespaced (a:b) tags are not component references
	if name is None or name.type != "identifier":
		return None
	return _text(name)


def extract_facts(path: str, text: str, language: str = "tsx") -> FileFacts:
	tree = get_parser(language).parse(text.encode("utf-8"))
	root = tree.root_node
	if root.has_error:
		raise ParseError(path, _first_error_line(root))

	definitions: List[Definition] = []
	references: List[Reference] = []
	# Usages are attributed to the most recently opened definition in the file,
	# not to the lexically enclosing one.
	current: Optional[str] = None

	stack = [root]
	while stack:
		node = stack.pop()
		name = _component_definition(node)
		if name is not None:
			current = name
			definitions.append(Definition(component_name=name, file_path=path))
		elif node.type in _JSX_TAGS:
			tag = _tag_name(node)
			if is_pascal_case(tag):
				references.append(
					Reference(
						used_component=tag,
						using_component=current,
						file=path,
						line=node.start_point[0] + 1,
					)
				)
		stack.extend(reversed(node.children))

	return FileFacts(path=path, definitions=definitions, references=references)
