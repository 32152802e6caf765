"""
Tests for the Esprima Parser Adapter.

Verifies:
1. Script parsing into the dataclass model.
2. Loading ESTree dictionaries.
3. Rejection of unsupported node kinds.
"""

import sys

import pytest

from estree_kit.core.nodes import (
  ArrayExpression,
  ArrowFunctionExpression,
  BinaryExpression,
  ClassDeclaration,
  ExpressionStatement,
  FunctionDeclaration,
  Identifier,
  Literal,
  Program,
  TemplateLiteral,
  UnaryExpression,
  VariableDeclaration,
)
from estree_kit.core.parser import parse_script, parse_structure
from estree_kit.exceptions import ParseError, UnsupportedNodeError


def test_parse_script_returns_raw_program():
  """Parser output has no parent links and no verbatim annotations."""
  program = parse_script("var a = 1;")

  assert isinstance(program, Program)
  assert program.source_type == "script"
  decl = program.body[0]
  assert isinstance(decl, VariableDeclaration)
  assert decl.kind == "var"
  assert decl.parent is None

  init = decl.declarations[0].init
  assert isinstance(init, Literal)
  assert init.raw == "1"
  assert init.value == 1
  assert init.verbatim is None


def test_async_flag_is_mapped():
  """esprima's isAsync populates is_async."""
  program = parse_script("async function f() {} var g = async () => 1;")
  func = program.body[0]
  arrow = program.body[1].declarations[0].init

  assert isinstance(func, FunctionDeclaration)
  assert func.is_async is True
  assert isinstance(arrow, ArrowFunctionExpression)
  assert arrow.is_async is True
  assert arrow.expression is True


def test_array_holes_are_kept():
  """Elisions become None entries."""
  [stmt] = parse_script("[a, , b];").body
  arr = stmt.expression
  assert isinstance(arr, ArrayExpression)
  assert arr.elements[1] is None
  assert [e.name for e in arr.elements if e is not None] == ["a", "b"]


def test_class_super_class():
  """superClass maps to super_class."""
  [cls] = parse_script("class A extends B {}").body
  assert isinstance(cls, ClassDeclaration)
  assert cls.super_class == Identifier(name="B")
  assert cls.body.body == []


def test_template_parts():
  """Template elements keep their raw text."""
  [stmt] = parse_script("`a${b}c`;").body
  tpl = stmt.expression
  assert isinstance(tpl, TemplateLiteral)
  assert [q.value.raw for q in tpl.quasis] == ["a", "c"]
  assert tpl.quasis[-1].tail is True


def test_regex_literal_info():
  """Regular-expression literals carry pattern and flags."""
  [stmt] = parse_script("/ab+c/gi;").body
  lit = stmt.expression
  assert lit.regex.pattern == "ab+c"
  assert lit.regex.flags == "gi"
  assert lit.raw == "/ab+c/gi"


def test_directive_is_recorded():
  """Directive prologues keep their directive text."""
  [stmt] = parse_script("'use strict';").body
  assert isinstance(stmt, ExpressionStatement)
  assert stmt.directive == "use strict"


def test_parse_error():
  """Invalid source raises ParseError from the esprima error."""
  with pytest.raises(ParseError) as exc:
    parse_script("function (")
  assert exc.value.line == 1


def test_module_syntax_is_rejected():
  """Scripts cannot contain import declarations."""
  with pytest.raises(ParseError):
    parse_script("import x from 'y';")


def test_parse_structure_from_dict():
  """ESTree dictionaries load through the same registry."""
  raw = {
    "type": "ExpressionStatement",
    "expression": {
      "type": "CallExpression",
      "callee": {"type": "Identifier", "name": "f"},
      "arguments": [{"type": "Literal", "value": 2, "raw": "2"}],
    },
  }
  stmt = parse_structure(raw)

  assert isinstance(stmt, ExpressionStatement)
  assert stmt.expression.callee == Identifier(name="f")
  assert stmt.expression.arguments[0].raw == "2"


def test_parse_structure_unknown_type():
  """Node kinds outside the closed set are rejected."""
  with pytest.raises(UnsupportedNodeError):
    parse_structure({"type": "ImportDeclaration", "specifiers": [], "source": None})


def test_long_operator_chain():
  """A thousand-term `+` chain converts without exhausting the stack."""
  program = parse_script("x = " + " + ".join(f"t{i}" for i in range(1000)) + ";")

  node = program.body[0].expression.right
  depth = 0
  while isinstance(node, BinaryExpression):
    assert node.operator == "+"
    node = node.left
    depth += 1
  assert depth == 999
  assert isinstance(node, Identifier)
  assert node.name == "t0"


def test_deep_dict_structure():
  """Dict input nested past the recursion limit converts iteratively."""
  depth = sys.getrecursionlimit() + 100
  raw = {"type": "Identifier", "name": "x"}
  for _ in range(depth):
    raw = {"type": "UnaryExpression", "operator": "!", "prefix": True, "argument": raw}

  node = parse_structure(raw)
  for _ in range(depth):
    assert isinstance(node, UnaryExpression)
    node = node.argument
  assert node.name == "x"
