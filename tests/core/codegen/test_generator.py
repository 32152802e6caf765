"""
Tests for the JavaScript Code Generator.

Verifies:
1. Precedence-driven parenthesization.
2. Statement layout and indentation.
3. Verbatim literal emission and value-derived fallback.
4. Errors for unsupported or incomplete trees.
"""

import pytest

from estree_kit.config import ConversionConfig
from estree_kit.core.codegen import CodeGenerator, generate
from estree_kit.core.factory import NodeFactory as F
from estree_kit.core.node_utils import convert_code_to_structure
from estree_kit.core.nodes import (
  ArrowFunctionExpression,
  BinaryExpression,
  ForStatement,
  Literal,
  Verbatim,
)
from estree_kit.enums import Precedence
from estree_kit.exceptions import GenerationError, UnsupportedNodeError

ID = F.identifier_node


def _regen(code: str) -> str:
  return "".join(generate(node) for node in convert_code_to_structure(code))


# --- Expressions ---


@pytest.mark.parametrize(
  "code, expected",
  [
    ("a + b * c;", "a + b * c;"),
    ("(a + b) * c;", "(a + b) * c;"),
    ("a - (b - c);", "a - (b - c);"),
    ("(a - b) - c;", "a - b - c;"),
    ("a ** b ** c;", "a ** b ** c;"),
    ("(a ** b) ** c;", "(a ** b) ** c;"),
    ("a || b && c;", "a || b && c;"),
    ("(a || b) && c;", "(a || b) && c;"),
    ("a = b = c;", "a = b = c;"),
    ("(a, b);", "a, b;"),
    ("f((a, b));", "f((a, b));"),
    ("x = (a ? b : c) ? d : e;", "x = (a ? b : c) ? d : e;"),
    ("!(a && b);", "!(a && b);"),
    ("typeof (a + b);", "typeof (a + b);"),
    ("- -a;", "- -a;"),
    ("-(-a);", "- -a;"),
    ("-(+a);", "-+a;"),
    ("i++ + ++j;", "i++ + ++j;"),
    ("(a + b).c;", "(a + b).c;"),
    ("a[b + c];", "a[b + c];"),
    ("new (f())();", "new (f())();"),
    ("new (a.b().c)();", "new (a.b()).c();"),
    ("new A;", "new A();"),
    ("new A().b();", "new A().b();"),
    ("(() => 1)();", "(() => 1)();"),
    ("f(...args);", "f(...args);"),
    ("x = [1, , 2, ];", "x = [1, , 2];"),
    ("x = [, ];", "x = [,];"),
    ("x = `a${b + 1}c`;", "x = `a${b + 1}c`;"),
  ],
)
def test_expression_parenthesization(code: str, expected: str):
  """Parentheses appear exactly where precedence requires them."""
  assert _regen(code) == expected


def test_function_expression_statement_wrapped():
  """Expression statements that start with function are parenthesized."""
  assert _regen("(function () {})();") == "(function () {\n}());"


def test_object_expression_statement_wrapped():
  """Expression statements that start with a brace are parenthesized."""
  assert _regen("({}).toString();") == "({}.toString());"


def test_let_bracket_statement_wrapped():
  """`let[` at statement start is wrapped to avoid a declaration."""
  stmt = F.expression_statement_node(
    F.assignment_expression_node("=", F.member_expression_node(ID("let"), F.literal_node(0, "0"), True), ID("x"))
  )
  assert generate(stmt) == "(let[0] = x);"


def test_member_of_integer_literal():
  """An integer literal gets a second dot before member access."""
  node = F.member_expression_node(F.literal_node(1, "1"), ID("toString"))
  assert generate(node) == "1..toString"
  assert generate(F.member_expression_node(F.literal_node(1.5, "1.5"), ID("toFixed"))) == "1.5.toFixed"


def test_in_operator_inside_for_init():
  """`in` is parenthesized inside a for-loop initializer only."""
  assert _regen("for (var x = (a in b); ;) ;") == "for (var x = (a in b);;);"
  assert _regen("for (x = (a in b); ;) ;") == "for (x = (a in b);;);"
  assert _regen("for (;;) x = a in b;") == "for (;;)\n    x = a in b;"


def test_arrow_with_object_body():
  """Object literal arrow bodies are parenthesized."""
  arrow = ArrowFunctionExpression(params=[ID("x")], body=F.object_expression_node([]), expression=True)
  assert generate(arrow) == "(x) => ({})"


def test_arrow_precedence():
  """Arrows are parenthesized as operands."""
  arrow = ArrowFunctionExpression(params=[], body=ID("a"), expression=True)
  assert generate(F.logical_expression_node("||", ID("f"), arrow)) == "f || (() => a)"
  assert generate(F.assignment_expression_node("=", ID("g"), arrow)) == "g = () => a"


def test_coalesce_mixed_with_logical():
  """`??` operands that are `||` or `&&` chains stay grouped."""
  node = F.logical_expression_node("??", ID("a"), F.logical_expression_node("||", ID("b"), ID("c")))
  assert generate(node) == "a ?? (b || c)"
  node = F.logical_expression_node("&&", F.logical_expression_node("??", ID("a"), ID("b")), ID("c"))
  assert generate(node) == "(a ?? b) && c"
  node = F.logical_expression_node("??", F.logical_expression_node("||", ID("a"), ID("b")), ID("c"))
  assert generate(node) == "(a || b) ?? c"


def test_exponent_with_unary_base():
  """A unary base of `**` is parenthesized."""
  node = F.binary_expression_node("**", F.unary_expression_node("-", ID("a")), ID("b"))
  assert generate(node) == "(-a) ** b"
  node = F.binary_expression_node("**", F.unary_expression_node("typeof", ID("a")), ID("b"))
  assert generate(node) == "(typeof a) ** b"


def test_long_operator_chain():
  """A thousand-term left-deep chain renders without exhausting the stack."""
  node = ID("t0")
  for i in range(1, 1000):
    node = F.binary_expression_node("+", node, ID(f"t{i}"))
  expected = " + ".join(f"t{i}" for i in range(1000))
  assert generate(node) == expected


def test_long_chain_keeps_inner_grouping():
  """Lower-precedence left operands inside a long chain stay parenthesized."""
  node = F.binary_expression_node("+", ID("a"), ID("b"))
  for i in range(500):
    node = F.binary_expression_node("*", node, ID(f"c{i}"))
  text = generate(node)
  assert text.startswith("(a + b) * c0 * c1")
  assert text.endswith("* c499")


def test_object_layout():
  """Object literals put one property per line."""
  obj = F.object_expression_node(
    [
      F.property_node(ID("a"), F.literal_node(1, "1")),
      F.property_node(F.literal_node("b"), F.object_expression_node([F.property_node(ID("c"), ID("d"))])),
      F.property_node(ID("k"), ID("v"), computed=True),
    ]
  )
  assert generate(obj) == "{\n    a: 1,\n    'b': {\n        c: d\n    },\n    [k]: v\n}"


def test_property_kinds():
  """Accessors, methods and shorthand properties use their short forms."""
  assert _regen("x = {get a() {}, set a(v) {}, m() {}, s};") == (
    "x = {\n    get a() {\n    },\n    set a(v) {\n    },\n    m() {\n    },\n    s\n};"
  )


# --- Literals ---


def test_verbatim_literal_wins():
  """Verbatim content is emitted in place of the value."""
  lit = Literal(value=31, raw="31", verbatim=Verbatim("0x1F"))
  assert generate(lit) == "0x1F"


def test_verbatim_precedence_parenthesized():
  """Verbatim text with low precedence is parenthesized in tight contexts."""
  lit = Literal(value=0, raw="0", verbatim=Verbatim("a + b", Precedence.ADDITIVE))
  node = F.binary_expression_node("*", lit, ID("c"))
  assert generate(node) == "(a + b) * c"


def test_verbatim_disabled_uses_value():
  """With verbatim off, literals are derived from their value."""
  config = ConversionConfig(verbatim=False)
  assert generate(F.literal_node(31, "0x1F"), config) == "31"
  assert generate(F.literal_node("it's"), config) == "'it\\'s'"


@pytest.mark.parametrize(
  "value, expected",
  [
    (None, "null"),
    (True, "true"),
    (False, "false"),
    (42, "42"),
    (42.0, "42"),
    (0.5, "0.5"),
    ("a\nb", "'a\\nb'"),
    ("tab\there", "'tab\\there'"),
    ("\x01", "'\\x01'"),
  ],
)
def test_value_derived_literals(value, expected):
  """Literals without verbatim text are rendered from their value."""
  assert generate(Literal(value=value)) == expected


def test_negative_value_parenthesized_as_operand():
  """A negative numeric value behaves like a unary expression."""
  node = F.member_expression_node(Literal(value=-1), ID("x"))
  assert generate(node) == "(-1).x"
  assert generate(F.binary_expression_node("-", ID("a"), Literal(value=-1))) == "a - -1"


def test_double_quotes():
  """The quote style is configurable."""
  config = ConversionConfig(quotes="double")
  assert generate(Literal(value='say "hi"'), config) == '"say \\"hi\\""'
  assert generate(Literal(value="it's"), config) == '"it\'s"'


def test_regex_without_verbatim():
  """Regular-expression literals render from their pattern and flags."""
  [stmt] = convert_code_to_structure("/ab+c/g;")
  stmt.expression.verbatim = None
  assert generate(stmt) == "/ab+c/g;"


# --- Statements ---


def test_function_declaration_layout():
  """Function bodies are indented one level per nesting depth."""
  body = F.block_statement_node(
    [
      F.if_statement_node(
        ID("a"),
        F.block_statement_node([F.return_statement_node(ID("a"))]),
      ),
      F.return_statement_node(),
    ]
  )
  node = F.function_declaration_node("f", [ID("a"), ID("b")], body)
  assert generate(node) == "function f(a, b) {\n    if (a) {\n        return a;\n    }\n    return;\n}"


def test_empty_block():
  """Empty blocks close on the following line."""
  assert generate(F.block_statement_node()) == "{\n}"


def test_custom_indent():
  """The indentation unit is configurable."""
  body = F.block_statement_node([F.expression_statement_node(ID("x"))])
  assert generate(F.while_statement_node(ID("t"), body), ConversionConfig(indent="\t")) == "while (t) {\n\tx;\n}"


def test_crlf_newline():
  """The line terminator is configurable."""
  program = F.program_node([F.expression_statement_node(ID("a")), F.expression_statement_node(ID("b"))])
  assert generate(program, ConversionConfig(newline="\r\n")) == "a;\r\nb;"


def test_if_else_chain():
  """else-if chains stay flat; non-block bodies move to their own line."""
  assert _regen("if (a) b(); else if (c) { d(); } else e();") == (
    "if (a)\n    b();\nelse if (c) {\n    d();\n} else\n    e();"
  )


def test_dangling_else_is_braced():
  """An inner if without else is wrapped when the outer if has an else."""
  inner = F.if_statement_node(ID("b"), F.expression_statement_node(ID("c")))
  outer = F.if_statement_node(ID("a"), inner, F.expression_statement_node(ID("d")))
  code = generate(outer)

  assert code == "if (a) {\n    if (b)\n        c;\n} else\n    d;"
  [reparsed] = convert_code_to_structure(code)
  assert reparsed.alternate is not None
  assert reparsed.consequent.body[0].alternate is None


def test_switch_layout():
  """Cases are indented inside the switch; consequents one level deeper."""
  node = F.switch_statement_node(
    ID("x"),
    [
      F.switch_case_node(F.literal_node(1, "1"), [F.expression_statement_node(ID("a")), F.break_statement()]),
      F.switch_case_node(None, []),
    ],
  )
  assert generate(node) == "switch (x) {\n    case 1:\n        a;\n        break;\n    default:\n}"


def test_try_catch_finally():
  """try statements keep their clauses on the closing-brace line."""
  assert _regen("try { a(); } catch (e) { b(); } finally { c(); }") == (
    "try {\n    a();\n} catch (e) {\n    b();\n} finally {\n    c();\n}"
  )


def test_loops():
  """Loop headers render their clauses."""
  assert _regen("for (var i = 0, n = 3; i < n; i++) {}") == "for (var i = 0, n = 3; i < n; i++) {\n}"
  assert _regen("for (const k in o) ;") == "for (const k in o);"
  assert _regen("for (let v of [1, 2]) f(v);") == "for (let v of [1, 2])\n    f(v);"
  assert _regen("do { x(); } while (y);") == "do {\n    x();\n} while (y);"
  assert _regen("do x(); while (y);") == "do\n    x();\nwhile (y);"


def test_labels_and_jumps():
  """Labels prefix their statement; jumps keep their label."""
  assert _regen("a: for (;;) { break a; continue a; }") == "a: for (;;) {\n    break a;\n    continue a;\n}"


def test_class_layout():
  """Class bodies list one member per line."""
  code = "class A extends B { static m() { return 1; } *g() {} }"
  assert _regen(code) == "class A extends B {\n    static m() {\n        return 1;\n    }\n    *g() {\n    }\n}"


def test_variable_declarations():
  """Declarators are comma separated."""
  decl = F.variable_declaration_node(
    [F.variable_declarator_node(ID("a"), F.literal_node(1, "1")), F.variable_declarator_node(ID("b"))],
    "let",
  )
  assert generate(decl) == "let a = 1, b;"


def test_misc_statements():
  """Simple statements end with a semicolon."""
  assert _regen("debugger;") == "debugger;"
  assert _regen(";") == ";"
  assert _regen("throw new Error('x');") == "throw new Error('x');"
  assert _regen("with (o) x;") == "with (o)\n    x;"


def test_generator_is_reusable():
  """A CodeGenerator instance can render several nodes."""
  gen = CodeGenerator()
  assert gen.generate(ID("a")) == "a"
  assert gen.generate(F.block_statement_node([F.expression_statement_node(ID("b"))])) == "{\n    b;\n}"


# --- Errors ---


def test_missing_child_raises():
  """A required child set to None is reported."""
  node = BinaryExpression(operator="+", left=None, right=ID("b"))
  with pytest.raises(GenerationError):
    generate(node)


def test_unknown_operator_raises():
  """Operators outside the table are reported."""
  with pytest.raises(GenerationError):
    generate(F.binary_expression_node("<=>", ID("a"), ID("b")))


def test_statement_required():
  """Expressions cannot be rendered in statement position."""
  body = F.block_statement_node([ID("x")])
  with pytest.raises(UnsupportedNodeError):
    generate(body)


def test_for_statement_missing_body():
  """Loops without a body are reported."""
  with pytest.raises(GenerationError):
    generate(ForStatement(body=None))
