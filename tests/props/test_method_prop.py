"""
Tests for Function-Valued Properties.

Verifies:
1.  Method shorthand and function expressions both build to class methods.
2.  `this._super` calls are rewritten to the member's parent call.
3.  Accessor kinds, async and generator flags carry over.
4.  Runtime decorators are attached to methods.
5.  Decorators written on the source entry are dropped with a diagnostic.
6.  Parent calls inside raw source text are reported.
"""

from native_class_codemod.enums import PropKind
from native_class_codemod.nodes import (
  BlockStatement,
  CallExpression,
  Decorator,
  ExpressionStatement,
  FunctionExpression,
  Identifier,
  MemberExpression,
  RawStatement,
  ReturnStatement,
  SpreadElement,
  ThisExpression,
)
from native_class_codemod.props import FunctionExpressionProp, MethodProp, make_prop
from native_class_codemod.runtime_data import parse_runtime_data


def super_statement() -> ExpressionStatement:
  callee = MemberExpression(ThisExpression(), Identifier("_super"))
  return ExpressionStatement(CallExpression(callee, [SpreadElement(Identifier("arguments"))]))


def test_method_shorthand(js, options):
  """Scenario: init() { this._super(...arguments); }"""
  prop = make_prop(js.method("init", [super_statement()]), None, options)

  assert isinstance(prop, MethodProp)
  assert prop.kind is PropKind.METHOD
  assert prop.type == "ObjectMethod"
  assert not prop.realizes_action
  assert prop.type_errors == []
  assert prop.build().to_text() == "init() {\n  super.init(...arguments);\n}"


def test_function_expression(js, options):
  """Scenario: didRender: function (a, b) { return a; }"""
  fn = js.function([ReturnStatement(Identifier("a"))], params=["a", "b"])
  prop = make_prop(js.prop("didRender", fn), None, options)

  assert isinstance(prop, FunctionExpressionProp)
  assert prop.kind is PropKind.FUNCTION_EXPRESSION
  assert prop.type == "FunctionExpression"
  assert prop.build().to_text() == "didRender(a, b) {\n  return a;\n}"


def test_accessor_and_async_flags(js, options):
  getter = make_prop(js.method("total", [ReturnStatement(Identifier("x"))], kind="get"), None, options)
  assert getter.build().to_text() == "get total() {\n  return x;\n}"

  fn = FunctionExpression(body=BlockStatement(), is_async=True)
  loader = make_prop(js.prop("load", fn), None, options)
  assert loader.build().to_text() == "async load() {}"


def test_method_with_runtime_decorators(js, options):
  runtime = parse_runtime_data({"type": "Component", "offProperties": {"handler": ["resize"]}})
  prop = make_prop(js.method("handler"), runtime, options)

  assert prop.has_off_decorator
  assert prop.build().to_text() == "@off('resize')\nhandler() {}"


def test_method_lifecycle_name_is_fine_outside_actions(js, options):
  """Lifecycle checks only apply to actions."""
  prop = make_prop(js.method("didInsertElement"), None, options)
  assert prop.type_errors == []


def test_overridden_uses_properties_outside_actions(js, options):
  runtime = parse_runtime_data({"type": "Component", "overriddenActions": ["save"], "overriddenProperties": []})
  prop = make_prop(js.method("save"), runtime, options)
  assert not prop.is_overridden


def test_source_decorators_on_method_reported(js, options):
  """Methods do not carry source decorators over; each one is reported."""
  raw = js.method("foo", decorators=[Decorator(Identifier("tracked"))])
  prop = make_prop(raw, None, options)

  assert prop.ignored_decorators == ["tracked"]
  assert [d.text for d in prop.diagnostics] == ["[foo] Ignored decorator tracked"]
  assert prop.build().to_text() == "foo() {}"


def test_source_decorators_on_function_expression_reported(js, options):
  raw = js.prop("onClick", js.function(), decorators=[Decorator(CallExpression(Identifier("debounce"), []))])
  prop = make_prop(raw, None, options)

  assert prop.ignored_decorators == ["debounce"]
  assert len(prop.diagnostics) == 1


def test_super_call_in_raw_statement_reported(js, options):
  """Scenario: willDestroy() { if (x) { this._super(...arguments); } }"""
  raw = RawStatement("if (x) {\n  this._super(...arguments);\n}")
  prop = make_prop(js.method("willDestroy", [raw]), None, options)

  assert prop.type_errors == [
    "[willDestroy]: Transform not supported - "
    "this._super call in unparsed code can not be rewritten, replace it with a super call by hand"
  ]
  assert "this._super(...arguments);" in prop.build().to_text()
