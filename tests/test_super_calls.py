"""
Tests for Method Body Rewriting.

Verifies:
1.  `this._super(...)` becomes `super.<name>(...)`.
2.  Nested functions are left alone; arrow functions are rewritten.
3.  Comment injection for statements containing a rewrite.
4.  Detection of self-recursive calls and of parent calls hidden in raw code.
5.  The transformer returns untouched subtrees by identity.
"""

from native_class_codemod.nodes import (
  ArrowFunctionExpression,
  BlockStatement,
  CallExpression,
  ExpressionStatement,
  FunctionExpression,
  Identifier,
  MemberExpression,
  RawStatement,
  ReturnStatement,
  SpreadElement,
  StringLiteral,
  ThisExpression,
)
from native_class_codemod.super_calls import calls_own_method, has_opaque_super_calls, replace_super_expressions
from native_class_codemod.visitor import NodeTransformer, iter_nodes


def super_call() -> CallExpression:
  return CallExpression(MemberExpression(ThisExpression(), Identifier("_super")), [SpreadElement(Identifier("arguments"))])


def test_rewrites_super_call():
  """Scenario: init() { this._super(...arguments); }"""
  body = BlockStatement([ExpressionStatement(super_call())])

  new_body, count = replace_super_expressions(body, Identifier("init"))

  assert count == 1
  assert new_body.to_text() == "{\n  super.init(...arguments);\n}"
  # Input is untouched
  assert body.to_text() == "{\n  this._super(...arguments);\n}"


def test_string_key_uses_computed_access():
  """A quoted key cannot follow a dot."""
  body = BlockStatement([ReturnStatement(super_call())])
  new_body, _ = replace_super_expressions(body, StringLiteral("my-key"))
  assert new_body.to_text() == "{\n  return super['my-key'](...arguments);\n}"


def test_nested_function_not_rewritten():
  """`function` binds its own `this`, arrows do not."""
  nested = FunctionExpression(body=BlockStatement([ExpressionStatement(super_call())]))
  arrow = ArrowFunctionExpression(body=super_call())
  body = BlockStatement(
    [
      ExpressionStatement(CallExpression(Identifier("run"), [nested])),
      ExpressionStatement(CallExpression(Identifier("later"), [arrow])),
    ]
  )

  new_body, count = replace_super_expressions(body, Identifier("foo"))

  assert count == 1
  text = new_body.to_text()
  assert "this._super(...arguments)" in text
  assert "() => super.foo(...arguments)" in text


def test_comment_lines_attached_to_statement():
  """Only statements containing a rewrite receive comments."""
  body = BlockStatement(
    [
      ExpressionStatement(CallExpression(Identifier("log"), [])),
      ExpressionStatement(super_call()),
    ]
  )

  new_body, _ = replace_super_expressions(body, Identifier("save"), comment_lines=[" first", " second"])

  untouched, rewritten = new_body.body
  assert untouched.comments == []
  assert [c.value for c in rewritten.comments] == [" first", " second"]
  assert rewritten.to_text() == "// first\n// second\nsuper.save(...arguments);"


def test_comment_lines_only_on_innermost_statement():
  """Scenario: save() { return p.then(() => { this._super(); }); }"""
  arrow = ArrowFunctionExpression(body=BlockStatement([ExpressionStatement(super_call())]))
  then = CallExpression(MemberExpression(Identifier("p"), Identifier("then")), [arrow])
  body = BlockStatement([ReturnStatement(then)])

  new_body, count = replace_super_expressions(body, Identifier("save"), comment_lines=[" TODO: review"])

  assert count == 1
  outer = new_body.body[0]
  assert outer.comments == []
  assert new_body.to_text().count("TODO") == 1
  inner = outer.argument.arguments[0].body.body[0]
  assert [c.value for c in inner.comments] == [" TODO: review"]


def test_calls_own_method():
  """Scenario: save() { this.save(); }"""
  call = CallExpression(MemberExpression(ThisExpression(), Identifier("save")), [])
  body = BlockStatement([ExpressionStatement(call)])

  assert calls_own_method(body, "save")
  assert not calls_own_method(body, "cancel")

  wrapped = BlockStatement([ExpressionStatement(FunctionExpression(body=body))])
  assert not calls_own_method(wrapped, "save")


def test_transformer_identity_when_unchanged():
  """A pass with no matching hooks returns the same object."""
  body = BlockStatement([ExpressionStatement(CallExpression(Identifier("noop"), []))])
  assert NodeTransformer().transform(body) is body


def test_iter_nodes_preorder():
  """Verify traversal order and the skip predicate."""
  call = CallExpression(Identifier("f"), [Identifier("a")])
  names = [type(n).__name__ for n in iter_nodes(call)]
  assert names == ["CallExpression", "Identifier", "Identifier"]

  skipped = list(iter_nodes(call, skip=lambda n: isinstance(n, CallExpression)))
  assert skipped == [call]


def test_opaque_super_calls():
  """Parent calls kept as raw source text survive the rewrite."""
  raw = RawStatement("if (x) {\n  this._super(...arguments);\n}")
  assert has_opaque_super_calls(BlockStatement([raw]))
  assert not has_opaque_super_calls(BlockStatement([RawStatement("if (x) { this.superb(); }")]))
  assert not has_opaque_super_calls(BlockStatement([ExpressionStatement(super_call())]))

  nested = FunctionExpression(body=BlockStatement([raw]))
  assert not has_opaque_super_calls(BlockStatement([ExpressionStatement(nested)]))
