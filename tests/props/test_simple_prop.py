"""
Tests for Simple Value Properties.

Verifies:
1.  Plain values build to class fields unchanged.
2.  Runtime data synthesizes `@unobserves` / `@off` and drops the initializer.
3.  Validation against `class_fields` and object-valued state.
4.  Handling of decorators already written in the object literal.
"""

import logging

from native_class_codemod.config import CodemodOptions
from native_class_codemod.diagnostics import DiagnosticSink
from native_class_codemod.enums import PropKind
from native_class_codemod.nodes import (
  ArrayExpression,
  CallExpression,
  Comment,
  Decorator,
  Identifier,
  NumericLiteral,
  ObjectExpression,
  ObjectProperty,
  StringLiteral,
)
from native_class_codemod.props import SimpleProp, make_prop
from native_class_codemod.runtime_data import parse_runtime_data


def test_simple_without_runtime_data(js, options):
  """Scenario: foo: 'bar'"""
  raw = js.prop("foo", StringLiteral("bar"), comments=[Comment(" A comment")])
  prop = make_prop(raw, None, options)

  assert isinstance(prop, SimpleProp)
  assert prop.kind is PropKind.SIMPLE
  assert prop.name == "foo"
  assert prop.type == "StringLiteral"
  assert not prop.has_runtime_data
  assert not prop.is_computed
  assert prop.runtime_type is None
  assert prop.decorators == []
  assert prop.type_errors == []

  member = prop.build()
  assert member.key == raw.key
  assert member.value == raw.value
  assert member.decorators == []
  assert member.to_text() == "// A comment\nfoo = 'bar';"


def test_unobserved_property(js, options):
  """unobservedProperties: {foo: []} yields exactly one `@unobserves()`."""
  runtime = parse_runtime_data({"type": "EmberObject", "unobservedProperties": {"foo": []}})
  prop = make_prop(js.prop("foo", NumericLiteral(1)), runtime, options)

  assert prop.has_runtime_data
  assert prop.runtime_type == "EmberObject"
  assert prop.has_unobserves_decorator
  assert not prop.has_off_decorator
  assert prop.decorator_names == ["unobserves"]
  assert prop.build().to_text() == "@unobserves()\nfoo;"


def test_unobserves_then_off_order(js, options):
  runtime = parse_runtime_data(
    {
      "type": "Component",
      "unobservedProperties": {"foo": ["a"]},
      "offProperties": {"foo": ["b", "c"]},
      "overriddenProperties": ["foo"],
    }
  )
  prop = make_prop(js.prop("foo", NumericLiteral(1)), runtime, options)

  assert prop.decorator_names == ["unobserves", "off"]
  assert prop.is_overridden
  assert prop.build().to_text() == "@unobserves('a')\n@off('b', 'c')\nfoo;"


def test_class_fields_disabled_with_object_value(js):
  """Both problems are reported; the member is still built."""
  options = CodemodOptions(class_fields=False)
  prop = make_prop(js.prop("config", ObjectExpression()), None, options)

  assert prop.type_errors == [
    "[config]: Transform not supported - need option '--class-fields=true'",
    "[config]: Transform not supported - value is of type object. "
    "For more details: eslint-plugin-ember/avoid-leaking-state-in-ember-objects",
  ]
  assert prop.build().to_text() == "config = {};"


def test_array_value_is_shared_state(js, options):
  prop = make_prop(js.prop("items", ArrayExpression()), None, options)
  assert len(prop.type_errors) == 1
  assert "avoid-leaking-state" in prop.type_errors[0]


def test_query_params_object_allowed(js, options):
  """The framework copies `queryParams` per instance."""
  prop = make_prop(js.prop("queryParams", ObjectExpression()), None, options)
  assert prop.type_errors == []


def test_type_errors_are_idempotent(js):
  prop = make_prop(js.prop("config", ObjectExpression()), None, CodemodOptions(class_fields=False))
  assert prop.type_errors == prop.type_errors


def test_unsupported_existing_decorator_dropped(js, options, caplog):
  """One informational diagnostic per dropped decorator."""
  raw = js.prop(
    "foo",
    StringLiteral("bar"),
    decorators=[Decorator(Identifier("tracked")), Decorator(CallExpression(Identifier("attr"), []))],
  )
  prop = make_prop(raw, None, options)

  assert prop.existing_decorators == raw.decorators
  assert prop.ignored_decorators == ["tracked", "attr"]
  assert prop.decorators == []
  assert prop.build().to_text() == "foo = 'bar';"

  sink = DiagnosticSink()
  with caplog.at_level(logging.INFO):
    sink.report(prop.diagnostics)

  assert [e.text for e in sink.events] == [
    "[foo] Ignored decorator tracked",
    "[foo] Ignored decorator attr",
  ]
  assert "[foo] Ignored decorator tracked" in caplog.messages


def test_allowed_existing_decorator_preserved(js):
  """Preserved source decorators come before synthesized ones."""
  options = CodemodOptions.from_mapping({"decorators": {"inObjectLiterals": ["tracked"]}})
  runtime = parse_runtime_data({"type": "Component", "unobservedProperties": {"foo": []}})
  raw = js.prop("foo", StringLiteral("bar"), decorators=[Decorator(Identifier("tracked"))])

  prop = make_prop(raw, runtime, options)

  assert prop.ignored_decorators == []
  assert prop.diagnostics == []
  assert prop.decorator_names == ["tracked", "unobserves"]
  assert prop.build().to_text() == "@tracked\n@unobserves()\nfoo;"


def test_synthesized_never_duplicates_existing(js):
  options = CodemodOptions.from_mapping({"decorators": {"inObjectLiterals": ["off"]}})
  runtime = parse_runtime_data({"type": "Component", "offProperties": {"foo": ["x"]}})
  existing = Decorator(CallExpression(Identifier("off"), [StringLiteral("y")]))
  prop = make_prop(js.prop("foo", NumericLiteral(1), decorators=[existing]), runtime, options)

  assert prop.decorator_names == ["off"]
  assert prop.build().decorators == [existing]


def test_quote_style_applies_to_synthesized_args(js):
  options = CodemodOptions(quote="double")
  runtime = parse_runtime_data({"type": "Component", "offProperties": {"foo": ["x"]}})
  prop = make_prop(js.prop("foo", NumericLiteral(1)), runtime, options)
  assert prop.build().to_text() == '@off("x")\nfoo;'


def test_build_is_idempotent(js, options):
  runtime = parse_runtime_data({"type": "Component", "unobservedProperties": {"foo": []}})
  prop = make_prop(js.prop("foo", NumericLiteral(1)), runtime, options)
  assert prop.build() == prop.build()
  assert prop.build() is not prop.build()


def test_literal_and_computed_keys(options):
  quoted = make_prop(ObjectProperty(StringLiteral("my-key"), NumericLiteral(1)), None, options)
  assert quoted.name == "my-key"

  computed = make_prop(ObjectProperty(Identifier("KEY"), NumericLiteral(1), computed=True), None, options)
  assert computed.name == "KEY"
  assert computed.build().to_text() == "[KEY] = 1;"
