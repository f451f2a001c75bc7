"""
Tests for Class Decorator Properties.

Verifies:
1.  Component configuration keys become class-level decorators.
2.  List values are spread into decorator arguments.
3.  `layout: layout` is emitted as `@templateLayout`.
4.  Non-array values of list kinds are reported.
"""

import pytest

from native_class_codemod.enums import ClassDecoratorKind, PropKind
from native_class_codemod.nodes import ArrayExpression, Identifier, StringLiteral
from native_class_codemod.props import ClassDecoratorProp, make_prop
from native_class_codemod.runtime_data import parse_runtime_data


def test_tag_name(js, options):
  prop = make_prop(js.prop("tagName", StringLiteral("span")), None, options)

  assert isinstance(prop, ClassDecoratorProp)
  assert prop.kind is PropKind.CLASS_DECORATOR
  assert prop.is_class_decorator
  assert prop.is_tag_name
  assert prop.class_decorator_kind is ClassDecoratorKind.TAG_NAME
  assert prop.build().to_text() == "@tagName('span')"
  assert prop.build_members() == []


@pytest.mark.parametrize(
  "name, flag",
  [
    ("classNames", "is_class_names"),
    ("classNameBindings", "is_class_name_bindings"),
    ("attributeBindings", "is_attribute_bindings"),
  ],
)
def test_list_kinds_spread(js, options, name, flag):
  value = ArrayExpression([StringLiteral("a"), StringLiteral("b:c")])
  prop = make_prop(js.prop(name, value), None, options)

  assert getattr(prop, flag)
  assert prop.type_errors == []
  assert prop.build().to_text() == f"@{name}('a', 'b:c')"


def test_list_kind_requires_array(js, options):
  prop = make_prop(js.prop("classNames", Identifier("NAMES")), None, options)
  assert prop.type_errors == [
    "[classNames]: Transform not supported - value of 'classNames' must be an array literal, got Identifier"
  ]


def test_layout_with_template_import(js, options):
  """`layout: layout` would clash with the imported template binding."""
  prop = make_prop(js.prop("layout", Identifier("layout")), None, options)

  assert prop.is_template_layout_decorator
  assert not prop.is_layout_decorator
  assert prop.build().to_text() == "@templateLayout(layout)"


def test_layout_with_other_binding(js, options):
  prop = make_prop(js.prop("layout", Identifier("template")), None, options)

  assert prop.is_layout_decorator
  assert prop.build().to_text() == "@layout(template)"


def test_runtime_data_ignored(js, options):
  runtime = parse_runtime_data({"type": "Component", "unobservedProperties": {"tagName": []}})
  prop = make_prop(js.prop("tagName", StringLiteral("div")), runtime, options)

  assert prop.decorators == []
  assert not prop.has_unobserves_decorator


def test_runtime_type_recorded(js, options):
  """Runtime decorators are not synthesized, but the record is still seen."""
  runtime = parse_runtime_data({"type": "Component"})
  prop = make_prop(js.prop("tagName", StringLiteral("div")), runtime, options)

  assert prop.has_runtime_data
  assert prop.runtime_type == "Component"
