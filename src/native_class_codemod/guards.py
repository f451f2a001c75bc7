"""
Shape Predicates for Legacy Property Declarations.

Each predicate answers one question the classifier asks about an entry of
the legacy object literal. They only inspect node types and key names and
never look at runtime data.
"""

from typing import Union

from native_class_codemod.known_decorators import ACTIONS_KEY, CLASS_DECORATOR_NAMES
from native_class_codemod.nodes import (
  CallExpression,
  FunctionExpression,
  Identifier,
  JsNode,
  NumericLiteral,
  ObjectExpression,
  ObjectMethod,
  ObjectProperty,
  StringLiteral,
)

PropertyNode = Union[ObjectProperty, ObjectMethod]


def key_name(key: JsNode, computed: bool = False) -> str:
  """
  Returns the name a property key is known by.

  Args:
      key: The key node.
      computed: True for the `[expr]:` form; the rendered expression is used.

  Returns:
      str: Identifier name, literal value, or rendered key expression.
  """
  if not computed:
    if isinstance(key, Identifier):
      return key.name
    if isinstance(key, StringLiteral):
      return key.value
    if isinstance(key, NumericLiteral):
      return str(key.value)
  return key.to_text()


def prop_name(node: PropertyNode) -> str:
  return key_name(node.key, node.computed)


def is_property_node(node: JsNode) -> bool:
  return isinstance(node, (ObjectProperty, ObjectMethod))


def is_method(node: JsNode) -> bool:
  """`foo() {}` method shorthand."""
  return isinstance(node, ObjectMethod)


def is_property_with_call_expression(node: JsNode) -> bool:
  return isinstance(node, ObjectProperty) and isinstance(node.value, CallExpression)


def is_property_with_function_expression(node: JsNode) -> bool:
  """`foo: function () {}`. Arrow functions do not count: they stay class fields."""
  return isinstance(node, ObjectProperty) and isinstance(node.value, FunctionExpression)


def is_property_for_class_decorator(node: JsNode) -> bool:
  return isinstance(node, ObjectProperty) and not node.computed and prop_name(node) in CLASS_DECORATOR_NAMES


def is_property_for_actions_object(node: JsNode) -> bool:
  return (
    isinstance(node, ObjectProperty)
    and not node.computed
    and prop_name(node) == ACTIONS_KEY
    and isinstance(node.value, ObjectExpression)
  )
