"""
Properties bound to a function expression: `foo: function (a) { ... }`.
"""

from typing import List

from native_class_codemod.enums import PropKind
from native_class_codemod.nodes import BlockStatement, FunctionExpression, JsNode
from native_class_codemod.props.method import AbstractMethodProp


class FunctionExpressionProp(AbstractMethodProp):
  kind = PropKind.FUNCTION_EXPRESSION

  @property
  def value(self) -> FunctionExpression:
    return self._prop.value

  @property
  def params(self) -> List[JsNode]:
    return self.value.params

  @property
  def body(self) -> BlockStatement:
    return self.value.body

  @property
  def is_async(self) -> bool:
    return self.value.is_async

  @property
  def generator(self) -> bool:
    return self.value.generator
