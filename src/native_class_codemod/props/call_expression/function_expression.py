"""
Macros whose last argument is a function.

``computed('a', function () {...})`` becomes a decorated getter:

    @computed('a')
    get foo() {...}

Method decorators (``observer``, ``on``, ``action``) decorate a plain method
instead: ``observer('a', function () {...})`` becomes ``@observer('a') foo() {...}``.
"""

from typing import List

from native_class_codemod.enums import PropKind
from native_class_codemod.nodes import (
  BlockStatement,
  ClassMethod,
  FunctionExpression,
  Identifier,
  JsNode,
  StringLiteral,
  VariableDeclaration,
  VariableDeclarator,
)
from native_class_codemod.props.call_expression.base import AbstractCallExpressionProp
from native_class_codemod.super_calls import OPAQUE_SUPER_CALL_ERROR, has_opaque_super_calls, replace_super_expressions


def declare_key_param(param: JsNode, name: str, body: BlockStatement, quote: str) -> BlockStatement:
  """
  Classic accessors receive the property name as their first argument.
  Native accessors do not, so the parameter becomes a local constant.
  """
  declaration = VariableDeclaration([VariableDeclarator(param, StringLiteral(name, quote=quote))])
  return BlockStatement([declaration, *body.body])


class ComputedFunctionExpressionProp(AbstractCallExpressionProp):
  kind = PropKind.COMPUTED_FUNCTION_EXPRESSION

  @property
  def function(self) -> FunctionExpression:
    return self.chain.last_argument

  @property
  def decorator_arguments(self) -> List[JsNode]:
    return list(self.chain.base.arguments[:-1])

  @property
  def is_method_decorator(self) -> bool:
    return self.import_info is not None and self.import_info.is_method_decorator

  def build(self) -> ClassMethod:
    body, _ = replace_super_expressions(self.function.body, self.key, computed=self.computed)

    if self.is_method_decorator:
      kind = "method"
      params = list(self.function.params)
    else:
      kind = "get"
      params = []
      if self.function.params and isinstance(self.function.params[0], Identifier):
        body = declare_key_param(self.function.params[0], self.name, body, self.quote)

    return ClassMethod(
      key=self.key,
      params=params,
      body=body,
      kind=kind,
      computed=self.computed,
      is_async=self.function.is_async,
      generator=self.function.generator,
      decorators=self.build_decorators(),
      comments=self.comments,
    )

  @property
  def type_errors(self) -> List[str]:
    errors = super().type_errors
    if has_opaque_super_calls(self.function.body):
      errors.append(self.make_error(OPAQUE_SUPER_CALL_ERROR))
    return errors
