"""
Call-Expression Disambiguator.

Properties whose value is a call are macros from the framework, injections,
or calls the codemod does not know. The callee identifier is resolved
against the file's decorator imports to pick the model.
"""

from typing import Optional, Union

from native_class_codemod.config import CodemodOptions
from native_class_codemod.decorators import DecoratorImportInfoMap
from native_class_codemod.enums import CallKind
from native_class_codemod.nodes import FunctionExpression, Identifier, ObjectExpression, ObjectProperty
from native_class_codemod.props.call_expression.base import AbstractCallExpressionProp
from native_class_codemod.props.call_expression.chain import CallChain, CallModifier, parse_call_chain
from native_class_codemod.props.call_expression.decorated import DecoratedProp
from native_class_codemod.props.call_expression.function_expression import ComputedFunctionExpressionProp
from native_class_codemod.props.call_expression.object_expression import ComputedObjectExpressionProp
from native_class_codemod.runtime_data import RuntimeData

CallExpressionProp = Union[ComputedFunctionExpressionProp, ComputedObjectExpressionProp, DecoratedProp]


def make_call_expression_prop(
  raw_prop: ObjectProperty,
  runtime_data: Optional[RuntimeData],
  options: CodemodOptions,
  import_infos: DecoratorImportInfoMap,
) -> CallExpressionProp:
  """
  Picks the model for a call-valued property.

  Args:
      raw_prop: A property whose value is a `CallExpression`.
      runtime_data: The declaration's runtime record, or None.
      options: Codemod options.
      import_infos: Decorator imports of the file, keyed by local name.

  Returns:
      CallExpressionProp: The computed getter/method, the getter/setter pair,
      or a decorated field.
  """
  chain = parse_call_chain(raw_prop.value)
  callee = chain.callee
  info = import_infos.get(callee.name) if isinstance(callee, Identifier) else None

  if info is None:
    return DecoratedProp(raw_prop, runtime_data, options, None, CallKind.UNRECOGNIZED)

  last = chain.last_argument
  if (info.is_computed or info.is_method_decorator) and isinstance(last, FunctionExpression):
    return ComputedFunctionExpressionProp(raw_prop, runtime_data, options, info, CallKind.COMPUTED_MACRO)
  if info.is_computed and isinstance(last, ObjectExpression):
    return ComputedObjectExpressionProp(raw_prop, runtime_data, options, info, CallKind.COMPUTED_MACRO)
  if info.is_injection:
    return DecoratedProp(raw_prop, runtime_data, options, info, CallKind.SERVICE_INJECTION)
  return DecoratedProp(raw_prop, runtime_data, options, info, CallKind.KNOWN_MACRO)


__all__ = [
  "AbstractCallExpressionProp",
  "CallChain",
  "CallExpressionProp",
  "CallModifier",
  "ComputedFunctionExpressionProp",
  "ComputedObjectExpressionProp",
  "DecoratedProp",
  "make_call_expression_prop",
  "parse_call_chain",
]
