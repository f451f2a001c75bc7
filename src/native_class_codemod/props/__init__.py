"""
Property Models and the Variant Classifier.

`make_prop` turns one entry of a legacy object literal into exactly one
property model. The first matching rule wins:

1. Call-valued property: resolved by the call-expression disambiguator.
2. Method shorthand: `MethodProp`.
3. Function expression value: `FunctionExpressionProp`.
4. Component configuration key (`tagName`, `classNames`, ...): `ClassDecoratorProp`.
5. `actions` object: `ActionsProp`.
6. Anything else: `SimpleProp`.
"""

from typing import Optional, Union

from native_class_codemod.config import CodemodOptions
from native_class_codemod.decorators import DecoratorImportInfoMap, default_decorator_import_infos
from native_class_codemod.errors import ClassificationError
from native_class_codemod.guards import (
  is_method,
  is_property_for_actions_object,
  is_property_for_class_decorator,
  is_property_node,
  is_property_with_call_expression,
  is_property_with_function_expression,
)
from native_class_codemod.nodes import JsNode
from native_class_codemod.props.actions import ActionPropertyProp, ActionsProp, make_action_prop
from native_class_codemod.props.base import AbstractProp
from native_class_codemod.props.call_expression import (
  ComputedFunctionExpressionProp,
  ComputedObjectExpressionProp,
  DecoratedProp,
  make_call_expression_prop,
)
from native_class_codemod.props.class_decorator import ClassDecoratorProp
from native_class_codemod.props.function_expression import FunctionExpressionProp
from native_class_codemod.props.method import AbstractMethodProp, MethodProp
from native_class_codemod.props.simple import SimpleProp
from native_class_codemod.runtime_data import RuntimeData

Prop = Union[
  SimpleProp,
  MethodProp,
  FunctionExpressionProp,
  ComputedFunctionExpressionProp,
  ComputedObjectExpressionProp,
  DecoratedProp,
  ActionsProp,
  ClassDecoratorProp,
]


def make_prop(
  declaration: JsNode,
  runtime_data: Optional[RuntimeData],
  options: CodemodOptions,
  import_infos: Optional[DecoratorImportInfoMap] = None,
) -> Prop:
  """
  Classifies a legacy property declaration.

  Args:
      declaration: An `ObjectProperty` or `ObjectMethod`.
      runtime_data: The runtime record of the enclosing declaration, or None.
      options: Codemod options.
      import_infos: Decorator imports of the file. Defaults to the
          conventional framework imports.

  Returns:
      Prop: The property model.

  Raises:
      ClassificationError: If `declaration` is not a property declaration.
  """
  if not is_property_node(declaration):
    raise ClassificationError(f"Cannot classify {type(declaration).__name__}: {declaration.to_text()}")

  if is_property_with_call_expression(declaration):
    if import_infos is None:
      import_infos = default_decorator_import_infos()
    return make_call_expression_prop(declaration, runtime_data, options, import_infos)
  if is_method(declaration):
    return MethodProp(declaration, runtime_data, options)
  if is_property_with_function_expression(declaration):
    return FunctionExpressionProp(declaration, runtime_data, options)
  if is_property_for_class_decorator(declaration):
    return ClassDecoratorProp(declaration, runtime_data, options)
  if is_property_for_actions_object(declaration):
    return ActionsProp(declaration, runtime_data, options)
  return SimpleProp(declaration, runtime_data, options)


__all__ = [
  "AbstractMethodProp",
  "AbstractProp",
  "ActionPropertyProp",
  "ActionsProp",
  "ClassDecoratorProp",
  "ComputedFunctionExpressionProp",
  "ComputedObjectExpressionProp",
  "DecoratedProp",
  "FunctionExpressionProp",
  "MethodProp",
  "Prop",
  "SimpleProp",
  "make_action_prop",
  "make_prop",
]
