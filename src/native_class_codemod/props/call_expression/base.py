"""
Shared behaviour of properties whose value is a call expression.
"""

from typing import List, Optional

from native_class_codemod.config import CodemodOptions
from native_class_codemod.decorators import DecoratorImportInfo, DecoratorInfo
from native_class_codemod.enums import CallKind
from native_class_codemod.known_decorators import VOLATILE_MODIFIER
from native_class_codemod.nodes import CallExpression, Decorator, JsNode, ObjectProperty
from native_class_codemod.props.base import AbstractProp
from native_class_codemod.props.call_expression.chain import CallChain, build_decorator_expression, parse_call_chain
from native_class_codemod.runtime_data import RuntimeData


class AbstractCallExpressionProp(AbstractProp):
  """
  A property whose value is a (possibly modified) macro call.

  The macro call itself becomes the first decorator of the member.

  Attributes:
      chain (CallChain): The base call and its modifiers.
      import_info (Optional[DecoratorImportInfo]): What the callee was imported as,
          or None when the callee is not a known decorator.
      call_kind (CallKind): Outcome of call disambiguation.
  """

  def __init__(
    self,
    raw_prop: ObjectProperty,
    runtime_data: Optional[RuntimeData],
    options: CodemodOptions,
    import_info: Optional[DecoratorImportInfo] = None,
    call_kind: CallKind = CallKind.UNRECOGNIZED,
  ):
    super().__init__(raw_prop, runtime_data, options)
    self.chain: CallChain = parse_call_chain(raw_prop.value)
    self.import_info = import_info
    self.call_kind = call_kind

  @property
  def value(self) -> CallExpression:
    return self._prop.value

  @property
  def callee_name(self) -> str:
    return self.chain.callee_name

  @property
  def decorator_arguments(self) -> List[JsNode]:
    """Arguments of the macro call that the decorator keeps."""
    return list(self.chain.base.arguments)

  @property
  def is_macro(self) -> bool:
    return self.import_info is not None and self.import_info.is_macro_decorator

  @property
  def has_modifier_with_args(self) -> bool:
    return any(m.has_args for m in self.chain.modifiers)

  @property
  def has_volatile(self) -> bool:
    return VOLATILE_MODIFIER in self.chain.modifier_names

  def _source_decorators(self) -> List[DecoratorInfo]:
    expression = build_decorator_expression(self.chain, self.decorator_arguments)
    is_meta = self.import_info.is_meta_decorator if self.import_info else self.is_computed
    return [DecoratorInfo(self.callee_name, is_meta_decorator=is_meta, node=Decorator(expression))]

  @property
  def type_errors(self) -> List[str]:
    errors: List[str] = []
    if self.has_modifier_with_args:
      errors.append(self.make_error("value has modifiers like 'property' or 'meta'"))
    if self.has_volatile and self.is_macro:
      errors.append(
        self.make_error("value has 'volatile' modifier with computed meta ('@ember/object/computed') is not supported")
      )
    return errors
