"""
Call Chain Parsing.

Computed macros may be followed by modifier calls:
``computed('a', fn).readOnly()`` or ``alias('x').property('y')``. This
module separates the base macro call from its modifiers and rebuilds the
decorator expression from them.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from native_class_codemod.known_decorators import CALL_MODIFIERS, MODIFIERS_WITH_ARGS
from native_class_codemod.nodes import CallExpression, Identifier, JsNode, MemberExpression


@dataclass(frozen=True)
class CallModifier:
  name: str
  arguments: List[JsNode] = field(default_factory=list, compare=False)

  @property
  def has_args(self) -> bool:
    return self.name in MODIFIERS_WITH_ARGS or len(self.arguments) > 0


@dataclass(frozen=True)
class CallChain:
  """
  Attributes:
      base (CallExpression): The innermost macro call.
      modifiers (Tuple[CallModifier, ...]): Modifiers in application order.
  """

  base: CallExpression
  modifiers: Tuple[CallModifier, ...] = ()

  @property
  def callee(self) -> JsNode:
    return self.base.callee

  @property
  def callee_name(self) -> str:
    """Identifier name of the macro, or the rendered callee (`Ember.computed`)."""
    if isinstance(self.callee, Identifier):
      return self.callee.name
    return self.callee.to_text()

  @property
  def last_argument(self) -> Optional[JsNode]:
    return self.base.arguments[-1] if self.base.arguments else None

  @property
  def modifier_names(self) -> List[str]:
    return [m.name for m in self.modifiers]


def _modifier_of(call: CallExpression) -> Optional[str]:
  callee = call.callee
  if (
    isinstance(callee, MemberExpression)
    and not callee.computed
    and isinstance(callee.property, Identifier)
    and callee.property.name in CALL_MODIFIERS
    and isinstance(callee.object, CallExpression)
  ):
    return callee.property.name
  return None


def parse_call_chain(call: CallExpression) -> CallChain:
  modifiers: List[CallModifier] = []
  current = call
  while True:
    name = _modifier_of(current)
    if name is None:
      break
    modifiers.insert(0, CallModifier(name, list(current.arguments)))
    current = current.callee.object
  return CallChain(current, tuple(modifiers))


def build_decorator_expression(chain: CallChain, arguments: List[JsNode]) -> JsNode:
  """
  Rebuilds the decorator expression for a macro call.

  Args:
      chain: The parsed call chain.
      arguments: Arguments the decorator keeps (the macro's function or
          accessor object is dropped by the caller).

  Returns:
      JsNode: The bare callee (``@service``) when there are no arguments and
      no modifiers, otherwise the call with its modifiers reapplied
      (``@computed('a').readOnly()``).
  """
  if not arguments and not chain.modifiers:
    return chain.callee

  expr: JsNode = CallExpression(chain.callee, list(arguments))
  for modifier in chain.modifiers:
    expr = CallExpression(MemberExpression(expr, Identifier(modifier.name)), list(modifier.arguments))
  return expr
