"""
Calls that become a decorated class field.

`store: service()` becomes `@service store;` and
`isEmpty: empty('items').readOnly()` becomes `@empty('items').readOnly() isEmpty;`.
"""

from typing import List

from native_class_codemod.enums import CallKind, PropKind
from native_class_codemod.nodes import ClassProperty
from native_class_codemod.props.call_expression.base import AbstractCallExpressionProp


class DecoratedProp(AbstractCallExpressionProp):
  kind = PropKind.DECORATED_CALL_EXPRESSION

  @property
  def is_recognized(self) -> bool:
    return self.call_kind is not CallKind.UNRECOGNIZED

  def build(self) -> ClassProperty:
    return ClassProperty(
      key=self.key,
      value=None,
      computed=self.computed,
      decorators=self.build_decorators(),
      comments=self.comments,
    )

  @property
  def type_errors(self) -> List[str]:
    errors = super().type_errors
    # An unknown callee is only safe to use as a decorator if it is known
    # to produce a computed property.
    if not self.is_recognized and not self.is_computed:
      errors.append(self.make_error(f"call to '{self.callee_name}' can not be transformed"))
    return errors
