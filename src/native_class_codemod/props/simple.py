"""
Plain value properties (`foo: 'bar'`, `items: null`), emitted as class fields.
"""

from typing import List

from native_class_codemod.enums import PropKind
from native_class_codemod.known_decorators import QUERY_PARAMS_KEY
from native_class_codemod.nodes import ArrayExpression, ClassProperty, JsNode, ObjectExpression
from native_class_codemod.props.base import AbstractProp


class SimpleProp(AbstractProp):
  """
  A property whose value is neither a function nor a call.

  A decorated field never keeps its initializer: the decorator supplies the
  value at runtime.
  """

  kind = PropKind.SIMPLE
  supports_object_literal_decorators = True

  @property
  def value(self) -> JsNode:
    return self._prop.value

  def build(self) -> ClassProperty:
    return ClassProperty(
      key=self.key,
      value=None if self.has_decorators else self.value,
      computed=self.computed,
      decorators=self.build_decorators(),
      comments=self.comments,
    )

  @property
  def type_errors(self) -> List[str]:
    errors: List[str] = []

    if not self.options.class_fields:
      errors.append(self.make_error("need option '--class-fields=true'"))

    if isinstance(self.value, (ObjectExpression, ArrayExpression)) and self.name != QUERY_PARAMS_KEY:
      errors.append(
        self.make_error(
          "value is of type object. For more details: eslint-plugin-ember/avoid-leaking-state-in-ember-objects"
        )
      )

    return errors
