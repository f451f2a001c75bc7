"""
Computed properties defined with an accessor object.

    fullName: computed('first', 'last', {
      get(key) { ... },
      set(key, value) { ... }
    })

becomes a getter carrying the decorator and a plain setter:

    @computed('first', 'last')
    get fullName() { const key = 'fullName'; ... }

    set fullName(value) { const key = 'fullName'; ... }
"""

from typing import List, Optional

from native_class_codemod.enums import PropKind
from native_class_codemod.guards import key_name
from native_class_codemod.nodes import (
  ClassMethod,
  FunctionExpression,
  Identifier,
  JsNode,
  ObjectExpression,
  ObjectMethod,
  ObjectProperty,
)
from native_class_codemod.props.call_expression.base import AbstractCallExpressionProp
from native_class_codemod.props.call_expression.function_expression import declare_key_param
from native_class_codemod.super_calls import OPAQUE_SUPER_CALL_ERROR, has_opaque_super_calls, replace_super_expressions

ACCESSOR_KINDS = ("get", "set")


def _accessor_function(entry: JsNode) -> Optional[JsNode]:
  """The function of a `get`/`set` entry, or None when the entry has another shape."""
  if isinstance(entry, ObjectMethod) and entry.kind == "method":
    return entry
  if isinstance(entry, ObjectProperty) and isinstance(entry.value, FunctionExpression):
    return entry.value
  return None


class ComputedObjectExpressionProp(AbstractCallExpressionProp):
  kind = PropKind.COMPUTED_OBJECT_EXPRESSION

  @property
  def accessors(self) -> ObjectExpression:
    return self.chain.last_argument

  @property
  def decorator_arguments(self) -> List[JsNode]:
    return list(self.chain.base.arguments[:-1])

  def _entries(self):
    for entry in self.accessors.properties:
      if isinstance(entry, (ObjectProperty, ObjectMethod)):
        name = key_name(entry.key, entry.computed)
        yield name, entry, _accessor_function(entry)
      else:
        yield None, entry, None

  @property
  def getter(self) -> Optional[JsNode]:
    for name, _, fn in self._entries():
      if name == "get" and fn is not None:
        return fn
    return None

  @property
  def setter(self) -> Optional[JsNode]:
    for name, _, fn in self._entries():
      if name == "set" and fn is not None:
        return fn
    return None

  def _build_accessor(self, fn: JsNode, kind: str, decorated: bool) -> ClassMethod:
    body, _ = replace_super_expressions(fn.body, self.key, computed=self.computed)

    params = list(fn.params)
    if params and isinstance(params[0], Identifier):
      body = declare_key_param(params[0], self.name, body, self.quote)
    if params:
      params = params[1:]
    if kind == "get":
      params = []

    return ClassMethod(
      key=self.key,
      params=params,
      body=body,
      kind=kind,
      computed=self.computed,
      decorators=self.build_decorators() if decorated else [],
      comments=self.comments if decorated else [],
    )

  def build(self) -> List[ClassMethod]:
    members: List[ClassMethod] = []
    getter, setter = self.getter, self.setter
    if getter is not None:
      members.append(self._build_accessor(getter, "get", decorated=True))
    if setter is not None:
      members.append(self._build_accessor(setter, "set", decorated=getter is None))
    return members

  @property
  def type_errors(self) -> List[str]:
    errors = super().type_errors
    for name, entry, fn in self._entries():
      if name not in ACCESSOR_KINDS or fn is None:
        label = name if name is not None else entry.to_text()
        errors.append(self.make_error(f"property with object expression has unsupported entry '{label}'"))
    if any(has_opaque_super_calls(fn.body) for fn in (self.getter, self.setter) if fn is not None):
      errors.append(self.make_error(OPAQUE_SUPER_CALL_ERROR))
    if self.getter is None and self.setter is None:
      errors.append(self.make_error("property with object expression has neither a getter nor a setter"))
    return errors
