"""
Component configuration properties that become class decorators.

`tagName: 'span'` becomes `@tagName('span')` on the class, and list-valued
properties such as `classNames: ['a', 'b']` are spread into the decorator's
arguments. None of them produce a class member.
"""

from typing import List

from native_class_codemod.decorators import create_class_decorator
from native_class_codemod.enums import ClassDecoratorKind, PropKind
from native_class_codemod.known_decorators import LAYOUT_DECORATOR_NAME
from native_class_codemod.nodes import ArrayExpression, Decorator, Identifier, JsNode
from native_class_codemod.props.base import AbstractProp

_LIST_KINDS = (
  ClassDecoratorKind.CLASS_NAMES,
  ClassDecoratorKind.CLASS_NAME_BINDINGS,
  ClassDecoratorKind.ATTRIBUTE_BINDINGS,
)


class ClassDecoratorProp(AbstractProp):
  kind = PropKind.CLASS_DECORATOR
  is_class_decorator = True
  synthesizes_runtime_decorators = False

  @property
  def value(self) -> JsNode:
    return self._prop.value

  @property
  def class_decorator_kind(self) -> ClassDecoratorKind:
    # `layout: layout` refers to an imported template named `layout`; the
    # decorator is then imported as `templateLayout` to avoid the clash.
    if (
      self.name == LAYOUT_DECORATOR_NAME
      and isinstance(self.value, Identifier)
      and self.value.name == LAYOUT_DECORATOR_NAME
    ):
      return ClassDecoratorKind.TEMPLATE_LAYOUT
    return ClassDecoratorKind(self.name)

  @property
  def decorator_name(self) -> str:
    return self.class_decorator_kind.value

  @property
  def is_tag_name(self) -> bool:
    return self.class_decorator_kind is ClassDecoratorKind.TAG_NAME

  @property
  def is_class_names(self) -> bool:
    return self.class_decorator_kind is ClassDecoratorKind.CLASS_NAMES

  @property
  def is_class_name_bindings(self) -> bool:
    return self.class_decorator_kind is ClassDecoratorKind.CLASS_NAME_BINDINGS

  @property
  def is_attribute_bindings(self) -> bool:
    return self.class_decorator_kind is ClassDecoratorKind.ATTRIBUTE_BINDINGS

  @property
  def is_layout_decorator(self) -> bool:
    return self.class_decorator_kind is ClassDecoratorKind.LAYOUT

  @property
  def is_template_layout_decorator(self) -> bool:
    return self.class_decorator_kind is ClassDecoratorKind.TEMPLATE_LAYOUT

  def build(self) -> Decorator:
    return create_class_decorator(self.decorator_name, self.value)

  def build_members(self) -> List[JsNode]:
    return []

  @property
  def type_errors(self) -> List[str]:
    errors: List[str] = []
    if self.class_decorator_kind in _LIST_KINDS and not isinstance(self.value, ArrayExpression):
      errors.append(self.make_error(f"value of '{self.name}' must be an array literal, got {self.type}"))
    return errors
