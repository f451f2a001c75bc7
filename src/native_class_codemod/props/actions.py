"""
The `actions: { ... }` object, expanded into one `@action` method per entry.
"""

from typing import List, Optional

from native_class_codemod.config import CodemodOptions
from native_class_codemod.decorators import DecoratorInfo
from native_class_codemod.diagnostics import DiagnosticEvent
from native_class_codemod.enums import PropKind
from native_class_codemod.guards import is_method, is_property_with_function_expression
from native_class_codemod.known_decorators import ACTION_DECORATOR
from native_class_codemod.nodes import ClassProperty, JsNode, ObjectExpression, ObjectProperty
from native_class_codemod.props.base import AbstractProp
from native_class_codemod.props.function_expression import FunctionExpressionProp
from native_class_codemod.props.method import MethodProp
from native_class_codemod.runtime_data import RuntimeData


class ActionPropertyProp(AbstractProp):
  """
  An `actions` entry whose value is not a function (`foo: someHelper`).

  It cannot become a method. It is kept as an `@action` field so no code is
  lost, and flagged for manual review.
  """

  kind = PropKind.SIMPLE

  def _is_overridden(self, runtime_data: RuntimeData) -> bool:
    return runtime_data.is_overridden_action(self.name)

  @property
  def value(self) -> JsNode:
    return self._prop.value

  @property
  def realizes_action(self) -> bool:
    return True

  def _source_decorators(self) -> List[DecoratorInfo]:
    return [DecoratorInfo(ACTION_DECORATOR, requires_import=True)]

  def build(self) -> ClassProperty:
    return ClassProperty(
      key=self.key,
      value=self.value,
      computed=self.computed,
      decorators=self.build_decorators(),
      comments=self.comments,
    )

  @property
  def type_errors(self) -> List[str]:
    return [self.make_error(f"action value is of type {self.type}, expected a function")]


def make_action_prop(entry: JsNode, runtime_data: Optional[RuntimeData], options: CodemodOptions) -> AbstractProp:
  """
  Classifies one entry of an `actions` object.

  Args:
      entry: An `ObjectMethod` or `ObjectProperty` of the actions object.
      runtime_data: The declaration's runtime record.
      options: Codemod options.

  Returns:
      AbstractProp: A method-like model flagged as an action.
  """
  if is_method(entry):
    return MethodProp(entry, runtime_data, options, is_action=True)
  if is_property_with_function_expression(entry):
    return FunctionExpressionProp(entry, runtime_data, options, is_action=True)
  return ActionPropertyProp(entry, runtime_data, options)


class ActionsProp(AbstractProp):
  """
  The `actions` hash.

  Attributes:
      actions (List[AbstractProp]): One model per entry, in source order.
  """

  kind = PropKind.ACTIONS_OBJECT
  synthesizes_runtime_decorators = False

  def __init__(self, raw_prop: ObjectProperty, runtime_data: Optional[RuntimeData], options: CodemodOptions):
    super().__init__(raw_prop, runtime_data, options)
    self.actions: List[AbstractProp] = []
    self._skipped: List[JsNode] = []

    for entry in self.value.properties:
      if isinstance(entry, ObjectProperty) or is_method(entry):
        self.actions.append(make_action_prop(entry, runtime_data, options))
      else:
        self._skipped.append(entry)

  @property
  def value(self) -> ObjectExpression:
    return self._prop.value

  @property
  def realizes_action(self) -> bool:
    return any(a.realizes_action for a in self.actions)

  @property
  def has_unobserves_decorator(self) -> bool:
    return any(a.has_unobserves_decorator for a in self.actions)

  @property
  def has_off_decorator(self) -> bool:
    return any(a.has_off_decorator for a in self.actions)

  @property
  def type_errors(self) -> List[str]:
    errors: List[str] = []
    for entry in self._skipped:
      errors.append(self.make_error(f"actions entry '{entry.to_text()}' of type {type(entry).__name__} is not supported"))
    for action in self.actions:
      errors.extend(action.type_errors)
    return errors

  @property
  def diagnostics(self) -> List[DiagnosticEvent]:
    events = super().diagnostics
    for action in self.actions:
      events.extend(action.diagnostics)
    return events

  def build(self) -> List[JsNode]:
    members: List[JsNode] = []
    for action in self.actions:
      members.extend(action.build_members())
    return members
