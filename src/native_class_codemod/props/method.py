"""
Function-valued properties, emitted as class methods.

`AbstractMethodProp` holds the logic shared by method shorthand entries
(`foo() {}`) and function expression entries (`foo: function () {}`),
including their role as actions when they live inside an `actions` object.
"""

from abc import abstractmethod
from typing import List, Optional

from native_class_codemod.config import CodemodOptions
from native_class_codemod.decorators import DecoratorInfo
from native_class_codemod.enums import PropKind
from native_class_codemod.guards import PropertyNode
from native_class_codemod.known_decorators import (
  ACTION_DECORATOR,
  ACTION_SUPER_EXPRESSION_COMMENT,
  LIFECYCLE_HOOKS,
)
from native_class_codemod.nodes import BlockStatement, ClassMethod, JsNode, ObjectMethod
from native_class_codemod.props.base import AbstractProp
from native_class_codemod.runtime_data import RuntimeData
from native_class_codemod.super_calls import (
  OPAQUE_SUPER_CALL_ERROR,
  calls_own_method,
  has_opaque_super_calls,
  replace_super_expressions,
)


class AbstractMethodProp(AbstractProp):
  """
  Shared behaviour of properties that become `ClassMethod`s.

  Attributes:
      is_action (bool): True for entries of an `actions` object. Actions get an
          implicit `@action` decorator, and overrides are looked up in the
          record's overridden actions.
  """

  def __init__(
    self,
    raw_prop: PropertyNode,
    runtime_data: Optional[RuntimeData],
    options: CodemodOptions,
    is_action: bool = False,
  ):
    self.is_action = is_action
    super().__init__(raw_prop, runtime_data, options)

  def _is_overridden(self, runtime_data: RuntimeData) -> bool:
    if self.is_action:
      return runtime_data.is_overridden_action(self.name)
    return runtime_data.is_overridden_property(self.name)

  @property
  @abstractmethod
  def params(self) -> List[JsNode]:
    pass

  @property
  @abstractmethod
  def body(self) -> BlockStatement:
    pass

  @property
  def method_kind(self) -> str:
    return "method"

  @property
  def is_async(self) -> bool:
    return False

  @property
  def generator(self) -> bool:
    return False

  @property
  def realizes_action(self) -> bool:
    return self.is_action

  def _source_decorators(self) -> List[DecoratorInfo]:
    if self.is_action:
      return [DecoratorInfo(ACTION_DECORATOR, requires_import=True)]
    return []

  def build_body(self) -> BlockStatement:
    comment_lines = ACTION_SUPER_EXPRESSION_COMMENT if self.is_action else None
    body, _ = replace_super_expressions(self.body, self.key, computed=self.computed, comment_lines=comment_lines)
    return body

  def build(self) -> ClassMethod:
    return ClassMethod(
      key=self.key,
      params=list(self.params),
      body=self.build_body(),
      kind=self.method_kind,
      computed=self.computed,
      is_async=self.is_async,
      generator=self.generator,
      decorators=self.build_decorators(),
      comments=self.comments,
    )

  @property
  def type_errors(self) -> List[str]:
    errors: List[str] = []
    if has_opaque_super_calls(self.body):
      errors.append(self.make_error(OPAQUE_SUPER_CALL_ERROR))
    if not self.is_action:
      return errors

    if self.name in LIFECYCLE_HOOKS:
      errors.append(
        self.make_error(
          "action name matches one of the lifecycle hooks. Rename and try again. "
          "See https://github.com/scalvert/ember-native-class-codemod/issues/34 for more details"
        )
      )
    if calls_own_method(self.body, self.name):
      errors.append(
        self.make_error(
          "calling the passed action would cause an infinite loop. "
          "See https://github.com/scalvert/eslint-plugin-ember-es6-class/pull/2 for more details"
        )
      )
    return errors


class MethodProp(AbstractMethodProp):
  """Method shorthand entry: `foo(a, b) { ... }`, including `get foo() {}`."""

  kind = PropKind.METHOD

  _prop: ObjectMethod

  @property
  def value(self) -> JsNode:
    return self._prop

  @property
  def params(self) -> List[JsNode]:
    return self._prop.params

  @property
  def body(self) -> BlockStatement:
    return self._prop.body

  @property
  def method_kind(self) -> str:
    return self._prop.kind

  @property
  def is_async(self) -> bool:
    return self._prop.is_async

  @property
  def generator(self) -> bool:
    return self._prop.generator
