"""
Enumerations for native-class-codemod.

This module defines the closed sets of tags used across the codebase for
property classification, class-level decorators and output preferences.
"""

from enum import Enum


class PropKind(str, Enum):
  """
  Structural variant of a legacy object property.

  Every property handed to the classifier resolves to exactly one of these.
  """

  SIMPLE = "simple"
  METHOD = "method"
  FUNCTION_EXPRESSION = "function_expression"
  COMPUTED_FUNCTION_EXPRESSION = "computed_function_expression"
  COMPUTED_OBJECT_EXPRESSION = "computed_object_expression"
  DECORATED_CALL_EXPRESSION = "decorated_call_expression"
  ACTIONS_OBJECT = "actions_object"
  CLASS_DECORATOR = "class_decorator"


class ClassDecoratorKind(str, Enum):
  """
  Class-level decorators produced from well-known component properties.

  The value is the decorator name emitted in the output.
  """

  TAG_NAME = "tagName"
  CLASS_NAMES = "classNames"
  CLASS_NAME_BINDINGS = "classNameBindings"
  ATTRIBUTE_BINDINGS = "attributeBindings"
  LAYOUT = "layout"
  # `layout: layout` would shadow the imported template, so the decorator
  # is imported under a local alias instead.
  TEMPLATE_LAYOUT = "templateLayout"


class CallKind(str, Enum):
  """
  Result of disambiguating a call expression used as a property value.
  """

  COMPUTED_MACRO = "computed_macro"
  SERVICE_INJECTION = "service_injection"
  KNOWN_MACRO = "known_macro"
  UNRECOGNIZED = "unrecognized"


class QuoteStyle(str, Enum):
  """Preferred quote character for string literals in emitted source."""

  SINGLE = "single"
  DOUBLE = "double"

  @property
  def char(self) -> str:
    return "'" if self is QuoteStyle.SINGLE else '"'


class DiagnosticLevel(str, Enum):
  """Severity of a diagnostic event. Values map onto `logging` level names."""

  INFO = "INFO"
  WARNING = "WARNING"
  ERROR = "ERROR"
