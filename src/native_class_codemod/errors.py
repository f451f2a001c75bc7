"""
Exception types raised by native-class-codemod.

Per-property validation problems are never raised: they are collected as
strings on the property model (`type_errors`). Exceptions are reserved for
malformed inputs (configuration, runtime data) and for callers that break
the classifier's contract.
"""


class CodemodError(Exception):
  """Base class for all codemod exceptions."""


class ClassificationError(CodemodError, AssertionError):
  """
  Raised when a node that is not a property declaration reaches the classifier.

  Upstream scanning only hands over `ObjectProperty` and `ObjectMethod`
  nodes, so this indicates a programming error rather than bad input.
  """


class ConfigError(CodemodError, ValueError):
  """Raised when codemod options fail validation."""


class RuntimeDataError(CodemodError, ValueError):
  """Raised when a runtime metadata record is malformed."""
