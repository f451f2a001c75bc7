"""
Decorator Import Accounting.

Every property model may need decorators that the file has to import
(`@action`, `@off`, `@classNames`, ...). This module folds the models of a
declaration into a `DecoratorImportSpecs` record and turns that record into
the import declarations still missing from the file.

The fold is a field-wise OR, so it is associative, commutative and
idempotent: the order in which declarations or files are processed never
changes the result.
"""

from functools import reduce
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

from native_class_codemod.enums import ClassDecoratorKind
from native_class_codemod.known_decorators import (
  ACTION_DECORATOR,
  EMBER_DECORATOR_SPECIFIERS,
  LAYOUT_DECORATOR_LOCAL_NAME,
  LAYOUT_DECORATOR_NAME,
  OFF_DECORATOR,
  UNOBSERVES_DECORATOR,
)
from native_class_codemod.nodes import Identifier, ImportDeclaration, ImportSpecifier, StringLiteral
from native_class_codemod.props.base import AbstractProp

# Class decorator kind -> spec field.
_CLASS_DECORATOR_FIELDS: Dict[ClassDecoratorKind, str] = {
  ClassDecoratorKind.TAG_NAME: "tag_name",
  ClassDecoratorKind.CLASS_NAMES: "class_names",
  ClassDecoratorKind.CLASS_NAME_BINDINGS: "class_name_bindings",
  ClassDecoratorKind.ATTRIBUTE_BINDINGS: "attribute_bindings",
  ClassDecoratorKind.LAYOUT: "layout",
  ClassDecoratorKind.TEMPLATE_LAYOUT: "template_layout",
}

# Local decorator name -> spec field.
_DECORATOR_FIELDS: Dict[str, str] = {
  ACTION_DECORATOR: "action",
  OFF_DECORATOR: "off",
  UNOBSERVES_DECORATOR: "unobserves",
  **{kind.value: name for kind, name in _CLASS_DECORATOR_FIELDS.items()},
}


class DecoratorImportSpecs(BaseModel):
  """
  Which codemod-introduced decorators a file needs (or already imports).
  """

  model_config = ConfigDict(frozen=True)

  action: bool = Field(False, description="`@action` from '@ember/object'.")
  class_names: bool = False
  class_name_bindings: bool = False
  attribute_bindings: bool = False
  layout: bool = False
  template_layout: bool = Field(False, description="`layout` imported as `templateLayout`.")
  off: bool = False
  tag_name: bool = False
  unobserves: bool = False

  def merge(self, other: "DecoratorImportSpecs") -> "DecoratorImportSpecs":
    return DecoratorImportSpecs(**{name: getattr(self, name) or getattr(other, name) for name in type(self).model_fields})

  def __or__(self, other: "DecoratorImportSpecs") -> "DecoratorImportSpecs":
    return self.merge(other)

  @property
  def names(self) -> List[str]:
    """Local names of the decorators that are flagged, in field order."""
    by_field = {v: k for k, v in _DECORATOR_FIELDS.items()}
    return [by_field[name] for name in type(self).model_fields if getattr(self, name)]

  @classmethod
  def from_prop(cls, prop: AbstractProp) -> "DecoratorImportSpecs":
    """
    The imports a single model needs.

    Args:
        prop: Any property model.

    Returns:
        DecoratorImportSpecs: The flags the model contributes.
    """
    flags = {
      "action": prop.realizes_action,
      "off": prop.has_off_decorator,
      "unobserves": prop.has_unobserves_decorator,
    }
    kind = prop.class_decorator_kind
    if prop.is_class_decorator and kind is not None:
      flags[_CLASS_DECORATOR_FIELDS[kind]] = True
    return cls(**flags)


def aggregate(
  props: Iterable[AbstractProp],
  existing: Optional[DecoratorImportSpecs] = None,
) -> DecoratorImportSpecs:
  """
  Folds property models into the import spec set.

  Args:
      props: Models of one or more declarations.
      existing: Specs already accumulated, e.g. from earlier declarations.

  Returns:
      DecoratorImportSpecs: `existing` OR-ed with every model's contribution.
  """
  start = existing if existing is not None else DecoratorImportSpecs()
  return reduce(lambda acc, prop: acc | DecoratorImportSpecs.from_prop(prop), props, start)


def get_existing_import_specs(imports: Sequence[ImportDeclaration]) -> DecoratorImportSpecs:
  """
  Reads which codemod decorators the file already imports.

  Args:
      imports: The file's import declarations.

  Returns:
      DecoratorImportSpecs: Flags for decorators imported under their expected local names.
  """
  flags: Dict[str, bool] = {}
  for declaration in imports:
    expected = EMBER_DECORATOR_SPECIFIERS.get(declaration.source.value)
    if not expected:
      continue
    for specifier in declaration.specifiers:
      if not isinstance(specifier, ImportSpecifier):
        continue
      local = specifier.local_name
      if local == LAYOUT_DECORATOR_LOCAL_NAME and specifier.imported.name != LAYOUT_DECORATOR_NAME:
        continue
      if local in expected and local in _DECORATOR_FIELDS:
        flags[_DECORATOR_FIELDS[local]] = True
  return DecoratorImportSpecs(**flags)


def _specifier(local: str) -> ImportSpecifier:
  if local == LAYOUT_DECORATOR_LOCAL_NAME:
    return ImportSpecifier(Identifier(LAYOUT_DECORATOR_NAME), Identifier(LAYOUT_DECORATOR_LOCAL_NAME))
  return ImportSpecifier(Identifier(local))


def get_decorator_import_declarations(
  specs: DecoratorImportSpecs,
  existing: Optional[DecoratorImportSpecs] = None,
  quote: str = "'",
) -> List[ImportDeclaration]:
  """
  Builds the import declarations for decorators the file still lacks.

  Args:
      specs: What the transformed declarations need.
      existing: What the file already imports.
      quote: Quote character for the module path.

  Returns:
      List[ImportDeclaration]: One declaration per module, in a fixed module
      order. Modules with nothing missing are omitted.
  """
  existing = existing or DecoratorImportSpecs()
  needed = set(specs.names) - set(existing.names)

  declarations: List[ImportDeclaration] = []
  for source, locals_ in EMBER_DECORATOR_SPECIFIERS.items():
    missing: Tuple[str, ...] = tuple(name for name in locals_ if name in needed)
    if missing:
      declarations.append(ImportDeclaration(StringLiteral(source, quote=quote), [_specifier(n) for n in missing]))
  return declarations
