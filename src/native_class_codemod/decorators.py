"""
Decorator Descriptors and Builders.

`DecoratorInfo` is the value type every property model uses to describe an
annotation it wants to attach. `DecoratorImportInfo` records an identifier
the source file imports from a decorator-capable module. The builder
functions turn descriptors into `Decorator` nodes.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence, Tuple

from native_class_codemod.known_decorators import (
  COMPUTED_DECORATOR,
  DECORATOR_PATHS,
  INJECTION_PATHS,
  META_DECORATOR_PATH,
  METHOD_DECORATORS,
)
from native_class_codemod.nodes import (
  ArrayExpression,
  CallExpression,
  Decorator,
  Identifier,
  ImportDeclaration,
  ImportSpecifier,
  JsNode,
  MemberExpression,
  StringLiteral,
  literal,
)
from native_class_codemod.runtime_data import DecoratorArg


@dataclass(frozen=True)
class DecoratorInfo:
  """
  An annotation to attach to a class member.

  Attributes:
      name (str): Decorator identifier.
      args (Optional[Tuple]): Literal arguments. ``None`` renders as a bare
          ``@name``; ``()`` renders as ``@name()``.
      requires_import (bool): True when the codemod must add an import for it.
      is_meta_decorator (bool): True for decorators that define computed metadata.
      node (Optional[Decorator]): A decorator taken from the source, emitted verbatim.
  """

  name: str
  args: Optional[Tuple[DecoratorArg, ...]] = None
  requires_import: bool = False
  is_meta_decorator: bool = False
  node: Optional[Decorator] = field(default=None, compare=False)


@dataclass(frozen=True)
class DecoratorImportInfo:
  """
  An identifier imported by the source file that can act as a decorator.

  Attributes:
      name (str): Local name in the file (after `as` renaming).
      imported_name (str): Name exported by the module.
      source (str): Module path.
      is_macro_decorator (bool): A computed macro from `@ember/object/computed`.
      is_method_decorator (bool): Decorates a method rather than a getter/field.
      is_meta_decorator (bool): Produces a computed property carrying metadata.
  """

  name: str
  imported_name: str
  source: str
  is_macro_decorator: bool = False
  is_method_decorator: bool = False
  is_meta_decorator: bool = False

  @property
  def is_computed(self) -> bool:
    return self.source == "@ember/object" and self.imported_name == COMPUTED_DECORATOR

  @property
  def is_injection(self) -> bool:
    return self.source in INJECTION_PATHS


DecoratorImportInfoMap = Dict[str, DecoratorImportInfo]


def get_decorator_import_infos(imports: Sequence[ImportDeclaration]) -> DecoratorImportInfoMap:
  """
  Collects the decorator-capable identifiers a file imports.

  Args:
      imports: The file's import declarations.

  Returns:
      DecoratorImportInfoMap: Infos keyed by local name.
  """
  infos: DecoratorImportInfoMap = {}
  for declaration in imports:
    source = declaration.source.value
    exported = DECORATOR_PATHS.get(source)
    if not exported:
      continue

    for specifier in declaration.specifiers:
      if not isinstance(specifier, ImportSpecifier):
        continue
      imported_name = specifier.imported.name
      if imported_name not in exported:
        continue

      is_macro = source == META_DECORATOR_PATH
      infos[specifier.local_name] = DecoratorImportInfo(
        name=specifier.local_name,
        imported_name=imported_name,
        source=source,
        is_macro_decorator=is_macro,
        is_method_decorator=imported_name in METHOD_DECORATORS,
        is_meta_decorator=is_macro or (source == "@ember/object" and imported_name == COMPUTED_DECORATOR),
      )
  return infos


def decorator_name(decorator: Decorator) -> Optional[str]:
  """
  Resolves the identifier a decorator expression is rooted at.

  Handles ``@foo``, ``@foo(...)`` and chains like ``@foo(...).readOnly()``.
  Returns None for anything else (e.g. ``@a.b`` or ``@(expr)``).
  """
  expr: JsNode = decorator.expression
  while True:
    if isinstance(expr, Identifier):
      return expr.name
    if isinstance(expr, CallExpression):
      callee = expr.callee
      # `foo(...).readOnly()` -> descend through the member to the inner call.
      if isinstance(callee, MemberExpression) and isinstance(callee.object, CallExpression):
        expr = callee.object
      else:
        expr = callee
      continue
    return None


def create_identifier_decorator(name: str) -> Decorator:
  return Decorator(Identifier(name))


def create_decorator_with_args(name: str, args: Sequence[DecoratorArg], quote: str = "'") -> Decorator:
  """
  Builds ``@name(arg1, arg2, ...)`` from literal values.

  Args:
      name: Decorator identifier.
      args: Literal arguments; an empty sequence yields ``@name()``.
      quote: Quote character for string arguments.

  Returns:
      Decorator: The decorator node.
  """
  return Decorator(CallExpression(Identifier(name), [literal(a, quote=quote) for a in args]))


def create_decorator_from_info(info: DecoratorInfo, quote: str = "'") -> Decorator:
  """
  Builds the decorator node for a descriptor.

  Source decorators are returned as they were written; otherwise the
  descriptor renders as ``@name`` or ``@name(args...)``.
  """
  if info.node is not None:
    return info.node
  if info.args is None:
    return create_identifier_decorator(info.name)
  return create_decorator_with_args(info.name, info.args, quote=quote)


def create_class_decorator(name: str, value: JsNode) -> Decorator:
  """
  Builds a class-level decorator from a property value.

  Array values are spread into positional arguments
  (``classNames: ['a', 'b']`` -> ``@classNames('a', 'b')``); anything else
  becomes the single argument.
  """
  if isinstance(value, ArrayExpression):
    args = [e for e in value.elements if e is not None]
  else:
    args = [value]
  return Decorator(CallExpression(Identifier(name), args))


def default_decorator_import_infos() -> DecoratorImportInfoMap:
  """
  The import table assumed when a caller does not supply the file's imports.

  Mirrors the conventional import style:
  ``import { computed, observer, action } from '@ember/object'``,
  every computed macro by its own name, ``on`` from evented, and
  ``inject as service`` / ``inject as controller``.
  """
  imports = [
    ImportDeclaration(
      StringLiteral("@ember/object"),
      [ImportSpecifier(Identifier(n)) for n in sorted(DECORATOR_PATHS["@ember/object"])],
    ),
    ImportDeclaration(
      StringLiteral(META_DECORATOR_PATH),
      [ImportSpecifier(Identifier(n)) for n in sorted(DECORATOR_PATHS[META_DECORATOR_PATH])],
    ),
    ImportDeclaration(StringLiteral("@ember/object/evented"), [ImportSpecifier(Identifier("on"))]),
    ImportDeclaration(
      StringLiteral("@ember/service"),
      [ImportSpecifier(Identifier("inject"), Identifier("service"))],
    ),
    ImportDeclaration(
      StringLiteral("@ember/controller"),
      [ImportSpecifier(Identifier("inject"), Identifier("controller"))],
    ),
  ]
  return get_decorator_import_infos(imports)
