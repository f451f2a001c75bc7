"""
JavaScript Syntax Tree Nodes.

This module defines the ESTree-shaped data structures the codemod reads and
produces. Parsing source text into these nodes is the job of an upstream
parser; the codemod only inspects them and builds new ones.

Every node renders itself through `to_text()`. The rendering is canonical
(two-space indentation, one member per line) and exists so that results can
be inspected and asserted on; it makes no attempt to preserve the original
formatting.
"""

import textwrap
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

LiteralValue = Union[str, bool, int, float, None]

INDENT = "  "


def _join(nodes: Sequence[Optional["JsNode"]], sep: str = ", ") -> str:
  return sep.join("" if n is None else n.to_text() for n in nodes)


def _render_comments(comments: Sequence["Comment"]) -> List[str]:
  return [c.to_text() for c in comments]


def _render_key(key: "JsNode", computed: bool) -> str:
  return f"[{key.to_text()}]" if computed else key.to_text()


def _render_params(params: Sequence["JsNode"]) -> str:
  return f"({_join(params)})"


@dataclass
class JsNode(ABC):
  """Abstract base class for all JavaScript tree nodes."""

  @abstractmethod
  def to_text(self) -> str:
    """
    Render this node to JavaScript source.

    Returns:
        str: The canonical source text for this construct.
    """
    pass


@dataclass
class Comment(JsNode):
  """
  A source comment. `value` excludes the `//` or `/* */` markers, as ESTree does.
  """

  value: str
  block: bool = False

  def to_text(self) -> str:
    if self.block:
      return f"/*{self.value}*/"
    return f"//{self.value}"


# --- Literals & Primaries ---


@dataclass
class Identifier(JsNode):
  name: str

  def to_text(self) -> str:
    return self.name


@dataclass
class StringLiteral(JsNode):
  """A string literal. `quote` is the character used when rendering."""

  value: str
  quote: str = "'"

  def to_text(self) -> str:
    escaped = self.value.replace("\\", "\\\\").replace(self.quote, "\\" + self.quote)
    return f"{self.quote}{escaped}{self.quote}"


@dataclass
class NumericLiteral(JsNode):
  value: Union[int, float]

  def to_text(self) -> str:
    return str(self.value)


@dataclass
class BooleanLiteral(JsNode):
  value: bool

  def to_text(self) -> str:
    return "true" if self.value else "false"


@dataclass
class NullLiteral(JsNode):
  def to_text(self) -> str:
    return "null"


@dataclass
class ThisExpression(JsNode):
  def to_text(self) -> str:
    return "this"


@dataclass
class Super(JsNode):
  def to_text(self) -> str:
    return "super"


@dataclass
class RawExpression(JsNode):
  """
  An expression the parser kept as opaque source text.
  The codemod never looks inside it.
  """

  code: str

  def to_text(self) -> str:
    return self.code


# --- Expressions ---


@dataclass
class ArrayExpression(JsNode):
  elements: List[Optional[JsNode]] = field(default_factory=list)

  def to_text(self) -> str:
    return f"[{_join(self.elements)}]"


@dataclass
class SpreadElement(JsNode):
  argument: JsNode

  def to_text(self) -> str:
    return f"...{self.argument.to_text()}"


@dataclass
class BlockStatement(JsNode):
  body: List[JsNode] = field(default_factory=list)

  def to_text(self) -> str:
    if not self.body:
      return "{}"
    inner = "\n".join(stmt.to_text() for stmt in self.body)
    return "{\n" + textwrap.indent(inner, INDENT) + "\n}"


@dataclass
class ObjectProperty(JsNode):
  """
  A `key: value` entry of an object literal.

  Attributes:
      key (JsNode): Identifier, literal, or (when `computed`) any expression.
      value (JsNode): The property value.
      computed (bool): True for the `[expr]: value` form.
      shorthand (bool): True for the `{ foo }` form.
      decorators (List[Decorator]): Decorators already applied in the source.
      comments (List[Comment]): Leading comments.
  """

  key: JsNode
  value: JsNode
  computed: bool = False
  shorthand: bool = False
  decorators: List["Decorator"] = field(default_factory=list)
  comments: List[Comment] = field(default_factory=list)

  def to_text(self) -> str:
    lines = _render_comments(self.comments) + [d.to_text() for d in self.decorators]
    if self.shorthand:
      lines.append(self.key.to_text())
    else:
      lines.append(f"{_render_key(self.key, self.computed)}: {self.value.to_text()}")
    return "\n".join(lines)


@dataclass
class ObjectMethod(JsNode):
  """
  A method-shorthand entry of an object literal (`foo() {}`, `get foo() {}`).
  """

  key: JsNode
  params: List[JsNode] = field(default_factory=list)
  body: BlockStatement = field(default_factory=BlockStatement)
  kind: str = "method"
  computed: bool = False
  is_async: bool = False
  generator: bool = False
  decorators: List["Decorator"] = field(default_factory=list)
  comments: List[Comment] = field(default_factory=list)

  def to_text(self) -> str:
    lines = _render_comments(self.comments) + [d.to_text() for d in self.decorators]
    lines.append(_render_method_head(self) + " " + self.body.to_text())
    return "\n".join(lines)


@dataclass
class ObjectExpression(JsNode):
  properties: List[JsNode] = field(default_factory=list)

  def to_text(self) -> str:
    if not self.properties:
      return "{}"
    inner = ",\n".join(p.to_text() for p in self.properties)
    return "{\n" + textwrap.indent(inner, INDENT) + "\n}"


@dataclass
class FunctionExpression(JsNode):
  params: List[JsNode] = field(default_factory=list)
  body: BlockStatement = field(default_factory=BlockStatement)
  id: Optional[Identifier] = None
  is_async: bool = False
  generator: bool = False

  def to_text(self) -> str:
    prefix = "async " if self.is_async else ""
    star = "*" if self.generator else ""
    name = f" {self.id.to_text()}" if self.id else ""
    return f"{prefix}function{star}{name}{_render_params(self.params)} {self.body.to_text()}"


@dataclass
class ArrowFunctionExpression(JsNode):
  params: List[JsNode] = field(default_factory=list)
  body: JsNode = field(default_factory=BlockStatement)
  is_async: bool = False

  def to_text(self) -> str:
    prefix = "async " if self.is_async else ""
    return f"{prefix}{_render_params(self.params)} => {self.body.to_text()}"


@dataclass
class CallExpression(JsNode):
  callee: JsNode
  arguments: List[JsNode] = field(default_factory=list)

  def to_text(self) -> str:
    return f"{self.callee.to_text()}({_join(self.arguments)})"


@dataclass
class MemberExpression(JsNode):
  object: JsNode
  property: JsNode
  computed: bool = False

  def to_text(self) -> str:
    if self.computed:
      return f"{self.object.to_text()}[{self.property.to_text()}]"
    return f"{self.object.to_text()}.{self.property.to_text()}"


# --- Statements ---


@dataclass
class ExpressionStatement(JsNode):
  expression: JsNode
  comments: List[Comment] = field(default_factory=list)

  def to_text(self) -> str:
    return "\n".join(_render_comments(self.comments) + [f"{self.expression.to_text()};"])


@dataclass
class ReturnStatement(JsNode):
  argument: Optional[JsNode] = None
  comments: List[Comment] = field(default_factory=list)

  def to_text(self) -> str:
    stmt = "return;" if self.argument is None else f"return {self.argument.to_text()};"
    return "\n".join(_render_comments(self.comments) + [stmt])


@dataclass
class VariableDeclarator(JsNode):
  id: JsNode
  init: Optional[JsNode] = None

  def to_text(self) -> str:
    if self.init is None:
      return self.id.to_text()
    return f"{self.id.to_text()} = {self.init.to_text()}"


@dataclass
class VariableDeclaration(JsNode):
  declarations: List[VariableDeclarator] = field(default_factory=list)
  kind: str = "const"
  comments: List[Comment] = field(default_factory=list)

  def to_text(self) -> str:
    stmt = f"{self.kind} {_join(self.declarations)};"
    return "\n".join(_render_comments(self.comments) + [stmt])


@dataclass
class RawStatement(JsNode):
  """A statement kept as opaque source text by the parser."""

  code: str

  def to_text(self) -> str:
    return self.code


# --- Modules ---


@dataclass
class ImportSpecifier(JsNode):
  """`imported` or `imported as local` inside an import's braces."""

  imported: Identifier
  local: Optional[Identifier] = None

  @property
  def local_name(self) -> str:
    return (self.local or self.imported).name

  def to_text(self) -> str:
    if self.local is None or self.local.name == self.imported.name:
      return self.imported.to_text()
    return f"{self.imported.to_text()} as {self.local.to_text()}"


@dataclass
class ImportDefaultSpecifier(JsNode):
  local: Identifier

  @property
  def local_name(self) -> str:
    return self.local.name

  def to_text(self) -> str:
    return self.local.to_text()


@dataclass
class ImportDeclaration(JsNode):
  source: StringLiteral
  specifiers: List[Union[ImportSpecifier, ImportDefaultSpecifier]] = field(default_factory=list)

  def to_text(self) -> str:
    default = [s.to_text() for s in self.specifiers if isinstance(s, ImportDefaultSpecifier)]
    named = [s.to_text() for s in self.specifiers if isinstance(s, ImportSpecifier)]
    parts = list(default)
    if named:
      parts.append("{ " + ", ".join(named) + " }")
    if not parts:
      return f"import {self.source.to_text()};"
    return f"import {', '.join(parts)} from {self.source.to_text()};"


# --- Class Output ---


@dataclass
class Decorator(JsNode):
  expression: JsNode

  def to_text(self) -> str:
    return f"@{self.expression.to_text()}"


@dataclass
class ClassProperty(JsNode):
  """
  A native class field. `value` is None for a bare declaration (`foo;`).
  """

  key: JsNode
  value: Optional[JsNode] = None
  computed: bool = False
  static: bool = False
  decorators: List[Decorator] = field(default_factory=list)
  comments: List[Comment] = field(default_factory=list)

  def to_text(self) -> str:
    lines = _render_comments(self.comments) + [d.to_text() for d in self.decorators]
    head = ("static " if self.static else "") + _render_key(self.key, self.computed)
    if self.value is None:
      lines.append(f"{head};")
    else:
      lines.append(f"{head} = {self.value.to_text()};")
    return "\n".join(lines)


@dataclass
class ClassMethod(JsNode):
  """
  A native class method, getter (`kind="get"`) or setter (`kind="set"`).
  """

  key: JsNode
  params: List[JsNode] = field(default_factory=list)
  body: BlockStatement = field(default_factory=BlockStatement)
  kind: str = "method"
  computed: bool = False
  static: bool = False
  is_async: bool = False
  generator: bool = False
  decorators: List[Decorator] = field(default_factory=list)
  comments: List[Comment] = field(default_factory=list)

  def to_text(self) -> str:
    lines = _render_comments(self.comments) + [d.to_text() for d in self.decorators]
    head = ("static " if self.static else "") + _render_method_head(self)
    lines.append(f"{head} {self.body.to_text()}")
    return "\n".join(lines)


def _render_method_head(node: Union[ObjectMethod, ClassMethod]) -> str:
  prefix = ""
  if node.is_async:
    prefix += "async "
  if node.kind in ("get", "set"):
    prefix += f"{node.kind} "
  if node.generator:
    prefix += "*"
  return f"{prefix}{_render_key(node.key, node.computed)}{_render_params(node.params)}"


def literal(value: LiteralValue, quote: str = "'") -> JsNode:
  """
  Builds the literal node for a plain Python value.

  Args:
      value: A string, number, boolean or None.
      quote: Quote character for string literals.

  Returns:
      JsNode: The matching literal node (`null` for None).

  Raises:
      TypeError: If the value is not a JSON-style scalar.
  """
  if value is None:
    return NullLiteral()
  # bool before int: True is an int in Python.
  if isinstance(value, bool):
    return BooleanLiteral(value)
  if isinstance(value, (int, float)):
    return NumericLiteral(value)
  if isinstance(value, str):
    return StringLiteral(value, quote=quote)
  raise TypeError(f"Cannot build a literal node from {type(value).__name__}")
