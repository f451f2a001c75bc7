"""
Object Call Transformation.

Drives the conversion of one legacy `Base.extend(MixinA, { ... })` call:

1. Split the call arguments into the object literal and the mixins.
2. Classify every property of the object literal into a property model.
3. Build the class members and class decorators.
4. Collect validation errors and diagnostics.
5. Account for the decorator imports the result needs.
"""

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, Field, SkipValidation

from native_class_codemod.config import CodemodOptions
from native_class_codemod.decorators import (
  DecoratorImportInfoMap,
  default_decorator_import_infos,
  get_decorator_import_infos,
)
from native_class_codemod.diagnostics import DiagnosticEvent, DiagnosticSink
from native_class_codemod.guards import is_property_node
from native_class_codemod.import_specs import (
  DecoratorImportSpecs,
  aggregate,
  get_decorator_import_declarations,
  get_existing_import_specs,
)
from native_class_codemod.nodes import (
  CallExpression,
  Decorator,
  Identifier,
  ImportDeclaration,
  JsNode,
  MemberExpression,
  ObjectExpression,
)
from native_class_codemod.props import Prop, make_prop
from native_class_codemod.runtime_data import RuntimeData, parse_runtime_data
from native_class_codemod.utils.console import log_warning


@dataclass
class ObjectCallArguments:
  """
  The arguments of a legacy `extend` call.

  Attributes:
      object_expression (Optional[ObjectExpression]): The property object,
          None when the call only applies mixins.
      mixins (List[JsNode]): Every other argument, in order.
      superclass (Optional[JsNode]): The object `extend` is called on.
  """

  object_expression: Optional[ObjectExpression] = None
  mixins: List[JsNode] = field(default_factory=list)
  superclass: Optional[JsNode] = None


def parse_object_call_expression(call: CallExpression) -> ObjectCallArguments:
  """
  Separates the object literal of an `extend` call from its mixins.

  When several object literals are passed, the last one is the property object.
  """
  result = ObjectCallArguments()
  callee = call.callee
  if isinstance(callee, MemberExpression) and isinstance(callee.property, Identifier):
    result.superclass = callee.object

  for arg in call.arguments:
    if isinstance(arg, ObjectExpression):
      if result.object_expression is not None:
        result.mixins.append(result.object_expression)
      result.object_expression = arg
    else:
      result.mixins.append(arg)
  return result


def get_object_props(
  object_expression: Optional[ObjectExpression],
  runtime_data: Optional[RuntimeData],
  options: CodemodOptions,
  import_infos: Optional[DecoratorImportInfoMap] = None,
) -> List[Prop]:
  """
  Classifies every property of the object literal, in source order.

  Raises:
      ClassificationError: If the object contains a non-property entry.
  """
  if object_expression is None:
    return []
  if import_infos is None:
    import_infos = default_decorator_import_infos()
  return [make_prop(p, runtime_data, options, import_infos) for p in object_expression.properties]


class TransformResult(BaseModel):
  """
  Outcome of transforming one legacy declaration.

  Members and errors are always populated; `success` only says whether the
  output can be applied without manual review.
  """

  # Nodes are built by this module and are not revalidated.
  members: SkipValidation[List[JsNode]] = Field(default_factory=list, description="Class members in declaration order.")
  class_decorators: SkipValidation[List[Decorator]] = Field(
    default_factory=list, description="Decorators for the class itself."
  )
  mixins: SkipValidation[List[JsNode]] = Field(default_factory=list, description="Mixins passed to `extend`.")
  superclass: SkipValidation[Optional[JsNode]] = Field(None, description="The extended base class.")
  decorator_import_specs: DecoratorImportSpecs = Field(default_factory=DecoratorImportSpecs)
  import_declarations: SkipValidation[List[ImportDeclaration]] = Field(
    default_factory=list, description="Decorator imports the file still needs."
  )
  errors: List[str] = Field(default_factory=list, description="Type errors of all properties.")
  diagnostics: List[DiagnosticEvent] = Field(default_factory=list)
  success: bool = Field(default=True, description="False if any property could not be transformed faithfully.")

  @property
  def has_errors(self) -> bool:
    return len(self.errors) > 0

  def body_text(self) -> str:
    """Renders the class decorators and members, one block per line group."""
    parts = [d.to_text() for d in self.class_decorators]
    parts.extend(m.to_text() for m in self.members)
    return "\n".join(parts)


def transform_object_call(
  call: CallExpression,
  runtime_data: Union[None, RuntimeData, Mapping[str, Any]] = None,
  options: Optional[CodemodOptions] = None,
  imports: Sequence[ImportDeclaration] = (),
  sink: Optional[DiagnosticSink] = None,
) -> TransformResult:
  """
  Transforms a legacy `extend` call into native class parts.

  Args:
      call: The `Base.extend(...)` call.
      runtime_data: The runtime record of the declaration, raw or parsed.
      options: Codemod options. Defaults are used if None.
      imports: The file's import declarations. When empty, the conventional
          framework imports are assumed for resolving macros.
      sink: Receives the diagnostics. A logging sink is created if None.

  Returns:
      TransformResult: Members, class decorators, imports, errors and diagnostics.

  Raises:
      RuntimeDataError: If the runtime record is malformed.
  """
  options = options or CodemodOptions()
  sink = sink if sink is not None else DiagnosticSink()
  record = parse_runtime_data(runtime_data)
  import_infos = get_decorator_import_infos(imports) if imports else default_decorator_import_infos()

  parsed = parse_object_call_expression(call)
  errors: List[str] = []

  entries: List[JsNode] = []
  if parsed.object_expression is not None:
    for entry in parsed.object_expression.properties:
      if is_property_node(entry):
        entries.append(entry)
      else:
        errors.append(f"[{entry.to_text()}]: Transform not supported - {type(entry).__name__} can not be transformed")
  props = get_object_props(ObjectExpression(entries), record, options, import_infos)

  members: List[JsNode] = []
  class_decorators: List[Decorator] = []
  events: List[DiagnosticEvent] = []
  for prop in props:
    if prop.is_class_decorator:
      class_decorators.append(prop.build())
    else:
      members.extend(prop.build_members())
    errors.extend(prop.type_errors)
    events.extend(prop.diagnostics)

  sink.report(events)
  for error in errors:
    log_warning(error)

  existing = get_existing_import_specs(imports)
  specs = aggregate(props)

  return TransformResult(
    members=members,
    class_decorators=class_decorators,
    mixins=parsed.mixins,
    superclass=parsed.superclass,
    decorator_import_specs=specs,
    import_declarations=get_decorator_import_declarations(specs, existing, quote=options.quote.char),
    errors=errors,
    diagnostics=events,
    success=not errors,
  )
