"""
Property Model Base.

`AbstractProp` wraps one entry of a legacy object literal together with the
runtime record of its declaration. It exposes the entry's identity, the
decorators the native member will carry, validation errors, and a `build()`
operation producing the native class member.

Decorators come from two places and are listed in this order:

1. Source decorators: written on the entry itself, or implied by its shape
   (e.g. the macro call of a computed property, `@action` inside `actions`).
2. Synthesized decorators: derived from the runtime record (`@unobserves`,
   `@off`). A synthesized decorator is skipped when a source decorator of the
   same name is already present.

Models never mutate the wrapped node or the runtime record, and `build()`
returns fresh nodes on every call.
"""

from abc import ABC, abstractmethod
from typing import ClassVar, List, Optional, Tuple, Union

from native_class_codemod.config import CodemodOptions
from native_class_codemod.decorators import DecoratorInfo, create_decorator_from_info, decorator_name
from native_class_codemod.diagnostics import DiagnosticEvent, ignored_decorator_event
from native_class_codemod.enums import ClassDecoratorKind, PropKind
from native_class_codemod.guards import PropertyNode, prop_name
from native_class_codemod.known_decorators import OFF_DECORATOR, UNOBSERVES_DECORATOR
from native_class_codemod.nodes import Comment, Decorator, JsNode
from native_class_codemod.runtime_data import RuntimeData


class AbstractProp(ABC):
  """
  Legacy object property.

  Attributes:
      kind (PropKind): The structural variant tag.
      is_class_decorator (bool): True when the entry becomes a class-level decorator.
      supports_object_literal_decorators (bool): True when decorators written on the
          source entry are carried over.
      synthesizes_runtime_decorators (bool): False for variants the runtime record
          does not apply to.
      is_computed (bool): The runtime record lists the property as computed.
      is_overridden (bool): The runtime record lists the property as overridden.
      runtime_type (Optional[str]): The runtime type tag, if runtime data is present.
  """

  kind: ClassVar[PropKind]
  is_class_decorator: ClassVar[bool] = False
  supports_object_literal_decorators: ClassVar[bool] = False
  synthesizes_runtime_decorators: ClassVar[bool] = True

  def __init__(self, raw_prop: PropertyNode, runtime_data: Optional[RuntimeData], options: CodemodOptions):
    self._prop = raw_prop
    self.runtime_data = runtime_data
    self.options = options

    self._synthesized: List[DecoratorInfo] = []
    self.is_computed = False
    self.is_overridden = False
    self.runtime_type: Optional[str] = None

    if runtime_data is not None:
      self.is_computed = runtime_data.is_computed(self.name)
      self.is_overridden = self._is_overridden(runtime_data)
      self.runtime_type = runtime_data.type
      if self.synthesizes_runtime_decorators:
        self._synthesize(runtime_data)

  def _synthesize(self, runtime_data: RuntimeData) -> None:
    name = self.name

    unobserves = runtime_data.unobserves_args(name)
    if unobserves is not None:
      self._synthesized.append(DecoratorInfo(UNOBSERVES_DECORATOR, unobserves, requires_import=True))

    off = runtime_data.off_args(name)
    if off is not None:
      self._synthesized.append(DecoratorInfo(OFF_DECORATOR, off, requires_import=True))

  def _is_overridden(self, runtime_data: RuntimeData) -> bool:
    return runtime_data.is_overridden_property(self.name)

  # --- Identity ---

  @property
  def raw_prop(self) -> PropertyNode:
    return self._prop

  @property
  @abstractmethod
  def value(self) -> JsNode:
    """The node whose shape determined the variant."""

  @property
  def type(self) -> str:
    """Node type name of the value, e.g. 'ObjectExpression'."""
    return type(self.value).__name__

  @property
  def key(self) -> JsNode:
    return self._prop.key

  @property
  def name(self) -> str:
    return prop_name(self._prop)

  @property
  def comments(self) -> List[Comment]:
    return list(self._prop.comments)

  @property
  def computed(self) -> bool:
    return bool(self._prop.computed)

  @property
  def has_runtime_data(self) -> bool:
    return self.runtime_type is not None

  @property
  def quote(self) -> str:
    return self.options.quote.char

  # --- Capabilities queried by the import aggregator ---

  @property
  def class_decorator_kind(self) -> Optional[ClassDecoratorKind]:
    return None

  @property
  def realizes_action(self) -> bool:
    """True when building this model emits at least one `@action` member."""
    return False

  # --- Decorators ---

  def _split_existing_decorators(self) -> Tuple[List[DecoratorInfo], List[str]]:
    preserved: List[DecoratorInfo] = []
    ignored: List[str] = []
    allowed = self.options.decorators.in_object_literals if self.supports_object_literal_decorators else []
    for decorator in self._prop.decorators:
      name = decorator_name(decorator)
      if name is not None and name in allowed:
        preserved.append(DecoratorInfo(name, node=decorator))
      else:
        ignored.append(name or decorator.expression.to_text())
    return preserved, ignored

  def _source_decorators(self) -> List[DecoratorInfo]:
    return self._split_existing_decorators()[0]

  @property
  def existing_decorators(self) -> List[Decorator]:
    """Decorators written on the source entry, when this variant reads them."""
    if not self.supports_object_literal_decorators:
      return []
    return list(self._prop.decorators)

  @property
  def ignored_decorators(self) -> List[str]:
    """Names of source decorators that are dropped from the output."""
    return self._split_existing_decorators()[1]

  @property
  def decorators(self) -> List[DecoratorInfo]:
    source = self._source_decorators()
    source_names = {d.name for d in source}
    return source + [d for d in self._synthesized if d.name not in source_names]

  @property
  def decorator_names(self) -> List[str]:
    return [d.name for d in self.decorators]

  @property
  def has_decorators(self) -> bool:
    return len(self.decorators) > 0

  @property
  def has_unobserves_decorator(self) -> bool:
    return UNOBSERVES_DECORATOR in self.decorator_names

  @property
  def has_off_decorator(self) -> bool:
    return OFF_DECORATOR in self.decorator_names

  @property
  def has_meta_decorator(self) -> bool:
    return any(d.is_meta_decorator for d in self.decorators)

  def build_decorators(self) -> List[Decorator]:
    return [create_decorator_from_info(d, quote=self.quote) for d in self.decorators]

  # --- Validation & Diagnostics ---

  def make_error(self, message: str) -> str:
    return f"[{self.name}]: Transform not supported - {message}"

  @property
  def type_errors(self) -> List[str]:
    """
    Reasons this property cannot be transformed faithfully.

    Errors are advisory: `build()` still produces output. Computing the list
    has no side effects.
    """
    return []

  @property
  def diagnostics(self) -> List[DiagnosticEvent]:
    return [ignored_decorator_event(self.name, d) for d in self.ignored_decorators]

  # --- Output ---

  @abstractmethod
  def build(self) -> Union[JsNode, List[JsNode]]:
    """Builds the native class member(s) for this property."""

  def build_members(self) -> List[JsNode]:
    """`build()` normalized to a list of class members."""
    result = self.build()
    return list(result) if isinstance(result, list) else [result]

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.name!r})"
