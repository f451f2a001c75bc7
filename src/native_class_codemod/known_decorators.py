"""
Known Decorator Tables.

Static knowledge about the framework modules whose exports can be used as
decorators, the decorators the codemod may need to import, and the
framework method names an action must not shadow.
"""

from typing import Dict, FrozenSet, List, Tuple

COMPUTED_DECORATOR = "computed"
ACTION_DECORATOR = "action"
OFF_DECORATOR = "off"
UNOBSERVES_DECORATOR = "unobserves"

LAYOUT_DECORATOR_NAME = "layout"
LAYOUT_DECORATOR_LOCAL_NAME = "templateLayout"

ACTIONS_KEY = "actions"
# The one object-valued property the framework copies per instance.
QUERY_PARAMS_KEY = "queryParams"

CLASS_DECORATOR_NAMES: Tuple[str, ...] = (
  "tagName",
  "classNames",
  "classNameBindings",
  "attributeBindings",
  LAYOUT_DECORATOR_NAME,
)

COMPUTED_MACROS: FrozenSet[str] = frozenset(
  {
    "alias",
    "and",
    "bool",
    "collect",
    "deprecatingAlias",
    "empty",
    "equal",
    "filter",
    "filterBy",
    "gt",
    "gte",
    "intersect",
    "lt",
    "lte",
    "map",
    "mapBy",
    "match",
    "max",
    "min",
    "none",
    "not",
    "notEmpty",
    "oneWay",
    "or",
    "readOnly",
    "reads",
    "setDiff",
    "sort",
    "sum",
    "union",
    "uniq",
    "uniqBy",
  }
)

# Module path -> exported names usable as property decorators.
DECORATOR_PATHS: Dict[str, FrozenSet[str]] = {
  "@ember/object": frozenset({COMPUTED_DECORATOR, "observer", ACTION_DECORATOR}),
  "@ember/object/computed": COMPUTED_MACROS,
  "@ember/object/evented": frozenset({"on"}),
  "@ember/service": frozenset({"inject"}),
  "@ember/controller": frozenset({"inject"}),
  "@ember-decorators/object": frozenset({OFF_DECORATOR, "on", UNOBSERVES_DECORATOR, "observes"}),
}

INJECTION_PATHS: FrozenSet[str] = frozenset({"@ember/service", "@ember/controller"})

# Decorators of computed macros come from this module; the emitted
# decorator then carries computed metadata of its own.
META_DECORATOR_PATH = "@ember/object/computed"

# Imported names whose decorator goes on a method rather than a getter.
METHOD_DECORATORS: FrozenSet[str] = frozenset({ACTION_DECORATOR, "on", "observer", "observes"})

# Chained calls on a computed macro, e.g. `computed(...).readOnly()`.
CALL_MODIFIERS: FrozenSet[str] = frozenset({"readOnly", "volatile", "property", "meta"})
MODIFIERS_WITH_ARGS: FrozenSet[str] = frozenset({"property", "meta"})
VOLATILE_MODIFIER = "volatile"

# Decorators the codemod introduces itself, by the module that exports them.
EMBER_DECORATOR_SPECIFIERS: Dict[str, List[str]] = {
  "@ember/object": [ACTION_DECORATOR],
  "@ember-decorators/object": [OFF_DECORATOR, UNOBSERVES_DECORATOR],
  "@ember-decorators/component": [
    "classNames",
    "attributeBindings",
    "classNameBindings",
    LAYOUT_DECORATOR_NAME,
    "tagName",
    LAYOUT_DECORATOR_LOCAL_NAME,
  ],
}

# Framework methods and events. An action with one of these names would
# clobber the inherited member once actions become class methods.
LIFECYCLE_HOOKS: FrozenSet[str] = frozenset(
  {
    # Methods
    "$",
    "addObserver",
    "cacheFor",
    "decrementProperty",
    "destroy",
    "didReceiveAttrs",
    "didRender",
    "didUpdate",
    "didUpdateAttrs",
    "get",
    "getProperties",
    "getWithDefault",
    "has",
    "incrementProperty",
    "init",
    "notifyPropertyChange",
    "off",
    "on",
    "one",
    "readDOMAttr",
    "removeObserver",
    "rerender",
    "send",
    "set",
    "setProperties",
    "toString",
    "toggleProperty",
    "trigger",
    "willDestroy",
    "willRender",
    "willUpdate",
    # Events
    "didInsertElement",
    "willClearRender",
    "willDestroyElement",
    "willInsertElement",
    # Touch events
    "touchStart",
    "touchMove",
    "touchEnd",
    "touchCancel",
    # Keyboard events
    "keyDown",
    "keyUp",
    "keyPress",
    # Mouse events
    "mouseDown",
    "mouseUp",
    "contextMenu",
    "click",
    "doubleClick",
    "focusIn",
    "focusOut",
    # Form events
    "submit",
    "change",
    "input",
    # Drag and drop events
    "dragStart",
    "drag",
    "dragEnter",
    "dragLeave",
    "dragOver",
    "dragEnd",
    "drop",
  }
)

ACTION_SUPER_EXPRESSION_COMMENT: Tuple[str, ...] = (
  " TODO: This call to super is within an action, and has to refer to the parent",
  " class's actions to be safe. This should be refactored to call a normal method",
  " on the parent class. If the parent class has not been converted to native",
  " classes, it may need to be refactored as well.",
)
