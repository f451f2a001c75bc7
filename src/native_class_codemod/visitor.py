"""
Tree Traversal.

Provides a small transformer base class for the JavaScript node model,
following the LibCST convention:

- ``visit_<NodeType>(node)`` is called before children are processed and may
  return ``False`` to skip the subtree.
- ``leave_<NodeType>(original_node, updated_node)`` is called after children
  and returns the replacement node.

Nodes are never mutated; a parent is copied only when one of its children
changed, so an untouched subtree is returned by identity.
"""

from dataclasses import fields, replace
from typing import Any, Callable, Iterator, List

from native_class_codemod.nodes import JsNode


class NodeTransformer:
  """Base class for tree rewrites. Subclasses define visit_/leave_ hooks."""

  def transform(self, node: JsNode) -> JsNode:
    """
    Runs the transformer over a subtree.

    Args:
        node: Root of the subtree.

    Returns:
        JsNode: The rewritten root (the same object if nothing changed).
    """
    type_name = type(node).__name__

    visit_fn = getattr(self, f"visit_{type_name}", None)
    descend = True if visit_fn is None else visit_fn(node) is not False

    updated = node
    if descend:
      changes = {}
      for f in fields(node):
        value = getattr(node, f.name)
        new_value = self._transform_value(value)
        if new_value is not value:
          changes[f.name] = new_value
      if changes:
        updated = replace(node, **changes)

    leave_fn = getattr(self, f"leave_{type_name}", None)
    if leave_fn is None:
      return updated
    return leave_fn(node, updated)

  def _transform_value(self, value: Any) -> Any:
    if isinstance(value, JsNode):
      return self.transform(value)
    if isinstance(value, list):
      new_items: List[Any] = [self._transform_value(item) for item in value]
      if any(new is not old for new, old in zip(new_items, value)):
        return new_items
    return value


def iter_nodes(node: JsNode, skip: Callable[[JsNode], bool] = lambda n: False) -> Iterator[JsNode]:
  """
  Yields every node of a subtree in pre-order.

  Args:
      node: Root of the subtree (always yielded).
      skip: Predicate; children of a node for which it returns True are not visited.
  """
  yield node
  if skip(node):
    return
  for f in fields(node):
    value = getattr(node, f.name)
    children = value if isinstance(value, list) else [value]
    for child in children:
      if isinstance(child, JsNode):
        yield from iter_nodes(child, skip)
