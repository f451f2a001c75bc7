"""
Method Body Rewriting.

Legacy methods reach their parent implementation through
``this._super(...)``. Native classes use ``super.<name>(...)`` instead. This
module performs that rewrite and answers related questions about method
bodies.

Nested ``function`` expressions and object methods bind their own ``this``,
so they are never descended into. Arrow functions are.
"""

import re
from dataclasses import replace
from typing import List, Optional, Sequence, Tuple

from native_class_codemod.nodes import (
  BlockStatement,
  CallExpression,
  Comment,
  ExpressionStatement,
  FunctionExpression,
  Identifier,
  JsNode,
  MemberExpression,
  ObjectMethod,
  RawExpression,
  RawStatement,
  ReturnStatement,
  Super,
  ThisExpression,
  VariableDeclaration,
)
from native_class_codemod.visitor import NodeTransformer, iter_nodes

SUPER_PROPERTY = "_super"
RAW_SUPER_PATTERN = re.compile(r"\bthis\s*\.\s*_super\b")
OPAQUE_SUPER_CALL_ERROR = "this._super call in unparsed code can not be rewritten, replace it with a super call by hand"


def _is_this_member(node: JsNode, name: str) -> bool:
  return (
    isinstance(node, MemberExpression)
    and not node.computed
    and isinstance(node.object, ThisExpression)
    and isinstance(node.property, Identifier)
    and node.property.name == name
  )


def _binds_own_this(node: JsNode) -> bool:
  return isinstance(node, (FunctionExpression, ObjectMethod))


class SuperCallRewriter(NodeTransformer):
  """
  Replaces ``this._super(...)`` with ``super.<key>(...)``.

  When `comment_lines` is given, every statement containing a rewritten call
  receives them as leading line comments.
  """

  def __init__(self, key: JsNode, computed: bool = False, comment_lines: Optional[Sequence[str]] = None):
    self.key = key
    self.computed = computed
    self.comment_lines = list(comment_lines or [])
    self.replaced = 0
    self._stmt_marks: List[int] = []

  def visit_FunctionExpression(self, node: FunctionExpression) -> bool:
    return False

  def visit_ObjectMethod(self, node: ObjectMethod) -> bool:
    return False

  def leave_CallExpression(self, original_node: CallExpression, updated_node: CallExpression) -> JsNode:
    if not _is_this_member(updated_node.callee, SUPER_PROPERTY):
      return updated_node
    self.replaced += 1
    computed = self.computed or not isinstance(self.key, Identifier)
    callee = MemberExpression(Super(), self.key, computed=computed)
    return replace(updated_node, callee=callee)

  # Statement hooks bracket the traversal so comments land on the right statement.

  def visit_ExpressionStatement(self, node: ExpressionStatement) -> bool:
    self._stmt_marks.append(self.replaced)
    return True

  def visit_ReturnStatement(self, node: ReturnStatement) -> bool:
    self._stmt_marks.append(self.replaced)
    return True

  def visit_VariableDeclaration(self, node: VariableDeclaration) -> bool:
    self._stmt_marks.append(self.replaced)
    return True

  def leave_ExpressionStatement(self, original_node: ExpressionStatement, updated_node: ExpressionStatement) -> JsNode:
    return self._annotate(updated_node)

  def leave_ReturnStatement(self, original_node: ReturnStatement, updated_node: ReturnStatement) -> JsNode:
    return self._annotate(updated_node)

  def leave_VariableDeclaration(self, original_node: VariableDeclaration, updated_node: VariableDeclaration) -> JsNode:
    return self._annotate(updated_node)

  def _annotate(self, stmt):
    mark = self._stmt_marks.pop()
    if not self.comment_lines or self.replaced == mark:
      return stmt
    # Rewrites inside this statement are claimed; enclosing statements stay bare.
    self._stmt_marks = [self.replaced] * len(self._stmt_marks)
    comments = [Comment(line) for line in self.comment_lines]
    return replace(stmt, comments=[*comments, *stmt.comments])


def replace_super_expressions(
  body: BlockStatement,
  key: JsNode,
  computed: bool = False,
  comment_lines: Optional[Sequence[str]] = None,
) -> Tuple[BlockStatement, int]:
  """
  Rewrites the parent calls of a method body.

  Args:
      body: The method body. It is not modified.
      key: The member key the calls should target.
      computed: True when the key is a computed expression.
      comment_lines: Optional comment lines for statements containing a rewrite.

  Returns:
      Tuple[BlockStatement, int]: The new body and the number of rewritten calls.
  """
  rewriter = SuperCallRewriter(key, computed=computed, comment_lines=comment_lines)
  new_body = rewriter.transform(body)
  return new_body, rewriter.replaced


def calls_own_method(body: BlockStatement, name: str) -> bool:
  """True if the body calls ``this.<name>(...)`` outside nested functions."""
  for node in iter_nodes(body, skip=lambda n: n is not body and _binds_own_this(n)):
    if isinstance(node, CallExpression) and _is_this_member(node.callee, name):
      return True
  return False


def has_opaque_super_calls(body: BlockStatement) -> bool:
  """
  True if unparsed source inside the body still reaches ``this._super``.

  Raw statements and expressions are emitted verbatim, so a parent call
  inside them survives the rewrite and fails at runtime in a native class.
  """
  for node in iter_nodes(body, skip=lambda n: n is not body and _binds_own_this(n)):
    if isinstance(node, (RawStatement, RawExpression)) and RAW_SUPER_PATTERN.search(node.code):
      return True
  return False
