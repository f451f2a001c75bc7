"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Builders for the JavaScript nodes most tests start from.
- Console isolation so log captures do not leak between tests.
"""

import sys
from pathlib import Path
from typing import Any, List, Optional

import pytest

# Add src to path so we can import 'native_class_codemod' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from native_class_codemod.config import CodemodOptions
from native_class_codemod.nodes import (
  BlockStatement,
  CallExpression,
  FunctionExpression,
  Identifier,
  JsNode,
  ObjectMethod,
  ObjectProperty,
  StringLiteral,
)
from native_class_codemod.utils.console import reset_console


class NodeFactory:
  """
  Shorthand constructors for legacy object literal entries.
  """

  def prop(self, name: str, value: JsNode, **kwargs: Any) -> ObjectProperty:
    return ObjectProperty(Identifier(name), value, **kwargs)

  def method(
    self,
    name: str,
    body: Optional[List[JsNode]] = None,
    params: Optional[List[str]] = None,
    **kwargs: Any,
  ) -> ObjectMethod:
    return ObjectMethod(
      Identifier(name),
      params=[Identifier(p) for p in params or []],
      body=BlockStatement(list(body or [])),
      **kwargs,
    )

  def function(self, body: Optional[List[JsNode]] = None, params: Optional[List[str]] = None) -> FunctionExpression:
    return FunctionExpression(params=[Identifier(p) for p in params or []], body=BlockStatement(list(body or [])))

  def call(self, callee: str, *args: Any) -> CallExpression:
    """`callee(args...)`. Plain strings become string literals."""
    nodes = [StringLiteral(a) if isinstance(a, str) else a for a in args]
    return CallExpression(Identifier(callee), nodes)


@pytest.fixture
def js() -> NodeFactory:
  return NodeFactory()


@pytest.fixture
def options() -> CodemodOptions:
  return CodemodOptions()


@pytest.fixture(autouse=True)
def isolate_console():
  """Tests that swap the console backend get the default one back afterwards."""
  yield
  reset_console()
