"""
native-class-codemod Package.

Rewrites legacy object-composition declarations
(`Base.extend(MixinA, { ...properties... })`) into native class members
annotated with decorators, merging in runtime metadata gathered by a
separate analysis pass.

Usage
-----

.. code-block:: python

    from native_class_codemod import CodemodOptions, transform_object_call

    options = CodemodOptions.load()
    result = transform_object_call(call, runtime_data=record, options=options, imports=imports)

    if result.success:
        print(result.body_text())
    else:
        print(f"Errors: {result.errors}")
"""

from native_class_codemod.config import CodemodOptions, DecoratorOptions
from native_class_codemod.decorators import DecoratorImportInfo, DecoratorInfo, get_decorator_import_infos
from native_class_codemod.diagnostics import DiagnosticEvent, DiagnosticSink
from native_class_codemod.enums import CallKind, ClassDecoratorKind, PropKind, QuoteStyle
from native_class_codemod.errors import ClassificationError, CodemodError, ConfigError, RuntimeDataError
from native_class_codemod.import_specs import (
  DecoratorImportSpecs,
  aggregate,
  get_decorator_import_declarations,
  get_existing_import_specs,
)
from native_class_codemod.props import make_prop
from native_class_codemod.runtime_data import RuntimeData, RuntimeDataStore, parse_runtime_data
from native_class_codemod.transform import (
  ObjectCallArguments,
  TransformResult,
  get_object_props,
  parse_object_call_expression,
  transform_object_call,
)

__version__ = "0.0.1"

__all__ = [
  "CallKind",
  "ClassDecoratorKind",
  "ClassificationError",
  "CodemodError",
  "CodemodOptions",
  "ConfigError",
  "DecoratorImportInfo",
  "DecoratorImportSpecs",
  "DecoratorInfo",
  "DecoratorOptions",
  "DiagnosticEvent",
  "DiagnosticSink",
  "ObjectCallArguments",
  "PropKind",
  "QuoteStyle",
  "RuntimeData",
  "RuntimeDataError",
  "RuntimeDataStore",
  "TransformResult",
  "aggregate",
  "get_decorator_import_declarations",
  "get_decorator_import_infos",
  "get_existing_import_specs",
  "get_object_props",
  "make_prop",
  "parse_object_call_expression",
  "parse_runtime_data",
  "transform_object_call",
]
