"""
Runtime Metadata Records.

A separate analysis pass boots the application and records, per legacy
declaration, which properties are computed, overridden, disabled (``off``) or
unobserved at runtime. This module validates those records and exposes
lookup helpers for the decorator synthesizer.

A record without a ``type`` carries no usable information; it is represented
as ``None`` rather than as a half-empty model.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from native_class_codemod.errors import RuntimeDataError

DecoratorArg = Union[str, bool, int, float, None]


class RuntimeData(BaseModel):
  """
  Facts observed at runtime for one legacy declaration.

  Keys are accepted both in camelCase (as written by the analysis pass)
  and snake_case.
  """

  model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

  type: str = Field(..., min_length=1, description="Runtime type tag, e.g. 'Component' or 'Service'.")
  computed_properties: List[str] = Field(default_factory=list)
  off_properties: Dict[str, List[DecoratorArg]] = Field(default_factory=dict)
  overridden_actions: List[str] = Field(default_factory=list)
  overridden_properties: List[str] = Field(default_factory=list)
  unobserved_properties: Dict[str, List[DecoratorArg]] = Field(default_factory=dict)

  def is_computed(self, name: str) -> bool:
    return name in self.computed_properties

  def is_overridden_property(self, name: str) -> bool:
    return name in self.overridden_properties

  def is_overridden_action(self, name: str) -> bool:
    return name in self.overridden_actions

  def unobserves_args(self, name: str) -> Optional[Tuple[DecoratorArg, ...]]:
    """Arguments for `@unobserves`, or None when the property is observed."""
    if name in self.unobserved_properties:
      return tuple(self.unobserved_properties[name])
    return None

  def off_args(self, name: str) -> Optional[Tuple[DecoratorArg, ...]]:
    """Arguments for `@off`, or None when the property is not disabled."""
    if name in self.off_properties:
      return tuple(self.off_properties[name])
    return None


def parse_runtime_data(raw: Union[None, RuntimeData, Mapping[str, Any]]) -> Optional[RuntimeData]:
  """
  Validates a raw runtime record.

  Args:
      raw: A mapping as produced by the analysis pass, an existing model, or None.

  Returns:
      Optional[RuntimeData]: The validated record, or None when no runtime
      type is present.

  Raises:
      RuntimeDataError: If the record has a type but malformed fields.
  """
  if raw is None or isinstance(raw, RuntimeData):
    return raw
  if not isinstance(raw, Mapping):
    raise RuntimeDataError(f"Runtime data must be a mapping, got {type(raw).__name__}")
  if not raw.get("type"):
    return None
  try:
    return RuntimeData.model_validate(raw)
  except ValidationError as e:
    raise RuntimeDataError(f"Malformed runtime data: {e}") from e


class RuntimeDataStore:
  """
  Collection of runtime records keyed by file path or declaration name.
  """

  def __init__(self, records: Optional[Mapping[str, Any]] = None):
    self._records: Dict[str, Optional[RuntimeData]] = {}
    for key, raw in (records or {}).items():
      self._records[key] = parse_runtime_data(raw)

  @classmethod
  def load(cls, path: Path) -> "RuntimeDataStore":
    """
    Reads a JSON document of the form ``{"<key>": {<record>}, ...}``.

    Raises:
        RuntimeDataError: If the file is not valid JSON or a record is malformed.
    """
    try:
      data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
      raise RuntimeDataError(f"Cannot parse runtime data file {path}: {e}") from e
    if not isinstance(data, dict):
      raise RuntimeDataError(f"Runtime data file {path} must contain a JSON object")
    return cls(data)

  def get(self, key: str) -> Optional[RuntimeData]:
    return self._records.get(key)

  def __contains__(self, key: object) -> bool:
    return self._records.get(key) is not None  # type: ignore[arg-type]

  def __len__(self) -> int:
    return len(self._records)
