"""
Codemod Options.

Global options that gate which property shapes may be transformed and how
the output is printed. Options are read from ``[tool.native_class_codemod]``
in the nearest ``pyproject.toml`` and can be overridden programmatically.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from native_class_codemod.enums import QuoteStyle
from native_class_codemod.errors import ConfigError

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

TOOL_SECTION = "native_class_codemod"

# TOML spellings of option keys, mapped to field names.
KEY_ALIASES: Dict[str, str] = {
  "classFields": "class_fields",
  "runtimeDataPath": "runtime_data_path",
  "quotes": "quote",
}


class DecoratorOptions(BaseModel):
  """
  Controls how decorators already present in object literals are treated.
  """

  model_config = ConfigDict(frozen=True, populate_by_name=True)

  in_object_literals: List[str] = Field(
    default_factory=list,
    alias="inObjectLiterals",
    description="Decorator names allowed on object literal properties; others are dropped.",
  )


class CodemodOptions(BaseModel):
  """
  Global configuration container for the transform.
  """

  model_config = ConfigDict(frozen=True, populate_by_name=True)

  class_fields: bool = Field(
    True,
    alias="classFields",
    description="If True, plain values are emitted as native class fields.",
  )
  decorators: DecoratorOptions = Field(default_factory=DecoratorOptions)
  quote: QuoteStyle = Field(QuoteStyle.SINGLE, description="Quote style used by the printer.")
  runtime_data_path: Optional[Path] = Field(
    None,
    alias="runtimeDataPath",
    description="JSON file with runtime metadata, keyed by file path.",
  )

  @field_validator("decorators", mode="before")
  @classmethod
  def coerce_decorators(cls, v: Any) -> Any:
    """
    Accepts the boolean shorthand (`decorators = true`) for the default settings.

    Decorators are the output format of the codemod, so `decorators = false`
    is rejected.

    Args:
        v: Raw option value.

    Returns:
        Any: A mapping or model pydantic can validate.
    """
    if v is False:
      raise ValueError("decorators can not be disabled; use a table to configure them")
    if v is True:
      return {}
    return v

  @field_validator("quote", mode="before")
  @classmethod
  def normalize_quote(cls, v: Any) -> Any:
    if isinstance(v, str):
      return v.lower().strip()
    return v

  @classmethod
  def from_mapping(cls, data: Dict[str, Any]) -> "CodemodOptions":
    """
    Validates a raw mapping (TOML table, CLI dict) into options.

    TOML spellings (``classFields``, ``runtimeDataPath``, and the legacy
    ``quotes``) are accepted alongside the field names.

    Raises:
        ConfigError: If validation fails.
    """
    data = _normalize_keys(data)
    try:
      return cls.model_validate(data)
    except ValidationError as e:
      raise ConfigError(f"Invalid codemod options: {e}") from e

  @classmethod
  def load(
    cls,
    search_path: Optional[Path] = None,
    class_fields: Optional[bool] = None,
    quote: Optional[str] = None,
    in_object_literals: Optional[List[str]] = None,
    runtime_data_path: Optional[Path] = None,
  ) -> "CodemodOptions":
    """
    Loads options from pyproject.toml and applies explicit overrides.

    Args:
        search_path (Optional[Path]): Directory to start searching for TOML config.
        class_fields (Optional[bool]): Override for class field emission.
        quote (Optional[str]): Override for the quote style.
        in_object_literals (Optional[List[str]]): Override for allowed object literal decorators.
        runtime_data_path (Optional[Path]): Override for the runtime data file.

    Returns:
        CodemodOptions: The fully resolved options.
    """
    toml_config, toml_dir = _load_toml_settings(search_path or Path.cwd())
    data = _normalize_keys(toml_config)

    if class_fields is not None:
      data["class_fields"] = class_fields
    if quote is not None:
      data["quote"] = quote
    if in_object_literals is not None:
      data["decorators"] = {"in_object_literals": in_object_literals}

    # Relative paths in the TOML file resolve against the file's directory.
    toml_runtime = data.pop("runtime_data_path", None)
    raw_runtime = runtime_data_path or toml_runtime
    if raw_runtime is not None:
      path = Path(raw_runtime)
      if runtime_data_path is None and toml_dir and not path.is_absolute():
        path = toml_dir / path
      data["runtime_data_path"] = path

    return cls.from_mapping(data)


def _normalize_keys(table: Dict[str, Any]) -> Dict[str, Any]:
  """Renames aliased TOML keys so explicit overrides replace them instead of competing."""
  data: Dict[str, Any] = {}
  for key, value in table.items():
    name = KEY_ALIASES.get(key, key)
    if key == name or name not in table:
      data[name] = value
  return data


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches the start directory and its parents for 'pyproject.toml'.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The tool table and the directory it was found in.

  Raises:
      ConfigError: If the TOML file exists but cannot be parsed.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Cannot parse {toml_path}: {e}") from e

      tool_section = data.get("tool", {})
      if TOOL_SECTION in tool_section:
        return tool_section[TOOL_SECTION], parent

  return {}, None
