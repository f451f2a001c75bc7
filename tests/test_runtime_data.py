"""
Tests for Runtime Metadata Records.

Verifies:
1.  camelCase and snake_case keys are both accepted.
2.  Records without a type are treated as absent.
3.  Malformed records raise `RuntimeDataError`.
4.  Loading a JSON store from disk.
"""

import json

import pytest

from native_class_codemod.errors import RuntimeDataError
from native_class_codemod.runtime_data import RuntimeData, RuntimeDataStore, parse_runtime_data


def test_parse_camel_case_record():
  """Keys as written by the analysis pass."""
  record = parse_runtime_data(
    {
      "type": "Component",
      "computedProperties": ["fullName"],
      "offProperties": {"onResize": ["resize"]},
      "overriddenActions": ["save"],
      "overriddenProperties": ["init"],
      "unobservedProperties": {"onChange": []},
    }
  )

  assert record.type == "Component"
  assert record.is_computed("fullName")
  assert record.is_overridden_action("save")
  assert record.is_overridden_property("init")
  assert record.off_args("onResize") == ("resize",)
  assert record.unobserves_args("onChange") == ()
  assert record.unobserves_args("other") is None


def test_parse_snake_case_record():
  record = parse_runtime_data({"type": "Service", "computed_properties": ["a"]})
  assert record.is_computed("a")


def test_missing_type_means_absent():
  """No type, no usable information."""
  assert parse_runtime_data(None) is None
  assert parse_runtime_data({}) is None
  assert parse_runtime_data({"type": "", "computedProperties": ["a"]}) is None


def test_model_passes_through():
  record = RuntimeData(type="Route")
  assert parse_runtime_data(record) is record


def test_malformed_record_raises():
  with pytest.raises(RuntimeDataError):
    parse_runtime_data({"type": "Component", "computedProperties": 5})

  with pytest.raises(RuntimeDataError):
    parse_runtime_data(["not", "a", "mapping"])


def test_record_is_frozen():
  record = RuntimeData(type="Component")
  with pytest.raises(Exception):
    record.type = "Other"


def test_store_load(tmp_path):
  """Records are keyed by file path; typeless ones count as absent."""
  data_file = tmp_path / "runtime.json"
  data_file.write_text(
    json.dumps(
      {
        "app/components/foo.js": {"type": "Component", "computedProperties": ["bar"]},
        "app/utils/bare.js": {},
      }
    ),
    encoding="utf-8",
  )

  store = RuntimeDataStore.load(data_file)

  assert len(store) == 2
  assert "app/components/foo.js" in store
  assert "app/utils/bare.js" not in store
  assert store.get("app/components/foo.js").is_computed("bar")
  assert store.get("missing.js") is None


def test_store_load_invalid_json(tmp_path):
  data_file = tmp_path / "runtime.json"
  data_file.write_text("{not json", encoding="utf-8")
  with pytest.raises(RuntimeDataError):
    RuntimeDataStore.load(data_file)
