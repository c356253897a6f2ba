"""Tests for loading declarations from YAML and JSON files."""

import json
import tempfile

import pytest
import yaml

from methodical import DeclarationFileError, Methodical
from methodical.loader import dump_interface, load_declaration, load_interface


def _write_yaml(data) -> str:
    """Write data to a temporary YAML file and return the path."""
    f = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
    yaml.dump(data, f)
    f.close()
    return f.name


def test_load_flat_list():
    m = load_interface(_write_yaml(["open", "close"]))
    assert m.get_interface().as_dict() == {
        "required": {"open": "function", "close": "function"},
    }
    assert m.name is None


def test_load_structured_with_name():
    path = _write_yaml({
        "name": "storage backend",
        "required": ["get", "put"],
        "optional": {"close": "function"},
    })
    m = load_interface(path)

    assert m.name == "storage backend"
    assert m.get_interface().required == {"get": "function", "put": "function"}
    assert m.get_interface().optional == {"close": "function"}


def test_load_nested_under_interface_key():
    declaration, name = load_declaration(_write_yaml({"interface": {"name": "Nested", "required": ["a"]}}))
    assert name == "Nested"
    assert declaration["required"] == ["a"]


def test_explicit_name_wins():
    m = load_interface(_write_yaml({"name": "From file", "required": ["a"]}), name="Explicit")
    assert m.name == "Explicit"


def test_load_json_file():
    f = tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False)
    json.dump({"required": ["read"], "optional": ["seek"]}, f)
    f.close()

    m = load_interface(f.name)
    assert list(m.get_interface().required) == ["read"]
    assert list(m.get_interface().optional) == ["seek"]


def test_malformed_content_is_dropped_not_raised():
    m = load_interface(_write_yaml({"name": 12, "required": ["ok", 3, ""], "optional": "nope"}))
    assert m.name is None
    assert m.get_interface().as_dict() == {"required": {"ok": "function"}}


def test_empty_file_is_blank_interface():
    f = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
    f.close()
    assert load_interface(f.name).get_interface().as_dict() == {"required": {}}


def test_file_not_found():
    with pytest.raises(DeclarationFileError, match="not found"):
        load_interface("/nonexistent/path.yaml")


def test_invalid_yaml():
    f = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
    f.write("{{invalid yaml::: [")
    f.close()
    with pytest.raises(DeclarationFileError, match="invalid YAML"):
        load_interface(f.name)


def test_declaration_file_error_is_a_type_error():
    with pytest.raises(TypeError):
        load_declaration("/nonexistent/path.yaml")


def test_dump_interface():
    m = Methodical({"required": ["get"], "optional": ["close"]}, name="store")
    data = yaml.safe_load(dump_interface(m))
    assert data == {"name": "store", "required": ["get"], "optional": ["close"]}


def test_dump_then_load_keeps_descriptor():
    m = Methodical(["a", "b"])
    text = dump_interface(m)
    assert "optional" not in text
    assert load_interface(_write_yaml(yaml.safe_load(text))).get_interface() == m.get_interface()
