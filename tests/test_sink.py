import json
from pathlib import Path

import pytest

from ischema.compiler import compile_interface
from ischema.errors import SchemaRejectedError
from ischema.model import Interface, Leaf
from ischema.sink import SchemaSink, dump_schema
from ischema.validate import is_valid_schema, schema_errors


def test_valid_schema_accepted() -> None:
    schema = compile_interface(Interface("Ok", {"a": Leaf("string")}))
    assert is_valid_schema(schema)
    assert schema_errors(schema) == []


def test_unknown_type_token_rejected() -> None:
    schema = compile_interface(Interface("Bad", {"when": Leaf("Date")}))
    assert not is_valid_schema(schema)
    (error,) = schema_errors(schema)
    assert "when" in error


def test_sink_writes_tab_indented_file(tmp_path: Path) -> None:
    schema = compile_interface(Interface("Ok", {"a": Leaf("string")}))
    path = SchemaSink(tmp_path).emit(schema)
    assert path == tmp_path / "Ok.json"
    text = path.read_text()
    assert text == dump_schema(schema)
    assert '\n\t"title": "Ok"' in text
    assert json.loads(text) == schema


def test_sink_rejects_before_writing(tmp_path: Path) -> None:
    sink = SchemaSink(tmp_path)
    schema = compile_interface(Interface("Bad", {"when": Leaf("Date")}))
    with pytest.raises(SchemaRejectedError) as excinfo:
        sink.emit(schema)
    assert excinfo.value.title == "Bad"
    assert "Invalid schema: Bad" in str(excinfo.value)
    assert not (tmp_path / "Bad.json").exists()
    assert sink.written == []


def test_sink_without_validation_writes_anything(tmp_path: Path) -> None:
    schema = compile_interface(Interface("Loose", {"when": Leaf("Date")}))
    path = SchemaSink(tmp_path, validate=False).emit(schema)
    assert path.exists()
