"""Tests for struct declaration walking."""

from __future__ import annotations

from accessorgen.fields.walker import DeclarationWalker, format_type_params
from accessorgen.models import FieldDescriptor
from tests.fields.model_source import MODEL_GO


def _walk(go_package, cache, source: str):
    directory = go_package.write({"file.go": source})
    unit = cache.resolve(directory).units[0]
    return DeclarationWalker(cache).walk(unit)


def test_walk_finds_structs_in_declaration_order(go_package, cache) -> None:
    records = _walk(go_package, cache, MODEL_GO)

    assert [record.name for record in records] == ["Inner", "Box", "Person"]
    person = records[-1]
    names = [field.name for field in person.fields]
    assert names[:4] == ["age", "Name", "Tags", "Meta"]
    assert names[-2:] == ["x", "y"]


def test_walk_builds_complete_field_descriptors(go_package, cache) -> None:
    person = _walk(go_package, cache, MODEL_GO)[-1]
    fields = {field.name: field for field in person.fields}

    assert fields["age"] == FieldDescriptor(
        name="age",
        rendered_type="int",
        dereferenced_type="",
        is_primitive_pointer=False,
        example_value_a="int(1)",
        example_value_b="int(2)",
    )
    assert fields["Name"].is_primitive_pointer is True
    assert fields["Name"].dereferenced_type == "string"
    assert fields["Tags"].example_value_a == '[]string{"str", "str", "str"}'
    assert fields["Meta"].example_value_a == 'map[string]int{"str": int(1)}'


def test_multi_name_fields_share_type_information(go_package, cache) -> None:
    person = _walk(go_package, cache, MODEL_GO)[-1]
    fields = {field.name: field for field in person.fields}

    x, y = fields["x"], fields["y"]
    assert (x.rendered_type, x.example_value_a) == (y.rendered_type, y.example_value_a)
    assert x.rendered_type == "uint16"


def test_generic_parameters_render_in_order(go_package, cache) -> None:
    records = _walk(
        go_package,
        cache,
        """
        package gen

        type Pair[K comparable, V any] struct {
        \tKey   K
        \tValue V
        }

        type Triple[A, B any, C comparable] struct {
        \tA A
        }

        type Plain struct {
        \tN int
        }
        """,
    )

    params = {record.name: record.type_params for record in records}
    assert params == {"Pair": "[K, V]", "Triple": "[A, B, C]", "Plain": ""}
    assert records[0].receiver_type == "Pair[K, V]"


def test_non_struct_declarations_and_embedded_fields_are_ignored(go_package, cache) -> None:
    records = _walk(
        go_package,
        cache,
        """
        package misc

        type Reader interface {
        \tRead() error
        }

        type ID int

        type Alias = struct{ X int }

        type Base struct {
        \tID int
        }

        type Derived struct {
        \tBase
        \t*Reader
        \tName string
        }

        func helper() {
        \ttype local struct{ Z int }
        }
        """,
    )

    assert [record.name for record in records] == ["Base", "Derived"]
    assert [field.name for field in records[1].fields] == ["Name"]


def test_empty_struct_yields_record_without_fields(go_package, cache) -> None:
    records = _walk(go_package, cache, "package e\n\ntype Empty struct{}\n")
    assert len(records) == 1
    assert records[0].fields == ()


def test_grouped_type_declarations(go_package, cache) -> None:
    records = _walk(
        go_package,
        cache,
        """
        package grouped

        type (
        \tFirst struct {
        \t\tA string
        \t}
        \tSecond struct {
        \t\tB *bool
        \t}
        )
        """,
    )

    assert [record.name for record in records] == ["First", "Second"]
    assert records[1].fields[0].dereferenced_type == "bool"


def test_format_type_params() -> None:
    assert format_type_params([]) == ""
    assert format_type_params(["T"]) == "[T]"
    assert format_type_params(["K", "V"]) == "[K, V]"


def test_interface_fields_are_marked(go_package, cache) -> None:
    records = _walk(
        go_package,
        cache,
        """
        package iface

        type Reader interface {
        \tRead() error
        }

        type Holder struct {
        \tErr    error
        \tAny    any
        \tReader Reader
        \tCount  int
        }
        """,
    )

    flags = {field.name: field.is_interface for field in records[0].fields}
    assert flags == {"Err": True, "Any": True, "Reader": True, "Count": False}
