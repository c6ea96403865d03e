"""Tests for type descriptors and runtime type discovery."""

from typing import Any, Dict, List, Literal, Optional, Union

from structbind.kernel.types import (
    UNTYPED,
    TypeDescriptor,
    describe,
    normalize_type,
    runtime_type_name,
)


class TestNormalizeType:
    """Alias vocabulary."""

    def test_aliases_map_to_canonical_names(self):
        assert normalize_type("integer") == "int"
        assert normalize_type("boolean") == "bool"
        assert normalize_type("double") == "float"
        assert normalize_type("string") == "str"
        assert normalize_type("NoneType") == "None"
        assert normalize_type("null") == "None"

    def test_unknown_names_pass_through(self):
        assert normalize_type("Address") == "Address"
        assert normalize_type("int") == "int"


class TestRuntimeTypeName:

    def test_primitives(self):
        assert runtime_type_name(1) == "int"
        assert runtime_type_name(1.5) == "float"
        assert runtime_type_name(True) == "bool"
        assert runtime_type_name("x") == "str"
        assert runtime_type_name(None) == "None"
        assert runtime_type_name([1]) == "list"
        assert runtime_type_name({"a": 1}) == "dict"


class TestDescribe:

    def test_single_class(self):
        descriptor = describe(int)
        assert descriptor.names == ("int",)
        assert descriptor.is_union is False
        assert descriptor.expected == "int"

    def test_optional_is_union_with_none(self):
        descriptor = describe(Optional[int])
        assert descriptor.names == ("int", "None")
        assert descriptor.is_union is True
        assert descriptor.expected == "int|None"

    def test_pipe_union_keeps_declaration_order(self):
        assert describe(str | int).names == ("str", "int")

    def test_generic_maps_to_origin(self):
        assert describe(List[int]).names == ("list",)
        assert describe(dict[str, Any]).names == ("dict",)
        assert describe(Optional[Dict[str, int]]).names == ("dict", "None")

    def test_any_is_untyped(self):
        assert describe(Any) is UNTYPED
        assert describe(Union[int, Any]) is UNTYPED
        assert UNTYPED.is_untyped

    def test_none_annotation(self):
        assert describe(None).names == ("None",)
        assert describe(type(None)).names == ("None",)

    def test_string_names_are_normalized(self):
        assert describe("integer").names == ("int",)

    def test_literal_uses_value_type(self):
        assert describe(Literal["a", "b"]).names == ("str",)


class TestAccepts:
    """Exact nominal comparison, no coercion."""

    def test_exact_match(self):
        assert describe(int).accepts(3)
        assert describe(float).accepts(3.0)

    def test_no_numeric_coercion(self):
        assert not describe(float).accepts(3)
        assert not describe(int).accepts(3.0)

    def test_bool_is_not_int(self):
        assert not describe(int).accepts(True)

    def test_union_membership(self):
        descriptor = describe(Union[int, float])
        assert descriptor.accepts(1)
        assert descriptor.accepts(1.5)
        assert not descriptor.accepts("1")

    def test_untyped_accepts_everything(self):
        assert UNTYPED.accepts(object())

    def test_alias_spelled_descriptor(self):
        descriptor = TypeDescriptor(names=("integer", "double"), is_union=True)
        assert descriptor.accepts(1)
        assert descriptor.accepts(1.0)
        assert descriptor.expected == "integer|double"
