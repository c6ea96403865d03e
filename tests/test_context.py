"""Tests for the diagnostic context store."""

import pytest

from structbind.kernel.context import DiagnosticContext, DiagnosticEntry


@pytest.fixture
def context():
    return DiagnosticContext()


def test_reset_creates_empty_entry(context):
    context.reset("a.Schema")

    assert context.get_all()["a.Schema"] == DiagnosticEntry()
    assert context.get_errors("a.Schema") == []
    assert context.get_properties("a.Schema") == {}
    assert context.get_strict("a.Schema") is False


def test_reset_clears_previous_state(context):
    context.set("a.Schema", "strict", True)
    context.append_error("a.Schema", "boom")

    context.reset("a.Schema")

    assert context.get_errors("a.Schema") == []
    assert context.get_strict("a.Schema") is False
    assert context.isset("a.Schema", "strict") is False


def test_enablement_is_independent_of_reset(context):
    assert context.is_enabled("a.Schema") is False
    context.enable("a.Schema")
    context.reset("a.Schema")
    assert context.is_enabled("a.Schema") is True
    context.disable("a.Schema")
    assert context.is_enabled("a.Schema") is False


def test_set_get_and_isset(context):
    context.set("a.Schema", "properties", {"id": 1})

    assert context.get("a.Schema", "properties") == {"id": 1}
    assert context.isset("a.Schema", "properties") is True
    assert context.isset("a.Schema", "strict") is False
    assert context.get("missing.Schema", "errors") is None


def test_set_rejects_unknown_field(context):
    with pytest.raises(KeyError):
        context.set("a.Schema", "colour", "blue")


def test_last_write_wins(context):
    context.set("a.Schema", "strict", True)
    context.set("a.Schema", "strict", False)
    assert context.get_strict("a.Schema") is False


def test_all_errors_include_every_touched_schema(context):
    context.append_error("a.Schema", "first")
    context.append_error("a.Schema", "second")
    context.reset("b.Schema")

    assert context.get_all_errors() == {"a.Schema": ["first", "second"], "b.Schema": []}
    assert context.get_all_errors_count() == 2


def test_accessors_return_copies(context):
    context.append_error("a.Schema", "first")
    context.get_errors("a.Schema").append("mutated")
    assert context.get_errors("a.Schema") == ["first"]


def test_clear(context):
    context.enable("a.Schema")
    context.append_error("a.Schema", "first")

    context.clear()

    assert context.get_all() == {}
    assert context.is_enabled("a.Schema") is False
