"""Tests for the structbind CLI."""

import json

import pytest

from structbind.cli import main


def _write_input(tmp_path, data):
    path = tmp_path / "input.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def _run(argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


def test_bind_valid_input_prints_result(tmp_path, capsys):
    path = _write_input(tmp_path, {"id": 1, "amount": 2.5})

    code = _run(["bind", "--schema", "sample_schemas:Order", "--input", str(path)])

    assert code == 0
    output = json.loads(capsys.readouterr().out)
    assert output["ok"] is True
    assert output["values"] == {"amount": 2.5, "id": 1}


def test_bind_strict_failure_exits_nonzero(tmp_path, capsys):
    path = _write_input(tmp_path, {"id": 1, "extra": "x"})

    code = _run(["bind", "--schema", "sample_schemas:Order", "--input", str(path)])

    assert code == 1
    captured = capsys.readouterr()
    assert json.loads(captured.out)["values"] is None
    assert "Property Order.extra doesn't exist!" in captured.err


def test_bind_lenient_writes_report(tmp_path, capsys):
    path = _write_input(tmp_path, {"id": 1, "amount": 2})
    out_dir = tmp_path / "out"

    code = _run([
        "bind", "--schema", "sample_schemas:Order", "--input", str(path),
        "--lenient", "--output-dir", str(out_dir),
    ])

    assert code == 1
    report = json.loads((out_dir / "bind_result.json").read_text(encoding="utf-8"))
    assert report["strict"] is False
    assert report["errors"] == ["Property Order.amount must be float, but int given!"]
    assert "[FAILED] Bind complete" in capsys.readouterr().out


def test_bind_quiet_prints_nothing(tmp_path, capsys):
    path = _write_input(tmp_path, {"id": 1})

    code = _run(["bind", "--schema", "sample_schemas:Order", "--input", str(path), "--quiet"])

    assert code == 0
    assert capsys.readouterr().out == ""


def test_bind_configuration_error(tmp_path, capsys):
    path = _write_input(tmp_path, {"label": "x"})

    code = _run(["bind", "--schema", "sample_schemas:Hybrid", "--input", str(path)])

    assert code == 1
    assert "MIXED_STRUCTURE" in capsys.readouterr().err


def test_bind_bad_schema_reference(tmp_path, capsys):
    path = _write_input(tmp_path, {})

    code = _run(["bind", "--schema", "sample_schemas:Missing", "--input", str(path)])

    assert code == 1
    assert "SCHEMA_LOAD_FAILED" in capsys.readouterr().err


def test_bind_rejects_non_object_input(tmp_path, capsys):
    path = _write_input(tmp_path, [1, 2])

    code = _run(["bind", "--schema", "sample_schemas:Order", "--input", str(path)])

    assert code == 1
    assert "must be a JSON object" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    assert _run([]) == 2
    assert "usage" in capsys.readouterr().out
