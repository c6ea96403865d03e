"""Smoke test for scripts/generate_schemas.py."""

import importlib.util
import json
from pathlib import Path

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "generate_schemas.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("generate_schemas", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_generate_schemas_writes_one_file_per_model(tmp_path):
    module = _load_script()

    written = module.generate_schemas(tmp_path)

    assert sorted(p.name for p in written) == ["bind_result.schema.json", "debug_snapshot.schema.json"]
    bind_schema = json.loads((tmp_path / "bind_result.schema.json").read_text(encoding="utf-8"))
    assert bind_schema["title"] == "BindResult"
    assert "errors" in bind_schema["properties"]
