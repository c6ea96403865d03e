"""Generate JSON schemas for the public result models and save them to schemas/."""

import json
from pathlib import Path
from typing import List, Optional

from structbind.api import BindResult
from structbind.contracts import DebugSnapshot

MODELS = {
    "bind_result.schema.json": BindResult,
    "debug_snapshot.schema.json": DebugSnapshot,
}


def generate_schemas(schemas_dir: Optional[Path] = None) -> List[Path]:
    """Write one JSON schema per public model; returns the written paths."""
    if schemas_dir is None:
        schemas_dir = Path(__file__).parent.parent / "schemas"
    schemas_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for filename, model in MODELS.items():
        schema_path = schemas_dir / filename
        with open(schema_path, 'w', encoding='utf-8') as f:
            json.dump(model.model_json_schema(), f, indent=2, ensure_ascii=False)
        print(f"Generated: {schema_path}")
        written.append(schema_path)

    print("\nSchema generation complete!")
    return written


if __name__ == "__main__":
    generate_schemas()
