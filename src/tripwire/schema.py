"""Generate JSON Schema for the suite YAML format."""

from __future__ import annotations

import json
from pathlib import Path

from tripwire.config import SuiteConfig


def generate_json_schema() -> dict:
    schema = SuiteConfig.model_json_schema()
    schema["$schema"] = "https://json-schema.org/draft/2020-12/schema"
    schema["properties"]["routines"]["items"]["pattern"] = (
        r"^[A-Za-z_][A-Za-z0-9_.]*:[A-Za-z_][A-Za-z0-9_.]*$"
    )
    return schema


def write_json_schema(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(generate_json_schema(), indent=2) + "\n")
