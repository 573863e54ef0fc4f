"""Generate JSON Schema and docs for the manifest YAML format."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from affirm.config import Manifest


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def _collect_refs(obj: object) -> set[str]:
    """Return all ``$defs`` names referenced via ``$ref`` inside *obj*."""
    refs: set[str] = set()
    if isinstance(obj, dict):
        if "$ref" in obj:
            ref = obj["$ref"]
            if ref.startswith("#/$defs/"):
                refs.add(ref.removeprefix("#/$defs/"))
        for v in obj.values():
            refs |= _collect_refs(v)
    elif isinstance(obj, list):
        for v in obj:
            refs |= _collect_refs(v)
    return refs


def _order_defs(defs: dict) -> dict:
    """Topologically sort ``$defs`` so referenced types precede referencing types."""
    ordered: dict[str, dict] = {}
    visited: set[str] = set()

    def _visit(name: str) -> None:
        if name in visited or name not in defs:
            return
        visited.add(name)
        for dep in _collect_refs(defs[name]):
            _visit(dep)
        ordered[name] = defs[name]

    for name in defs:
        _visit(name)
    return ordered


def generate_json_schema() -> dict:
    schema = Manifest.model_json_schema()
    if "$defs" in schema:
        schema["$defs"] = _order_defs(schema["$defs"])
    return schema


def write_json_schema(path: Path) -> None:
    _ensure_parent(path)
    schema = generate_json_schema()
    path.write_text(json.dumps(schema, indent=2) + "\n")


def _format_fields(fields: Iterable[str]) -> str:
    return ", ".join(fields)


def generate_schema_doc() -> str:
    schema = generate_json_schema()
    defs = schema.get("$defs", {})
    check_props = defs.get("FileCheck", {}).get("properties", {})
    digest_props = defs.get("DigestCheck", {}).get("properties", {})

    lines: list[str] = []
    lines.append("# affirm manifest schema")
    lines.append("")
    lines.append("This doc is generated from the Pydantic models.")
    lines.append("")
    lines.append("## Top-level keys")
    lines.append("- `checks`: list of file checks (required, non-empty).")
    lines.append("- `base_dir`: directory relative paths are read from "
                 "(defaults to the manifest's directory).")
    lines.append("")
    lines.append("## Check keys")
    for key, prop in check_props.items():
        if key == "digest":
            lines.append(f"- `digest`: {{ {_format_fields(digest_props.keys())} }}")
            continue
        kind = prop.get("type")
        if kind is None and "anyOf" in prop:
            kind = " | ".join(p.get("type", "object") for p in prop["anyOf"])
        lines.append(f"- `{key}`: {kind}")

    lines.append("")
    lines.append("String values may reference environment variables as `${VAR}` "
                 "or `${VAR:-default}`.")
    lines.append("")
    return "\n".join(lines)


def write_schema_doc(path: Path) -> None:
    _ensure_parent(path)
    path.write_text(generate_schema_doc())
