"""
json_exporter.py
GEDCOM X style JSON export of a ConversionResult.

The model objects already know their JSON shape (``to_dict``); this module
only adds the document envelope and file handling.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from gedcomx_converter.logging import get_logger
from gedcomx_converter.mapping.result import ConversionResult

log = get_logger("json_exporter")


def build_result_dict(result: ConversionResult, *, include_diagnostics: bool = False) -> Dict[str, Any]:
    data = result.to_dict()
    if include_diagnostics:
        data["diagnostics"] = [
            {"context": d.context, "message": d.message} for d in result.diagnostics
        ]
    return data


def serialize_result(result: ConversionResult, indent: int | None = 2, **kwargs: Any) -> str:
    if indent is None:
        return json.dumps(build_result_dict(result, **kwargs), separators=(",", ":"), ensure_ascii=False)
    return json.dumps(build_result_dict(result, **kwargs), indent=indent, ensure_ascii=False)


def export_result_json(result: ConversionResult, output_path: str | Path, indent: int = 2, **kwargs: Any) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    log.info(
        "Exporting GEDCOM X JSON to: %s (persons=%d, sources=%d)",
        output_path,
        len(result.persons),
        len(result.source_descriptions),
    )

    with output_path.open("w", encoding="utf-8") as f:
        f.write(serialize_result(result, indent=indent, **kwargs))

    log.info("JSON export complete. size=%d bytes", output_path.stat().st_size)
    return output_path
