from .json_exporter import build_result_dict, export_result_json, serialize_result

__all__ = [
    "build_result_dict",
    "export_result_json",
    "serialize_result",
]
