"""
Name decomposition engine: NAME / FONE / ROMN values to conclusion Names.
"""

from .assembler import assemble_names
from .parts import build_parts, name_parts_for
from .settings import DEFAULT_SETTINGS, NameSettings
from .slashes import extract_surname, normalize_name_value
from .variants import synthesize_variant

__all__ = [
    "DEFAULT_SETTINGS",
    "NameSettings",
    "assemble_names",
    "build_parts",
    "extract_surname",
    "name_parts_for",
    "normalize_name_value",
    "synthesize_variant",
]
