# src/gedcomx_converter/mapping/ids.py
from __future__ import annotations

import hashlib
from typing import Any, Optional


def _uuid_from_key(key: str) -> str:
    """
    Canonical UUID-like value (8-4-4-4-12) from the SHA1 of ``key``.
    Deterministic for the same key; not a security primitive.
    """
    h = hashlib.sha1(key.encode("utf-8")).hexdigest()[:32]
    return f"{h[0:8]}-{h[8:12]}-{h[12:16]}-{h[16:20]}-{h[20:32]}"


def normalize_pointer(pointer: Optional[str]) -> Optional[str]:
    """``" i1 "`` / ``"@i1@"`` -> ``"@I1@"``; blank -> None."""
    if pointer is None:
        return None
    p = pointer.strip().strip("@").upper()
    if not p:
        return None
    return f"@{p}@"


def create_id(pointer: str, config: Any = None) -> str:
    """
    Identifier for a converted record.

    ``pointer`` mode (default) keeps the xref without its ``@`` markers;
    ``uuid`` mode derives a stable UUID from the normalized pointer.
    """
    p = normalize_pointer(pointer)
    if p is None:
        raise ValueError(f"Invalid pointer: {pointer!r}")

    mode = getattr(config, "id_mode", "pointer") if config is not None else "pointer"
    if mode == "uuid":
        return _uuid_from_key(f"PTR|{p}")
    return pointer.strip().strip("@")
