"""Loading layout items from JSON documents."""

from __future__ import annotations

import json
from numbers import Real
from pathlib import Path
from typing import Any, Dict, List


def parse_items(document: Any) -> List[Dict[str, Any]]:
    """Check a decoded JSON document is a list of item objects.

    Objects are returned as-is; `width`/`height`, when present, must be
    numbers (null counts as missing).
    """

    if not isinstance(document, list):
        raise ValueError("items document must be a JSON list")

    items: List[Dict[str, Any]] = []
    for index, item in enumerate(document):
        if not isinstance(item, dict):
            raise ValueError(f"item {index} must be a JSON object")
        for name in ("width", "height"):
            value = item.get(name)
            if value is None:
                continue
            # bool is a Real subclass; reject it explicitly.
            if isinstance(value, bool) or not isinstance(value, Real):
                raise ValueError(f"item {index}: {name} must be a number")
        items.append(item)
    return items


def load_items(path: str | Path) -> List[Dict[str, Any]]:
    p = Path(path)
    try:
        document = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"{p}: invalid JSON ({exc.msg} at line {exc.lineno})") from exc
    return parse_items(document)
