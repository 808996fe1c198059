import json
from typing import Any


def compact_json(value: Any) -> str:
    """Serialize a JSON value without whitespace, keeping non-ASCII text as-is."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"), allow_nan=False)
