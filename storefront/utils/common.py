import json
from typing import Any, Dict, List, Optional

def money(n: float) -> float:
    # bankers-safe rounding to 2dp
    return round((n + 1e-12) * 100) / 100

def _maybe_json(value):
    if isinstance(value, str):
        v = value.strip()
        if not v:
            return None
        try:
            return json.loads(v)
        except Exception:
            return value
    return value

def _coerce_record_list(v) -> List[Dict[str, Any]]:
    """Stored lists may arrive as JSON text or lists of JSON strings; keep the dicts."""
    v = _maybe_json(v)
    if not isinstance(v, list):
        return []
    out = []
    for it in v:
        it = _maybe_json(it)
        if isinstance(it, dict):
            out.append(it)
    return out

def first_present(raw: Dict[str, Any], *keys: str) -> Optional[Any]:
    """Value of the first key that is set and non-empty."""
    for k in keys:
        val = raw.get(k)
        if val is not None and val != "":
            return val
    return None
