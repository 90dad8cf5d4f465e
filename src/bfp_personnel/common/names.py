from __future__ import annotations

from typing import Any, Mapping, Optional

from ..core.constants import UNKNOWN


def joined_name(r: Mapping[str, Any], *, fallback: Optional[str] = None) -> str:
    """Full name from joined personnel columns, else ``fallback``, else Unknown."""
    parts = [r.get("first_name"), r.get("middle_name"), r.get("last_name")]
    name = " ".join(str(p).strip() for p in parts if p and str(p).strip())
    return name or (fallback or "").strip() or UNKNOWN
