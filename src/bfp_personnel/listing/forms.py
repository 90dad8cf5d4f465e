from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from .spec import field_text


@dataclass(frozen=True)
class FormField:
    name: str
    label: str
    kind: str = "text"  # text | date | number | select | textarea | password
    options: Sequence[str] = ()
    required: bool = False


@dataclass(frozen=True)
class RowAction:
    """A per-row POST button; ``fields`` render as small inline inputs."""

    label: str
    endpoint: str
    style: str = "primary"
    confirm: Optional[str] = None
    fields: Sequence[FormField] = ()


def form_values(fields: Sequence[FormField], record: Any = None) -> Mapping[str, str]:
    if record is None:
        return {f.name: "" for f in fields}
    return {f.name: field_text(record, f.name) for f in fields}
