from __future__ import annotations

import io
from typing import Any, Sequence

import pandas as pd

from .spec import ListingSpec, field_text


def to_dataframe(records: Sequence[Any], spec: ListingSpec) -> pd.DataFrame:
    data = []
    for r in records:
        data.append({c.label: field_text(r, c.field) for c in spec.columns})
    return pd.DataFrame(data, columns=[c.label for c in spec.columns])


def export_xlsx(records: Sequence[Any], spec: ListingSpec) -> io.BytesIO:
    """Write ``records`` to an in-memory workbook, one sheet named after the screen."""
    df = to_dataframe(records, spec)

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=spec.title[:31])

    output.seek(0)
    return output
