from __future__ import annotations

from typing import List, Optional, Sequence

from table_studio.core.dataset import Dataset, Row


def resolve_columns(active_dataset: Optional[Dataset], preview_rows: Sequence[Row]) -> List[str]:
    """
    Ordered display columns.

    The declared schema wins whenever it is non-empty; otherwise fall back to
    the keys of the first preview row.
    """
    if active_dataset is not None and active_dataset.columns:
        return list(active_dataset.columns)
    if preview_rows:
        return list(preview_rows[0].keys())
    return []
