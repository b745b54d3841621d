from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

# A row maps column name -> scalar (str, int, float, bool or None)
Row = Dict[str, Any]


@dataclass(frozen=True)
class DatasetSummary:
    """
    Registry entry for a previously uploaded dataset.

    Carries no column types and no rows; selecting one yields a degraded
    Dataset (see Dataset.from_summary).
    """
    id: str
    name: str
    columns: Tuple[str, ...] = ()
    row_count: int = 0

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> DatasetSummary:
        return cls(
            id=str(data["_id"]),
            name=str(data.get("name") or ""),
            columns=tuple(data.get("columns") or ()),
            row_count=int(data.get("row_count") or 0),
        )


@dataclass(frozen=True)
class Dataset:
    """
    The active dataset.

    Fields:

    - id: server identity, the only thing compared when checking staleness
    - name: display name (usually the uploaded file name)
    - columns: declared schema order, may be empty
    - column_types: column -> type label, empty for datasets picked from the registry
    - row_count: total rows held by the service (not the number displayed)
    """
    id: str
    name: str
    columns: Tuple[str, ...] = ()
    column_types: Dict[str, str] = field(default_factory=dict)
    row_count: int = 0

    @classmethod
    def from_summary(cls, summary: DatasetSummary) -> Dataset:
        return cls(
            id=summary.id,
            name=summary.name,
            columns=tuple(summary.columns),
            column_types={},
            row_count=summary.row_count,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "columns": list(self.columns),
            "column_types": dict(self.column_types),
            "row_count": self.row_count,
        }


@dataclass(frozen=True)
class UploadResult:
    dataset: Dataset
    preview: List[Row]

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> UploadResult:
        dataset = Dataset(
            id=str(data["dataset_id"]),
            name=str(data.get("name") or ""),
            columns=tuple(data.get("columns") or ()),
            column_types=dict(data.get("column_types") or {}),
            row_count=int(data.get("row_count") or 0),
        )
        return cls(dataset=dataset, preview=rows_from_payload(data.get("preview")))


def rows_from_payload(raw: Optional[Any]) -> List[Row]:
    """Copy a JSON row list into plain dicts; None means no rows."""
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise TypeError(f"Expected a list of rows, got {type(raw).__name__}")
    return [dict(r) for r in raw]


def format_cell(value: Any) -> str:
    """Render a scalar cell value as text."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
