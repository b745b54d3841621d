"""
Core domain layer: dataset types, the view state and its transitions,
and column resolution
"""

from .columns import resolve_columns
from .dataset import Dataset, DatasetSummary, UploadResult
from .view_state import RequestTag, ViewState

__all__ = ["Dataset", "DatasetSummary", "UploadResult", "RequestTag", "ViewState", "resolve_columns"]
