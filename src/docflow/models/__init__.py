"""Data models for the document workflow."""

from docflow.models.document_state import DocumentAction, StateName
from docflow.models.history import HistoryEntry
from docflow.models.snapshot import DocumentSnapshot

__all__ = [
    "DocumentAction",
    "DocumentSnapshot",
    "HistoryEntry",
    "StateName",
]
