"""Document snapshot model — a read-only view of a workflow context."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from docflow.models.document_state import DocumentAction, StateName
from docflow.models.history import HistoryEntry


class DocumentSnapshot(BaseModel):
    """Point-in-time copy of a document's state, content and audit trail."""

    model_config = ConfigDict(frozen=True)

    state: StateName
    content: str = ""
    comments: tuple[str, ...] = ()
    version: int = 1
    allowed_actions: tuple[DocumentAction, ...] = ()
    history: tuple[HistoryEntry, ...] = ()
