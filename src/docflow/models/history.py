"""History entry model — one audit record per action attempt."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from docflow.models.document_state import DocumentAction, StateName


class HistoryEntry(BaseModel):
    """An immutable record of an action and the state it was attempted in."""

    model_config = ConfigDict(frozen=True)

    action: DocumentAction
    state: StateName
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
