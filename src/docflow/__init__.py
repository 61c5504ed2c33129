"""Document workflow engine built on per-state handler objects."""

from docflow.errors import DocflowError, IllegalTransitionError
from docflow.models import DocumentAction, DocumentSnapshot, HistoryEntry, StateName
from docflow.workflow import (
    ArchivedState,
    DocumentContext,
    DocumentState,
    EditingState,
    PublishedState,
    ReviewingState,
    StateMachineValidator,
    ValidatedDocumentContext,
)

__all__ = [
    "ArchivedState",
    "DocflowError",
    "DocumentAction",
    "DocumentContext",
    "DocumentSnapshot",
    "DocumentState",
    "EditingState",
    "HistoryEntry",
    "IllegalTransitionError",
    "PublishedState",
    "ReviewingState",
    "StateMachineValidator",
    "StateName",
    "ValidatedDocumentContext",
]
