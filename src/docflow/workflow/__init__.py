"""State-pattern workflow components."""

from docflow.workflow.context import DocumentContext, ValidatedDocumentContext
from docflow.workflow.states import (
    ArchivedState,
    DocumentState,
    EditingState,
    PublishedState,
    ReviewingState,
    state_for,
)
from docflow.workflow.validator import TRANSITIONS, StateMachineValidator

__all__ = [
    "TRANSITIONS",
    "ArchivedState",
    "DocumentContext",
    "DocumentState",
    "EditingState",
    "PublishedState",
    "ReviewingState",
    "StateMachineValidator",
    "ValidatedDocumentContext",
    "state_for",
]
