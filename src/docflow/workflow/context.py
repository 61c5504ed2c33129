"""Document context — owns a document's data and delegates actions to its state."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from docflow.errors import IllegalTransitionError
from docflow.models.document_state import DocumentAction, StateName
from docflow.models.history import HistoryEntry
from docflow.models.snapshot import DocumentSnapshot
from docflow.workflow.states import EditingState
from docflow.workflow.validator import StateMachineValidator

if TYPE_CHECKING:
    from docflow.workflow.states import DocumentState

logger = logging.getLogger(__name__)


class DocumentContext:
    """A single document moving through the editing workflow.

    Each action method records a history entry tagged with the state the
    document was in when the call was made, then hands off to that state.
    Actions the current state does not accept are logged and ignored.

    Not thread-safe; a context is meant for one owner at a time.
    """

    def __init__(self) -> None:
        self._state: DocumentState = EditingState()
        self._content = ""
        self._comments: list[str] = []
        self._version = 1
        self._history: list[HistoryEntry] = []

    def set_state(self, state: DocumentState) -> None:
        """Install *state* as the current state."""
        self._state = state
        logger.info("State changed to: %s", state.name)

    # Workflow actions

    def save(self) -> None:
        self._record(DocumentAction.SAVE)
        self._state.save(self)

    def submit_review(self) -> None:
        self._record(DocumentAction.SUBMIT_REVIEW)
        self._state.submit_review(self)

    def approve(self) -> None:
        self._record(DocumentAction.APPROVE)
        self._state.approve(self)

    def reject(self) -> None:
        self._record(DocumentAction.REJECT)
        self._state.reject(self)

    def archive(self) -> None:
        self._record(DocumentAction.ARCHIVE)
        self._state.archive(self)

    def create_version(self) -> None:
        self._record(DocumentAction.CREATE_VERSION)
        self._state.create_version(self)

    def add_content(self, content: str) -> None:
        self._record(DocumentAction.ADD_CONTENT)
        self._state.add_content(self, content)

    def add_comment(self, comment: str) -> None:
        self._record(DocumentAction.ADD_COMMENT)
        self._state.add_comment(self, comment)

    # Mutation hooks for state handlers

    def append_content(self, content: str) -> None:
        self._content += content

    def append_comment(self, comment: str) -> None:
        self._comments.append(comment)

    def increment_version(self) -> None:
        self._version += 1

    # Read accessors

    @property
    def content(self) -> str:
        return self._content

    @property
    def comments(self) -> tuple[str, ...]:
        return tuple(self._comments)

    @property
    def version(self) -> int:
        return self._version

    @property
    def current_state_name(self) -> StateName:
        return self._state.name

    @property
    def allowed_actions(self) -> list[DocumentAction]:
        return list(self._state.allowed_actions)

    @property
    def history(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._history)

    def snapshot(self) -> DocumentSnapshot:
        """Return an immutable copy of the document as it stands now."""
        return DocumentSnapshot(
            state=self.current_state_name,
            content=self._content,
            comments=tuple(self._comments),
            version=self._version,
            allowed_actions=self._state.allowed_actions,
            history=tuple(self._history),
        )

    def _record(self, action: DocumentAction) -> None:
        self._history.append(HistoryEntry(action=action, state=self._state.name))


class ValidatedDocumentContext(DocumentContext):
    """Document context that refuses state changes outside the transition graph.

    Unlike a rejected action, an illegal ``set_state`` call is a programming
    error: it is logged and the ``IllegalTransitionError`` propagates.
    """

    def set_state(self, state: DocumentState) -> None:
        current = self.current_state_name
        try:
            StateMachineValidator.validate_transition(current, state.name)
        except IllegalTransitionError as exc:
            logger.error("Transition error: %s", exc)  # noqa: TRY400
            raise
        super().set_state(state)

    def valid_next_states(self) -> list[StateName]:
        """Return the states reachable from the current one, in table order."""
        return StateMachineValidator.get_valid_transitions(self.current_state_name)
