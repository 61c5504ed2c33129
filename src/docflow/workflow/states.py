"""Document states — one object per workflow state, each handling its own actions."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from docflow.models.document_state import DocumentAction, StateName

if TYPE_CHECKING:
    from docflow.workflow.context import DocumentContext

logger = logging.getLogger(__name__)


class DocumentState(ABC):
    """Base state. Every action is rejected unless a subclass overrides it.

    A rejection logs a warning and leaves the document untouched; it never
    raises, so a stray command in an interactive session is a no-op.
    """

    @property
    @abstractmethod
    def name(self) -> StateName: ...

    @property
    @abstractmethod
    def allowed_actions(self) -> tuple[DocumentAction, ...]: ...

    def _not_allowed(self, action: DocumentAction) -> None:
        logger.warning('Action "%s" not allowed in state %s', action, self.name)

    def save(self, context: DocumentContext) -> None:
        self._not_allowed(DocumentAction.SAVE)

    def submit_review(self, context: DocumentContext) -> None:
        self._not_allowed(DocumentAction.SUBMIT_REVIEW)

    def approve(self, context: DocumentContext) -> None:
        self._not_allowed(DocumentAction.APPROVE)

    def reject(self, context: DocumentContext) -> None:
        self._not_allowed(DocumentAction.REJECT)

    def archive(self, context: DocumentContext) -> None:
        self._not_allowed(DocumentAction.ARCHIVE)

    def create_version(self, context: DocumentContext) -> None:
        self._not_allowed(DocumentAction.CREATE_VERSION)

    def add_content(self, context: DocumentContext, content: str) -> None:
        self._not_allowed(DocumentAction.ADD_CONTENT)

    def add_comment(self, context: DocumentContext, comment: str) -> None:
        self._not_allowed(DocumentAction.ADD_COMMENT)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class EditingState(DocumentState):
    name = StateName.EDITING
    allowed_actions = (
        DocumentAction.SAVE,
        DocumentAction.SUBMIT_REVIEW,
        DocumentAction.ADD_CONTENT,
    )

    def save(self, context: DocumentContext) -> None:
        # No persistence; save only logs.
        logger.info("Saving document")

    def submit_review(self, context: DocumentContext) -> None:
        logger.info("Submitting document for review")
        context.set_state(ReviewingState())

    def add_content(self, context: DocumentContext, content: str) -> None:
        logger.info('Adding content: "%s"', content)
        context.append_content(content)


class ReviewingState(DocumentState):
    name = StateName.REVIEWING
    allowed_actions = (
        DocumentAction.APPROVE,
        DocumentAction.REJECT,
        DocumentAction.ADD_COMMENT,
    )

    def approve(self, context: DocumentContext) -> None:
        logger.info("Document approved, publishing")
        context.set_state(PublishedState())

    def reject(self, context: DocumentContext) -> None:
        logger.info("Document rejected, returning to editing")
        context.set_state(EditingState())

    def add_comment(self, context: DocumentContext, comment: str) -> None:
        logger.info('Review comment added: "%s"', comment)
        context.append_comment(comment)


class PublishedState(DocumentState):
    name = StateName.PUBLISHED
    allowed_actions = (DocumentAction.ARCHIVE, DocumentAction.CREATE_VERSION)

    def archive(self, context: DocumentContext) -> None:
        logger.info("Archiving document")
        context.set_state(ArchivedState())

    def create_version(self, context: DocumentContext) -> None:
        logger.info("Creating new document version")
        context.increment_version()
        context.set_state(EditingState())
        logger.info("Current version: %d", context.version)


class ArchivedState(DocumentState):
    name = StateName.ARCHIVED
    allowed_actions = (DocumentAction.CREATE_VERSION,)

    def create_version(self, context: DocumentContext) -> None:
        logger.info("Restoring archived document as a new version")
        context.increment_version()
        context.set_state(EditingState())
        logger.info("Current version: %d", context.version)


_STATES: dict[StateName, type[DocumentState]] = {
    StateName.EDITING: EditingState,
    StateName.REVIEWING: ReviewingState,
    StateName.PUBLISHED: PublishedState,
    StateName.ARCHIVED: ArchivedState,
}


def state_for(name: str) -> DocumentState:
    """Return a fresh state object for *name*. Raise ``ValueError`` if unknown."""
    return _STATES[StateName(name)]()
