"""Shared fixtures for docflow tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from docflow.models.document_state import StateName
from docflow.workflow.context import DocumentContext, ValidatedDocumentContext

if TYPE_CHECKING:
    from collections.abc import Callable

# Actions that move a fresh document from Editing into each state.
_PATHS: dict[StateName, tuple[str, ...]] = {
    StateName.EDITING: (),
    StateName.REVIEWING: ("submit_review",),
    StateName.PUBLISHED: ("submit_review", "approve"),
    StateName.ARCHIVED: ("submit_review", "approve", "archive"),
}


@pytest.fixture
def document() -> DocumentContext:
    """Return a fresh document in the Editing state."""
    return DocumentContext()


@pytest.fixture
def validated_document() -> ValidatedDocumentContext:
    """Return a fresh validated document in the Editing state."""
    return ValidatedDocumentContext()


@pytest.fixture
def make_document() -> Callable[..., DocumentContext]:
    """Return a factory that builds a document already in the requested state."""

    def _make(state: StateName = StateName.EDITING, *, validated: bool = False) -> DocumentContext:
        doc = ValidatedDocumentContext() if validated else DocumentContext()
        for action in _PATHS[state]:
            getattr(doc, action)()
        return doc

    return _make
