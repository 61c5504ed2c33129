"""Scripted walkthrough of the document workflow."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from docflow.config import load_settings
from docflow.errors import IllegalTransitionError
from docflow.logging import configure_logging
from docflow.models.document_state import StateName
from docflow.workflow.context import DocumentContext, ValidatedDocumentContext
from docflow.workflow.states import state_for

if TYPE_CHECKING:
    from docflow.models.snapshot import DocumentSnapshot

logger = logging.getLogger(__name__)


def run_demo() -> DocumentSnapshot:
    """Drive one document through review, rejection, publication and a new version.

    Ends with an action the current state refuses, then shows the valid next
    states of a validated context and tries to force each other state into it
    by name. Returns the main document's final snapshot.
    """
    document = DocumentContext()
    logger.info("Initial state: %s", document.current_state_name)
    logger.info("Allowed actions: %s", ", ".join(document.allowed_actions))

    document.add_content("Document introduction...")
    document.add_content(" More content...")
    document.save()

    document.submit_review()
    document.add_comment("Section 2 needs more detail")
    document.add_comment("Check the references")
    logger.info("Comments: %d", len(document.comments))

    document.reject()
    document.add_content(" Section 2 expanded...")
    document.submit_review()
    document.approve()
    logger.info("Document published, version %d", document.version)

    document.create_version()
    document.add_content("New version with improvements...")

    # Editing does not accept archive; this is logged and ignored.
    document.archive()

    validated = ValidatedDocumentContext()
    logger.info(
        "Valid states from %s: %s",
        validated.current_state_name,
        ", ".join(validated.valid_next_states()),
    )

    allowed = validated.valid_next_states()
    for name in StateName:
        if name in allowed or name == validated.current_state_name:
            continue
        try:
            validated.set_state(state_for(name))
        except IllegalTransitionError:
            logger.info("Refused forced change to %s", name)

    return document.snapshot()


def main() -> None:
    """Entry point for the ``docflow-demo`` command."""
    settings = load_settings()
    configure_logging(settings.app.log_level, log_file=settings.app.log_file or None)

    snapshot = run_demo()

    logger.info("Total actions: %d", len(snapshot.history))
    for entry in snapshot.history[-3:]:
        logger.info(
            "%s in %s at %s",
            entry.action,
            entry.state,
            entry.timestamp.strftime("%H:%M:%S"),
        )


if __name__ == "__main__":
    main()
