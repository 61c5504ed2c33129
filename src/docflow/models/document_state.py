"""Workflow enumerations — state names and the actions a document accepts."""

from __future__ import annotations

from enum import StrEnum


class StateName(StrEnum):
    EDITING = "Editing"
    REVIEWING = "Reviewing"
    PUBLISHED = "Published"
    ARCHIVED = "Archived"


class DocumentAction(StrEnum):
    """Enumerate workflow actions. Values match the context method names."""

    SAVE = "save"
    SUBMIT_REVIEW = "submit_review"
    APPROVE = "approve"
    REJECT = "reject"
    ARCHIVE = "archive"
    CREATE_VERSION = "create_version"
    ADD_CONTENT = "add_content"
    ADD_COMMENT = "add_comment"
