"""Exception types raised by the document workflow."""

from __future__ import annotations


class DocflowError(Exception):
    """Base class for all docflow errors."""


class IllegalTransitionError(DocflowError, ValueError):
    """Raised when a state change is not an edge of the transition graph."""

    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target
        super().__init__(f"Invalid transition from {source} to {target}")
