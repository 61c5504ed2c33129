"""Transition policy — the fixed graph of legal state changes."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from docflow.errors import IllegalTransitionError
from docflow.models.document_state import StateName

if TYPE_CHECKING:
    from collections.abc import Mapping

TRANSITIONS: Mapping[StateName, tuple[StateName, ...]] = MappingProxyType(
    {
        StateName.EDITING: (StateName.REVIEWING,),
        StateName.REVIEWING: (StateName.PUBLISHED, StateName.EDITING),
        StateName.PUBLISHED: (StateName.ARCHIVED, StateName.EDITING),
        StateName.ARCHIVED: (StateName.EDITING,),
    }
)


class StateMachineValidator:
    """Pure lookups against ``TRANSITIONS``.

    Accepts plain strings as well as ``StateName`` members; unknown names
    have no successors.
    """

    @staticmethod
    def is_valid_transition(source: str, target: str) -> bool:
        """Return True if *target* is a legal successor of *source*."""
        return target in TRANSITIONS.get(source, ())  # type: ignore[call-overload]

    @staticmethod
    def get_valid_transitions(source: str) -> list[StateName]:
        """Return the legal successors of *source* in declaration order."""
        return list(TRANSITIONS.get(source, ()))  # type: ignore[call-overload]

    @classmethod
    def validate_transition(cls, source: str, target: str) -> None:
        """Raise ``IllegalTransitionError`` unless *source* -> *target* is legal."""
        if not cls.is_valid_transition(source, target):
            raise IllegalTransitionError(source, target)
