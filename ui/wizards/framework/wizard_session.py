# -*- coding: utf-8 -*-
"""
Wizard Session - State owned by one open wizard.

Holds:
- Step index and step count
- The accumulated draft
- Editing/creating flavour and visibility
"""

from enum import Enum
from typing import Dict, Any, Optional
from datetime import datetime
import uuid


class WizardState(Enum):
    """Observable controller states."""
    CLOSED = "closed"
    CREATING = "creating"
    EDITING = "editing"


class WizardSession:
    """
    State of a single wizard session.

    A session is created when the wizard opens and discarded when it closes.
    It is owned by exactly one WizardDraftController and handed to views by
    reference.
    """

    def __init__(self, step_count: int = 1, draft: Optional[Dict[str, Any]] = None,
                 is_editing: bool = False, visible: bool = False):
        self.session_id: str = str(uuid.uuid4())
        self.step_count: int = step_count
        self.step_index: int = 0
        self.draft: Dict[str, Any] = draft if draft is not None else {}
        self.is_editing: bool = is_editing
        self.visible: bool = visible
        self.opened_at: datetime = datetime.now()
        self.updated_at: datetime = self.opened_at

    @classmethod
    def closed(cls, draft: Optional[Dict[str, Any]] = None) -> 'WizardSession':
        """A hidden session; a given draft dict is emptied and reused."""
        if draft is not None:
            draft.clear()
        return cls(draft=draft)

    @property
    def state(self) -> WizardState:
        if not self.visible:
            return WizardState.CLOSED
        return WizardState.EDITING if self.is_editing else WizardState.CREATING

    @property
    def last_index(self) -> int:
        return self.step_count - 1

    def clamp(self, index: int) -> int:
        """Clamp a step index into [0, step_count - 1]."""
        return max(0, min(index, self.last_index))

    def touch(self):
        self.updated_at = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "session_id": self.session_id,
            "state": self.state.value,
            "step_index": self.step_index,
            "step_count": self.step_count,
            "is_editing": self.is_editing,
            "visible": self.visible,
            "opened_at": self.opened_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "draft_keys": sorted(self.draft.keys()),
        }
