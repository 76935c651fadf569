# -*- coding: utf-8 -*-
"""
Wizard Draft Controller - Step navigation and draft accumulation.

Handles:
- Opening in create or edit mode (rehydrating the editing record)
- Step progression (advance/retreat/goto), always clamped
- Merging per-step values into the draft
- Resetting on close, whether cancelled or submitted
"""

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from PyQt5.QtCore import QObject, pyqtSignal

from app.config import Config
from services.exceptions import PreconditionException
from utils.logger import get_logger
from .draft import union_merge, rehydrate_editing_record
from .wizard_session import WizardSession, WizardState

logger = get_logger(__name__)


class WizardDraftController(QObject):
    """
    Owns the WizardSession of one modal.

    Views read step_index, visible and current_draft() on every render and
    call the navigation methods from button handlers. Validation is the
    host's job; the controller never rejects values.
    """

    # Signals
    opened = pyqtSignal(bool)  # is_editing
    closed = pyqtSignal()
    step_changed = pyqtSignal(int, int)  # old_index, new_index
    draft_changed = pyqtSignal(dict)  # merged values

    def __init__(self, step_count: Optional[int] = None,
                 rehydrate_absent_dates: Optional[bool] = None,
                 parent: Optional[QObject] = None):
        """
        Initialize the controller.

        Args:
            step_count: Default step count used by open()
            rehydrate_absent_dates: Override Config.REHYDRATE_ABSENT_DATES
            parent: Parent QObject
        """
        super().__init__(parent)
        if step_count is not None:
            self._check_step_count(step_count)
        self._default_step_count = step_count
        if rehydrate_absent_dates is None:
            rehydrate_absent_dates = Config.REHYDRATE_ABSENT_DATES
        self.rehydrate_absent_dates = rehydrate_absent_dates
        # Every session shares this dict, so current_draft() views stay live
        self._draft: Dict[str, Any] = {}
        self._session = WizardSession.closed(self._draft)

    # =========================================================================
    # State
    # =========================================================================

    @property
    def session(self) -> WizardSession:
        return self._session

    @property
    def state(self) -> WizardState:
        return self._session.state

    @property
    def visible(self) -> bool:
        return self._session.visible

    @property
    def is_editing(self) -> bool:
        return self._session.visible and self._session.is_editing

    @property
    def step_index(self) -> int:
        return self._session.step_index

    @property
    def step_count(self) -> int:
        return self._session.step_count

    @property
    def is_first_step(self) -> bool:
        return self._session.step_index == 0

    @property
    def is_last_step(self) -> bool:
        return self._session.step_index == self._session.last_index

    def current_draft(self) -> Mapping[str, Any]:
        """
        Read-only live view of the draft, for populating field defaults.

        The view follows merges, close() and later open() calls.
        """
        return MappingProxyType(self._draft)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def open(self, editing_record: Optional[Mapping[str, Any]] = None,
             step_count: Optional[int] = None) -> WizardState:
        """
        Open the wizard at step 0.

        Args:
            editing_record: Existing record to edit; None or {} opens in
                create mode with an empty draft
            step_count: Number of steps, defaults to the constructor value

        Returns:
            The new state (CREATING or EDITING)

        Raises:
            PreconditionException: if step_count is missing or below 1
        """
        if step_count is None:
            step_count = self._default_step_count
        self._check_step_count(step_count)

        if self._session.visible:
            logger.debug("open() on a visible wizard, starting a fresh session")

        is_editing = bool(editing_record)
        draft = rehydrate_editing_record(
            editing_record,
            rehydrate_absent_dates=self.rehydrate_absent_dates
        )
        self._draft.clear()
        self._draft.update(draft)
        self._session = WizardSession(
            step_count=step_count,
            draft=self._draft,
            is_editing=is_editing,
            visible=True
        )

        logger.info(
            f"Wizard opened ({self.state.value}): {step_count} steps, "
            f"{len(draft)} draft fields"
        )
        self.opened.emit(is_editing)
        return self.state

    def close(self):
        """
        Hide the wizard and reset the session.

        Safe to call in any state and any number of times.
        """
        was_visible = self._session.visible
        self._session = WizardSession.closed(self._draft)
        if was_visible:
            logger.info("Wizard closed, draft cleared")
            self.closed.emit()

    # =========================================================================
    # Navigation
    # =========================================================================

    def advance(self, values: Optional[Mapping[str, Any]] = None,
                from_step: Optional[int] = None) -> int:
        """
        Merge the current step's values and move forward one step.

        Args:
            values: Field values of the step being left
            from_step: Step the values were rendered on. A repeated call with
                the same from_step lands on the same step.

        Returns:
            The step index after the move (unchanged on the last step)
        """
        if not self._ensure_open("advance"):
            return self._session.step_index

        self._merge(values)
        base = self._session.step_index if from_step is None else self._session.clamp(from_step)
        return self._navigate_to(base + 1)

    def retreat(self) -> int:
        """Move back one step. The draft is left untouched."""
        if not self._ensure_open("retreat"):
            return self._session.step_index
        return self._navigate_to(self._session.step_index - 1)

    def goto_step(self, index: int) -> int:
        """Jump to a step (tabbed modals). Out-of-range indexes are clamped."""
        if not self._ensure_open("goto_step"):
            return self._session.step_index
        return self._navigate_to(index)

    def merge_without_advancing(self, values: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
        """
        Capture values into the draft without moving.

        Used before a validation gate decides whether to advance.
        """
        if self._ensure_open("merge_without_advancing"):
            self._merge(values)
        return self.current_draft()

    # =========================================================================
    # Internals
    # =========================================================================

    @staticmethod
    def _check_step_count(step_count: Optional[int]):
        if not isinstance(step_count, int) or isinstance(step_count, bool) or step_count < 1:
            raise PreconditionException(
                f"step_count must be an integer >= 1, got {step_count!r}",
                argument="step_count",
                context="WizardDraftController"
            )

    def _ensure_open(self, operation: str) -> bool:
        # Deferred UI events may still arrive after close()
        if not self._session.visible:
            logger.debug(f"Ignoring {operation}() on a closed wizard")
            return False
        return True

    def _merge(self, values: Optional[Mapping[str, Any]]):
        if not values:
            return
        union_merge(self._draft, values)
        self._session.touch()
        logger.debug(f"Merged fields into draft: {sorted(values.keys())}")
        self.draft_changed.emit(dict(values))

    def _navigate_to(self, index: int) -> int:
        old_index = self._session.step_index
        new_index = self._session.clamp(index)
        if new_index == old_index:
            logger.debug(f"Step unchanged at {old_index} (requested {index})")
            return old_index

        self._session.step_index = new_index
        self._session.touch()
        logger.info(f"Navigating: Step {old_index} → {new_index}")
        self.step_changed.emit(old_index, new_index)
        return new_index
