# -*- coding: utf-8 -*-
"""
Admin Form Controller
=====================
Host for the policy, discount, promo code, ancillary and offer modals.

Wires one WizardDefinition to a WizardDraftController, validates each step
before advancing, hands the finished draft to the submit callback and
closes the wizard on cancel or successful submit.
"""

from typing import Any, Callable, Dict, Mapping, Optional

from PyQt5.QtCore import pyqtSignal

from controllers.base_controller import BaseController, OperationResult
from repositories.kv_store import KeyValueStore
from services.wizard.step_validator import StepValidator
from ui.wizards.framework import (
    StepValidationResult,
    WizardDefinition,
    WizardDraftController,
    WizardState,
    draft_to_record,
)
from utils.logger import get_logger

logger = get_logger(__name__)


class AdminFormController(BaseController):
    """
    Drives one authoring modal.

    Usage:
        controller = AdminFormController(POLICY_WIZARD, on_submit=save_policy)
        controller.open_form(existing_policy)
        controller.next_step(step_values)
        result = controller.submit(last_step_values)
    """

    # Signals
    validation_failed = pyqtSignal(object)  # StepValidationResult
    form_submitted = pyqtSignal(dict)  # JSON-safe record
    form_cancelled = pyqtSignal()

    def __init__(
        self,
        definition: WizardDefinition,
        on_submit: Optional[Callable[[Dict[str, Any]], Any]] = None,
        store: Optional[KeyValueStore] = None,
        storage_key: Optional[str] = None,
        rehydrate_absent_dates: Optional[bool] = None,
        parent=None
    ):
        super().__init__(parent)
        self.definition = definition
        self._on_submit = on_submit
        self.store = store
        self.storage_key = storage_key
        self.wizard = WizardDraftController(
            step_count=definition.step_count,
            rehydrate_absent_dates=rehydrate_absent_dates,
            parent=self
        )

    # =========================================================================
    # View-facing state
    # =========================================================================

    @property
    def step_index(self) -> int:
        return self.wizard.step_index

    @property
    def visible(self) -> bool:
        return self.wizard.visible

    @property
    def is_editing(self) -> bool:
        return self.wizard.is_editing

    @property
    def current_step_title(self) -> str:
        return self.definition.step_for_index(self.wizard.step_index).title

    @property
    def action_label(self) -> str:
        """Next on inner steps, the domain's submit label on the last one."""
        return self.definition.submit_label if self.wizard.is_last_step else "Next"

    def current_draft(self) -> Mapping[str, Any]:
        return self.wizard.current_draft()

    def step_defaults(self) -> Dict[str, Any]:
        """Draft values for the fields of the visible step."""
        draft = self.wizard.current_draft()
        fields = self.definition.fields_for_step(self.wizard.step_index)
        return {name: draft[name] for name in fields if name in draft}

    # =========================================================================
    # Operations
    # =========================================================================

    def open_form(self, editing_record: Optional[Mapping[str, Any]] = None) -> WizardState:
        """Open the modal, in edit mode when a non-empty record is given."""
        self._log_operation("open_form", domain=self.definition.domain,
                            editing=bool(editing_record))
        return self.wizard.open(editing_record, self.definition.step_count)

    def next_step(self, values: Optional[Mapping[str, Any]] = None,
                  from_step: Optional[int] = None) -> OperationResult[int]:
        """
        Capture the step's values and advance if its required fields are set.

        Values are merged even when validation fails so nothing typed is lost.

        Returns:
            OperationResult with the resulting step index as data
        """
        if not self.wizard.visible:
            return OperationResult.fail("Wizard is not open", data=self.wizard.step_index)

        rendered = self.wizard.step_index if from_step is None else from_step
        self.wizard.merge_without_advancing(values)

        result = StepValidator.validate_step(self.definition, rendered, self.wizard.current_draft())
        if not result.is_valid:
            return self._reject(result, data=self.wizard.step_index)

        new_index = self.wizard.advance(from_step=rendered)
        return OperationResult.ok(data=new_index)

    def previous_step(self) -> int:
        return self.wizard.retreat()

    def goto_step(self, index: int) -> int:
        return self.wizard.goto_step(index)

    def submit(self, values: Optional[Mapping[str, Any]] = None) -> OperationResult[Dict[str, Any]]:
        """
        Finish the wizard.

        Merges the last step's values, validates every step, calls the submit
        callback, stores the record when a store key is configured and closes
        the wizard. On failure the wizard stays open with its draft intact.
        """
        if not self.wizard.visible:
            return OperationResult.fail("Wizard is not open")

        self.wizard.merge_without_advancing(values)
        result = StepValidator.validate_all(self.definition, self.wizard.current_draft())
        if not result.is_valid:
            return self._reject(result)

        record = draft_to_record(self.wizard.current_draft())
        if self._on_submit is not None:
            outcome = self.execute_with_error_handling("submit", self._on_submit, record)
            if not outcome.success:
                return OperationResult.fail(outcome.message, data=record)

        if self.store is not None and self.storage_key:
            self.store.set_record(self.storage_key, record)

        logger.info(f"{self.definition.domain} form submitted with {len(record)} fields")
        self.form_submitted.emit(record)
        self.wizard.close()
        return OperationResult.ok(data=record)

    def cancel(self):
        """Close without submitting. Safe to call at any time."""
        was_visible = self.wizard.visible
        self.wizard.close()
        if was_visible:
            self.form_cancelled.emit()

    def _reject(self, result: StepValidationResult, data: Any = None) -> OperationResult:
        logger.warning(f"{self.definition.domain} validation failed: {result.errors}")
        self.validation_failed.emit(result)
        return OperationResult.fail("Please complete the required fields",
                                    errors=list(result.errors), data=data)
