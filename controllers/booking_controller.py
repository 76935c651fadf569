# -*- coding: utf-8 -*-
"""
Booking Controller
==================
Host for the "Group Leader Review" step of the booking flow.

Prices the booking, saves the group leader and stores the summary read by
the payment step.
"""

from typing import Any, Callable, Dict, Mapping, Optional

from PyQt5.QtCore import pyqtSignal

from app.config import StorageKeys
from controllers.base_controller import BaseController, OperationResult
from repositories.kv_store import KeyValueStore
from services.booking_summary_service import BookingSummaryService
from services.exceptions import StorageException, ValidationException
from services.pricing_service import PricingResult
from services.wizard.step_validator import StepValidator
from ui.wizards.admin.form_definitions import BOOKING_FLOW, GROUP_LEADER_STEP_INDEX
from ui.wizards.framework import draft_to_record
from utils.logger import get_logger

logger = get_logger(__name__)


class GroupLeaderController(BaseController):
    """Handles the group leader form submission."""

    summary_ready = pyqtSignal(object)  # PricingResult

    def __init__(
        self,
        store: KeyValueStore,
        summary_service: Optional[BookingSummaryService] = None,
        on_saved: Optional[Callable[[Dict[str, Any]], Any]] = None,
        parent=None
    ):
        """
        Args:
            store: Record store shared with the rest of the booking flow
            summary_service: Pricing service, built on the store by default
            on_saved: Optional callback receiving the group leader record
                (e.g. an API client call); a failure aborts the submission
        """
        super().__init__(parent)
        self.store = store
        self.summary_service = summary_service or BookingSummaryService(store)
        self._on_saved = on_saved

    def submit_group_leader(self, values: Mapping[str, Any]) -> OperationResult[PricingResult]:
        """
        Validate the group leader, price the booking, then store both.

        Returns:
            OperationResult carrying the PricingResult on success
        """
        validation = StepValidator.validate_step(BOOKING_FLOW, GROUP_LEADER_STEP_INDEX, values)
        if not validation.is_valid:
            logger.warning(f"Group leader validation failed: {validation.errors}")
            return OperationResult.fail("Please complete the required fields",
                                        errors=list(validation.errors))

        # Nothing is written until the booking prices cleanly
        try:
            summary = self.summary_service.calculate()
        except (ValidationException, StorageException) as e:
            self._emit_error("calculate_summary", str(e))
            return OperationResult.fail(e.message, errors=list(getattr(e, "errors", [])) or [str(e)])

        record = draft_to_record(values)
        if self._on_saved is not None:
            outcome = self.execute_with_error_handling("save_group_leader", self._on_saved, record)
            if not outcome.success:
                return OperationResult.fail("Failed to save group leader information",
                                            errors=[outcome.message])

        try:
            self.store.set_record(StorageKeys.GROUP_LEADER, record)
            self.summary_service.store_summary(summary)
        except StorageException as e:
            self._emit_error("store_group_leader", str(e))
            return OperationResult.fail(e.message, errors=[str(e)])

        self.summary_ready.emit(summary)
        return OperationResult.ok(data=summary, message="Group leader information saved successfully")
