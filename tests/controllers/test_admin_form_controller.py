# -*- coding: utf-8 -*-
"""
Tests for AdminFormController.

Covers step gating, submit and cancel for the authoring modals.
"""

import pytest
from PyQt5.QtCore import QDate

from controllers.admin_form_controller import AdminFormController
from ui.wizards.admin import ANCILLARY_WIZARD, OFFER_WIZARD, POLICY_WIZARD
from ui.wizards.framework import WizardState

ANCILLARY_BASICS = {"ancillaryName": "Lounge", "category": "comfort", "ancillaryType": "service"}


@pytest.fixture
def ancillary_form(memory_store):
    return AdminFormController(ANCILLARY_WIZARD, store=memory_store, storage_key="ancillaryDraft")


class TestStepGating:
    """Next only moves when the rendered step is complete."""

    def test_next_blocked_on_missing_fields(self, qtbot, ancillary_form):
        ancillary_form.open_form()

        with qtbot.waitSignal(ancillary_form.validation_failed, timeout=1000):
            result = ancillary_form.next_step({"ancillaryName": "Lounge"})

        assert result.success is False
        assert result.data == 0
        assert ancillary_form.step_index == 0
        # Typed values survive the failed attempt
        assert ancillary_form.current_draft()["ancillaryName"] == "Lounge"

    def test_next_advances(self, ancillary_form):
        ancillary_form.open_form()
        result = ancillary_form.next_step(ANCILLARY_BASICS)

        assert result.success is True
        assert result.data == 1
        assert ancillary_form.action_label == "Create Ancillary"

    def test_double_next_lands_once(self):
        form = AdminFormController(POLICY_WIZARD)
        form.open_form()
        values = {"policyName": "Flex", "priorityLevel": "high"}

        form.next_step(values, from_step=0)
        form.next_step(values, from_step=0)

        assert form.step_index == 1

    def test_next_on_closed_form(self, ancillary_form):
        result = ancillary_form.next_step(ANCILLARY_BASICS)
        assert result.success is False
        assert ancillary_form.visible is False

    def test_previous_keeps_draft(self, ancillary_form):
        ancillary_form.open_form()
        ancillary_form.next_step(ANCILLARY_BASICS)

        assert ancillary_form.previous_step() == 0
        assert ancillary_form.step_defaults() == ANCILLARY_BASICS
        assert ancillary_form.current_step_title == "Product Definition"
        assert ancillary_form.action_label == "Next"

    def test_offer_tabs_jump_freely(self):
        form = AdminFormController(OFFER_WIZARD)
        form.open_form()

        assert form.goto_step(4) == 4
        assert form.goto_step(99) == 5
        assert form.current_step_title == "Output Channels"


class TestSubmit:
    """Final submit behaviour."""

    def test_submit_stores_record_and_closes(self, qtbot, ancillary_form, memory_store):
        received = []
        ancillary_form._on_submit = received.append
        ancillary_form.open_form()
        ancillary_form.next_step(ANCILLARY_BASICS)

        with qtbot.waitSignal(ancillary_form.form_submitted, timeout=1000) as blocker:
            result = ancillary_form.submit({"refundable": True})

        expected = dict(ANCILLARY_BASICS, refundable=True)
        assert result.success is True
        assert blocker.args == [expected]
        assert received == [expected]
        assert memory_store.get_record("ancillaryDraft") == expected
        assert ancillary_form.visible is False
        assert ancillary_form.current_draft() == {}

    def test_submit_serializes_dates(self):
        form = AdminFormController(POLICY_WIZARD)
        form.open_form({"policyName": "Flex", "priorityLevel": "high",
                        "validFrom": "2025-01-01", "validTo": "2025-12-31"})

        result = form.submit()

        assert result.success is True
        assert result.data["validFrom"] == "2025-01-01"
        assert result.data["validTo"] == "2025-12-31"

    def test_submit_with_missing_fields_stays_open(self, ancillary_form, memory_store):
        ancillary_form.open_form()
        result = ancillary_form.submit({"refundable": True})

        assert result.success is False
        assert len(result.errors) == 3
        assert ancillary_form.visible is True
        assert memory_store.contains("ancillaryDraft") is False

    def test_callback_failure_keeps_draft(self, memory_store):
        def reject(record):
            raise RuntimeError("backend unavailable")

        form = AdminFormController(ANCILLARY_WIZARD, on_submit=reject,
                                   store=memory_store, storage_key="ancillaryDraft")
        form.open_form()
        result = form.submit(ANCILLARY_BASICS)

        assert result.success is False
        assert result.message == "backend unavailable"
        assert form.last_error == "backend unavailable"
        assert form.visible is True
        assert form.current_draft()["ancillaryName"] == "Lounge"
        assert memory_store.contains("ancillaryDraft") is False


class TestCancelAndEdit:
    """Cancel and edit-mode behaviour."""

    def test_cancel_clears(self, qtbot, ancillary_form):
        ancillary_form.open_form()
        ancillary_form.next_step(ANCILLARY_BASICS)

        with qtbot.waitSignal(ancillary_form.form_cancelled, timeout=1000):
            ancillary_form.cancel()

        assert ancillary_form.visible is False
        assert ancillary_form.step_index == 0
        assert ancillary_form.current_draft() == {}

    def test_cancel_when_closed_is_silent(self, qtbot, ancillary_form):
        with qtbot.assertNotEmitted(ancillary_form.form_cancelled):
            ancillary_form.cancel()

    def test_edit_mode_prefills_dates(self):
        form = AdminFormController(POLICY_WIZARD)
        state = form.open_form({"policyName": "Flex", "validFrom": "2025-03-01"})

        assert state is WizardState.EDITING
        assert form.is_editing is True
        assert form.current_draft()["validFrom"] == QDate(2025, 3, 1)
        assert "validTo" not in form.current_draft()
