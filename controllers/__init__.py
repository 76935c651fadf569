# -*- coding: utf-8 -*-
"""
Offer Desk Controllers
======================
Host controllers sitting between the views and the wizard core.

Controllers provide:
- Per-step validation before the wizard advances
- Standardized outcomes via OperationResult
- Qt signals for UI updates
- Persistence of finished drafts and booking summaries

Usage:
    from controllers import AdminFormController
    from ui.wizards.admin import POLICY_WIZARD

    controller = AdminFormController(POLICY_WIZARD, on_submit=save_policy)
    controller.open_form()
    result = controller.next_step({"policyName": "Flex", "priorityLevel": "high"})
"""

# Base controller and result types
from controllers.base_controller import (
    BaseController,
    OperationResult,
)

# Wizard hosts
from controllers.admin_form_controller import AdminFormController
from controllers.booking_controller import GroupLeaderController

# All public exports
__all__ = [
    # Base
    "BaseController",
    "OperationResult",

    # Hosts
    "AdminFormController",
    "GroupLeaderController",
]
