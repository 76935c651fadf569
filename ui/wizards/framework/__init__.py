# -*- coding: utf-8 -*-
"""
Wizard Framework - one draft controller for every multi-step modal.

Provides the step definitions, session state and draft helpers shared by the
policy, discount, promo code, ancillary, offer and booking wizards.
"""

from .base_step import StepValidationResult, WizardStep, WizardDefinition
from .wizard_session import WizardSession, WizardState
from .draft import DATE_FIELDS, detach_value, union_merge, rehydrate_editing_record, draft_to_record
from .draft_controller import WizardDraftController

__all__ = [
    'StepValidationResult',
    'WizardStep',
    'WizardDefinition',
    'WizardSession',
    'WizardState',
    'DATE_FIELDS',
    'detach_value',
    'union_merge',
    'rehydrate_editing_record',
    'draft_to_record',
    'WizardDraftController'
]
