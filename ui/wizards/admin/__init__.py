# -*- coding: utf-8 -*-
"""
Admin Wizards Package - step layouts for the authoring modals.

Policy, discount, promo code, ancillary and offer modals, plus the
passenger-facing booking flow.
"""

from .form_definitions import (
    POLICY_WIZARD,
    DISCOUNT_WIZARD,
    PROMO_CODE_WIZARD,
    ANCILLARY_WIZARD,
    OFFER_WIZARD,
    BOOKING_FLOW,
    GROUP_LEADER_STEP_INDEX,
    get_definition,
)

__all__ = [
    'POLICY_WIZARD',
    'DISCOUNT_WIZARD',
    'PROMO_CODE_WIZARD',
    'ANCILLARY_WIZARD',
    'OFFER_WIZARD',
    'BOOKING_FLOW',
    'GROUP_LEADER_STEP_INDEX',
    'get_definition'
]
