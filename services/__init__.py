# -*- coding: utf-8 -*-
"""
Offer Desk Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "PriceAggregator",
    "BookingSummaryService",
    "StepValidator",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "PriceAggregator":
        from .pricing_service import PriceAggregator
        return PriceAggregator
    elif name == "BookingSummaryService":
        from .booking_summary_service import BookingSummaryService
        return BookingSummaryService
    elif name == "StepValidator":
        from .wizard.step_validator import StepValidator
        return StepValidator
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
