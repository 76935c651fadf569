# -*- coding: utf-8 -*-
"""
Step validation service for the draft wizards.

Checks required fields of a step definition without UI coupling. Hosts run
it before calling WizardDraftController.advance().
"""

from typing import Any, Mapping

from PyQt5.QtCore import QDate

from ui.wizards.framework.base_step import StepValidationResult, WizardDefinition


class StepValidator:
    """Validates wizard step data against a WizardDefinition."""

    @staticmethod
    def is_missing(value: Any) -> bool:
        """A required value is missing when empty, blank or an invalid date."""
        if value is None:
            return True
        if isinstance(value, QDate):
            return not value.isValid()
        if isinstance(value, str):
            return not value.strip()
        if isinstance(value, (list, tuple, set, frozenset, dict)):
            return len(value) == 0
        return False

    @staticmethod
    def validate_step(definition: WizardDefinition, step_index: int,
                      values: Mapping[str, Any]) -> StepValidationResult:
        """
        Validate one step's values.

        Args:
            definition: Wizard layout
            step_index: Step being validated (clamped into range)
            values: Field values, usually the merged draft

        Returns:
            StepValidationResult with one error per missing field
        """
        step = definition.step_for_index(step_index)
        result = StepValidationResult(is_valid=True, errors=[], warnings=[])

        for name in step.required_fields:
            if StepValidator.is_missing(values.get(name)):
                result.add_error(f"{step.title}: '{name}' is required", field_name=name)

        known = definition.all_fields()
        unknown = sorted(name for name in values if name not in known)
        if unknown:
            result.add_warning(f"Fields not used by {definition.domain}: {', '.join(unknown)}")

        return result

    @staticmethod
    def validate_all(definition: WizardDefinition,
                     draft: Mapping[str, Any]) -> StepValidationResult:
        """Validate every step against the full draft (final submit)."""
        result = StepValidationResult(is_valid=True, errors=[], warnings=[])
        for index in range(definition.step_count):
            step_result = StepValidator.validate_step(definition, index, draft)
            # Unknown-field warnings would repeat once per step
            step_result.warnings = []
            result.merge(step_result)
        return result

    @staticmethod
    def get_step_name(definition: WizardDefinition, step_index: int) -> str:
        """Get the display name for a step."""
        titles = definition.step_titles()
        if 0 <= step_index < len(titles):
            return titles[step_index]
        return ""
