# -*- coding: utf-8 -*-
"""
Base Step - Step definitions shared by every wizard.

A wizard is described as data: an ordered list of steps, each owning a
subset of draft fields. The same WizardDraftController drives every domain,
only the definition differs.
"""

from typing import List, Optional, Tuple
from dataclasses import dataclass, field


@dataclass
class StepValidationResult:
    """Result of step validation."""
    is_valid: bool
    errors: List[str]
    warnings: List[str] = None
    missing_fields: List[str] = field(default_factory=list)

    def __post_init__(self):
        if self.warnings is None:
            self.warnings = []

    def add_error(self, message: str, field_name: Optional[str] = None):
        """Add an error message."""
        self.errors.append(message)
        if field_name and field_name not in self.missing_fields:
            self.missing_fields.append(field_name)
        self.is_valid = False

    def add_warning(self, message: str):
        """Add a warning message."""
        self.warnings.append(message)

    def has_errors(self) -> bool:
        """Check if there are any errors."""
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        """Check if there are any warnings."""
        return len(self.warnings) > 0

    def merge(self, other: 'StepValidationResult'):
        """Fold another result into this one."""
        for message in other.errors:
            self.errors.append(message)
        for name in other.missing_fields:
            if name not in self.missing_fields:
                self.missing_fields.append(name)
        self.warnings.extend(other.warnings)
        if other.has_errors():
            self.is_valid = False


@dataclass(frozen=True)
class WizardStep:
    """One screen of a wizard and the draft fields it owns."""

    step_id: str
    title: str
    fields: Tuple[str, ...] = ()
    required_fields: Tuple[str, ...] = ()

    def owns(self, field_name: str) -> bool:
        return field_name in self.fields


@dataclass(frozen=True)
class WizardDefinition:
    """Ordered step layout for one wizard domain."""

    domain: str
    title: str
    steps: Tuple[WizardStep, ...]
    submit_label: str = "Submit"

    def __post_init__(self):
        if not self.steps:
            raise ValueError(f"Wizard '{self.domain}' needs at least one step")

    @property
    def step_count(self) -> int:
        return len(self.steps)

    @property
    def last_index(self) -> int:
        return len(self.steps) - 1

    def step_for_index(self, index: int) -> WizardStep:
        """Get the step at index, clamped into range."""
        index = max(0, min(index, self.last_index))
        return self.steps[index]

    def fields_for_step(self, index: int) -> Tuple[str, ...]:
        return self.step_for_index(index).fields

    def all_fields(self) -> Tuple[str, ...]:
        names: List[str] = []
        for step in self.steps:
            for name in step.fields:
                if name not in names:
                    names.append(name)
        return tuple(names)

    def step_titles(self) -> List[str]:
        return [step.title for step in self.steps]
