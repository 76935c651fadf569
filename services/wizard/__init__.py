# -*- coding: utf-8 -*-
"""Wizard services."""

from .step_validator import StepValidator

__all__ = ["StepValidator"]
