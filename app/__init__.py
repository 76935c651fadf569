# -*- coding: utf-8 -*-
"""
Offer Desk Application Core Module
"""

from .config import Config, StorageKeys, WizardDomains

__all__ = ["Config", "StorageKeys", "WizardDomains"]
