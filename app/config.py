# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# Pricing
_TAX_RATE = float(os.getenv("OFFERDESK_TAX_RATE", "0.08"))
_GROUP_DISCOUNT_RATE = float(os.getenv("OFFERDESK_GROUP_DISCOUNT_RATE", "0.15"))
_GROUP_DISCOUNT_THRESHOLD = int(os.getenv("OFFERDESK_GROUP_DISCOUNT_THRESHOLD", "10"))

# Wizard behaviour
_REHYDRATE_ABSENT_DATES = _env_flag("OFFERDESK_REHYDRATE_ABSENT_DATES")

# Paths
_PROJECT_ROOT = Path(__file__).parent.parent
_LOGS_DIR = Path(os.getenv("OFFERDESK_LOGS_DIR", str(_PROJECT_ROOT / "logs")))
_SETTINGS_PATH = Path(os.getenv("OFFERDESK_SETTINGS_PATH", str(_PROJECT_ROOT / "data" / "offerdesk.ini")))


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Offer Desk"
    APP_TITLE: str = "Airline Offer & Booking Administration"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "OfferDesk"

    # Paths
    PROJECT_ROOT: Path = _PROJECT_ROOT
    DATA_DIR: Path = PROJECT_ROOT / "data"
    LOGS_DIR: Path = _LOGS_DIR

    # Local key-value store (QSettings, INI format)
    SETTINGS_PATH: Path = _SETTINGS_PATH

    # Logging
    LOG_FILE: str = "app.log"
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3

    # Pricing (flat rates, no currency/locale branching)
    TAX_RATE: float = _TAX_RATE
    GROUP_DISCOUNT_RATE: float = _GROUP_DISCOUNT_RATE
    GROUP_DISCOUNT_THRESHOLD: int = _GROUP_DISCOUNT_THRESHOLD
    DEFAULT_PASSENGER_COUNT: int = 1

    # Wizard
    # False: only date fields present in the editing record are converted.
    # True: every date field is converted, absent ones become invalid dates.
    REHYDRATE_ABSENT_DATES: bool = _REHYDRATE_ABSENT_DATES

    # Date/Time Formats
    DATE_FORMAT: str = "%Y-%m-%d"
    QT_DATE_FORMAT: str = "yyyy-MM-dd"


# Keys of records persisted in the local key-value store
class StorageKeys:
    BOOKING_FORM_DATA = "bookingFormData"
    SELECTED_FLIGHT = "selectedFlightData"
    SELECTED_BUNDLE = "selectedBundleData"
    SELECTED_SERVICES = "selectedServices"
    GROUP_LEADER = "groupLeaderData"
    BOOKING_SUMMARY = "bookingSummary"


# Wizard domains
class WizardDomains:
    POLICY = "policy"
    DISCOUNT = "discount"
    PROMO_CODE = "promo_code"
    ANCILLARY = "ancillary"
    OFFER = "offer"
    BOOKING = "booking"

    ADMIN_DOMAINS = (POLICY, DISCOUNT, PROMO_CODE, ANCILLARY, OFFER)
