# -*- coding: utf-8 -*-
"""
Booking summary service.

Collects the booking flow's stored selections, prices them with the
PriceAggregator and stores the resulting summary for the payment step.
"""

from typing import Any, Dict, List, Optional

from app.config import Config, StorageKeys
from repositories.kv_store import KeyValueStore
from services.pricing_service import PriceAggregator, PricingContext, PricingResult
from utils.logger import get_logger

logger = get_logger(__name__)


class BookingSummaryService:
    """Prices the booking recorded in the key-value store."""

    def __init__(self, store: KeyValueStore, aggregator: Optional[PriceAggregator] = None):
        self.store = store
        self.aggregator = aggregator or PriceAggregator()

    def _record(self, key: str) -> Dict[str, Any]:
        value = self.store.get_record(key, {})
        return value if isinstance(value, dict) else {}

    def _services(self) -> List[Dict[str, Any]]:
        value = self.store.get_record(StorageKeys.SELECTED_SERVICES, [])
        return value if isinstance(value, list) else []

    def build_context(self) -> PricingContext:
        """
        Build a PricingContext from the stored booking records.

        The passenger count falls back to Config.DEFAULT_PASSENGER_COUNT only
        when the booking form did not record one; an explicit 0 is passed on
        and rejected by the aggregator.
        """
        booking = self._record(StorageKeys.BOOKING_FORM_DATA)
        flight = self._record(StorageKeys.SELECTED_FLIGHT)
        bundle = self._record(StorageKeys.SELECTED_BUNDLE)

        passenger_count = booking.get("totalPassengers")
        if passenger_count is None:
            passenger_count = Config.DEFAULT_PASSENGER_COUNT

        return PricingContext.create(
            passenger_count=passenger_count,
            base_cost=flight.get("baseCost"),
            bundle_cost_per_passenger=bundle.get("bundleCost"),
            services=self._services(),
        )

    def calculate(self) -> PricingResult:
        return self.aggregator.calculate(self.build_context())

    def calculate_and_store(self) -> PricingResult:
        """Price the booking and store the summary under bookingSummary."""
        return self.store_summary(self.calculate())

    def store_summary(self, result: PricingResult) -> PricingResult:
        self.store.set_record(StorageKeys.BOOKING_SUMMARY, result.to_dict())
        logger.info(
            f"Booking summary stored: {result.passenger_count} passengers, "
            f"total {result.total:.2f}"
        )
        return result

    def stored_summary(self) -> Optional[Dict[str, Any]]:
        return self.store.get_record(StorageKeys.BOOKING_SUMMARY)
