# -*- coding: utf-8 -*-
"""
Pricing Service
===============
Booking price aggregation for the group booking flow.

total = subtotal + taxes - group discount, where
- subtotal = base cost + (bundle + sum of services) * passengers
- taxes = subtotal * tax rate
- group discount = subtotal * discount rate when passengers >= threshold
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple, Union

from app.config import Config
from services.exceptions import ValidationException
from utils.datetime_utils import now_utc
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PricingPolicy:
    """Rates applied by the aggregator."""
    tax_rate: float = 0.08
    group_discount_rate: float = 0.15
    group_discount_threshold: int = 10

    @classmethod
    def from_config(cls) -> "PricingPolicy":
        return cls(
            tax_rate=Config.TAX_RATE,
            group_discount_rate=Config.GROUP_DISCOUNT_RATE,
            group_discount_threshold=Config.GROUP_DISCOUNT_THRESHOLD,
        )


@dataclass(frozen=True)
class ServiceLine:
    """An add-on service, billed once per passenger."""
    price: float
    name: str = ""

    @classmethod
    def from_value(cls, value: Union["ServiceLine", Mapping[str, Any], float, int]) -> "ServiceLine":
        if isinstance(value, ServiceLine):
            return value
        if isinstance(value, Mapping):
            return cls(price=value.get("price", 0), name=str(value.get("name") or value.get("title") or ""))
        return cls(price=value)


@dataclass(frozen=True)
class PricingContext:
    """Read-only booking inputs for a price calculation."""
    passenger_count: int
    base_cost: Optional[float] = None
    bundle_cost_per_passenger: Optional[float] = None
    services: Tuple[ServiceLine, ...] = ()

    @classmethod
    def create(cls, passenger_count: int, base_cost: Optional[float] = None,
               bundle_cost_per_passenger: Optional[float] = None,
               services: Iterable[Any] = ()) -> "PricingContext":
        """Build a context, accepting service dicts like {'price': 20}."""
        return cls(
            passenger_count=passenger_count,
            base_cost=base_cost,
            bundle_cost_per_passenger=bundle_cost_per_passenger,
            services=tuple(ServiceLine.from_value(item) for item in services or ()),
        )


@dataclass(frozen=True)
class PricingResult:
    """Outcome of one calculation. A new context always yields a new result."""
    subtotal: float
    taxes: float
    group_discount: float
    total: float
    passenger_count: int
    calculated_at: datetime = field(default_factory=now_utc)

    @property
    def has_group_discount(self) -> bool:
        return self.group_discount > 0

    def to_dict(self) -> Dict[str, Any]:
        """Record layout persisted as the booking summary."""
        return {
            "subtotal": self.subtotal,
            "taxes": self.taxes,
            "groupDiscount": self.group_discount,
            "totalAmount": self.total,
            "passengerCount": self.passenger_count,
            "calculatedAt": self.calculated_at.isoformat(),
        }


class PriceAggregator:
    """
    Computes a booking's payable total from a PricingContext.

    Pure apart from the calculated_at timestamp: inputs are never modified
    and equal inputs give equal amounts.
    """

    def __init__(self, policy: Optional[PricingPolicy] = None,
                 clock: Optional[Callable[[], datetime]] = None):
        self.policy = policy or PricingPolicy.from_config()
        self._clock = clock or now_utc

    def is_group_discount_eligible(self, passenger_count: int) -> bool:
        return passenger_count >= self.policy.group_discount_threshold

    def calculate(self, context: PricingContext) -> PricingResult:
        """
        Calculate subtotal, taxes, group discount and total.

        Raises:
            ValidationException: passenger count is not a positive integer
                or a cost is negative
        """
        self._validate(context)

        passengers = context.passenger_count
        base_cost = context.base_cost or 0
        bundle_cost = context.bundle_cost_per_passenger or 0
        services_cost = sum(line.price for line in context.services) * passengers

        subtotal = base_cost + bundle_cost * passengers + services_cost
        taxes = subtotal * self.policy.tax_rate
        group_discount = (
            subtotal * self.policy.group_discount_rate
            if self.is_group_discount_eligible(passengers) else 0
        )
        total = subtotal + taxes - group_discount

        logger.debug(
            f"Priced booking: passengers={passengers} subtotal={subtotal} "
            f"taxes={taxes} discount={group_discount} total={total}"
        )
        return PricingResult(
            subtotal=subtotal,
            taxes=taxes,
            group_discount=group_discount,
            total=total,
            passenger_count=passengers,
            calculated_at=self._clock(),
        )

    @staticmethod
    def _validate(context: PricingContext):
        count = context.passenger_count
        if not isinstance(count, int) or isinstance(count, bool) or count < 1:
            raise ValidationException(
                f"Passenger count must be a positive integer, got {count!r}",
                field="passenger_count",
                context="PriceAggregator"
            )

        costs = [
            ("base_cost", context.base_cost),
            ("bundle_cost_per_passenger", context.bundle_cost_per_passenger),
        ]
        costs.extend((f"services[{index}].price", line.price) for index, line in enumerate(context.services))

        problems = []
        for name, value in costs:
            # Optional cost terms contribute 0
            if value is None and not name.startswith("services"):
                continue
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                problems.append((name, f"must be a number, got {value!r}"))
            elif value < 0:
                problems.append((name, f"must not be negative, got {value!r}"))

        if problems:
            first_field, first_message = problems[0]
            raise ValidationException(
                first_message,
                field=first_field,
                errors=[f"{name} {message}" for name, message in problems],
                context="PriceAggregator"
            )
