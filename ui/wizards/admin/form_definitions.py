# -*- coding: utf-8 -*-
"""
Step layouts for the admin authoring modals and the booking flow.

Each wizard differs only in its steps and fields; all of them are driven by
the same WizardDraftController.
"""

from typing import Dict

from app.config import WizardDomains
from ui.wizards.framework import WizardDefinition, WizardStep


POLICY_WIZARD = WizardDefinition(
    domain=WizardDomains.POLICY,
    title="Create New Policy",
    submit_label="Create Policy",
    steps=(
        WizardStep(
            step_id="basic_information",
            title="Basic Information",
            fields=("policyName", "priorityLevel", "policyDescription", "policyEnabled"),
            required_fields=("policyName", "priorityLevel"),
        ),
        WizardStep(
            step_id="refund_change_rules",
            title="Refund/Change Rules",
            fields=(
                "allowRefunds", "refundDeadline", "refundPercentage", "refundFee",
                "allowChanges", "changeDeadline", "changeFee",
            ),
        ),
        WizardStep(
            step_id="eligibility_rules",
            title="Eligibility Rules",
            fields=("loyaltyTiers", "corporateCustomersOnly"),
        ),
        WizardStep(
            step_id="stacking_blackout",
            title="Stacking & Blackout Dates",
            fields=("allowDiscountStacking", "hasBlackoutDates", "blackoutStartDate", "blackoutEndDate"),
        ),
        WizardStep(
            step_id="validity_period",
            title="Validity Period",
            fields=("validFrom", "validTo", "gdprCompliant", "enableAuditTrail"),
            required_fields=("validFrom", "validTo"),
        ),
    ),
)

DISCOUNT_WIZARD = WizardDefinition(
    domain=WizardDomains.DISCOUNT,
    title="Create New Discount",
    submit_label="Create Discount",
    steps=(
        WizardStep(
            step_id="basic_information",
            title="Basic Information",
            fields=("discountName", "discountCode", "description", "discountType", "discountValue", "status"),
            required_fields=("discountName", "discountCode", "discountType", "discountValue"),
        ),
        WizardStep(
            step_id="application_limits",
            title="Application & Limits",
            fields=("targetApplication", "totalUsageLimit", "perUserLimit", "maxDiscountCap"),
        ),
        WizardStep(
            step_id="eligibility",
            title="Eligibility",
            fields=("loyaltyTiers", "minSpendThreshold"),
        ),
        WizardStep(
            step_id="validity",
            title="Validity",
            fields=("validFrom", "validTo", "blackoutDates"),
            required_fields=("validFrom", "validTo"),
        ),
        WizardStep(
            step_id="combinability",
            title="Combinability",
            fields=("allowPromoCodeCombination",),
        ),
    ),
)

PROMO_CODE_WIZARD = WizardDefinition(
    domain=WizardDomains.PROMO_CODE,
    title="Create New Promo Code",
    submit_label="Create Promo Code",
    steps=(
        WizardStep(
            step_id="basic_information",
            title="Basic Information",
            fields=("promoName", "promoCode", "description", "discountType", "discountValue", "status"),
            required_fields=("promoName", "promoCode", "discountType", "discountValue"),
        ),
        WizardStep(
            step_id="code_generation",
            title="Code Generation",
            fields=("generationType", "prefix", "codeLength", "quantity", "discountRule"),
        ),
        WizardStep(
            step_id="usage_rules",
            title="Usage Rules",
            fields=(
                "minPurchase", "maxDiscount", "totalUsageLimit", "perUserLimit",
                "allowStacking", "availableChannels",
            ),
        ),
        WizardStep(
            step_id="targeting_validity",
            title="Targeting & Validity",
            fields=("customerSegments", "startDate", "endDate"),
            required_fields=("startDate", "endDate"),
        ),
    ),
)

ANCILLARY_WIZARD = WizardDefinition(
    domain=WizardDomains.ANCILLARY,
    title="Add New Ancillary",
    submit_label="Create Ancillary",
    steps=(
        WizardStep(
            step_id="product_definition",
            title="Product Definition",
            fields=("ancillaryName", "category", "ancillaryType", "status", "description"),
            required_fields=("ancillaryName", "category", "ancillaryType"),
        ),
        WizardStep(
            step_id="rules_conditions",
            title="Rules & Conditions",
            fields=("refundable", "changeable", "transferable", "cancellationPolicy", "specialConditions"),
        ),
    ),
)

# Tabbed modal, navigated with goto_step() as well as Next/Previous
OFFER_WIZARD = WizardDefinition(
    domain=WizardDomains.OFFER,
    title="Create New Offer",
    submit_label="Create Offer",
    steps=(
        WizardStep(
            step_id="basicInfo",
            title="Basic Info",
            fields=("offerName", "offerCode", "description", "status", "basePrice", "startDate", "endDate"),
            required_fields=("offerName", "offerCode"),
        ),
        WizardStep(step_id="template", title="Template", fields=("selectedTemplate",)),
        WizardStep(step_id="ancillaries", title="Ancillaries", fields=("ancillaryServices",)),
        WizardStep(
            step_id="personalization",
            title="Personalization",
            fields=("customerSegments", "behaviorTriggers", "contextFactors"),
        ),
        WizardStep(
            step_id="dynamicPricing",
            title="Dynamic Pricing",
            fields=(
                "enableDynamicPricing", "promoCodes", "loyaltyDiscount",
                "bundleDiscount", "allowDiscountStacking",
            ),
        ),
        WizardStep(
            step_id="outputChannels",
            title="Output Channels",
            fields=(
                "enableWebsite", "websiteDisplayMode", "enableMobile",
                "mobileOptimized", "enableNDC", "enableAPI",
            ),
        ),
    ),
)

GROUP_LEADER_FIELDS = (
    "title", "firstName", "lastName", "email", "phoneNumber", "dateOfBirth",
    "nationality", "passportNumber", "passportExpiryDate", "streetAddress",
    "city", "stateProvince", "postalCode", "country", "emergencyContactName",
    "emergencyContactPhone", "emergencyContactRelationship",
)

BOOKING_FLOW = WizardDefinition(
    domain=WizardDomains.BOOKING,
    title="Group Booking",
    submit_label="Continue to Payment",
    steps=(
        WizardStep(
            step_id="trip_details",
            title="Trip Details",
            fields=(
                "origin", "destination", "departureDate", "returnDate", "adults",
                "kids", "infants", "cabin", "groupType", "specialRequests",
            ),
            required_fields=("origin", "destination", "departureDate"),
        ),
        WizardStep(
            step_id="flight_bundles",
            title="Flight Search & Bundles",
            fields=("selectedFlight", "selectedBundle"),
        ),
        WizardStep(step_id="add_services", title="Add Services", fields=("selectedServices",)),
        WizardStep(
            step_id="group_leader",
            title="Group Leader Review",
            fields=GROUP_LEADER_FIELDS,
            required_fields=tuple(
                name for name in GROUP_LEADER_FIELDS if name not in ("stateProvince", "postalCode")
            ),
        ),
        WizardStep(step_id="payment", title="Payment", fields=("paymentMethod",)),
        WizardStep(step_id="passenger_info", title="Passenger Info", fields=("passengers",)),
    ),
)

GROUP_LEADER_STEP_INDEX = 3

_DEFINITIONS: Dict[str, WizardDefinition] = {
    definition.domain: definition
    for definition in (
        POLICY_WIZARD,
        DISCOUNT_WIZARD,
        PROMO_CODE_WIZARD,
        ANCILLARY_WIZARD,
        OFFER_WIZARD,
        BOOKING_FLOW,
    )
}


def get_definition(domain: str) -> WizardDefinition:
    """Look up a wizard layout by domain name."""
    try:
        return _DEFINITIONS[domain]
    except KeyError:
        raise KeyError(f"Unknown wizard domain: {domain!r}") from None
