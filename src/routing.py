"""Rule-based routing of claims to downstream workflows."""

from decimal import Decimal
from typing import Optional, Sequence

from src.constants import (
    Route,
    ROUTE_PRIORITIES,
    FRAUD_INDICATORS,
    INJURY_CLAIM_TYPES,
    FAST_TRACK_THRESHOLD,
)
from src.models import ClaimData, RoutingDecision


def determine_route(data: ClaimData, missing_fields: Sequence[str]) -> RoutingDecision:
    """Determine the workflow for a claim.

    Rules are evaluated in priority order and the first match wins:

    1. Investigation: fraud indicators in the incident description
    2. Manual Review: any mandatory field missing
    3. Specialist Queue: injury or medical claim type
    4. Fast Track: damage amount below the fast track threshold
    5. Standard Processing: everything else

    Args:
        data: Extracted claim data
        missing_fields: Missing mandatory fields from validation

    Returns:
        RoutingDecision with route, priority and triggered rules
    """
    if has_fraud_indicators(data):
        return _decision(Route.INVESTIGATION, "Fraud indicators detected in incident description")

    if missing_fields:
        return _decision(Route.MANUAL_REVIEW, f"Missing mandatory fields: {', '.join(missing_fields)}")

    if is_injury_claim(data):
        return _decision(Route.SPECIALIST_QUEUE, "Claim type indicates injury or medical attention required")

    if is_low_damage_claim(data):
        amount = effective_damage_amount(data)
        return _decision(
            Route.FAST_TRACK,
            f"Estimated damage (${format_number(amount)}) is below fast track threshold (${FAST_TRACK_THRESHOLD})",
        )

    return _decision(Route.STANDARD_PROCESSING, "No special conditions detected, routing to standard processing")


def _decision(route: Route, *rules: str) -> RoutingDecision:
    return RoutingDecision(
        route=route.value,
        priority=ROUTE_PRIORITIES[route],
        triggered_rules=rules,
    )


def _contains_any(text: Optional[str], terms: Sequence[str]) -> bool:
    haystack = (text or "").lower()
    return any(term.lower() in haystack for term in terms)


def has_fraud_indicators(data: ClaimData) -> bool:
    """Check if the incident description contains fraud indicators."""
    return _contains_any(data.incident_information.incident_description, FRAUD_INDICATORS)


def is_injury_claim(data: ClaimData) -> bool:
    """Check if the claim type is injury-related."""
    return _contains_any(data.mandatory_fields.claim_type, INJURY_CLAIM_TYPES)


def effective_damage_amount(data: ClaimData) -> Optional[float]:
    """Damage amount used for routing: estimated damage, else initial estimate."""
    if data.asset_details.estimated_damage is not None:
        return data.asset_details.estimated_damage
    return data.mandatory_fields.initial_estimate


def is_low_damage_claim(data: ClaimData) -> bool:
    """Check if the claim is eligible for fast track based on its amount."""
    amount = effective_damage_amount(data)
    if amount is None:
        return False
    return amount < FAST_TRACK_THRESHOLD


def format_number(amount: float) -> str:
    """Render an amount the way it appears in JSON: 5000, 5000.5, 0.00001."""
    value = float(amount)
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    # Positional notation down to 1e-6, exponent only below that
    if "e" in text and 1e-6 <= abs(value) < 1e21:
        return format(Decimal(text), "f")
    return text
