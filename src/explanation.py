"""Human-readable explanations for routing decisions."""

from typing import Sequence

from src.constants import NEXT_STEPS, DEFAULT_NEXT_STEPS
from src.models import ClaimData, RoutingDecision
from src.routing import effective_damage_amount


def generate_explanation(
    data: ClaimData,
    decision: RoutingDecision,
    missing_fields: Sequence[str],
) -> str:
    """Generate the reasoning narrative for a routing decision.

    Args:
        data: Extracted claim data
        decision: Routing decision with triggered rules
        missing_fields: Missing mandatory fields from validation

    Returns:
        Multi-section explanation joined by newlines
    """
    parts = [f"This claim has been routed to **{decision.route}** based on the following analysis:"]

    if decision.triggered_rules:
        parts.append("\n**Decision Factors:**")
        for idx, rule in enumerate(decision.triggered_rules, 1):
            parts.append(f"{idx}. {rule}")

    parts.append("\n**Claim Summary:**")
    parts.extend(_claim_summary(data))

    if missing_fields:
        parts.append("\n**⚠️ Missing Required Information:**")
        for field in missing_fields:
            parts.append(f"- {format_field_name(field)}")

    parts.append("\n**Next Steps:**")
    parts.append(get_next_steps(decision.route))

    return "\n".join(parts)


def _claim_summary(data: ClaimData) -> list[str]:
    lines = []
    if data.policy_information.policy_number:
        lines.append(f"- Policy Number: {data.policy_information.policy_number}")
    if data.mandatory_fields.claim_type:
        lines.append(f"- Claim Type: {data.mandatory_fields.claim_type}")

    amount = effective_damage_amount(data)
    if amount is not None:
        lines.append(f"- Estimated Damage: ${format_currency(amount)}")

    if data.incident_information.incident_date:
        lines.append(f"- Incident Date: {data.incident_information.incident_date}")
    if data.incident_information.incident_location:
        lines.append(f"- Location: {data.incident_information.incident_location}")
    return lines


def format_field_name(field_path: str) -> str:
    """Format a dot-path for display: 'mandatoryFields.claimType' -> 'MandatoryFields > ClaimType'."""
    return " > ".join(part[:1].upper() + part[1:] for part in field_path.split("."))


def format_currency(amount: float) -> str:
    """Format an amount with thousands separators and at most 3 decimals."""
    if float(amount).is_integer():
        return f"{int(amount):,}"
    return f"{amount:,.3f}".rstrip("0").rstrip(".")


def get_next_steps(route: str) -> str:
    """Next-steps sentence for a route label."""
    return NEXT_STEPS.get(route, DEFAULT_NEXT_STEPS)
