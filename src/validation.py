"""Completeness and data-quality checks for extracted claims."""

import math
from datetime import datetime
from typing import Any, Callable, NamedTuple, Optional

from src.models import ClaimData, ValidationResult


class FieldCheck(NamedTuple):
    """A dot-path paired with a null-safe accessor into ClaimData."""

    path: str
    resolve: Callable[[ClaimData], Any]


def _effective_dates(data: ClaimData):
    return data.policy_information.effective_dates


MANDATORY_FIELDS = (
    FieldCheck("policyInformation.policyNumber", lambda d: d.policy_information.policy_number),
    FieldCheck("policyInformation.policyholderName", lambda d: d.policy_information.policyholder_name),
    FieldCheck("incidentInformation.incidentDate", lambda d: d.incident_information.incident_date),
    FieldCheck("incidentInformation.incidentLocation", lambda d: d.incident_information.incident_location),
    FieldCheck("incidentInformation.incidentDescription", lambda d: d.incident_information.incident_description),
    FieldCheck("involvedParties.claimant", lambda d: d.involved_parties.claimant),
    FieldCheck("mandatoryFields.claimType", lambda d: d.mandatory_fields.claim_type),
    FieldCheck("mandatoryFields.initialEstimate", lambda d: d.mandatory_fields.initial_estimate),
)

NUMERIC_FIELDS = (
    FieldCheck("assetDetails.estimatedDamage", lambda d: d.asset_details.estimated_damage),
    FieldCheck("mandatoryFields.initialEstimate", lambda d: d.mandatory_fields.initial_estimate),
)

DATE_FIELDS = (
    FieldCheck("incidentInformation.incidentDate", lambda d: d.incident_information.incident_date),
    FieldCheck(
        "policyInformation.effectiveDates.startDate",
        lambda d: _effective_dates(d).start_date if _effective_dates(d) else None,
    ),
    FieldCheck(
        "policyInformation.effectiveDates.endDate",
        lambda d: _effective_dates(d).end_date if _effective_dates(d) else None,
    ),
)

# Written forms tried after ISO 8601
_DATE_FORMATS = (
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%m-%d-%Y",
    "%B %d, %Y",
    "%B %d %Y",
    "%b %d, %Y",
    "%b %d %Y",
    "%d %B %Y",
    "%d %b %Y",
)


def validate(data: ClaimData) -> ValidationResult:
    """Validate extracted claim data.

    Collects missing mandatory fields in declared order, then checks amounts
    and dates. Invalid values are reported in ``errors`` and never affect
    ``missing_fields``.

    Args:
        data: Claim data produced by extraction

    Returns:
        ValidationResult with missing fields and error messages
    """
    missing_fields = [check.path for check in MANDATORY_FIELDS if _is_missing(check.resolve(data))]

    errors = []
    errors.extend(_validate_numeric_fields(data))
    errors.extend(_validate_date_fields(data))

    return ValidationResult(
        is_valid=not missing_fields and not errors,
        missing_fields=tuple(missing_fields),
        errors=tuple(errors),
    )


def _is_missing(value: Any) -> bool:
    # Zero, NaN and "" count as missing, same as null
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0 or math.isnan(value)
    return False


def _validate_numeric_fields(data: ClaimData) -> list[str]:
    errors = []
    for check in NUMERIC_FIELDS:
        value = check.resolve(data)
        if value is None:
            continue
        if not isinstance(value, (int, float)) or not math.isfinite(value):
            errors.append(f"{check.path} must be a valid number")
        elif value < 0:
            errors.append(f"{check.path} cannot be negative")
    return errors


def _validate_date_fields(data: ClaimData) -> list[str]:
    errors = []
    for check in DATE_FIELDS:
        value = check.resolve(data)
        if value is not None and not is_valid_date(value):
            errors.append(f"{check.path} must be a valid date")
    return errors


def is_valid_date(value: str) -> bool:
    """Check whether a string parses as a calendar date."""
    return _parse_date(value) is not None


def _parse_date(value: str) -> Optional[datetime]:
    text = value.strip()
    if not text:
        return None
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None
