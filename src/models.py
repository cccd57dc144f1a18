"""Data models for FNOL (First Notice of Loss) claim routing."""

from typing import Optional, List, Tuple
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.constants import Route


class ClaimModel(BaseModel):
    """Base for claim records: camelCase on the wire, frozen, closed shape."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )


class EffectiveDates(ClaimModel):
    """Policy coverage period."""

    start_date: Optional[str] = Field(..., description="Policy start date (ISO 8601)")
    end_date: Optional[str] = Field(..., description="Policy end date (ISO 8601)")


class PolicyInformation(ClaimModel):
    """Policy the claim is filed against."""

    policy_number: Optional[str] = Field(..., description="Policy number")
    policyholder_name: Optional[str] = Field(..., description="Name of the policyholder")
    effective_dates: Optional[EffectiveDates] = Field(..., description="Policy effective dates")


class IncidentInformation(ClaimModel):
    """When, where and how the loss occurred."""

    incident_date: Optional[str] = Field(..., description="Date of incident (ISO 8601)")
    incident_time: Optional[str] = Field(..., description="Time of incident")
    incident_location: Optional[str] = Field(..., description="Location where incident occurred")
    incident_description: Optional[str] = Field(..., description="Description of how the incident occurred")


class ClaimantContactDetails(ClaimModel):
    """How to reach the claimant."""

    phone: Optional[str] = Field(..., description="Contact phone number")
    email: Optional[str] = Field(..., description="Contact email address")
    address: Optional[str] = Field(..., description="Postal address")


class Claimant(ClaimModel):
    """Person filing the claim."""

    name: Optional[str] = Field(..., description="Name of the claimant")
    contact_details: Optional[ClaimantContactDetails] = Field(..., description="Claimant contact details")


class ThirdPartyContactDetails(ClaimModel):
    """How to reach a third party."""

    phone: Optional[str] = Field(..., description="Contact phone number")
    email: Optional[str] = Field(..., description="Contact email address")


class ThirdParty(ClaimModel):
    """Another party involved in the incident."""

    name: Optional[str] = Field(..., description="Name of the third party")
    role: Optional[str] = Field(..., description="Role in the incident (e.g., other driver, witness)")
    contact_details: Optional[ThirdPartyContactDetails] = Field(..., description="Third party contact details")


class InvolvedParties(ClaimModel):
    """People involved in the incident."""

    claimant: Optional[Claimant] = Field(..., description="Person filing the claim")
    third_parties: Optional[List[ThirdParty]] = Field(..., description="Other parties, in document order")


class AssetDetails(ClaimModel):
    """The insured asset that was damaged."""

    asset_type: Optional[str] = Field(..., description="Type of asset (e.g., vehicle, property)")
    asset_id: Optional[str] = Field(..., description="Asset identifier (e.g., VIN, property ID)")
    estimated_damage: Optional[float] = Field(..., description="Estimated damage amount in dollars")


class MandatoryFields(ClaimModel):
    """Claim type, attachments and initial estimate."""

    claim_type: Optional[str] = Field(..., description="Type of claim (e.g., property damage, bodily injury)")
    attachments: Optional[List[str]] = Field(..., description="Names of attached documents")
    initial_estimate: Optional[float] = Field(..., description="Initial loss estimate in dollars")


class ClaimData(ClaimModel):
    """Structured claim record extracted from an FNOL document.

    Every field must be present; absent information is an explicit null.
    Amounts and dates are not range-checked here so that the validation
    engine can report bad values instead of the record being rejected.
    """

    policy_information: PolicyInformation
    incident_information: IncidentInformation
    involved_parties: InvolvedParties
    asset_details: AssetDetails
    mandatory_fields: MandatoryFields


class ValidationResult(ClaimModel):
    """Outcome of the completeness and semantic checks on a claim."""

    is_valid: bool = Field(..., description="True when nothing is missing and there are no errors")
    missing_fields: Tuple[str, ...] = Field(..., description="Dot-paths of missing mandatory fields, in declared order")
    errors: Tuple[str, ...] = Field(..., description="Human-readable descriptions of invalid values")


class RoutingDecision(ClaimModel):
    """Workflow a claim is assigned to and the rules that put it there."""

    route: str = Field(..., description="Assigned route label")
    priority: int = Field(..., description="Priority level from 1 (highest) to 5 (lowest)", ge=1, le=5)
    triggered_rules: Tuple[str, ...] = Field(..., description="Business rules that produced this decision")


class ClaimProcessingResult(ClaimModel):
    """Full result of processing one claim."""

    extracted_fields: ClaimData
    missing_fields: List[str] = Field(default_factory=list, description="Dot-paths of missing mandatory fields")
    recommended_route: str = Field(..., description="Assigned route label")
    reasoning: str = Field(..., description="Narrative explanation of the routing decision")
    triggered_rules: List[str] = Field(default_factory=list, description="Business rules that fired")


class BatchClaimProcessingResult(ClaimModel):
    """Container for the results of several processed claims."""

    results: List[ClaimProcessingResult] = Field(default_factory=list, description="Results in input order")

    def get_route_breakdown(self) -> dict:
        """Get count of claims by route.

        Returns:
            Dictionary with counts for each route label
        """
        breakdown = {route.value: 0 for route in Route}
        for result in self.results:
            if result.recommended_route in breakdown:
                breakdown[result.recommended_route] += 1
        return breakdown
