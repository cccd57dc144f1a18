"""Shared claim fixtures."""

import copy

import pytest

from src.models import ClaimData


COMPLETE_CLAIM = {
    "policyInformation": {
        "policyNumber": "POL-123456",
        "policyholderName": "John Smith",
        "effectiveDates": {"startDate": "2024-01-01", "endDate": "2024-12-31"},
    },
    "incidentInformation": {
        "incidentDate": "2024-06-15",
        "incidentTime": "14:30",
        "incidentLocation": "Main St and 5th Ave, Springfield",
        "incidentDescription": "Rear-ended at a red light",
    },
    "involvedParties": {
        "claimant": {
            "name": "John Smith",
            "contactDetails": {
                "phone": "555-0100",
                "email": "john.smith@example.com",
                "address": "12 Elm St, Springfield",
            },
        },
        "thirdParties": [
            {
                "name": "Jane Doe",
                "role": "Other driver",
                "contactDetails": {"phone": "555-0199", "email": None},
            }
        ],
    },
    "assetDetails": {
        "assetType": "Vehicle",
        "assetId": "1HGCM82633A004352",
        "estimatedDamage": 5000,
    },
    "mandatoryFields": {
        "claimType": "property damage",
        "attachments": ["photos.zip"],
        "initialEstimate": 4500,
    },
}


@pytest.fixture
def claim_payload():
    """A complete claim as camelCase JSON, safe to modify."""
    return copy.deepcopy(COMPLETE_CLAIM)


@pytest.fixture
def make_claim(claim_payload):
    """Build ClaimData from the complete claim with dot-path overrides.

    Example: make_claim({"mandatoryFields.claimType": "bodily injury"})
    """
    def _make(overrides=None):
        payload = copy.deepcopy(claim_payload)
        for path, value in (overrides or {}).items():
            *parents, leaf = path.split(".")
            node = payload
            for key in parents:
                node = node[key]
            node[leaf] = value
        return ClaimData.model_validate(payload)

    return _make
