"""Routing rules, fraud indicators and other fixed business tables."""

from enum import Enum
from types import MappingProxyType


class Route(str, Enum):
    """Downstream workflows a claim can be assigned to."""

    INVESTIGATION = "Investigation"
    MANUAL_REVIEW = "Manual Review"
    SPECIALIST_QUEUE = "Specialist Queue"
    FAST_TRACK = "Fast Track"
    STANDARD_PROCESSING = "Standard Processing"


# 1 is the most urgent
ROUTE_PRIORITIES = MappingProxyType({
    Route.INVESTIGATION: 1,
    Route.MANUAL_REVIEW: 2,
    Route.SPECIALIST_QUEUE: 3,
    Route.FAST_TRACK: 4,
    Route.STANDARD_PROCESSING: 5,
})

FRAUD_INDICATORS = (
    "fraud",
    "fraudulent",
    "fake",
    "suspicious",
    "fabricated",
    "staged",
    "false claim",
    "questionable",
    "dishonest",
    "deceptive",
    "misleading",
    "exaggerated",
    "inconsistent story",
    "tampered",
    "altered",
)

INJURY_CLAIM_TYPES = (
    "injury",
    "medical",
    "bodily injury",
    "personal injury",
    "health",
    "accident injury",
)

FAST_TRACK_THRESHOLD = 25000  # USD

NEXT_STEPS = MappingProxyType({
    Route.INVESTIGATION.value: "This claim will be reviewed by the fraud investigation team for further assessment.",
    Route.MANUAL_REVIEW.value: "An adjuster will contact the claimant to gather missing information before processing.",
    Route.SPECIALIST_QUEUE.value: "This claim will be assigned to a medical specialist for evaluation and settlement.",
    Route.FAST_TRACK.value: "This claim qualifies for expedited processing. Settlement decision expected within 2-3 business days.",
    Route.STANDARD_PROCESSING.value: "This claim will follow the standard review process. Expected processing time: 5-7 business days.",
})

DEFAULT_NEXT_STEPS = "This claim will be processed according to standard procedures."
