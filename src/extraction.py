"""LLM extraction of structured claim data from FNOL text."""

import json
import logging
import time
from typing import Optional

from google import genai
from google.genai import errors, types

from src.config import Settings, load_settings
from src.models import ClaimData

logger = logging.getLogger(__name__)

RETRY_BACKOFF_SECONDS = 1.0

SYSTEM_PROMPT = """You are an expert insurance claims data extraction system. Your task is to extract structured information from First Notice of Loss (FNOL) insurance documents.

CRITICAL RULES:
1. Output ONLY valid JSON - no additional text, explanations, or markdown
2. NEVER hallucinate or infer missing values
3. Return null for any field that is not explicitly stated in the document
4. Normalize currency values to numbers only (remove $, commas)
5. Normalize dates to ISO 8601 format (YYYY-MM-DD)
6. Ignore legal disclaimer sections
7. Be precise - only extract what is clearly stated

You must follow the exact schema structure provided in the user prompt."""


def build_extraction_prompt(raw_text: str) -> str:
    """Build the extraction prompt with the output schema and document text."""
    return f"""Extract structured claim data from the following FNOL document.

OUTPUT SCHEMA (you must follow this exactly, every key must be present):
{{
  "policyInformation": {{
    "policyNumber": string | null,
    "policyholderName": string | null,
    "effectiveDates": {{
      "startDate": string (ISO 8601) | null,
      "endDate": string (ISO 8601) | null
    }} | null
  }},
  "incidentInformation": {{
    "incidentDate": string (ISO 8601) | null,
    "incidentTime": string | null,
    "incidentLocation": string | null,
    "incidentDescription": string | null
  }},
  "involvedParties": {{
    "claimant": {{
      "name": string | null,
      "contactDetails": {{
        "phone": string | null,
        "email": string | null,
        "address": string | null
      }} | null
    }} | null,
    "thirdParties": array of {{
      "name": string | null,
      "role": string | null,
      "contactDetails": {{
        "phone": string | null,
        "email": string | null
      }} | null
    }} | null
  }},
  "assetDetails": {{
    "assetType": string | null,
    "assetId": string | null,
    "estimatedDamage": number | null
  }},
  "mandatoryFields": {{
    "claimType": string | null,
    "attachments": array of strings | null,
    "initialEstimate": number | null
  }}
}}

DOCUMENT TEXT:
{raw_text}

Extract the data and return ONLY the JSON object. Do not include any other text."""


def extract_claim_data(raw_text: str, settings: Optional[Settings] = None) -> ClaimData:
    """Extract structured claim data from cleaned FNOL text.

    The model is called up to ``settings.llm_max_retries`` times; an API error,
    an empty reply, invalid JSON or a reply that does not match the claim
    schema counts as a failed attempt. Attempts are spaced by a linearly
    growing delay.

    Args:
        raw_text: Cleaned text from the document parser
        settings: Pipeline settings, loaded from the environment if omitted

    Returns:
        ClaimData parsed from the model response

    Raises:
        ValueError: If GOOGLE_API_KEY is not set or every attempt fails
    """
    settings = settings or load_settings()
    client = genai.Client(api_key=settings.require_api_key())
    prompt = build_extraction_prompt(raw_text)

    last_error = None
    for attempt in range(1, settings.llm_max_retries + 1):
        try:
            response = client.models.generate_content(
                model=settings.llm_model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    system_instruction=SYSTEM_PROMPT,
                    temperature=settings.llm_temperature,
                    response_mime_type="application/json",
                ),
            )
            return parse_claim_response(response.text)
        except (errors.APIError, ValueError) as e:
            last_error = e
            logger.warning("Extraction attempt %d/%d failed: %s", attempt, settings.llm_max_retries, e)
            if attempt < settings.llm_max_retries:
                time.sleep(RETRY_BACKOFF_SECONDS * attempt)

    raise ValueError(f"LLM extraction failed after {settings.llm_max_retries} attempts: {last_error}")


def parse_claim_response(response_text: Optional[str]) -> ClaimData:
    """Parse a model reply into ClaimData.

    Raises:
        ValueError: If the reply is empty, not JSON, or does not match the schema
    """
    if not response_text or not response_text.strip():
        raise ValueError("Empty response from LLM")

    payload = json.loads(_strip_json_fences(response_text))
    return ClaimData.model_validate(payload)


def _strip_json_fences(text: str) -> str:
    # Remove markdown code blocks if present
    text = text.strip()
    if text.startswith("```json"):
        text = text[7:]
    if text.startswith("```"):
        text = text[3:]
    if text.endswith("```"):
        text = text[:-3]
    text = text.strip()

    # Keep only the outermost JSON object
    first_brace = text.find("{")
    last_brace = text.rfind("}")
    if first_brace != -1 and last_brace != -1 and last_brace > first_brace:
        text = text[first_brace:last_brace + 1]
    return text
