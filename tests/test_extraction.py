"""Tests for LLM claim extraction."""

import json
import os
import pytest
from unittest.mock import Mock, patch

from src.config import Settings
from src.extraction import extract_claim_data, parse_claim_response, build_extraction_prompt
from src.models import ClaimData


def _response(text):
    response = Mock()
    response.text = text
    return response


def test_extract_claim_data_success(claim_payload):
    """Test successful extraction of a single claim."""
    settings = Settings(google_api_key="test-key")

    with patch("src.extraction.genai.Client") as mock_client:
        mock_instance = mock_client.return_value
        mock_instance.models.generate_content.return_value = _response(json.dumps(claim_payload))

        result = extract_claim_data("FNOL text", settings)

    assert isinstance(result, ClaimData)
    assert result.policy_information.policy_number == "POL-123456"
    mock_client.assert_called_once_with(api_key="test-key")
    call_kwargs = mock_instance.models.generate_content.call_args.kwargs
    assert call_kwargs["model"] == "gemini-2.5-flash"
    assert "FNOL text" in call_kwargs["contents"]


def test_extract_claim_data_strips_markdown_fences(claim_payload):
    """Test that a fenced JSON reply is still parsed."""
    fenced = "```json\n" + json.dumps(claim_payload) + "\n```"
    settings = Settings(google_api_key="test-key")

    with patch("src.extraction.genai.Client") as mock_client:
        mock_client.return_value.models.generate_content.return_value = _response(fenced)

        result = extract_claim_data("FNOL text", settings)

    assert result.mandatory_fields.claim_type == "property damage"


def test_extract_claim_data_retries_then_succeeds(claim_payload):
    """Test that a bad reply is retried with backoff."""
    settings = Settings(google_api_key="test-key", llm_max_retries=3)

    with patch("src.extraction.genai.Client") as mock_client, \
            patch("src.extraction.time.sleep") as mock_sleep:
        mock_client.return_value.models.generate_content.side_effect = [
            _response("not json at all"),
            _response(json.dumps(claim_payload)),
        ]

        result = extract_claim_data("FNOL text", settings)

    assert result.policy_information.policyholder_name == "John Smith"
    assert mock_client.return_value.models.generate_content.call_count == 2
    mock_sleep.assert_called_once_with(1.0)


def test_extract_claim_data_gives_up_after_max_retries():
    """Test that ValueError is raised once every attempt has failed."""
    settings = Settings(google_api_key="test-key", llm_max_retries=3)

    with patch("src.extraction.genai.Client") as mock_client, \
            patch("src.extraction.time.sleep") as mock_sleep:
        mock_client.return_value.models.generate_content.return_value = _response(None)

        with pytest.raises(ValueError, match="LLM extraction failed after 3 attempts: Empty response from LLM"):
            extract_claim_data("FNOL text", settings)

    assert mock_client.return_value.models.generate_content.call_count == 3
    assert [c.args[0] for c in mock_sleep.call_args_list] == [1.0, 2.0]


def test_extract_claim_data_retries_on_schema_mismatch(claim_payload):
    """Test that a reply missing keys counts as a failed attempt."""
    del claim_payload["assetDetails"]
    settings = Settings(google_api_key="test-key", llm_max_retries=1)

    with patch("src.extraction.genai.Client") as mock_client:
        mock_client.return_value.models.generate_content.return_value = _response(json.dumps(claim_payload))

        with pytest.raises(ValueError, match="LLM extraction failed after 1 attempts"):
            extract_claim_data("FNOL text", settings)


def test_extract_claim_data_missing_api_key():
    """Test that ValueError is raised when API key is missing."""
    with patch.dict(os.environ, {}, clear=True):
        with pytest.raises(ValueError, match="GOOGLE_API_KEY environment variable is not set"):
            extract_claim_data("FNOL text")


def test_parse_claim_response_ignores_surrounding_text(claim_payload):
    """Test that text around the JSON object is dropped."""
    text = "Here is the data: " + json.dumps(claim_payload) + " Let me know!"

    result = parse_claim_response(text)

    assert result.incident_information.incident_time == "14:30"


def test_build_extraction_prompt_contains_schema_and_text():
    """Test that the prompt carries the schema keys and the document."""
    prompt = build_extraction_prompt("Policy POL-1 was in a crash")

    assert '"mandatoryFields"' in prompt
    assert '"initialEstimate": number | null' in prompt
    assert prompt.rstrip().endswith("Do not include any other text.")
    assert "Policy POL-1 was in a crash" in prompt
