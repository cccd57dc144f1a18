"""Main application module."""

import json
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional, Union

from src.config import Settings, load_settings
from src.explanation import generate_explanation
from src.extraction import extract_claim_data
from src.models import ClaimData, ClaimProcessingResult, BatchClaimProcessingResult
from src.parser import parse_document
from src.routing import determine_route
from src.validation import validate

logger = logging.getLogger(__name__)


def process_claim(data: ClaimData) -> ClaimProcessingResult:
    """Validate, route and explain an already-extracted claim.

    Validation errors are logged but only missing fields take part in
    routing.

    Args:
        data: Claim data produced by extraction

    Returns:
        ClaimProcessingResult with route, reasoning and triggered rules
    """
    validation = validate(data)
    if validation.errors:
        logger.warning("Validation errors: %s", list(validation.errors))
    if validation.missing_fields:
        logger.warning("Missing fields: %s", list(validation.missing_fields))

    decision = determine_route(data, validation.missing_fields)
    logger.info("Route: %s (priority %d)", decision.route, decision.priority)

    reasoning = generate_explanation(data, decision, validation.missing_fields)

    return ClaimProcessingResult(
        extracted_fields=data,
        missing_fields=list(validation.missing_fields),
        recommended_route=decision.route,
        reasoning=reasoning,
        triggered_rules=list(decision.triggered_rules),
    )


def process_document(file_path: Union[str, Path], settings: Optional[Settings] = None) -> ClaimProcessingResult:
    """Parse an FNOL document, extract its claim data with the LLM and process it.

    Raises:
        ValueError: If the document cannot be read or extraction fails
    """
    settings = settings or load_settings()
    raw_text = parse_document(file_path, max_file_size_mb=settings.max_file_size_mb)
    logger.info("Extracted %d characters of text from %s", len(raw_text), file_path)

    data = extract_claim_data(raw_text, settings)
    return process_claim(data)


def load_claim_data(file_path: Union[str, Path]) -> ClaimData:
    """Load already-extracted claim data from a JSON file.

    Raises:
        ValueError: If the file is missing, not JSON, or does not match the schema
    """
    path = Path(file_path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ValueError(f"Could not read claim data from {path}: {e}") from e
    return ClaimData.model_validate(payload)


def process_claims_batch(claims: Iterable[ClaimData]) -> BatchClaimProcessingResult:
    """Process several extracted claims in order."""
    return BatchClaimProcessingResult(results=[process_claim(claim) for claim in claims])


def _print_result(label: str, result: ClaimProcessingResult) -> None:
    print("\n" + "=" * 80)
    print(f"CLAIM: {label}")
    print("=" * 80)
    print(f"Route: {result.recommended_route}")
    if result.missing_fields:
        print(f"Missing Fields: {', '.join(result.missing_fields)}")
    print("Triggered Rules:")
    for rule in result.triggered_rules:
        print(f"  - {rule}")
    print("-" * 80)
    print(result.reasoning)


def main(argv: Optional[list] = None):
    """Entry point for the application - process FNOL documents into routed claims."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Validate and route FNOL claims, explaining each routing decision"
    )
    parser.add_argument(
        "--input",
        "-i",
        type=str,
        nargs="+",
        required=True,
        help="FNOL documents (.pdf, .txt), or claim JSON files with --extracted"
    )
    parser.add_argument(
        "--extracted",
        "-e",
        action="store_true",
        help="Treat inputs as already-extracted claim JSON (no LLM call)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        results = []
        if args.extracted:
            batch = process_claims_batch(load_claim_data(path) for path in args.input)
            results = batch.results
        else:
            settings = load_settings()
            for path in args.input:
                input_path = Path(path)
                if not input_path.exists():
                    print(f"Error: Input file not found: {input_path}", file=sys.stderr)
                    sys.exit(1)
                results.append(process_document(input_path, settings))
            batch = BatchClaimProcessingResult(results=results)

        if args.json:
            payload = [result.model_dump(mode="json", by_alias=True) for result in results]
            print(json.dumps(payload if len(payload) > 1 else payload[0], indent=2))
            return

        for path, result in zip(args.input, results):
            _print_result(path, result)

        if len(results) > 1:
            print("\n" + "=" * 80)
            print("ROUTING STATISTICS")
            print("=" * 80)
            for route, count in batch.get_route_breakdown().items():
                print(f"  {route}: {count} claim(s)")
            print("=" * 80)

    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
