#!/usr/bin/env python3
"""Generate a sample ConsumerSearchIHIBatchSync batch.

Builds a batch with valid searches of every kind and writes the wire
form to local/search_batch.json. With --send the batch is posted to the
endpoint configured through HI_* environment variables.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from hi_client.batch import SearchBatch
from hi_client.clients import ConsumerSearchIHIBatchSyncClient
from hi_client.config import HIClientConfig
from hi_client.exceptions import HIClientError
from hi_client.generators import CountryDistribution, SearchCriteriaGenerator
from hi_client.logging import setup_logging
from hi_client.serialization import search_request_to_wire, serialize_value
from hi_client.validation import SearchKind

logger = logging.getLogger(__name__)


def build_batch(per_kind: int, seed: int, kinds: list[SearchKind]) -> SearchBatch:
    """Generate ``per_kind`` valid searches for each kind.

    Parameters
    ----------
    per_kind : int
        Searches per kind.
    seed : int
        Random seed for reproducibility.
    kinds : list[SearchKind]
        Kinds to include.

    Returns
    -------
    SearchBatch
        Batch holding ``per_kind * len(kinds)`` entries.
    """
    generator = SearchCriteriaGenerator(
        seed=seed,
        country_distribution=CountryDistribution.common_origins(),
    )
    batch = SearchBatch()
    for kind in kinds:
        for identifier, search in generator.generate_batch(kind, per_kind):
            batch.add_search(kind, identifier, search)
        logger.info("Generated %d %s searches", per_kind, kind.value)
    return batch


def save_json(batch: SearchBatch, output: Path) -> None:
    """Save the wire form of ``batch`` to ``output``."""
    output.parent.mkdir(parents=True, exist_ok=True)
    entries = [search_request_to_wire(entry) for entry in batch]
    with open(output, "w", encoding="utf-8") as f:
        json.dump(serialize_value(entries), f, indent=2, ensure_ascii=False)
    logger.info("Saved %d searches to %s", len(entries), output)


def send(batch: SearchBatch) -> int:
    """Post ``batch`` to the configured endpoint and print the response."""
    config = HIClientConfig.from_env()
    try:
        with ConsumerSearchIHIBatchSyncClient.from_config(config) as client:
            response = client.search_ihi_batch_sync(batch)
    except HIClientError as e:
        logger.error("Batch search failed: %s", e)
        return 1
    print(json.dumps(serialize_value(response), indent=2, default=str))
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate a sample IHI search batch")
    parser.add_argument("--per-kind", type=int, default=2, help="Searches per kind (default: 2)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument(
        "--kind",
        action="append",
        choices=[kind.value for kind in SearchKind],
        help="Search kind to include; repeatable (default: all)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=project_root / "local" / "search_batch.json",
        help="Output file",
    )
    parser.add_argument("--send", action="store_true", help="Post the batch to the configured endpoint")
    parser.add_argument("--log-level", default="INFO", help="Log level (default: INFO)")
    parser.add_argument("--log-soap", action="store_true", help="Log SOAP envelopes (contain patient data)")
    args = parser.parse_args()

    setup_logging(level=args.log_level, log_soap=args.log_soap)

    kinds = [SearchKind(kind) for kind in args.kind] if args.kind else list(SearchKind)
    batch = build_batch(args.per_kind, args.seed, kinds)
    save_json(batch, args.output)

    if args.send:
        return send(batch)
    return 0


if __name__ == "__main__":
    sys.exit(main())
