#!/usr/bin/env python3
"""
Re-run the reality check for stored ideas and save the new reports.

Run with: python scripts/rescan_ideas.py [--status draft] [--missing-only]
"""

import asyncio
import argparse
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from seedbed.database import get_repository
from seedbed.processors.pipeline import get_pipeline
from seedbed.utils import setup_logging, get_logger, STATUSES

logger = get_logger(__name__)


async def rescan_ideas(status=None, missing_only: bool = False) -> dict:
    """
    Rescan ideas one at a time.

    Args:
        status: Only rescan ideas in this board column
        missing_only: Skip ideas that already have a reality check

    Returns:
        Mapping of idea id to (title, new score), score -1 if the scan failed
    """
    repository = get_repository()
    pipeline = get_pipeline()

    ideas = await repository.list()
    if status:
        ideas = [i for i in ideas if i.status.value == status]
    if missing_only:
        ideas = [i for i in ideas if i.reality_check is None]

    logger.info(f"Rescanning {len(ideas)} ideas")

    results = {}
    for idea in ideas:
        try:
            report = await pipeline.run_for_idea(repository, idea.id)
            results[str(idea.id)] = (idea.title, report.score)
        except Exception as e:
            logger.error("Rescan failed", idea_id=str(idea.id), error=str(e))
            results[str(idea.id)] = (idea.title, -1)
    return results


async def main():
    parser = argparse.ArgumentParser(description="Rescan stored ideas")
    parser.add_argument(
        "--status",
        type=str,
        choices=STATUSES,
        help="Only rescan ideas with this status"
    )
    parser.add_argument(
        "--missing-only",
        action="store_true",
        help="Only scan ideas without a reality check"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"]
    )
    args = parser.parse_args()

    setup_logging(args.log_level)

    results = await rescan_ideas(status=args.status, missing_only=args.missing_only)

    print(f"\n{'='*60}")
    print(f"Rescanned {len(results)} ideas")
    print(f"{'='*60}")
    for idea_id, (title, score) in results.items():
        state = f"{score}/100" if score >= 0 else "FAILED"
        print(f"  {idea_id} {title}: {state}")


if __name__ == "__main__":
    asyncio.run(main())
