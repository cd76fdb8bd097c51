#!/usr/bin/env python3
"""Main entry point for Seedbed."""

import asyncio
import argparse
from dotenv import load_dotenv

load_dotenv()


def run_api():
    """Run the FastAPI server."""
    import uvicorn
    from seedbed.interface.api import app
    from seedbed.utils import setup_logging, get_settings

    settings = get_settings()
    setup_logging(settings.log_level, settings.environment)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower()
    )


async def run_once(title: str, description: str):
    """Run a single reality check and print the report."""
    from seedbed.processors.pipeline import get_pipeline
    from seedbed.utils import setup_logging, get_settings

    settings = get_settings()
    setup_logging(settings.log_level, settings.environment)

    pipeline = get_pipeline()
    report = await pipeline.run(title, description)

    print("\n" + "="*60)
    print("REALITY CHECK")
    print("="*60)
    print(f"Score: {report.score}/100 ({report.saturation.value} saturation)")
    print(f"GitHub repos: {report.evidence.github.total_count} "
          f"(top stars: {report.evidence.github.max_stars})")
    print(f"HN stories: {report.evidence.hacker_news.total_hits}")
    print(f"npm packages: {report.evidence.npm.total_count}")
    print("="*60)

    if report.top_projects:
        print("\nTOP PROJECTS:")
        for i, repo in enumerate(report.top_projects, 1):
            print(f"{i}. {repo.full_name or repo.name} ({repo.stars} stars) {repo.url}")

    if report.pivot_suggestions:
        print("\nPIVOT IDEAS:")
        for suggestion in report.pivot_suggestions:
            print(f"- {suggestion}")


def main():
    parser = argparse.ArgumentParser(
        description="Seedbed idea board"
    )
    parser.add_argument(
        "mode",
        choices=["api", "check"],
        help="Run mode: api (web server), check (single reality check)"
    )
    parser.add_argument("--title", type=str, help="Idea title for check mode")
    parser.add_argument("--description", type=str, default="", help="Idea description")

    args = parser.parse_args()

    if args.mode == "api":
        run_api()
    elif args.mode == "check":
        if not args.title:
            parser.error("--title is required in check mode")
        asyncio.run(run_once(args.title, args.description))


if __name__ == "__main__":
    main()
