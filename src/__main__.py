"""Main entry point for Pain Point Priority Scout."""

import argparse
import json
import sys
from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from .orchestrator.ranking import PriorityRanker, RankingBatch, RankingResult
from .scoring.errors import InvalidInput
from .utils.config import get_config
from .utils.logger import setup_logging


def load_batch(path: Path) -> RankingBatch:
    """Load a ranking batch from a JSON or YAML file.

    Args:
        path: Path to the batch file

    Returns:
        RankingBatch instance
    """
    with open(path, "r", encoding="utf-8") as f:
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    # A bare list is shorthand for {"clusters": [...]}
    if isinstance(data, list):
        data = {"clusters": data}

    return RankingBatch.model_validate(data)


def format_ranking(result: RankingResult) -> str:
    """Render a ranking as a plain text table."""
    quality = result.data_quality
    lines = [
        f"Data quality: {quality.level.value} "
        f"(total={quality.total_data_size}, clusters={quality.cluster_count}, "
        f"avg size={quality.average_cluster_size})",
        "",
        f"{'LEVEL':<8} {'OVERALL':>7} {'DEMAND':>6} {'MARKET':>6} {'COMP':>5}  CLUSTER",
    ]

    for group, clusters in result.groups.items():
        for cluster in clusters:
            name = cluster.id if not cluster.label else f"{cluster.id} {cluster.label}"
            score = cluster.priority_score
            if score is None:
                lines.append(f"{group:<8} {'-':>7} {'-':>6} {'-':>6} {'-':>5}  {name}")
                continue
            lines.append(
                f"{group:<8} {score['overall']:>7.1f} {score['demand_intensity']:>6.1f} "
                f"{score['market_size']:>6.1f} {score['competition']:>5.1f}  {name}"
            )

    return "\n".join(lines)


def run_ranking(batch_file: str, as_json: bool = False):
    """Rank a batch file and print the result.

    Args:
        batch_file: Path to a JSON or YAML batch file
        as_json: Print JSON instead of a table
    """
    config = get_config()
    setup_logging()

    logger.info(f"Ranking clusters from {batch_file}")

    batch = load_batch(Path(batch_file))
    ranker = PriorityRanker(config.model_dump())
    result = ranker.rank(batch)

    if as_json:
        print(json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2))
    else:
        print(format_ranking(result))


def run_api():
    """Run the FastAPI server."""
    import uvicorn

    from .api.main import app

    config = get_config()
    setup_logging()

    logger.info("=" * 80)
    logger.info("Pain Point Priority Scout API - Starting")
    logger.info("=" * 80)

    uvicorn.run(
        app,
        host=config.api.host,
        port=config.api.port,
        log_level="info",
    )


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Pain Point Priority Scout")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Rank command
    rank_parser = subparsers.add_parser("rank", help="Rank the clusters of a batch file")
    rank_parser.add_argument("batch_file", help="JSON or YAML file with the batch's clusters")
    rank_parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")

    # API command
    subparsers.add_parser("api", help="Run the API server")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == "rank":
            run_ranking(args.batch_file, as_json=args.json)
        elif args.command == "api":
            run_api()
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except (InvalidInput, ValidationError, json.JSONDecodeError, yaml.YAMLError, OSError) as e:
        logger.error(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
