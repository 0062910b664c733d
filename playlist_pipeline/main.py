"""
Playlist Insights - Analysis Pipeline
Fetch, aggregate and report on a YouTube playlist.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .core.ai import PlaylistInsightGenerator
from .core.config import AppConfig, ConfigLoader, ConfigValidationError
from .core.errors import PlaylistAnalysisError, ValidationError
from .core.session import AnalysisSession
from .report import build_video_table, format_binge_message, render_report

DEFAULT_CONFIG_PATH = Path("config.yaml")


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """Configure logging with file and console handlers."""
    logs_dir = Path("logs")
    logs_dir.mkdir(exist_ok=True)

    log_file = logs_dir / "app.log"

    log_format = "%(asctime)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format=log_format,
        datefmt=date_format,
        handlers=[
            logging.FileHandler(log_file, mode='a', encoding='utf-8'),
            logging.StreamHandler()
        ]
    )

    return logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Playlist Insights - YouTube playlist analysis")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH,
                        help="Path to the YAML configuration file.")
    parser.add_argument("--playlist-url", type=str, help="Playlist URL (overrides config).")
    parser.add_argument("--api-key", type=str, help="Google Cloud API key (overrides config).")
    parser.add_argument("--hours", type=str, help="Daily watch hours for the binge estimate.")
    parser.add_argument("--minutes", type=str, help="Daily watch minutes for the binge estimate.")
    parser.add_argument("--insights", nargs="+", choices=["summary", "learning-path", "faq"], default=[],
                        help="Generate AI insights with Gemini.")
    parser.add_argument("--export-csv", type=Path, help="Write the video table to this CSV file.")
    return parser.parse_args(argv)


def load_configuration(args: argparse.Namespace) -> AppConfig:
    """
    Load configuration from YAML, letting command-line flags override it.
    Without a config file, --api-key alone is enough.
    """
    if args.config.exists():
        config = ConfigLoader(args.config, api_key_override=args.api_key).load()
    elif args.api_key:
        config = AppConfig(api_key=args.api_key)
    else:
        raise FileNotFoundError(f"Configuration file not found: {args.config}")

    if not args.playlist_url:
        return config

    return AppConfig(
        api_key=config.api_key,
        playlist_url=args.playlist_url,
        ai_api_key=config.ai_api_key,
        ai_model=config.ai_model,
        binge_hours=config.binge_hours,
        binge_minutes=config.binge_minutes,
        log_level=config.log_level
    )


async def run(config: AppConfig, args: argparse.Namespace, logger: logging.Logger) -> int:
    session = AnalysisSession()
    result = await session.analyze(config.playlist_url or "", config.api_key)

    print(render_report(result))

    if args.export_csv:
        build_video_table(result.videos, include_thumbnails=True).to_csv(args.export_csv, index=False, encoding='utf-8')
        logger.info(f"Video table saved to {args.export_csv}")

    hours = args.hours if args.hours is not None else config.binge_hours
    minutes = args.minutes if args.minutes is not None else config.binge_minutes
    if hours is not None or minutes is not None:
        try:
            print(format_binge_message(session.estimate_binge(hours, minutes)))
        except ValidationError as e:
            logger.warning(str(e))

    if args.insights:
        generator = PlaylistInsightGenerator(config.ai_api_key, config.ai_model)
        handlers = {
            "summary": ("AI Summary", generator.generate_summary),
            "learning-path": ("Learning Path", generator.generate_learning_path),
            "faq": ("FAQs", generator.generate_faqs),
        }
        for name in args.insights:
            title, generate = handlers[name]
            print("\n" + "=" * 60)
            print(title)
            print("=" * 60)
            print(await generate(result))

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution entry for the analysis pipeline."""
    args = parse_args(argv)

    try:
        config = load_configuration(args)
    except (FileNotFoundError, ConfigValidationError) as e:
        setup_logging().error(f"Configuration failed: {e}")
        return 1

    logger = setup_logging(config.log_level)
    logger.info("=" * 60)
    logger.info("Playlist Insights - ANALYSIS PIPELINE")
    logger.info("=" * 60)

    try:
        return asyncio.run(run(config, args, logger))
    except PlaylistAnalysisError as e:
        logger.error(f"Analysis failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
