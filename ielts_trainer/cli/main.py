"""Main CLI entry point for ielts_trainer."""

import argparse
import logging
import sys

from ielts_trainer import __version__
from ielts_trainer.cli.commands import article, daily_report, usage, words


def setup_logging(verbose: bool) -> None:
    """Configure root logging for a CLI run."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="ielts-trainer",
        description="IELTS vocabulary and reading trainer",
        epilog="Use 'ielts-trainer <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", help="Path to config.json (default: ./config.json)")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # ielts-trainer words
    words_parser = subparsers.add_parser(
        "words",
        help="Take a vocabulary translation quiz",
        description="Fetch new IELTS words, translate their example sentences and get scored",
    )
    words_parser.add_argument("--count", type=int, help="Number of words (default from config)")
    words_parser.add_argument(
        "--exclude-days",
        type=int,
        help="Skip words learned within this many days (default from config)",
    )

    # ielts-trainer article
    subparsers.add_parser(
        "article",
        help="Generate the daily reading article",
        description="Generate an IELTS reading article with translation and key words",
    )

    # ielts-trainer daily-report [DATE]
    report_parser = subparsers.add_parser(
        "daily-report",
        help="Generate the review report for a day",
        description="Build a review report of the words learned on one day",
    )
    report_parser.add_argument("date", nargs="?", help="Study date as YYYY-MM-DD (default: today)")

    # ielts-trainer usage stats|reset
    usage_parser = subparsers.add_parser(
        "usage",
        help="Inspect or reset the usage record",
        description="Maintain the record of used words and sentences",
    )
    usage_subparsers = usage_parser.add_subparsers(dest="usage_command")
    usage_subparsers.add_parser("stats", help="Show usage statistics")
    reset_parser = usage_subparsers.add_parser("reset", help="Clear used words and sentences")
    reset_parser.add_argument(
        "--all",
        action="store_true",
        help="Also delete the daily learning history",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    # Dispatch to appropriate command
    if args.command == "words":
        return words.words_command(args)
    elif args.command == "article":
        return article.article_command(args)
    elif args.command == "daily-report":
        return daily_report.daily_report_command(args)
    elif args.command == "usage" and args.usage_command == "stats":
        return usage.usage_stats_command(args)
    elif args.command == "usage" and args.usage_command == "reset":
        return usage.usage_reset_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
