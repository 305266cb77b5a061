"""Main CLI entry point for wordworld."""

import argparse
import logging
import sys

from wordworld import __version__
from wordworld.cli.commands import analyze, insights, level_up, recommend


def _add_learner_arguments(parser: argparse.ArgumentParser) -> None:
    """Arguments selecting a learner either from the backend or from files."""
    parser.add_argument("--child-id", help="Fetch profile and words from the backend API")
    parser.add_argument("--profile", help="Path to a child profile JSON file")
    parser.add_argument("--words", help="Path to a word catalog JSON file")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="wordworld",
        description="Adaptive vocabulary learning engine for WordWorld",
        epilog="Use 'wordworld <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # wordworld recommend
    recommend_parser = subparsers.add_parser(
        "recommend",
        help="Recommend the next words and activity",
        description="Pick the next words to learn and the best activity for a child",
    )
    _add_learner_arguments(recommend_parser)
    recommend_parser.add_argument(
        "--minutes",
        type=float,
        default=None,
        help="Minutes available for the session (default: 15)",
    )
    recommend_parser.add_argument(
        "--count",
        type=int,
        default=None,
        help="Number of words to select (default: 5)",
    )
    recommend_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible word variety",
    )
    recommend_parser.add_argument(
        "--word-of-the-day",
        action="store_true",
        help="Also show the word of the day",
    )

    # wordworld analyze <sessions>
    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Analyze learning sessions",
        description="Show active/passive words and engagement score per session",
    )
    analyze_parser.add_argument("sessions", help="Path to a session (or list of sessions) JSON file")

    # wordworld level-up
    level_parser = subparsers.add_parser(
        "level-up",
        help="Check if a child is ready for the next level",
        description="Evaluate difficulty progression from recent sessions",
    )
    level_parser.add_argument("--profile", required=True, help="Path to a child profile JSON file")
    level_parser.add_argument("--sessions", required=True, help="Path to a sessions JSON file")

    # wordworld insights
    insights_parser = subparsers.add_parser(
        "insights",
        help="Generate learning insights for parents",
        description="Summarise vocabulary, engagement and habits for parents",
    )
    _add_learner_arguments(insights_parser)
    insights_parser.add_argument("--sessions", help="Path to a sessions JSON file")

    # wordworld stats
    stats_parser = subparsers.add_parser(
        "stats",
        help="Show vocabulary progress statistics",
        description="Mastery, exposures and active/passive vocabulary",
    )
    _add_learner_arguments(stats_parser)
    stats_parser.add_argument("--sessions", help="Path to a sessions JSON file")

    return parser


def main(argv: list[str] | None = None):
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Dispatch to appropriate command
    if args.command == "recommend":
        return recommend.recommend_command(args)
    elif args.command == "analyze":
        return analyze.analyze_command(args)
    elif args.command == "level-up":
        return level_up.level_up_command(args)
    elif args.command == "insights":
        return insights.insights_command(args)
    elif args.command == "stats":
        return insights.stats_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
