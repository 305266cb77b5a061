"""CLI command for recommending the next words and activity."""

import random

from wordworld.config import create_default_config
from wordworld.exceptions import WordWorldException
from wordworld.interfaces import PresenterProtocol
from wordworld.presenters import ConsolePresenter
from wordworld.services import RecommendationService, WordSelector

from .common import load_learner


def recommend_command(args, presenter: PresenterProtocol | None = None) -> int:
    """Execute the recommend subcommand.

    Args:
        args: Parsed command-line arguments
        presenter: Output presenter (console by default)

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = presenter or ConsolePresenter()
    overrides = {"selection_count": args.count} if args.count is not None else {}
    config = create_default_config(**overrides)

    try:
        profile, words = load_learner(args, config)
    except WordWorldException as e:
        presenter.show_error(str(e))
        return 1

    if not words:
        presenter.show_warning(f"No words available for {profile.name}")

    selector = WordSelector(config, random_source=random.Random(args.seed))
    service = RecommendationService(config, selector=selector)

    presenter.show_info(f"WordWorld - Recommendation for {profile.name}")
    presenter.show_info("=" * 50)
    recommendation = service.recommend(words, profile, available_minutes=args.minutes)
    presenter.show_recommendation(recommendation)

    if args.word_of_the_day:
        word_of_the_day = service.word_of_the_day(words, profile)
        if word_of_the_day is not None:
            presenter.show_word_of_the_day(word_of_the_day)

    return 0
