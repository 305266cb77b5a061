"""CLI commands for parent insights and progress statistics."""

from wordworld.config import create_default_config
from wordworld.exceptions import WordWorldException
from wordworld.interfaces import PresenterProtocol
from wordworld.presenters import ConsolePresenter
from wordworld.services import InsightsService, ProgressService

from .common import load_learner, load_sessions


def insights_command(args, presenter: PresenterProtocol | None = None) -> int:
    """Execute the insights subcommand.

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = presenter or ConsolePresenter()
    config = create_default_config()

    try:
        profile, words = load_learner(args, config)
        sessions = load_sessions(args.sessions)
    except WordWorldException as e:
        presenter.show_error(str(e))
        return 1

    presenter.show_insights(InsightsService(config).generate(profile, words, sessions))
    return 0


def stats_command(args, presenter: PresenterProtocol | None = None) -> int:
    """Execute the stats subcommand.

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = presenter or ConsolePresenter()
    config = create_default_config()

    try:
        _profile, words = load_learner(args, config)
        sessions = load_sessions(args.sessions)
    except WordWorldException as e:
        presenter.show_error(str(e))
        return 1

    presenter.show_progress_stats(ProgressService().compute(words, sessions))
    return 0
