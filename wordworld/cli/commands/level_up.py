"""CLI command for checking level progression."""

from wordworld.config import create_default_config
from wordworld.exceptions import WordWorldException
from wordworld.interfaces import PresenterProtocol
from wordworld.presenters import ConsolePresenter
from wordworld.services import LevelUpEvaluator

from .common import load_profile, load_sessions


def level_up_command(args, presenter: PresenterProtocol | None = None) -> int:
    """Execute the level-up subcommand.

    Returns:
        Exit code (0 = ready to level up, 2 = not yet, 1 = failure)
    """
    presenter = presenter or ConsolePresenter()
    evaluator = LevelUpEvaluator(create_default_config())

    try:
        profile = load_profile(args.profile)
        sessions = load_sessions(args.sessions)
    except WordWorldException as e:
        presenter.show_error(str(e))
        return 1

    if evaluator.should_level_up(profile, sessions):
        presenter.show_success(f"{profile.name} is ready for level {profile.level + 1}")
        return 0

    presenter.show_info(f"{profile.name} should stay at level {profile.level} for now")
    return 2
