"""CLI command for analysing learning sessions."""

from wordworld.config import create_default_config
from wordworld.exceptions import WordWorldException
from wordworld.interfaces import PresenterProtocol
from wordworld.presenters import ConsolePresenter
from wordworld.services import SessionAnalyzer

from .common import load_sessions


def analyze_command(args, presenter: PresenterProtocol | None = None) -> int:
    """Execute the analyze subcommand.

    Args:
        args: Parsed command-line arguments
        presenter: Output presenter (console by default)

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = presenter or ConsolePresenter()
    analyzer = SessionAnalyzer(create_default_config())

    try:
        sessions = load_sessions(args.sessions)
    except WordWorldException as e:
        presenter.show_error(str(e))
        return 1

    if not sessions:
        presenter.show_warning("No sessions to analyze")
        return 1

    for session in sessions:
        presenter.show_info(f"\nSession {session.id or '?'} ({session.date:%Y-%m-%d})")
        presenter.show_session_analysis(analyzer.analyze(session))
    return 0
