"""Input loading shared by the CLI commands."""

import json
from pathlib import Path
from typing import Any

from wordworld.adapters import profile_from_payload, session_from_payload, word_from_payload
from wordworld.config import WordWorldConfig
from wordworld.exceptions import ValidationError
from wordworld.models import LearnerProfile, LearningSession, Word
from wordworld.services import BackendClient
from wordworld.utils.time_utils import to_utc


def load_json(path: str | Path) -> Any:
    """Read a JSON file.

    Raises:
        ValidationError: If the file is missing or not valid JSON
    """
    path = Path(path)
    if not path.exists():
        raise ValidationError(f"File not found: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON in {path}: {e}") from e


def _as_list(data: Any) -> list[Any]:
    return data if isinstance(data, list) else [data]


def load_words(path: str | Path) -> list[Word]:
    """Load a word catalog (list of word payloads with optional ``progress``)."""
    return [word_from_payload(item) for item in _as_list(load_json(path))]


def load_profile(path: str | Path) -> LearnerProfile:
    """Load a child profile payload."""
    return profile_from_payload(load_json(path))


def load_sessions(path: str | Path | None) -> list[LearningSession]:
    """Load session payloads, oldest first. A missing path means no history."""
    if path is None:
        return []
    sessions = [session_from_payload(item) for item in _as_list(load_json(path))]
    return sorted(sessions, key=lambda s: to_utc(s.date))


def load_learner(args, config: WordWorldConfig) -> tuple[LearnerProfile, list[Word]]:
    """Load a learner and their word catalog from the backend or from files.

    ``--child-id`` fetches from the backend; otherwise ``--profile`` and
    ``--words`` must both name JSON files.
    """
    if getattr(args, "child_id", None):
        client = BackendClient(config)
        return client.get_child(args.child_id), client.get_words_with_progress(args.child_id)

    if not args.profile or not args.words:
        raise ValidationError("Either --child-id or both --profile and --words are required")
    return load_profile(args.profile), load_words(args.words)
