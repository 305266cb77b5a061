"""Default configuration values for WordWorld."""

import os

from .config import WordWorldConfig

API_URL_ENV_VAR = "WORDWORLD_API_URL"
API_TOKEN_ENV_VAR = "WORDWORLD_API_TOKEN"


def create_default_config(**overrides) -> WordWorldConfig:
    """Create a default configuration with optional overrides.

    The backend URL and token are read from ``WORDWORLD_API_URL`` and
    ``WORDWORLD_API_TOKEN`` when set; explicit overrides always win.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        WordWorldConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            interest_weight=10,
            selection_count=8,
        )
    """
    api_url = os.environ.get(API_URL_ENV_VAR)
    if api_url and "api_base_url" not in overrides:
        overrides["api_base_url"] = api_url

    api_token = os.environ.get(API_TOKEN_ENV_VAR)
    if api_token and "api_token" not in overrides:
        overrides["api_token"] = api_token

    return WordWorldConfig(**overrides)
