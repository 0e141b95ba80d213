"""
Runtime configuration for the PR review statistics tool.

Settings come from environment variables. A local ``.env`` file is loaded
into the environment by the entry point before these are read.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .api_client import DEFAULT_API_URL

DEFAULT_WINDOW_DAYS = 30


@dataclass
class Settings:
    """Values controlling how statistics are fetched and computed."""
    token: Optional[str] = None
    api_url: str = DEFAULT_API_URL
    window_days: int = DEFAULT_WINDOW_DAYS
    sort_approvals: bool = False
    review_fetch_workers: int = 1
    max_retries: int = 0
    timeout: float = 30


def _read_int(env: Mapping[str, str], name: str, default: int, minimum: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == '':
        return default

    try:
        value = int(raw)
    except ValueError:
        logging.warning(f"Invalid {name} value '{raw}', using default: {default}")
        return default

    if value < minimum:
        logging.warning(f"{name} must be at least {minimum}, got {value}; using default: {default}")
        return default

    return value


def _read_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw.strip() == '':
        return default

    try:
        value = float(raw)
    except ValueError:
        logging.warning(f"Invalid {name} value '{raw}', using default: {default}")
        return default

    if value <= 0:
        logging.warning(f"{name} must be positive, got {value}; using default: {default}")
        return default

    return value


def _read_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ('true', '1', 'yes')


def load_settings(env: Mapping[str, str] = None) -> Settings:
    """Build Settings from environment variables.

    Args:
        env: Mapping to read from; defaults to ``os.environ``

    Returns:
        Settings with invalid values replaced by their defaults
    """
    if env is None:
        env = os.environ

    return Settings(
        token=env.get('GITHUB_TOKEN') or None,
        api_url=env.get('GITHUB_API_URL') or DEFAULT_API_URL,
        window_days=_read_int(env, 'ANALYSIS_DAYS', DEFAULT_WINDOW_DAYS, minimum=1),
        sort_approvals=_read_bool(env, 'SORT_APPROVALS_BY_TIME', False),
        review_fetch_workers=_read_int(env, 'REVIEW_FETCH_WORKERS', 1, minimum=1),
        max_retries=_read_int(env, 'GITHUB_MAX_RETRIES', 0, minimum=0),
        timeout=_read_float(env, 'GITHUB_TIMEOUT', 30)
    )
