"""PR Review Stats - review turnaround statistics for a GitHub repository."""

from .models import PullRequest, Review, ReportAccumulator, TurnaroundStats
from .api_client import (
    GitHubAPIClient,
    GitHubAPIError,
    GitHubAuthenticationError,
    GitHubRateLimitError,
    RepositoryNotFoundError,
)
from .config import Settings, load_settings
from .output import OutputFormatter
from .reporter import StatisticsReporter

__all__ = [
    'PullRequest',
    'Review',
    'ReportAccumulator',
    'TurnaroundStats',
    'GitHubAPIClient',
    'GitHubAPIError',
    'GitHubAuthenticationError',
    'GitHubRateLimitError',
    'RepositoryNotFoundError',
    'Settings',
    'load_settings',
    'OutputFormatter',
    'StatisticsReporter',
]
