"""Review turnaround statistics for a single repository."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple

import requests

from .api_client import GitHubAPIError, GitHubAuthenticationError, RepositoryNotFoundError
from .filtering import window_cutoff, filter_recent_merged, extract_approvals
from .models import PullRequest, Review, ReportAccumulator, TurnaroundStats
from .output import OutputFormatter

# Errors a remote call is expected to raise; anything else is a bug
REMOTE_ERRORS = (GitHubAPIError, requests.RequestException)


class StatisticsReporter:
    """Computes and prints PR review turnaround statistics.

    The client is any object providing ``get_repository``,
    ``list_pull_requests`` and ``list_reviews`` with the signatures of
    ``GitHubAPIClient``.
    """

    def __init__(
        self,
        client,
        window_days: int = 30,
        sort_approvals: bool = False,
        max_workers: int = 1,
        formatter: OutputFormatter = None
    ):
        """Initialize the reporter.

        Args:
            client: GitHub API client used for every remote call
            window_days: Only PRs created within this many days are considered
            sort_approvals: Sort approvals by submission time before picking the first
            max_workers: Number of concurrent review fetches (1 = sequential)
            formatter: Output formatter, one matching window_days is created if omitted
        """
        self.client = client
        self.window_days = window_days
        self.sort_approvals = sort_approvals
        self.max_workers = max(1, max_workers)
        self.formatter = formatter or OutputFormatter(window_days)

    def report(self, owner: str, repo: str):
        """Compute statistics for owner/repo and print them.

        Access errors are logged and nothing else is printed.
        """
        stats = self.collect(owner, repo)
        if stats is not None:
            self.formatter.print_summary(stats)

    def collect(self, owner: str, repo: str) -> Optional[TurnaroundStats]:
        """Compute statistics for owner/repo.

        Returns:
            The statistics, or None if the repository or its pull requests
            could not be read
        """
        self.formatter.print_start(owner, repo)

        if not self._check_repository(owner, repo):
            return None

        try:
            raw_prs = self.client.list_pull_requests(
                owner, repo, state='closed', sort='updated', direction='desc', per_page=100
            )
        except REMOTE_ERRORS as e:
            logging.error(f"Error fetching pull requests: {e}")
            return None

        prs = [PullRequest.from_api(pr) for pr in raw_prs]
        approved_prs = filter_recent_merged(prs, window_cutoff(self.window_days))
        self.formatter.print_fetched(len(prs), len(approved_prs))

        stats = TurnaroundStats(
            owner=owner,
            repo=repo,
            window_days=self.window_days,
            closed_prs=len(prs),
            approved_prs=len(approved_prs)
        )

        accumulator = ReportAccumulator()
        for pr, reviews in self._fetch_all_reviews(owner, repo, approved_prs):
            if reviews is None:
                stats.failed_prs.append(pr.number)
                continue
            accumulator.add(pr, extract_approvals(reviews, self.sort_approvals))

        stats.average_first_approval_hours = accumulator.average_hours
        stats.approval_counts = accumulator.approval_counts

        logging.info(f"Completed statistics for {owner}/{repo}: "
                     f"{accumulator.contributing_prs}/{len(approved_prs)} PRs had an approval")
        return stats

    def _check_repository(self, owner: str, repo: str) -> bool:
        """Return True if the repository can be read with the current credentials."""
        try:
            self.client.get_repository(owner, repo)
        except RepositoryNotFoundError:
            logging.error(f"Repository not found: {owner}/{repo}")
            logging.error("Please check if the repository exists and if you have the correct permissions.")
            return False
        except GitHubAuthenticationError:
            logging.error("Authentication failed. Please check your GitHub token.")
            return False
        except REMOTE_ERRORS as e:
            logging.error(f"Error accessing repository: {e}")
            return False

        return True

    def _fetch_reviews(self, owner: str, repo: str, pr: PullRequest) -> Optional[List[Review]]:
        """Fetch the reviews of one PR; None if the fetch failed."""
        try:
            raw_reviews = self.client.list_reviews(owner, repo, pr.number)
            return [Review.from_api(review, pr.number) for review in raw_reviews]
        except Exception as e:
            logging.error(f"Error fetching reviews for PR #{pr.number}: {e}")
            return None

    def _fetch_all_reviews(self, owner: str, repo: str,
                           prs: List[PullRequest]) -> List[Tuple[PullRequest, Optional[List[Review]]]]:
        """Fetch reviews for every PR, returning (pr, reviews) pairs in PR order."""
        if self.max_workers == 1 or len(prs) < 2:
            return [(pr, self._fetch_reviews(owner, repo, pr)) for pr in prs]

        max_workers = min(self.max_workers, len(prs))
        logging.debug(f"Fetching reviews for {len(prs)} PRs with {max_workers} workers")

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [executor.submit(self._fetch_reviews, owner, repo, pr) for pr in prs]
            return [(pr, future.result()) for pr, future in zip(prs, futures)]
