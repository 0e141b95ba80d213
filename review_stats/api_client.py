"""GitHub API client for making requests and handling pagination."""

import os
import logging
from typing import Dict, List, Optional
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry


DEFAULT_API_URL = 'https://api.github.com'


class GitHubAPIError(Exception):
    """Raised when the GitHub API answers with an error status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class GitHubAuthenticationError(GitHubAPIError):
    """Raised when the GitHub API rejects the token (HTTP 401)."""
    pass


class GitHubRateLimitError(GitHubAPIError):
    """Raised when the GitHub API rate limit is exhausted."""
    pass


class RepositoryNotFoundError(GitHubAPIError):
    """Raised when a repository does not exist or is not visible (HTTP 404)."""
    pass


class GitHubAPIClient:
    """Handles GitHub API requests, error mapping and pagination."""

    def __init__(self, token: str = None, base_url: str = DEFAULT_API_URL,
                 max_retries: int = 0, timeout: float = 30):
        """Initialize the GitHub API client.

        Args:
            token: GitHub personal access token for authentication
            base_url: Root URL of the REST API (GitHub Enterprise uses a different one)
            max_retries: Number of retries on 5xx responses (0 disables retrying)
            timeout: Per-request timeout in seconds
        """
        # Use provided token or fall back to environment variable
        self.token = token or os.environ.get('GITHUB_TOKEN')
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()

        adapter = HTTPAdapter(
            max_retries=Retry(
                total=max_retries,
                backoff_factor=0.3,
                status_forcelist=[500, 502, 503, 504],
                raise_on_status=False
            )
        )
        self.session.mount('https://', adapter)
        self.session.mount('http://', adapter)

        self.session.headers.update({'Accept': 'application/vnd.github.v3+json'})
        if self.token:
            self.session.headers.update({'Authorization': f'token {self.token}'})
            logging.info("Initialized GitHub API client with token")
        else:
            logging.warning("No GitHub token provided. Rate limits will be much lower.")
            logging.warning("Set GITHUB_TOKEN environment variable or add it to a .env file.")

    def get_repository(self, owner: str, repo: str) -> Dict:
        """Fetch repository metadata, confirming it exists and is readable.

        Raises:
            RepositoryNotFoundError: If the repository is missing or hidden from this token
            GitHubAuthenticationError: If the token is rejected
            GitHubAPIError: For any other error status
        """
        url = f"{self.base_url}/repos/{owner}/{repo}"
        response = self.session.get(url, timeout=self.timeout)

        if response.status_code == 404:
            raise RepositoryNotFoundError(f"Repository not found: {owner}/{repo}", 404)

        self._check_response(response)
        return response.json()

    def list_pull_requests(self, owner: str, repo: str, state: str = 'closed',
                           sort: str = 'updated', direction: str = 'desc',
                           per_page: int = 100) -> List[Dict]:
        """Fetch every pull request matching the given state, across all pages."""
        url = f"{self.base_url}/repos/{owner}/{repo}/pulls"
        return self.get_paginated(url, {
            'state': state,
            'sort': sort,
            'direction': direction
        }, per_page=per_page)

    def list_reviews(self, owner: str, repo: str, pull_number: int) -> List[Dict]:
        """Fetch every review submitted on a pull request, across all pages."""
        url = f"{self.base_url}/repos/{owner}/{repo}/pulls/{pull_number}/reviews"
        return self.get_paginated(url)

    def get_paginated(self, url: str, params: Dict = None, per_page: int = 100) -> List[Dict]:
        """Fetch all pages of a paginated GitHub API endpoint.

        Follows the ``rel="next"`` entry of the Link header until the last page.

        Args:
            url: The API endpoint URL
            params: Query parameters for the first request
            per_page: Page size requested from the API

        Returns:
            List of all items from all pages, in the order the API returned them
        """
        results = []
        params = dict(params or {})
        params['per_page'] = per_page
        page = 1

        while url:
            logging.debug(f"Fetching page {page} from {url}")
            response = self.session.get(url, params=params, timeout=self.timeout)
            self._check_response(response)
            results.extend(response.json())

            # The next link already carries the query string
            url = response.links.get('next', {}).get('url')
            params = None
            page += 1

        logging.debug(f"Fetched {len(results)} total items")
        return results

    @staticmethod
    def _check_response(response: requests.Response):
        """Map an error status to the matching GitHubAPIError subclass."""
        if response.status_code < 400:
            return

        message = GitHubAPIClient._error_message(response)

        if response.status_code == 401:
            raise GitHubAuthenticationError(f"Authentication failed: {message}", 401)
        if response.status_code in (403, 429) and response.headers.get('X-RateLimit-Remaining') == '0':
            raise GitHubRateLimitError(f"GitHub API rate limit exceeded: {message}", response.status_code)
        raise GitHubAPIError(f"HTTP {response.status_code}: {message}", response.status_code)

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            return response.reason or response.text
        if isinstance(data, dict) and data.get('message'):
            return data['message']
        return response.reason or response.text
