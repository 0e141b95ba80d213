"""Data models for PR review turnaround statistics."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional

GITHUB_TIMESTAMP_FORMAT = '%Y-%m-%dT%H:%M:%SZ'
APPROVED = 'APPROVED'
GHOST_LOGIN = 'ghost'


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse a GitHub ISO 8601 timestamp into an aware UTC datetime."""
    if not value:
        return None
    return datetime.strptime(value, GITHUB_TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class PullRequest:
    """A pull request as returned by the pulls listing endpoint."""
    number: int
    created_at: datetime
    merged_at: Optional[datetime] = None

    @classmethod
    def from_api(cls, data: Dict) -> 'PullRequest':
        return cls(
            number=data['number'],
            created_at=parse_timestamp(data['created_at']),
            merged_at=parse_timestamp(data.get('merged_at'))
        )

    @property
    def is_merged(self) -> bool:
        return self.merged_at is not None


@dataclass(frozen=True)
class Review:
    """A review submitted on a pull request."""
    pull_number: int
    state: str
    author: str
    submitted_at: Optional[datetime] = None  # None while the review is pending

    @classmethod
    def from_api(cls, data: Dict, pull_number: int) -> 'Review':
        # Deleted accounts come back as a null user
        user = data.get('user') or {}
        return cls(
            pull_number=pull_number,
            state=data['state'],
            author=user.get('login', GHOST_LOGIN),
            submitted_at=parse_timestamp(data.get('submitted_at'))
        )

    @property
    def is_approval(self) -> bool:
        return self.state == APPROVED


@dataclass
class ReportAccumulator:
    """Running totals used to compute the average first-approval time."""
    total_hours: float = 0.0
    contributing_prs: int = 0
    approval_counts: Dict[str, int] = field(default_factory=dict)  # login -> approvals, first-seen order

    def add(self, pr: PullRequest, approvals: List[Review]):
        """Fold the approvals of one pull request into the totals.

        The first element of ``approvals`` is taken as the first approval.
        """
        if not approvals:
            return

        self.total_hours += hours_between(pr.created_at, approvals[0].submitted_at)
        self.contributing_prs += 1

        for approval in approvals:
            self.approval_counts[approval.author] = self.approval_counts.get(approval.author, 0) + 1

    @property
    def average_hours(self) -> Optional[float]:
        """Mean first-approval time, or None when no pull request was approved."""
        if self.contributing_prs == 0:
            return None
        return self.total_hours / self.contributing_prs


@dataclass
class TurnaroundStats:
    """Result of one statistics run for a repository."""
    owner: str
    repo: str
    window_days: int
    closed_prs: int = 0
    approved_prs: int = 0
    average_first_approval_hours: Optional[float] = None
    approval_counts: Dict[str, int] = field(default_factory=dict)
    failed_prs: List[int] = field(default_factory=list)

    @property
    def has_average(self) -> bool:
        return self.average_first_approval_hours is not None


def hours_between(start: datetime, end: datetime) -> int:
    """Whole hours elapsed from start to end, truncated toward zero."""
    return int((end - start).total_seconds() / 3600)
