"""Pull request and review filtering."""

import logging
from datetime import datetime, timedelta, timezone
from typing import List

from .models import PullRequest, Review


def window_cutoff(days: int, now: datetime = None) -> datetime:
    """Return the start of the trailing window of ``days`` days ending now (UTC)."""
    now = now or datetime.now(timezone.utc)
    return now - timedelta(days=days)


def filter_recent_merged(prs: List[PullRequest], cutoff: datetime) -> List[PullRequest]:
    """Keep pull requests created strictly after ``cutoff`` that were merged.

    Args:
        prs: Pull requests in the order they were fetched
        cutoff: Start of the analysis window

    Returns:
        Filtered list, preserving the input order
    """
    recent_prs = []
    for pr in prs:
        if pr.created_at <= cutoff:
            continue

        if not pr.is_merged:
            logging.debug(f"Skipping unmerged PR #{pr.number}")
            continue

        recent_prs.append(pr)

    return recent_prs


def extract_approvals(reviews: List[Review], sort_by_time: bool = False) -> List[Review]:
    """Return the APPROVED reviews, in API order unless ``sort_by_time`` is set.

    The API lists reviews in the order it stores them, which is usually but not
    always chronological. Sorting is stable, so ties keep their API order.
    """
    approvals = [review for review in reviews if review.is_approval]

    if sort_by_time:
        approvals.sort(key=lambda review: review.submitted_at)

    return approvals
