"""Output formatting and display for review turnaround statistics."""

from .models import TurnaroundStats


class OutputFormatter:
    """Formats and prints review turnaround statistics."""

    def __init__(self, window_days: int = 30):
        """Initialize the output formatter.

        Args:
            window_days: Length of the analysis window, used in headings
        """
        self.window_days = window_days

    @property
    def window_label(self) -> str:
        return f"last {self.window_days} days"

    def print_start(self, owner: str, repo: str):
        print(f"Fetching PR statistics for {owner}/{repo}...")

    def print_fetched(self, closed_count: int, approved_count: int):
        """Print how many pull requests were fetched and how many qualified."""
        print(f"Found {closed_count} closed PRs in total.")
        print(f"{approved_count} PRs were created in the {self.window_label} and merged.")

    def format_average(self, stats: TurnaroundStats) -> str:
        if not stats.has_average:
            return "no data"
        return f"{stats.average_first_approval_hours:.2f} hours"

    def print_summary(self, stats: TurnaroundStats):
        """Print the statistics block for one repository.

        Args:
            stats: Computed statistics
        """
        print("\nStatistics:")
        print(f"Number of approved PRs in the {self.window_label}: {stats.approved_prs}")
        print(f"Average first review time: {self.format_average(stats)}")

        print("\nApproval counts by reviewer:")
        if not stats.approval_counts:
            print("(none)")
        for reviewer, count in stats.approval_counts.items():
            print(f"{reviewer}: {count}")

        if stats.failed_prs:
            failed = ', '.join(f"#{number}" for number in stats.failed_prs)
            print(f"\nReviews could not be fetched for {len(stats.failed_prs)} PR(s): {failed}")
