"""
Unit tests for OutputFormatter
"""

import pytest

from review_stats.models import TurnaroundStats
from review_stats.output import OutputFormatter


@pytest.fixture
def stats():
    """Create sample statistics."""
    return TurnaroundStats(
        owner='octo',
        repo='repo',
        window_days=30,
        closed_prs=12,
        approved_prs=2,
        average_first_approval_hours=3.5,
        approval_counts={'alice': 2, 'bob': 1}
    )


class TestOutputFormatterInitialization:
    """Test cases for OutputFormatter initialization."""

    def test_default_window(self):
        formatter = OutputFormatter()

        assert formatter.window_days == 30
        assert formatter.window_label == 'last 30 days'

    def test_custom_window(self):
        assert OutputFormatter(7).window_label == 'last 7 days'


class TestProgressLines:
    """Test cases for progress output."""

    def test_print_start(self, capsys):
        OutputFormatter().print_start('octo', 'repo')

        assert capsys.readouterr().out == 'Fetching PR statistics for octo/repo...\n'

    def test_print_fetched(self, capsys):
        """Test the fetched and qualifying counts."""
        OutputFormatter().print_fetched(12, 2)

        output = capsys.readouterr().out
        assert 'Found 12 closed PRs in total.' in output
        assert '2 PRs were created in the last 30 days and merged.' in output


class TestPrintSummary:
    """Test cases for the statistics block."""

    def test_summary_lines(self, stats, capsys):
        """Test the full statistics block."""
        OutputFormatter().print_summary(stats)

        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            '',
            'Statistics:',
            'Number of approved PRs in the last 30 days: 2',
            'Average first review time: 3.50 hours',
            '',
            'Approval counts by reviewer:',
            'alice: 2',
            'bob: 1',
        ]

    def test_counts_keep_insertion_order(self, stats, capsys):
        """Test that reviewers are printed in first-appearance order, not sorted."""
        stats.approval_counts = {'zed': 1, 'amy': 3}

        OutputFormatter().print_summary(stats)

        output = capsys.readouterr().out
        assert output.index('zed: 1') < output.index('amy: 3')

    def test_no_data(self, capsys):
        """Test that a missing average is printed as no data."""
        empty = TurnaroundStats(owner='octo', repo='repo', window_days=30)

        OutputFormatter().print_summary(empty)

        output = capsys.readouterr().out
        assert 'Number of approved PRs in the last 30 days: 0' in output
        assert 'Average first review time: no data' in output
        assert '(none)' in output

    def test_zero_hour_average(self, stats, capsys):
        """Test that a zero-hour average is printed as a number."""
        stats.average_first_approval_hours = 0.0

        OutputFormatter().print_summary(stats)

        assert 'Average first review time: 0.00 hours' in capsys.readouterr().out

    def test_failed_prs(self, stats, capsys):
        """Test that PRs with failed review fetches are listed."""
        stats.failed_prs = [7, 9]

        OutputFormatter().print_summary(stats)

        assert 'Reviews could not be fetched for 2 PR(s): #7, #9' in capsys.readouterr().out


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
