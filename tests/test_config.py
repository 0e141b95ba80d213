"""
Unit tests for environment configuration
"""

import os
import pytest
from unittest.mock import patch

from review_stats.config import Settings, load_settings


class TestLoadSettings:
    """Test cases for load_settings."""

    def test_defaults(self):
        """Test that an empty environment yields the defaults."""
        settings = load_settings({})

        assert settings == Settings()
        assert settings.token is None
        assert settings.api_url == 'https://api.github.com'
        assert settings.window_days == 30
        assert settings.sort_approvals is False
        assert settings.review_fetch_workers == 1
        assert settings.max_retries == 0
        assert settings.timeout == 30

    def test_all_values(self):
        """Test that every variable is read."""
        settings = load_settings({
            'GITHUB_TOKEN': 'secret',
            'GITHUB_API_URL': 'https://github.example.com/api/v3',
            'ANALYSIS_DAYS': '14',
            'SORT_APPROVALS_BY_TIME': 'yes',
            'REVIEW_FETCH_WORKERS': '4',
            'GITHUB_MAX_RETRIES': '2',
            'GITHUB_TIMEOUT': '7.5'
        })

        assert settings.token == 'secret'
        assert settings.api_url == 'https://github.example.com/api/v3'
        assert settings.window_days == 14
        assert settings.sort_approvals is True
        assert settings.review_fetch_workers == 4
        assert settings.max_retries == 2
        assert settings.timeout == 7.5

    def test_reads_os_environ_by_default(self):
        """Test that os.environ is used when no mapping is given."""
        with patch.dict(os.environ, {'GITHUB_TOKEN': 'env_token', 'ANALYSIS_DAYS': '10'}, clear=True):
            settings = load_settings()

        assert settings.token == 'env_token'
        assert settings.window_days == 10

    def test_empty_token_is_none(self):
        assert load_settings({'GITHUB_TOKEN': ''}).token is None

    @pytest.mark.parametrize('value', ['false', '0', 'no', 'off'])
    def test_sort_approvals_false_values(self, value):
        assert load_settings({'SORT_APPROVALS_BY_TIME': value}).sort_approvals is False

    def test_invalid_days_falls_back(self, caplog):
        """Test that a non-integer window logs a warning and uses the default."""
        settings = load_settings({'ANALYSIS_DAYS': 'a month'})

        assert settings.window_days == 30
        assert "Invalid ANALYSIS_DAYS value 'a month'" in caplog.text

    def test_days_below_minimum_falls_back(self, caplog):
        """Test that a zero-day window is rejected."""
        settings = load_settings({'ANALYSIS_DAYS': '0'})

        assert settings.window_days == 30
        assert 'ANALYSIS_DAYS must be at least 1' in caplog.text

    def test_negative_retries_fall_back(self):
        assert load_settings({'GITHUB_MAX_RETRIES': '-1'}).max_retries == 0

    def test_invalid_timeout_falls_back(self, caplog):
        settings = load_settings({'GITHUB_TIMEOUT': 'soon'})

        assert settings.timeout == 30
        assert "Invalid GITHUB_TIMEOUT value 'soon'" in caplog.text


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
