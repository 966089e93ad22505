"""Tests for validation_service module."""

from dataclasses import replace

import pytest

from ielts_trainer.services.validation_service import ValidationService


def _components(result):
    return {issue.component for issue in result.issues}


class TestValidateSetup:
    """Tests for ValidationService.validate_setup."""

    def test_valid_config_passes(self, test_config):
        """A complete configuration has no issues."""
        result = ValidationService(test_config).validate_setup()
        assert result.all_passed
        assert result.issues == []

    def test_missing_api_key(self, test_config):
        """An empty API key is an error."""
        result = ValidationService(replace(test_config, google_api_key=" ")).validate_setup()
        assert not result.all_passed
        assert _components(result) == {"google_api_key"}

    def test_null_api_key_is_reported(self, test_config):
        """A None key is reported like an empty one instead of raising."""
        result = ValidationService(replace(test_config, google_api_key=None)).validate_setup()
        assert _components(result) == {"google_api_key"}

    def test_api_key_not_required(self, test_config):
        """The key check can be turned off."""
        config = replace(test_config, google_api_key="")
        assert ValidationService(config).validate_setup(require_api_key=False).all_passed

    @pytest.mark.parametrize("count", [0, -1, 101])
    def test_word_count_out_of_range(self, test_config, count):
        """word_count must be 1-100."""
        result = ValidationService(replace(test_config, word_count=count)).validate_setup()
        assert [i.component for i in result.get_errors()] == ["word_count"]

    @pytest.mark.parametrize("count", [1, 100])
    def test_word_count_bounds_are_valid(self, test_config, count):
        """The range ends are accepted."""
        assert ValidationService(replace(test_config, word_count=count)).validate_setup().all_passed

    def test_key_words_count_out_of_range(self, test_config):
        """article_key_words_count must be 1-50."""
        config = replace(test_config, article_key_words_count=51)
        result = ValidationService(config).validate_setup()
        assert _components(result) == {"article_key_words_count"}

    def test_negative_exclude_days(self, test_config):
        """exclude_days may be zero but not negative."""
        assert ValidationService(replace(test_config, exclude_days=0)).validate_setup().all_passed
        result = ValidationService(replace(test_config, exclude_days=-1)).validate_setup()
        assert _components(result) == {"exclude_days"}

    def test_no_topics(self, test_config):
        """At least one usable topic is required."""
        result = ValidationService(replace(test_config, topics=["", "  "])).validate_setup()
        assert result.has_errors
        assert _components(result) == {"topics"}

    def test_some_blank_topics_warn(self, test_config):
        """Blank topics alongside valid ones only warn."""
        result = ValidationService(replace(test_config, topics=["Health", ""])).validate_setup()
        assert result.all_passed
        assert result.has_warnings
        assert result.get_warnings()[0].component == "topics"

    def test_bad_network_settings(self, test_config):
        """Negative retries or a non-positive timeout are errors."""
        config = replace(test_config, request_timeout=0)
        result = ValidationService(config).validate_setup()
        assert _components(result) == {"network"}

    def test_collects_every_issue(self, test_config):
        """All problems are reported together."""
        config = replace(test_config, google_api_key="", word_count=0, exclude_days=-2)
        result = ValidationService(config).validate_setup()
        assert _components(result) == {"google_api_key", "word_count", "exclude_days"}
