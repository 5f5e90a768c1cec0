"""Tests for DocDeltaConfig validation and repr masking."""

from __future__ import annotations

import pytest

from docdelta.config import DEFAULT_FUZZY_THRESHOLD, DocDeltaConfig


class TestDefaults:
    def test_defaults(self):
        config = DocDeltaConfig()
        assert config.fuzzy_threshold == DEFAULT_FUZZY_THRESHOLD == 3
        assert config.skip_fenced_code is True
        assert config.parse_front_matter_yaml is True
        assert config.metrics is None
        assert config.debug_dump_diff is False
        assert config.api_base_url == "http://localhost:8034/api"
        assert config.timeout_seconds == 30.0


class TestValidation:
    def test_insecure_remote_http_rejected(self):
        with pytest.raises(ValueError, match="insecure HTTP"):
            DocDeltaConfig(api_base_url="http://docs.example.com/api")

    @pytest.mark.parametrize(
        "url",
        [
            "https://docs.example.com/api",
            "http://localhost:9000",
            "http://127.0.0.1/api",
        ],
    )
    def test_allowed_urls(self, url):
        assert DocDeltaConfig(api_base_url=url).api_base_url == url

    @pytest.mark.parametrize("threshold", [0, -1])
    def test_threshold_must_be_positive(self, threshold):
        with pytest.raises(ValueError, match="fuzzy_threshold"):
            DocDeltaConfig(fuzzy_threshold=threshold)

    def test_threshold_of_one_allows_exact_only(self):
        assert DocDeltaConfig(fuzzy_threshold=1).fuzzy_threshold == 1

    @pytest.mark.parametrize("timeout", [0, -5.0])
    def test_timeout_must_be_positive(self, timeout):
        with pytest.raises(ValueError, match="timeout_seconds"):
            DocDeltaConfig(timeout_seconds=timeout)


class TestRepr:
    def test_token_is_masked(self):
        text = repr(DocDeltaConfig(api_token="supersecret"))
        assert "supersecret" not in text
        assert "api_token='...cret'" in text

    def test_short_token_fully_masked(self):
        assert "api_token='****'" in repr(DocDeltaConfig(api_token="abc"))

    def test_other_fields_shown(self):
        text = repr(DocDeltaConfig(fuzzy_threshold=5))
        assert text.startswith("DocDeltaConfig(")
        assert "fuzzy_threshold=5" in text
