"""Unit tests for StateTokenService."""

import pytest

from hub.domain.service import StateTokenService


class TestStateTokenService:
    """Tests for anti-forgery state tokens."""

    @pytest.fixture
    def service(self):
        return StateTokenService()

    def test_issue_returns_distinct_url_safe_tokens(self, service):
        """Every issued token should be new and usable in a query string."""
        tokens = {service.issue() for _ in range(50)}

        assert len(tokens) == 50
        for token in tokens:
            assert token
            assert all(c.isalnum() or c in "-_" for c in token)

    @pytest.mark.parametrize("token", ["a", "abc123", "x" * 64])
    def test_verify_accepts_identical_tokens(self, service, token):
        """verify(t, t) should hold for any non-empty t."""
        assert service.verify(token, token) is True

    def test_verify_rejects_different_tokens(self, service):
        """Two different tokens never verify."""
        assert service.verify(service.issue(), service.issue()) is False

    @pytest.mark.parametrize(
        "received,stored",
        [("abc", None), (None, "abc"), (None, None), ("", ""), ("abc", "")],
    )
    def test_verify_rejects_missing_tokens(self, service, received, stored):
        """A missing or empty token on either side never verifies."""
        assert service.verify(received, stored) is False

    def test_verify_is_case_sensitive(self, service):
        """Match must be exact."""
        assert service.verify("State", "state") is False
