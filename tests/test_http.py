"""Tests for the shared HTTP client with retry logic."""

from __future__ import annotations

from unittest.mock import patch

import requests
from urllib3.util.retry import Retry

from butterfly_gallery.services.http import (
    ACCEPT_HTML,
    DEFAULT_RETRY,
    DEFAULT_TIMEOUT,
    USER_AGENT,
    create_session,
    session,
)


class TestDefaultRetry:
    """Verify retry strategy configuration."""

    def test_total_retries(self) -> None:
        assert DEFAULT_RETRY.total == 3

    def test_backoff_factor(self) -> None:
        assert DEFAULT_RETRY.backoff_factor == 1

    def test_retries_on_server_errors(self) -> None:
        for status in (502, 503, 504):
            assert status in DEFAULT_RETRY.status_forcelist

    def test_retries_on_rate_limit(self) -> None:
        assert 429 in DEFAULT_RETRY.status_forcelist

    def test_does_not_retry_not_found(self) -> None:
        assert 404 not in DEFAULT_RETRY.status_forcelist

    def test_only_read_methods(self) -> None:
        allowed = DEFAULT_RETRY.allowed_methods
        assert "GET" in allowed
        assert "HEAD" in allowed
        assert "POST" not in allowed


class TestCreateSession:
    """Verify session factory."""

    def test_returns_session(self) -> None:
        assert isinstance(create_session(), requests.Session)

    def test_mounts_both_schemes(self) -> None:
        s = create_session()
        for url in ("https://example.org", "http://example.org"):
            assert isinstance(s.get_adapter(url), requests.adapters.HTTPAdapter)

    def test_adapter_has_retry(self) -> None:
        adapter = create_session().get_adapter("https://example.org")
        assert adapter.max_retries.total == 3

    def test_custom_retry(self) -> None:
        s = create_session(retry=Retry(total=7, backoff_factor=0))
        assert s.get_adapter("https://example.org").max_retries.total == 7

    def test_headers(self) -> None:
        s = create_session()
        assert "butterfly-gallery" in s.headers["User-Agent"]
        assert s.headers["User-Agent"] == USER_AGENT
        assert s.headers["Accept"] == ACCEPT_HTML
        assert "text/html" in s.headers["Accept"]

    def test_default_timeout_injected(self) -> None:
        s = create_session(timeout=42)
        prep = requests.Request("GET", "https://example.org").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 42

    def test_explicit_timeout_not_overridden(self) -> None:
        s = create_session(timeout=42)
        prep = requests.Request("GET", "https://example.org").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep, timeout=5)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 5


class TestModuleSession:
    """Verify the module-level singleton."""

    def test_session_is_configured(self) -> None:
        assert session.get_adapter("https://example.org").max_retries.total == 3

    def test_default_timeout(self) -> None:
        assert DEFAULT_TIMEOUT == 20
