"""Tests for API request logger."""

from unittest.mock import MagicMock, patch

import pytest

from sncf_departures.adapters.api_request_logger import (
    log_api_request,
    log_api_response,
    redact_sensitive_headers,
    should_log_requests,
)


class TestShouldLogRequests:
    """Tests for should_log_requests function."""

    def test_when_env_not_set_then_returns_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given SNCF_LOG_REQUESTS not set, when checking, then returns False."""
        monkeypatch.delenv("SNCF_LOG_REQUESTS", raising=False)

        assert should_log_requests() is False

    def test_when_env_set_to_true_capitalized_then_returns_true(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given SNCF_LOG_REQUESTS=True (capitalized), when checking, then returns True."""
        monkeypatch.setenv("SNCF_LOG_REQUESTS", "True")

        assert should_log_requests() is True

    def test_when_env_set_to_false_then_returns_false(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given SNCF_LOG_REQUESTS=false, when checking, then returns False."""
        monkeypatch.setenv("SNCF_LOG_REQUESTS", "false")

        assert should_log_requests() is False


def test_redact_sensitive_headers_is_case_insensitive() -> None:
    """Given mixed-case credential headers, when redacting, then only those values are hidden."""
    redacted = redact_sensitive_headers(
        {"authorization": "Basic abc", "X-API-Key": "k", "Accept": "application/json"}
    )

    assert redacted == {
        "authorization": "***REDACTED***",
        "X-API-Key": "***REDACTED***",
        "Accept": "application/json",
    }


class TestLogApiRequest:
    """Tests for log_api_request function."""

    @patch("sncf_departures.adapters.api_request_logger.should_log_requests")
    @patch("sncf_departures.adapters.api_request_logger.logger")
    def test_when_logging_disabled_then_does_not_log(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given logging disabled, when calling log_api_request, then does not log."""
        mock_should_log.return_value = False

        log_api_request("GET", "https://example.com/api")

        mock_logger.info.assert_not_called()

    @patch("sncf_departures.adapters.api_request_logger.should_log_requests")
    @patch("sncf_departures.adapters.api_request_logger.logger")
    def test_when_params_repeat_keys_then_all_are_in_url(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given ordered params, when logging, then the URL keeps them in order."""
        mock_should_log.return_value = True

        log_api_request(
            "GET",
            "https://example.com/places",
            params=[("q", "Gre"), ("type[]", "stop_area"), ("type[]", "address")],
        )

        call_args = mock_logger.info.call_args[0][0]
        assert "GET https://example.com/places?q=Gre&type[]=stop_area&type[]=address" in call_args

    @patch("sncf_departures.adapters.api_request_logger.should_log_requests")
    @patch("sncf_departures.adapters.api_request_logger.logger")
    def test_when_url_has_existing_params_then_appends_params(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given URL with existing params, when adding more params, then appends with &."""
        mock_should_log.return_value = True

        log_api_request("GET", "https://example.com/api?existing=1", params=[("new", "2")])

        call_args = mock_logger.info.call_args[0][0]
        assert "https://example.com/api?existing=1&new=2" in call_args

    @patch("sncf_departures.adapters.api_request_logger.should_log_requests")
    @patch("sncf_departures.adapters.api_request_logger.logger")
    def test_when_logging_with_authorization_header_then_redacts_it(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given Authorization header, when logging, then redacts the value."""
        mock_should_log.return_value = True

        log_api_request(
            "GET", "https://example.com/api", headers={"Authorization": "Basic c2VjcmV0Og=="}
        )

        call_args = mock_logger.info.call_args[0][0]
        assert "Authorization" in call_args
        assert "***REDACTED***" in call_args
        assert "c2VjcmV0Og==" not in call_args


class TestLogApiResponse:
    """Tests for log_api_response function."""

    @patch("sncf_departures.adapters.api_request_logger.should_log_requests")
    @patch("sncf_departures.adapters.api_request_logger.logger")
    def test_when_enabled_then_logs_status_and_body(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given logging enabled, when logging a response, then status and JSON body are logged."""
        mock_should_log.return_value = True

        log_api_response("https://example.com/journeys", 200, {"journeys": []})

        call_args = mock_logger.info.call_args[0][0]
        assert "200" in call_args
        assert '{"journeys": []}' in call_args

    @patch("sncf_departures.adapters.api_request_logger.should_log_requests")
    @patch("sncf_departures.adapters.api_request_logger.logger")
    def test_when_body_is_large_then_truncates(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given a large payload, when logging, then the body is cut to 500 characters."""
        mock_should_log.return_value = True

        log_api_response("https://example.com/places", 200, {"q": "x" * 2000})

        call_args = mock_logger.info.call_args[0][0]
        body = call_args.split(": ", 1)[1]
        assert len(body) == 500

    @patch("sncf_departures.adapters.api_request_logger.should_log_requests")
    @patch("sncf_departures.adapters.api_request_logger.logger")
    def test_when_disabled_then_does_not_log(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given logging disabled, when logging a response, then nothing is logged."""
        mock_should_log.return_value = False

        log_api_response("https://example.com/places", 500)

        mock_logger.info.assert_not_called()
