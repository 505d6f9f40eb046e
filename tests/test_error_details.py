"""Tests for describing failed remote lookups."""

import pytest

from sncf_departures.application.services import describe_lookup_error
from sncf_departures.domain.errors import RemoteLookupError


def test_timeout_is_described_without_status() -> None:
    """Given a timeout, when describing, then the reason says so and no status is set."""
    details = describe_lookup_error(TimeoutError())

    assert details.status_code is None
    assert details.reason == "Request timed out"


@pytest.mark.parametrize(
    ("status", "reason"),
    [
        (401, "Invalid or missing API key"),
        (403, "Invalid or missing API key"),
        (429, "Rate limit exceeded"),
        (503, "Service unavailable"),
        (500, "HTTP 500"),
    ],
)
def test_status_codes_are_described(status: int, reason: str) -> None:
    """Given a lookup error with a status, when describing, then the matching reason is chosen."""
    details = describe_lookup_error(RemoteLookupError("boom", status_code=status))

    assert details.status_code == status
    assert details.reason == reason


def test_unknown_error() -> None:
    """Given an error without status, when describing, then the reason is generic."""
    assert describe_lookup_error(RuntimeError("x")).reason == "Unknown error"
