"""Human-readable reasons for failed remote lookups."""

from sncf_departures.domain.models.error_details import ErrorDetails


def describe_lookup_error(error: Exception) -> ErrorDetails:
    """Extract the HTTP status code and a short reason from a lookup failure."""
    status_code = getattr(error, "status_code", None)

    if isinstance(error, TimeoutError):
        reason = "Request timed out"
    elif status_code == 429:
        reason = "Rate limit exceeded"
    elif status_code in (401, 403):
        reason = "Invalid or missing API key"
    elif status_code == 502:
        reason = "Bad gateway (server error)"
    elif status_code == 503:
        reason = "Service unavailable"
    elif status_code == 504:
        reason = "Gateway timeout"
    elif status_code is not None:
        reason = f"HTTP {status_code}"
    else:
        reason = "Unknown error"

    return ErrorDetails(status_code=status_code, reason=reason)
