"""HTTP client for SNCF (Navitia) API requests."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from sncf_departures.adapters.api_request_logger import log_api_request, log_api_response
from sncf_departures.adapters.navitia_api.constants import (
    DEFAULT_HEADERS,
    NO_SOLUTION_ERROR_IDS,
    SNCF_BASE_URL,
)
from sncf_departures.adapters.navitia_api.payloads import NavitiaError
from sncf_departures.domain.errors import RemoteLookupError

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

logger = logging.getLogger(__name__)


class NavitiaNoSolutionError(RemoteLookupError):
    """Navitia found no journey between the requested places."""


class NavitiaHttpClient:
    """HTTP client for the SNCF Navitia coverage."""

    def __init__(
        self,
        session: ClientSession,
        api_key: str,
        base_url: str = SNCF_BASE_URL,
        timeout_seconds: float = 10.0,
    ) -> None:
        """Initialize the client.

        Args:
            session: Shared aiohttp session.
            api_key: SNCF API token.
            base_url: Coverage base URL.
            timeout_seconds: Total timeout of a single request.
        """
        self._session = session
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    def _auth(self) -> aiohttp.BasicAuth:
        return aiohttp.BasicAuth(self._api_key)

    async def _read_json(self, response: ClientResponse, url: str) -> Any:
        try:
            return await response.json(content_type=None)
        except (aiohttp.ContentTypeError, ValueError) as e:
            # ValueError covers both malformed JSON and bytes that are not UTF-8
            raise RemoteLookupError(
                f"Invalid JSON from {url}: {e}", status_code=response.status
            ) from e

    async def _raise_for_error(self, response: ClientResponse, url: str) -> None:
        """Translate a non-200 response into a RemoteLookupError."""
        text = await response.text(errors="replace")
        error = NavitiaError()
        try:
            body = json.loads(text) if text else {}
            if isinstance(body, dict) and isinstance(body.get("error"), dict):
                error = NavitiaError.model_validate(body["error"])
        except ValueError:
            pass

        message = error.message or text[:200] or response.reason or "no response body"
        if response.status == 404 and error.id in NO_SOLUTION_ERROR_IDS:
            raise NavitiaNoSolutionError(message, status_code=response.status)

        logger.error(f"SNCF API returned status {response.status} for {url}: {message}")
        raise RemoteLookupError(
            f"SNCF API error {response.status}: {message}", status_code=response.status
        )

    async def get_json(self, path: str, params: list[tuple[str, str]]) -> dict[str, Any]:
        """GET ``path`` under the coverage and return the decoded JSON object.

        Raises:
            NavitiaNoSolutionError: If Navitia reports that no journey exists.
            RemoteLookupError: On transport errors, timeouts, error statuses
                or an undecodable body.
        """
        url = f"{self._base_url}/{path}"
        headers = dict(DEFAULT_HEADERS)
        log_api_request("GET", url, params=params, headers=headers)

        try:
            async with self._session.get(
                url, params=params, headers=headers, auth=self._auth(), timeout=self._timeout
            ) as response:
                if response.status != 200:
                    await self._raise_for_error(response, url)
                data = await self._read_json(response, url)
                log_api_response(url, response.status, data)
        except TimeoutError as e:
            raise RemoteLookupError(f"Request to {url} timed out") from e
        except aiohttp.ClientError as e:
            raise RemoteLookupError(f"Request to {url} failed: {e}") from e

        if not isinstance(data, dict):
            raise RemoteLookupError(f"Unexpected response shape from {url}")
        return data
