"""HTTP client for the Cisco support APIs.

Issues authenticated GET requests keyed by serial number. No retry: the
first failure is reported to the caller.
"""

from __future__ import annotations

import logging

import httpx
from rich.console import Console

from sn2info.utils.errors import ApiError, NetworkError

logger = logging.getLogger(__name__)
console = Console(stderr=True)


class SupportApiClient:
    """Bearer-authenticated GET client for the serial-number endpoints."""

    def __init__(self, token: str, debug: bool = False, verbose: bool = False) -> None:
        self._token = token
        self._debug = debug
        self._verbose = verbose
        self._http = httpx.Client(timeout=60.0)

    def get(self, base_url: str, serial: str) -> httpx.Response:
        """GET ``<base_url><serial>``.

        Args:
            base_url: Endpoint URL ending where the serial number goes.
            serial: Serial number appended to the path.

        Returns:
            The httpx.Response object with its body fully read.

        Raises:
            NetworkError: The request produced no response.
            ApiError: The API answered with an HTTP error status.
        """
        url = base_url + serial
        if self._debug:
            console.print(f"====> {url}", markup=False, highlight=False, soft_wrap=True)
        if self._verbose:
            logger.info(f"GET {url}")

        try:
            response = self._http.get(url, headers=self._build_headers())
        except httpx.HTTPError as e:
            raise NetworkError(f"GET {url} failed: {e}") from e
        except httpx.InvalidURL as e:
            raise NetworkError(f"Cannot request {url!r}: {e}") from e

        if self._verbose:
            logger.info(f"Response: {response.status_code}")

        if response.status_code >= 400:
            error_detail = response.text
            try:
                error_json = response.json()
                error_detail = error_json.get("message", error_json.get("error_description", response.text))
            except (ValueError, AttributeError):
                pass
            raise ApiError(
                f"API error (HTTP {response.status_code}) for {url}: {error_detail}",
                status_code=response.status_code,
            )

        return response

    def _build_headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "Authorization": f"Bearer {self._token}",
        }

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._http.close()
