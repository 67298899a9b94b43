"""Coverage summary lookup service."""

from __future__ import annotations

from sn2info.client import SupportApiClient
from sn2info.models.coverage import CoverageSummary
from sn2info.services.decoding import decode_response


class CoverageService:
    """Fetches warranty and contract coverage for a serial number."""

    def __init__(self, client: SupportApiClient, base_url: str, debug: bool = False) -> None:
        self._client = client
        self._base_url = base_url
        self._debug = debug

    def get_summary(self, serial: str) -> CoverageSummary:
        """Get the coverage summary for one serial number."""
        response = self._client.get(self._base_url, serial)
        return decode_response(response, CoverageSummary, debug=self._debug)
