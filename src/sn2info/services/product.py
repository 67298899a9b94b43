"""Product information lookup service."""

from __future__ import annotations

from sn2info.client import SupportApiClient
from sn2info.models.product import ProductInfo
from sn2info.services.decoding import decode_response


class ProductService:
    """Fetches catalog metadata for the product behind a serial number."""

    def __init__(self, client: SupportApiClient, base_url: str, debug: bool = False) -> None:
        self._client = client
        self._base_url = base_url
        self._debug = debug

    def get_info(self, serial: str) -> ProductInfo:
        """Get product information for one serial number."""
        response = self._client.get(self._base_url, serial)
        return decode_response(response, ProductInfo, debug=self._debug)
