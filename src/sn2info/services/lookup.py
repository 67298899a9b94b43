"""Serial number lookup: coverage first, then product information."""

from __future__ import annotations

from pydantic import BaseModel

from sn2info.client import SupportApiClient
from sn2info.config import Endpoints
from sn2info.models.coverage import CoverageSummary
from sn2info.models.product import ProductInfo
from sn2info.services.coverage import CoverageService
from sn2info.services.product import ProductService


class LookupResult(BaseModel):
    """Decoded coverage and product payloads for one serial number."""
    serial: str
    coverage: CoverageSummary
    product: ProductInfo


class LookupService:
    """Runs both lookups for a serial number, sequentially.

    The first failure propagates; no partial result is returned.
    """

    def __init__(self, client: SupportApiClient, endpoints: Endpoints, debug: bool = False) -> None:
        self._coverage = CoverageService(client, endpoints.coverage_url, debug=debug)
        self._product = ProductService(client, endpoints.product_url, debug=debug)

    def run(self, serial: str) -> LookupResult:
        coverage = self._coverage.get_summary(serial)
        product = self._product.get_info(serial)
        return LookupResult(serial=serial, coverage=coverage, product=product)
