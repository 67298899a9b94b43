"""Shared fixtures for the sn2info test suite."""
from __future__ import annotations

import copy

import httpx
import pytest

from sn2info.config import Config, Endpoints, Settings

TOKEN_URL = "https://sso.example.test/as/token.oauth2"
COVERAGE_URL = "https://api.example.test/sn2info/v2/coverage/summary/serial_numbers/"
PRODUCT_URL = "https://api.example.test/product/v1/information/serial_numbers/"

TOKEN_PAYLOAD = {
    "access_token": "fresh-token-123",
    "token_type": "Bearer",
    "expires_in": 3599,
}

COVERAGE_PAYLOAD = {
    "pagination_response_record": {
        "last_index": 1,
        "page_index": 1,
        "page_records": 1,
        "self_link": "https://api.example.test/sn2info/v2/coverage/summary/serial_numbers/SN123",
        "title": "Coverage Summary by Serial Numbers",
        "total_records": 1,
    },
    "serial_numbers": [
        {
            "base_pid_list": [{"base_pid": "WS-C3750X-48P-S"}],
            "contract_site_customer_name": "ACME CORP",
            "contract_site_address1": "1 Main St",
            "contract_site_city": "SAN JOSE",
            "contract_site_state_province": "CA",
            "contract_site_country": "US",
            "covered_product_line_end_date": "2027-06-30",
            "id": "1",
            "is_covered": "YES",
            "orderable_pid_list": [
                {
                    "item_description": "Catalyst 3750X 48 Port PoE IP Base",
                    "item_position": "",
                    "item_type": "MAJOR",
                    "orderable_pid": "WS-C3750X-48P-S",
                    "pillar_code": "SWITCH",
                }
            ],
            "parent_sr_no": "",
            "service_contract_number": "912345678",
            "service_line_descr": "SMARTNET 8X5XNBD",
            "sr_no": "SN123",
            "warranty_end_date": "2016-02-23",
            "warranty_type": "WARR-LTD-LIFE-HW",
            "warranty_type_description": "Limited Lifetime HW Warranty",
        }
    ],
}

PRODUCT_PAYLOAD = {
    "pagination_response_record": {
        "last_index": 1,
        "page_index": 1,
        "page_records": 1,
        "self_link": "https://api.example.test/product/v1/information/serial_numbers/SN123",
        "title": "Product Information by Serial Numbers",
        "total_records": 1,
    },
    "product_list": [
        {
            "id": "1",
            "sr_no": "SN123",
            "base_pid": "WS-C3750X-48P-S",
            "orderable_pid": "WS-C3750X-48P-S",
            "product_name": "Catalyst 3750X 48 Port PoE IP Base",
            "product_type": "SWITCH",
            "product_series": "Cisco Catalyst 3750-X Series Switches",
            "product_category": "Switches",
            "product_subcategory": "Campus LAN Switches - Access",
            "release_date": "2010-02-26",
            "orderable_status": "EoS",
            "dimensions": {"dimensions_format": "inches", "dimensions_value": "1.75 x 17.5 x 18.1"},
            "weight": "16.5 lb",
            "form_factor": "1RU",
            "product_support_page": "https://www.example.test/support/c3750x",
            "visio_stencil_url": "",
            "rich_media_urls": {
                "small_image_url": "https://www.example.test/img/c3750x-small.jpg",
                "large_image_url": "https://www.example.test/img/c3750x-large.jpg",
            },
        }
    ],
}


@pytest.fixture
def fake_endpoints() -> Endpoints:
    return Endpoints(token_url=TOKEN_URL, coverage_url=COVERAGE_URL, product_url=PRODUCT_URL)


@pytest.fixture
def fake_settings() -> Settings:
    return Settings(client_id="test-client-id", client_secret="test-client-secret")


@pytest.fixture
def fake_config(fake_settings, fake_endpoints) -> Config:
    return Config(settings=fake_settings, endpoints=fake_endpoints)


@pytest.fixture
def coverage_payload() -> dict:
    return copy.deepcopy(COVERAGE_PAYLOAD)


@pytest.fixture
def product_payload() -> dict:
    return copy.deepcopy(PRODUCT_PAYLOAD)


class StubTransport:
    """Routes requests to canned responses and records every request."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.routes: dict[str, tuple[int, dict] | Exception] = {}
        self.respond(TOKEN_URL, 200, json=TOKEN_PAYLOAD)
        self.respond(COVERAGE_URL + "SN123", 200, json=COVERAGE_PAYLOAD)
        self.respond(PRODUCT_URL + "SN123", 200, json=PRODUCT_PAYLOAD)

    def respond(self, url: str, status_code: int, **kwargs) -> None:
        self.routes[url] = (status_code, kwargs)

    def fail(self, url: str, error: Exception) -> None:
        self.routes[url] = error

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(str(request.url))
        if route is None:
            return httpx.Response(404, json={"message": "Not Found"})
        if isinstance(route, Exception):
            raise route
        status_code, kwargs = route
        return httpx.Response(status_code, **kwargs)

    def calls_to(self, url: str) -> list[httpx.Request]:
        return [r for r in self.requests if str(r.url).startswith(url)]


@pytest.fixture
def stub_transport(monkeypatch) -> StubTransport:
    """Make every httpx.Client created by sn2info use a StubTransport."""
    stub = StubTransport()
    real_client = httpx.Client

    def _client(*args, **kwargs):
        kwargs["transport"] = httpx.MockTransport(stub)
        return real_client(*args, **kwargs)

    monkeypatch.setattr(httpx, "Client", _client)
    return stub
