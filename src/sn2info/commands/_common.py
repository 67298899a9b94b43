"""Shared option types and client wiring for the lookup commands."""

from __future__ import annotations

from typing import Annotated

import typer

from sn2info.auth import resolve_token
from sn2info.client import SupportApiClient
from sn2info.config import Config, get_config
from sn2info.utils.errors import MissingSerialError
from sn2info.utils.output import OutputFormat

SerialOption = Annotated[str, typer.Option("--serial", "-serial", "-s", help="Serial number to look up")]
DebugOption = Annotated[bool, typer.Option("--debug", "-debug", "-d", help="Echo each raw JSON response, indented")]
OutputOption = Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Show request details")]

COVERAGE_COLUMNS = [
    "sr_no", "is_covered", "base_pid", "service_contract_number",
    "service_line_descr", "warranty_type", "warranty_end_date",
    "covered_product_line_end_date", "contract_site_customer_name",
]
PRODUCT_COLUMNS = [
    "sr_no", "base_pid", "product_name", "product_series",
    "product_category", "release_date", "orderable_status",
]


def require_serial(serial: str) -> str:
    serial = serial.strip()
    if not serial:
        raise MissingSerialError("Specify a serial number via the -serial flag")
    return serial


def build_client(debug: bool = False, verbose: bool = False) -> tuple[Config, SupportApiClient]:
    """Load config, resolve a bearer token and build the API client.

    A freshly issued token is printed to stdout.
    """
    config = get_config()
    token, fresh = resolve_token(config)
    if fresh:
        typer.echo(token)
    return config, SupportApiClient(token, debug=debug, verbose=verbose)
