"""CLI command for the full serial number lookup."""

from __future__ import annotations

import typer
from rich.console import Console

from sn2info.commands._common import (
    COVERAGE_COLUMNS,
    PRODUCT_COLUMNS,
    DebugOption,
    OutputOption,
    SerialOption,
    VerboseOption,
    build_client,
    require_serial,
)
from sn2info.services.lookup import LookupResult, LookupService
from sn2info.utils.errors import Sn2InfoError, handle_error
from sn2info.utils.output import OutputFormat, print_json, print_output

console = Console(stderr=True)


def render_result(result: LookupResult, output: OutputFormat) -> None:
    """Print both halves of a lookup in the requested format."""
    console.print(
        f"[dim]Found {len(result.coverage.serial_numbers)} coverage record(s), "
        f"{len(result.product.product_list)} product record(s)[/dim]"
    )
    if output == OutputFormat.JSON:
        print_json({
            "serial": result.serial,
            "coverage": result.coverage.model_dump(),
            "product": result.product.model_dump(),
        })
        return

    coverage_rows = [r.summary_row() for r in result.coverage.serial_numbers]
    product_rows = [r.summary_row() for r in result.product.product_list]
    columns = None if output == OutputFormat.CSV else COVERAGE_COLUMNS
    print_output(coverage_rows, output, columns=columns, title=f"Coverage ({result.serial})")
    if output == OutputFormat.CSV and coverage_rows and product_rows:
        typer.echo("")
    columns = None if output == OutputFormat.CSV else PRODUCT_COLUMNS
    print_output(product_rows, output, columns=columns, title=f"Product ({result.serial})")


def lookup(
    serial: SerialOption = "",
    debug: DebugOption = False,
    output: OutputOption = OutputFormat.TABLE,
    verbose: VerboseOption = False,
) -> None:
    """Look up coverage status and product information for a serial number."""
    client = None
    try:
        serial = require_serial(serial)
        config, client = build_client(debug, verbose)
        result = LookupService(client, config.endpoints, debug=debug).run(serial)
        render_result(result, output)
    except Sn2InfoError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        if client is not None:
            client.close()
