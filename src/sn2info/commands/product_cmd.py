"""CLI command for product information lookups."""

from __future__ import annotations

import typer

from sn2info.commands._common import (
    PRODUCT_COLUMNS,
    DebugOption,
    OutputOption,
    SerialOption,
    VerboseOption,
    build_client,
    require_serial,
)
from sn2info.services.product import ProductService
from sn2info.utils.errors import Sn2InfoError, handle_error
from sn2info.utils.output import OutputFormat, print_json, print_output


def product(
    serial: SerialOption = "",
    debug: DebugOption = False,
    output: OutputOption = OutputFormat.TABLE,
    verbose: VerboseOption = False,
) -> None:
    """Show catalog details of the product behind a serial number."""
    client = None
    try:
        serial = require_serial(serial)
        config, client = build_client(debug, verbose)
        info = ProductService(client, config.endpoints.product_url, debug=debug).get_info(serial)
        if output == OutputFormat.JSON:
            print_json(info.model_dump())
            return
        rows = [r.summary_row() for r in info.product_list]
        columns = PRODUCT_COLUMNS if output == OutputFormat.TABLE else None
        print_output(rows, output, columns=columns, title=f"Product ({serial})")
    except Sn2InfoError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        if client is not None:
            client.close()
