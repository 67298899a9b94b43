"""CLI command for coverage summary lookups."""

from __future__ import annotations

import typer

from sn2info.commands._common import (
    COVERAGE_COLUMNS,
    DebugOption,
    OutputOption,
    SerialOption,
    VerboseOption,
    build_client,
    require_serial,
)
from sn2info.services.coverage import CoverageService
from sn2info.utils.errors import Sn2InfoError, handle_error
from sn2info.utils.output import OutputFormat, print_json, print_output


def coverage(
    serial: SerialOption = "",
    debug: DebugOption = False,
    output: OutputOption = OutputFormat.TABLE,
    verbose: VerboseOption = False,
) -> None:
    """Show warranty and contract coverage for a serial number."""
    client = None
    try:
        serial = require_serial(serial)
        config, client = build_client(debug, verbose)
        summary = CoverageService(client, config.endpoints.coverage_url, debug=debug).get_summary(serial)
        if output == OutputFormat.JSON:
            print_json(summary.model_dump())
            return
        rows = [r.summary_row() for r in summary.serial_numbers]
        columns = COVERAGE_COLUMNS if output == OutputFormat.TABLE else None
        print_output(rows, output, columns=columns, title=f"Coverage ({serial})")
    except Sn2InfoError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        if client is not None:
            client.close()
