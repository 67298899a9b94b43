"""sn2info CLI entry point.

Agent-friendly CLI that resolves a hardware serial number into coverage
status and product metadata using the Cisco support APIs.
"""

from __future__ import annotations

import logging

import typer

from sn2info.commands.auth_cmd import app as auth_app
from sn2info.commands.coverage_cmd import coverage
from sn2info.commands.lookup_cmd import lookup
from sn2info.commands.product_cmd import product

app = typer.Typer(
    name="sn2info",
    help="Look up warranty coverage and product information by serial number.",
    no_args_is_help=True,
)

# Register commands
app.command("lookup")(lookup)
app.command("coverage")(coverage)
app.command("product")(product)
app.add_typer(auth_app, name="auth")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """sn2info: coverage and product lookups for serial numbers."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


if __name__ == "__main__":
    app()
