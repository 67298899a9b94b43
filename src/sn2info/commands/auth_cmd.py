"""CLI commands for authentication."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from sn2info.auth import Authenticator
from sn2info.config import get_config
from sn2info.utils.errors import CredentialsError, Sn2InfoError, handle_error
from sn2info.utils.output import OutputFormat, print_output

console = Console(stderr=True)
app = typer.Typer(name="auth", help="Obtain OAuth2 access tokens.", no_args_is_help=True)


@app.command()
def token(
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Print only the access token")] = False,
) -> None:
    """Fetch an access token with CLIENT_ID/CLIENT_SECRET and print it."""
    config = get_config()
    if not config.has_client_credentials:
        handle_error(CredentialsError("CLIENT_ID and CLIENT_SECRET must be set to request a token"))
        raise typer.Exit(1)

    auth = Authenticator.from_config(config)
    try:
        console.print(f"Requesting token from [bold]{config.endpoints.token_url}[/bold]...", style="yellow")
        token_response = auth.fetch_token()
        if quiet:
            typer.echo(token_response.access_token)
            return
        print_output(token_response.model_dump(), output, title="Access Token")
    except Sn2InfoError as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        auth.close()
