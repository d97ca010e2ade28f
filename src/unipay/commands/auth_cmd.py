"""CLI commands for token management."""

from __future__ import annotations

from typing import Annotated

import httpx
import typer
from pydantic import ValidationError
from rich.console import Console

from unipay.client import PayPalClient
from unipay.config import get_config
from unipay.errors import UnipayError
from unipay.utils.errors import handle_error
from unipay.utils.output import OutputFormat, print_output

console = Console(stderr=True)
app = typer.Typer(name="auth", help="Acquire and inspect PayPal access tokens.")


def _status_row(client: PayPalClient) -> dict[str, object]:
    status = client.token_status()
    return {
        "has_token": status.has_token,
        "is_expired": status.is_expired,
        "expires_at": str(status.expires_at) if status.expires_at else "N/A",
        "seconds_remaining": status.seconds_remaining or 0,
    }


@app.command()
def token(
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
    show: Annotated[bool, typer.Option("--show", help="Print the access token itself")] = False,
) -> None:
    """Acquire a client-credentials token and display its status."""
    try:
        client = PayPalClient(get_config().paypal)
    except UnipayError as e:
        handle_error(e)
        raise typer.Exit(1)

    try:
        console.print(f"Requesting token from [bold]{client.api_base}[/bold]...", style="yellow")
        response = client.get_access_token()
        result = {"status": "authenticated", "token_type": response.token_type, **_status_row(client)}
        if show:
            result["access_token"] = response.access_token
        print_output(result, output, title="Access Token")
    except (UnipayError, httpx.HTTPError, ValidationError) as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command()
def status(
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
) -> None:
    """Show the configured account. Reads configuration only, no token is requested.

    Tokens live in memory for the lifetime of one client, so there is nothing
    to report between invocations; use `auth token` to acquire one.
    """
    settings = get_config().paypal
    try:
        settings.require_credentials()
    except UnipayError as e:
        handle_error(e)
        raise typer.Exit(1)

    result = {
        "api_base": settings.api_base.rstrip("/"),
        "client_id": settings.client_id,
        "refresh_threshold": settings.refresh_threshold,
        "acquire_on_first_use": settings.acquire_on_first_use,
        "timeout": settings.timeout,
    }
    print_output(result, output, title="Account Configuration")
