"""CLI commands for webhooks."""

from __future__ import annotations

from typing import Annotated

import httpx
import typer
from pydantic import ValidationError

from unipay.client import PayPalClient
from unipay.config import get_config
from unipay.errors import UnipayError
from unipay.services.webhooks import ANCHOR_TYPE_APPLICATION, WebhookService
from unipay.utils.errors import handle_error
from unipay.utils.output import OutputFormat, print_output

app = typer.Typer(name="webhooks", help="List webhooks and event types.")


def _build_client() -> tuple[PayPalClient, WebhookService]:
    client = PayPalClient(get_config().paypal)
    return client, WebhookService(client)


@app.command("list")
def list_webhooks(
    anchor_type: Annotated[str, typer.Option("--anchor-type", help="APPLICATION or ACCOUNT")] = ANCHOR_TYPE_APPLICATION,
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
) -> None:
    """List webhooks registered for the app."""
    try:
        client, service = _build_client()
    except UnipayError as e:
        handle_error(e)
        raise typer.Exit(1)

    try:
        response = service.list(anchor_type.upper())
        rows = [
            {"id": w.id, "url": w.url, "event_types": ", ".join(e.name for e in w.event_types)}
            for w in response.webhooks
        ]
        print_output(rows, output, title="Webhooks")
    except (UnipayError, httpx.HTTPError, ValidationError) as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("event-types")
def event_types(
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
) -> None:
    """List every webhook event type PayPal can deliver."""
    try:
        client, service = _build_client()
    except UnipayError as e:
        handle_error(e)
        raise typer.Exit(1)

    try:
        response = service.event_types()
        print_output(response.event_types, output, columns=["name", "description", "status"], title="Event types")
    except (UnipayError, httpx.HTTPError, ValidationError) as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()
