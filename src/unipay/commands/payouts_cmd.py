"""CLI commands for payouts."""

from __future__ import annotations

from typing import Annotated

import httpx
import typer
from pydantic import ValidationError
from rich.console import Console

from unipay.client import PayPalClient
from unipay.config import get_config
from unipay.errors import UnipayError
from unipay.services.payouts import PayoutService
from unipay.utils.errors import handle_error
from unipay.utils.output import OutputFormat, print_output

console = Console(stderr=True)
app = typer.Typer(name="payouts", help="Inspect payout batches and items.")

ITEM_COLUMNS = ["payout_item_id", "transaction_id", "transaction_status", "payout_batch_id"]


def _build_client() -> tuple[PayPalClient, PayoutService]:
    client = PayPalClient(get_config().paypal)
    return client, PayoutService(client)


@app.command("get")
def get_payout(
    batch_id: Annotated[str, typer.Argument(help="Payout batch ID")],
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
) -> None:
    """Show a payout batch and the status of its items."""
    try:
        client, service = _build_client()
    except UnipayError as e:
        handle_error(e)
        raise typer.Exit(1)

    try:
        payout = service.get(batch_id)
        if output == OutputFormat.JSON:
            print_output(payout, output)
        else:
            header = payout.batch_header
            if header is not None:
                console.print(f"[bold]{header.payout_batch_id}[/bold] {header.batch_status}")
            print_output(payout.items, output, columns=ITEM_COLUMNS, title="Payout items")
    except (UnipayError, httpx.HTTPError, ValidationError) as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("cancel-item")
def cancel_item(
    item_id: Annotated[str, typer.Argument(help="Unclaimed payout item ID")],
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
) -> None:
    """Cancel an unclaimed payout item."""
    try:
        client, service = _build_client()
    except UnipayError as e:
        handle_error(e)
        raise typer.Exit(1)

    try:
        item = service.cancel_item(item_id)
        print_output(item, output, columns=ITEM_COLUMNS, title="Cancelled item")
    except (UnipayError, httpx.HTTPError, ValidationError) as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()
