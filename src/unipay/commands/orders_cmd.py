"""CLI commands for checkout orders."""

from __future__ import annotations

from typing import Annotated

import httpx
import typer
from pydantic import ValidationError

from unipay.client import PayPalClient
from unipay.config import get_config
from unipay.errors import UnipayError
from unipay.services.orders import OrderService
from unipay.utils.errors import handle_error
from unipay.utils.output import OutputFormat, print_output

app = typer.Typer(name="orders", help="Inspect and capture checkout orders.")

ORDER_COLUMNS = ["id", "status", "intent", "create_time"]


def _build_client() -> tuple[PayPalClient, OrderService]:
    client = PayPalClient(get_config().paypal)
    return client, OrderService(client)


@app.command("get")
def get_order(
    order_id: Annotated[str, typer.Argument(help="Order ID")],
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
) -> None:
    """Show an order."""
    try:
        client, service = _build_client()
    except UnipayError as e:
        handle_error(e)
        raise typer.Exit(1)

    try:
        order = service.get(order_id)
        print_output(order, output, columns=ORDER_COLUMNS, title=f"Order {order_id}")
    except (UnipayError, httpx.HTTPError, ValidationError) as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()


@app.command("capture")
def capture_order(
    order_id: Annotated[str, typer.Argument(help="Approved order ID")],
    request_id: Annotated[str | None, typer.Option("--request-id", help="Idempotency key (PayPal-Request-Id)")] = None,
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
) -> None:
    """Capture payment for an approved order."""
    try:
        client, service = _build_client()
    except UnipayError as e:
        handle_error(e)
        raise typer.Exit(1)

    try:
        result = service.capture(order_id, request_id=request_id)
        print_output(result, output, columns=["id", "status"], title="Capture")
    except (UnipayError, httpx.HTTPError, ValidationError) as e:
        handle_error(e)
        raise typer.Exit(1)
    finally:
        client.close()
