"""unipay CLI entry point.

Operator commands for the PayPal REST account configured in .env
or config/unipay.yaml.
"""

from __future__ import annotations

import logging

import typer

from unipay.commands.auth_cmd import app as auth_app
from unipay.commands.orders_cmd import app as orders_app
from unipay.commands.payouts_cmd import app as payouts_app
from unipay.commands.webhooks_cmd import app as webhooks_app

app = typer.Typer(
    name="unipay",
    help="CLI for the unified payment provider client.",
    no_args_is_help=True,
)

# Register command groups
app.add_typer(auth_app, name="auth")
app.add_typer(orders_app, name="orders")
app.add_typer(payouts_app, name="payouts")
app.add_typer(webhooks_app, name="webhooks")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """unipay: tokens, orders, payouts and webhooks."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


if __name__ == "__main__":
    app()
