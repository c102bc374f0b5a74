import click

from purchasing.infrastructure.bootstrap import LOG_LEVEL_ENV
from purchasing.infrastructure.cli.purchase_order_commands import (
    po_add_line,
    po_create,
    po_place,
    po_receive,
    po_show,
    po_undo_receipt,
)
from purchasing.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--log-level",
    default="WARNING",
    envvar=LOG_LEVEL_ENV,
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity.",
)
def cli(log_level: str) -> None:
    """Purchasing: purchase orders and goods receipts"""
    configure_logging(log_level)


@cli.group()
def po() -> None:
    """Manage purchase orders."""


# Register subcommands
po.add_command(po_add_line)
po.add_command(po_create)
po.add_command(po_place)
po.add_command(po_receive)
po.add_command(po_show)
po.add_command(po_undo_receipt)
