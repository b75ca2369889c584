import click

from cli.runner import emit, run_operation
from governance.models import DonationReceipt
from utils.formatter_utils import decimal_to_str


def _render(receipt: DonationReceipt) -> None:
    click.echo("✅ Donation successful!")
    click.echo(f"   Amount: {decimal_to_str(receipt.amount)}")
    click.echo(f"   To: {receipt.to}")
    click.echo(f"   TX: {receipt.explorer_url}")


@click.command()
@click.argument("amount", type=str)
@click.pass_context
def donate(ctx: click.Context, amount: str):
    """Donate AMOUNT of the stable asset to the treasury (testnet)."""
    receipt = run_operation(ctx, lambda client: client.donate(amount))
    emit(ctx, receipt, _render)
