import click

from cli.runner import emit, run_operation
from governance.models import TreasurySnapshot
from utils.formatter_utils import decimal_to_str


def _render(snapshot: TreasurySnapshot) -> None:
    token = snapshot.token
    click.echo("💰 Treasury:\n")
    click.echo(f"   {token.symbol} in Splitter: {decimal_to_str(token.balance)}")
    if snapshot.stable_asset is not None:
        stable = snapshot.stable_asset
        shown = decimal_to_str(stable.balance) if stable.balance is not None else stable.error
        click.echo(f"   Stable asset in Governance: {shown}")


@click.command()
@click.pass_context
def treasury(ctx: click.Context):
    """Check treasury balance."""
    snapshot = run_operation(ctx, lambda client: client.get_treasury())
    emit(ctx, snapshot, _render)
