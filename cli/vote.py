import click

from cli.runner import emit, run_operation
from governance.models import VoteReceipt
from utils.formatter_utils import decimal_to_str


def _render(receipt: VoteReceipt) -> None:
    click.echo("✅ Vote submitted!")
    click.echo(f"   Proposal: #{receipt.proposal_id}")
    click.echo(f"   Vote: {receipt.support}")
    click.echo(f"   Power: {decimal_to_str(receipt.voting_power)}")
    click.echo(f"   TX: {receipt.explorer_url}")


@click.command()
@click.argument("proposal_id", type=click.IntRange(min=1))
@click.argument("choice", type=click.Choice(["for", "against"], case_sensitive=False))
@click.pass_context
def vote(ctx: click.Context, proposal_id: int, choice: str):
    """Vote FOR or AGAINST proposal PROPOSAL_ID."""
    support = choice.lower() == "for"
    receipt = run_operation(ctx, lambda client: client.vote(proposal_id, support))
    emit(ctx, receipt, _render)
