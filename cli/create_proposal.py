import click

from cli.runner import emit, run_operation
from governance.models import ProposalCreationReceipt


def _render(receipt: ProposalCreationReceipt) -> None:
    click.echo("✅ Proposal created!")
    click.echo(f"   Proposal: #{receipt.proposal_id} - {receipt.title}")
    click.echo(f"   TX: {receipt.explorer_url}")


@click.command()
@click.argument("title")
@click.argument("description")
@click.pass_context
def create_proposal(ctx: click.Context, title: str, description: str):
    """Create a proposal (contract owner only)."""
    receipt = run_operation(ctx, lambda client: client.create_proposal(title, description))
    emit(ctx, receipt, _render)
