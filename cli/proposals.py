from typing import List

import click

from cli.runner import emit, run_operation
from governance.models import Proposal
from utils.formatter_utils import decimal_to_str


def _render(proposals: List[Proposal]) -> None:
    click.echo("📋 Proposals:\n")
    if not proposals:
        click.echo("No proposals yet.")
        return
    for p in proposals:
        click.echo(f"#{p.id} - {p.title}")
        click.echo(f"   Status: {p.status.value} | Active: {str(p.is_active).lower()}")
        click.echo(f"   Votes: ✅ {decimal_to_str(p.yes_votes)} FOR | ❌ {decimal_to_str(p.no_votes)} AGAINST")
        click.echo(f"   Ends: {p.end_time:%Y-%m-%d %H:%M:%S %Z}\n")


@click.command()
@click.pass_context
def proposals(ctx: click.Context):
    """List all proposals."""
    result = run_operation(ctx, lambda client: client.list_proposals())
    emit(ctx, result, _render)
