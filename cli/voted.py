from typing import Optional

import click

from cli.runner import emit, run_operation
from governance.client import GovernanceClient
from governance.exceptions import ConfigurationError


@click.command()
@click.argument("proposal_id", type=click.IntRange(min=1))
@click.argument("address", required=False)
@click.pass_context
def voted(ctx: click.Context, proposal_id: int, address: Optional[str]):
    """Check whether ADDRESS (defaults to the configured wallet) voted on PROPOSAL_ID."""

    async def operation(client: GovernanceClient) -> dict:
        target = address or client.address
        if not target:
            raise ConfigurationError("Usage: voted <proposal_id> <address>, or set MOLTDAO_PRIVATE_KEY")
        return {
            "proposal_id": proposal_id,
            "address": target,
            "has_voted": await client.has_voted(proposal_id, target),
        }

    def render(status: dict) -> None:
        answer = "has voted" if status["has_voted"] else "has not voted"
        click.echo(f"{status['address']} {answer} on proposal #{status['proposal_id']}")

    emit(ctx, run_operation(ctx, operation), render)
