from typing import Optional

import click

from cli.runner import emit, run_operation
from governance.client import GovernanceClient
from governance.exceptions import ConfigurationError
from governance.models import VotingPower
from utils.formatter_utils import decimal_to_str


def _render(power: VotingPower) -> None:
    click.echo(f"🗳️ Voting Power for {power.address}:")
    click.echo(f"   {decimal_to_str(power.voting_power)} votes")


@click.command()
@click.argument("address", required=False)
@click.pass_context
def power(ctx: click.Context, address: Optional[str]):
    """Check voting power of ADDRESS (defaults to the configured wallet)."""

    async def operation(client: GovernanceClient) -> VotingPower:
        target = address or client.address
        if not target:
            raise ConfigurationError("Usage: power <address>, or set MOLTDAO_PRIVATE_KEY to use your wallet")
        return await client.get_voting_power(target)

    emit(ctx, run_operation(ctx, operation), _render)
