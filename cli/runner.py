import asyncio
import json
from typing import Any, Awaitable, Callable

import click
from pydantic import BaseModel

from config.settings import settings
from governance.client import GovernanceClient
from governance.outcome import Outcome, attempt
from utils.logger_utils import get_logger

logger = get_logger("CLI Runner")

Operation = Callable[[GovernanceClient], Awaitable[Any]]


async def _execute(options: dict, operation: Operation) -> Any:
    # Construction errors (unknown network, bad RPC url) are part of the outcome too
    client = GovernanceClient(
        network=options["network"],
        private_key=settings.private_key_value(),
        rpc_url=options["rpc_url"],
        timeout=settings.rpc_timeout,
    )
    async with client:
        return await operation(client)


def run_operation(ctx: click.Context, operation: Operation) -> Any:
    """
    Runs a client operation for a CLI command. Governance errors are printed
    and end the process with exit code 1.
    """
    options = ctx.obj
    logger.debug(f"Network: {options['network']}")

    outcome: Outcome = asyncio.run(attempt(_execute(options, operation)))
    if not outcome.ok:
        click.echo(f"❌ Error: {outcome.message}", err=True)
        ctx.exit(1)
    return outcome.value


def emit(ctx: click.Context, value: Any, render: Callable[[Any], None]) -> None:
    """Prints `value` as JSON with --json, otherwise through `render`."""
    if ctx.obj["as_json"]:
        if isinstance(value, BaseModel):
            click.echo(value.model_dump_json(indent=2, exclude_none=True))
        elif isinstance(value, list):
            click.echo(json.dumps([item.model_dump(mode="json") for item in value], indent=2))
        else:
            click.echo(json.dumps(value, indent=2, default=str))
        return
    render(value)
