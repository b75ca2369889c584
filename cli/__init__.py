import click

from config.settings import settings
from utils.logger_utils import configure_logging

from cli.create_proposal import create_proposal
from cli.donate import donate
from cli.power import power
from cli.proposals import proposals
from cli.treasury import treasury
from cli.vote import vote
from cli.voted import voted


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(version="0.1.0")
@click.option("-n", "--network", default=settings.network, show_default=True, type=str, help="Named network (env: MOLTDAO_NETWORK).")
@click.option("--rpc-url", default=settings.rpc_url, type=str, help="Override the network's JSON-RPC endpoint (env: MOLTDAO_RPC_URL).")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print results as JSON.")
@click.option("--log-file", default=settings.log_file, show_default=True, type=str, help="Path to the log file.")
@click.option("--log-level", default=settings.log_level, show_default=True, type=str, help="Logging level.")
@click.pass_context
def cli(ctx, network, rpc_url, as_json, log_file, log_level):
    """MoltDAO governance: proposals, voting power, treasury, votes and donations."""
    configure_logging(log_file, log_level)
    ctx.obj = {"network": network, "rpc_url": rpc_url, "as_json": as_json}


# Read commands
cli.add_command(proposals, "proposals")
cli.add_command(power, "power")
cli.add_command(treasury, "treasury")
cli.add_command(voted, "voted")

# Write commands
cli.add_command(vote, "vote")
cli.add_command(donate, "donate")
cli.add_command(create_proposal, "create-proposal")
