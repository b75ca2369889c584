from types import MappingProxyType
from unittest.mock import AsyncMock, MagicMock

import pytest

from governance.client import GovernanceClient
from governance.models import ContractAddresses, NetworkConfig

# Example key from the eth-account docs; never funded
TEST_PRIVATE_KEY = "0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"

GOVERNANCE = "0x" + "11" * 20
TOKEN = "0x" + "22" * 20
SPLITTER = "0x" + "33" * 20
STABLE_ASSET = "0x" + "44" * 20

LOCAL = NetworkConfig(
    name="Local Devnet",
    chain_id=31337,
    rpc_url="http://127.0.0.1:8545",
    explorer_url="https://explorer.test",
    contracts=ContractAddresses(
        governance=GOVERNANCE,
        token=TOKEN,
        splitter=SPLITTER,
        stable_asset=STABLE_ASSET,
    ),
)

# Same contracts, no stable asset
PLAIN = LOCAL.model_copy(update={
    "name": "Plain Devnet",
    "contracts": ContractAddresses(governance=GOVERNANCE, token=TOKEN, splitter=SPLITTER),
})

TEST_NETWORKS = MappingProxyType({"local": LOCAL, "plain": PLAIN})


def bound_call(value=None, error=None) -> MagicMock:
    """A contract function bound to its args: `.call()` returns `value` or raises `error`."""
    bound = MagicMock()
    bound.call = AsyncMock(return_value=value, side_effect=error)
    return bound


@pytest.fixture
def contract_fn():
    """
    Factory for a fake `contract.functions.<name>`.
    Pass `value` for a constant result, or `by_id` (first arg -> value or exception).
    """

    def factory(value=None, error=None, by_id=None) -> MagicMock:
        if by_id is None:
            return MagicMock(return_value=bound_call(value, error))

        def build(first_arg, *rest):
            result = by_id[first_arg]
            if isinstance(result, BaseException):
                return bound_call(error=result)
            return bound_call(result)

        return MagicMock(side_effect=build)

    return factory


def _with_fake_contracts(client: GovernanceClient) -> GovernanceClient:
    client._governance = MagicMock()
    client._token = MagicMock()
    if client._stable_asset is not None:
        client._stable_asset = MagicMock()
    return client


@pytest.fixture
def client() -> GovernanceClient:
    return _with_fake_contracts(
        GovernanceClient(network="local", private_key=TEST_PRIVATE_KEY, networks=TEST_NETWORKS)
    )


@pytest.fixture
def plain_client() -> GovernanceClient:
    return _with_fake_contracts(
        GovernanceClient(network="plain", private_key=TEST_PRIVATE_KEY, networks=TEST_NETWORKS)
    )


@pytest.fixture
def read_only_client() -> GovernanceClient:
    return _with_fake_contracts(GovernanceClient(network="local", networks=TEST_NETWORKS))


@pytest.fixture
def networks():
    return TEST_NETWORKS


@pytest.fixture
def private_key() -> str:
    return TEST_PRIVATE_KEY
