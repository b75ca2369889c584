from types import MappingProxyType
from typing import Mapping

from governance.models import ContractAddresses, NetworkConfig

# Closed set of supported networks. Adding a network is a change to this table only.
NETWORKS: Mapping[str, NetworkConfig] = MappingProxyType({
    "testnet": NetworkConfig(
        name="Base Sepolia",
        chain_id=84532,
        rpc_url="https://sepolia.base.org",
        explorer_url="https://sepolia.basescan.org",
        contracts=ContractAddresses(
            governance="0xa5070Da0d76F1872D1c112D6e71f3666598314DF",
            # USDC doubles as the governance token on testnet
            token="0x036CbD53842c5426634e7929541eC2318f3dCF7e",
            splitter="0xcf9933743D2312ea1383574907cF1A9c6fE4808d",
            stable_asset="0x036CbD53842c5426634e7929541eC2318f3dCF7e",
        ),
    ),
})
