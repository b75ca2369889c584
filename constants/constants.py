# --- TOKEN SCALING ---

# Voting weights and vote tallies are reported with 18 fractional digits
VOTING_POWER_DECIMALS = 18

# USDC-style stable assets use 6 fractional digits
STABLE_ASSET_DECIMALS = 6

# --- NETWORK SELECTION ---

DEFAULT_NETWORK = "testnet"

# --- RPC ---

DEFAULT_RPC_TIMEOUT = 60
