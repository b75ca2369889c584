# --- MOLTDAO GOVERNANCE ---
GOVERNANCE_ABI = [
    # --- READ FUNCTIONS ---
    {
        "inputs": [],
        "name": "proposalCount",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "name": "getProposal",
        "outputs": [
            {"internalType": "uint256", "name": "id", "type": "uint256"},
            {"internalType": "string", "name": "title", "type": "string"},
            {"internalType": "string", "name": "description", "type": "string"},
            {"internalType": "uint256", "name": "startTime", "type": "uint256"},
            {"internalType": "uint256", "name": "endTime", "type": "uint256"},
            {"internalType": "uint256", "name": "yesVotes", "type": "uint256"},
            {"internalType": "uint256", "name": "noVotes", "type": "uint256"},
            {"internalType": "bool", "name": "cancelled", "type": "bool"},
            {"internalType": "uint8", "name": "status", "type": "uint8"}
        ],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "uint256", "name": "", "type": "uint256"},
            {"internalType": "address", "name": "", "type": "address"}
        ],
        "name": "hasUserVoted",
        "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "name": "isProposalActive",
        "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"internalType": "address", "name": "", "type": "address"}],
        "name": "getVotingPower",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
    # (ended, passed, yesVotes, noVotes, totalVotes)
    {
        "inputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "name": "getProposalResult",
        "outputs": [
            {"internalType": "bool", "name": "ended", "type": "bool"},
            {"internalType": "bool", "name": "passed", "type": "bool"},
            {"internalType": "uint256", "name": "yesVotes", "type": "uint256"},
            {"internalType": "uint256", "name": "noVotes", "type": "uint256"},
            {"internalType": "uint256", "name": "totalVotes", "type": "uint256"}
        ],
        "stateMutability": "view",
        "type": "function"
    },
    # --- WRITE FUNCTIONS ---
    {
        "inputs": [
            {"internalType": "uint256", "name": "_proposalId", "type": "uint256"},
            {"internalType": "bool", "name": "_support", "type": "bool"}
        ],
        "name": "vote",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    # Owner only
    {
        "inputs": [
            {"internalType": "string", "name": "_title", "type": "string"},
            {"internalType": "string", "name": "_description", "type": "string"}
        ],
        "name": "createProposal",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "nonpayable",
        "type": "function"
    }
]
