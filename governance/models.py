from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

from governance.exceptions import DataIntegrityError
from utils.formatter_utils import to_normalized_address


class ContractAddresses(BaseModel):
    model_config = ConfigDict(frozen=True)

    governance: str
    token: str
    splitter: str
    # Fiat-pegged asset used as a governance token stand-in (testnets only)
    stable_asset: str | None = None

    @field_validator("governance", "token", "splitter", "stable_asset")
    @classmethod
    def _checksum(cls, value: str | None) -> str | None:
        return to_normalized_address(value)


class NetworkConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    chain_id: int
    rpc_url: str
    explorer_url: str
    contracts: ContractAddresses

    def tx_url(self, tx_hash: str) -> str:
        return f"{self.explorer_url.rstrip('/')}/tx/{tx_hash}"


class ProposalStatus(str, Enum):
    PENDING = "Pending"
    ACTIVE = "Active"
    ENDED = "Ended"
    CANCELLED = "Cancelled"

    @classmethod
    def from_code(cls, code: int) -> "ProposalStatus":
        """
        Decodes the contract's uint8 status positionally.
        Anything outside 0..3 is a data-integrity error, never a default.
        """
        members = list(cls)
        if not isinstance(code, int) or isinstance(code, bool) or not 0 <= code < len(members):
            raise DataIntegrityError(f"Unknown proposal status code: {code!r}")
        return members[code]


class ProposalResult(BaseModel):
    ended: bool
    passed: bool
    yes_votes: Decimal
    no_votes: Decimal
    total_votes: Decimal


class Proposal(BaseModel):
    id: int
    title: str
    description: str
    start_time: datetime
    end_time: datetime
    yes_votes: Decimal
    no_votes: Decimal
    cancelled: bool
    status: ProposalStatus
    is_active: bool
    result: ProposalResult


class VotingPower(BaseModel):
    address: str
    voting_power: Decimal
    raw: int


class TokenBalance(BaseModel):
    address: str
    symbol: str | None = None
    decimals: int | None = None
    balance: Decimal | None = None
    # Set instead of `balance` when a best-effort read failed
    error: str | None = None


class TreasurySnapshot(BaseModel):
    token: TokenBalance
    stable_asset: TokenBalance | None = None


class TransactionResult(BaseModel):
    success: bool = True
    tx_hash: str
    explorer_url: str
    block_number: int | None = None
    gas_used: int | None = None


class VoteReceipt(TransactionResult):
    proposal_id: int
    support: str
    voting_power: Decimal


class DonationReceipt(TransactionResult):
    amount: Decimal
    to: str


class ProposalCreationReceipt(TransactionResult):
    proposal_id: int
    title: str
