import asyncio
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import aiohttp
from eth_account import Account
from eth_account.signers.local import LocalAccount
from eth_utils import ValidationError as KeyValidationError
from web3 import AsyncWeb3, Web3
from web3.exceptions import Web3Exception

from abi.erc20_abi import ERC20_ABI
from abi.governance_abi import GOVERNANCE_ABI
from constants.constants import (
    DEFAULT_NETWORK,
    DEFAULT_RPC_TIMEOUT,
    STABLE_ASSET_DECIMALS,
    VOTING_POWER_DECIMALS,
)
from constants.networks import NETWORKS
from governance.exceptions import (
    ConfigurationError,
    PreconditionError,
    PreconditionReason,
    TransportError,
)
from governance.models import (
    DonationReceipt,
    NetworkConfig,
    Proposal,
    ProposalCreationReceipt,
    ProposalResult,
    ProposalStatus,
    TokenBalance,
    TreasurySnapshot,
    VoteReceipt,
    VotingPower,
)
from utils.formatter_utils import format_units, parse_units, timestamp_to_datetime, to_normalized_address
from utils.logger_utils import get_logger
from utils.rpc_provider_utils import get_async_provider_from_uri

logger = get_logger("Governance Client")

# Failures of the JSON-RPC round trip. web3 raises its own hierarchy for RPC and ABI errors,
# aiohttp/asyncio for the HTTP layer, ValueError for legacy RPC error payloads.
TRANSPORT_ERRORS = (Web3Exception, aiohttp.ClientError, asyncio.TimeoutError, ConnectionError, ValueError)


class GovernanceClient(object):
    """
    Client for the MoltDAO governance contracts.

    Every public method is a coroutine that issues its reads (and at most one
    transaction) against the configured JSON-RPC endpoint and returns once the
    results are available. Nothing is cached between calls.

    Reads work without a signing key. Writes (vote, donate, create_proposal)
    require one and raise ConfigurationError otherwise.
    """

    def __init__(
            self,
            network: str = DEFAULT_NETWORK,
            private_key: Optional[str] = None,
            networks: Mapping[str, NetworkConfig] = NETWORKS,
            rpc_url: Optional[str] = None,
            timeout: int = DEFAULT_RPC_TIMEOUT,
        ):
        # Resolve before touching the network
        config = networks.get(network)
        if config is None:
            supported = ", ".join(sorted(networks)) or "none"
            raise ConfigurationError(f"Unsupported network '{network}'. Supported networks: {supported}")
        if rpc_url:
            config = config.model_copy(update={"rpc_url": rpc_url})

        self.network = network
        self.config = config
        self.contracts = config.contracts

        try:
            provider = get_async_provider_from_uri(config.rpc_url, timeout=timeout)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
        self.w3 = AsyncWeb3(provider)

        self._account, self._signer_error = self._load_signer(private_key)

        self._governance = self.w3.eth.contract(address=self.contracts.governance, abi=GOVERNANCE_ABI)
        self._token = self.w3.eth.contract(address=self.contracts.token, abi=ERC20_ABI)
        self._stable_asset = None
        if self.contracts.stable_asset:
            self._stable_asset = self.w3.eth.contract(address=self.contracts.stable_asset, abi=ERC20_ABI)

    @staticmethod
    def _load_signer(private_key: Optional[str]) -> Tuple[Optional[LocalAccount], Optional[str]]:
        if not private_key:
            return None, "No private key configured. Set MOLTDAO_PRIVATE_KEY environment variable."
        try:
            account = Account.from_key(private_key)
        except (ValueError, TypeError, KeyValidationError) as e:
            # Reads still work; writes report this reason
            logger.warning(f"Ignoring malformed private key: {type(e).__name__}")
            return None, f"Malformed private key in MOLTDAO_PRIVATE_KEY: {e}"
        return account, None

    @property
    def address(self) -> Optional[str]:
        """Address of the configured signer, if any."""
        return self._account.address if self._account else None

    async def close(self) -> None:
        """Closes the provider's HTTP session."""
        disconnect = getattr(self.w3.provider, "disconnect", None)
        if disconnect is not None:
            await disconnect()

    async def __aenter__(self) -> "GovernanceClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    # ========== READ FUNCTIONS ==========

    async def get_proposal_count(self) -> int:
        return int(await self._call(self._governance, "proposalCount"))

    async def list_proposals(self) -> List[Proposal]:
        """
        Fetches proposals 1..proposalCount in ascending id order.

        Ids are assigned by the contract, 1-based and contiguous. A proposal whose
        reads fail is logged and left out; the rest are still returned.
        DataIntegrityError is not caught.
        """
        count = await self.get_proposal_count()

        proposals = []
        for proposal_id in range(1, count + 1):
            try:
                proposals.append(await self.get_proposal(proposal_id))
            except TransportError as e:
                logger.error(f"Error fetching proposal {proposal_id}: {e}")

        if len(proposals) < count:
            logger.warning(f"Fetched {len(proposals)} of {count} proposals")
        return proposals

    async def get_proposal(self, proposal_id: int) -> Proposal:
        raw = await self._call(self._governance, "getProposal", proposal_id)
        result = await self._call(self._governance, "getProposalResult", proposal_id)
        is_active = await self._call(self._governance, "isProposalActive", proposal_id)
        return self._to_proposal(proposal_id, raw, result, is_active)

    @staticmethod
    def _to_proposal(proposal_id: int, raw: Any, result: Any, is_active: Any) -> Proposal:
        try:
            (
                remote_id, title, description, start_time, end_time,
                yes_votes, no_votes, cancelled, status_code,
            ) = raw
            ended, passed, result_yes, result_no, total_votes = result

            # Raises DataIntegrityError, which is not a transport failure
            status = ProposalStatus.from_code(status_code)

            return Proposal(
                id=int(remote_id),
                title=title,
                description=description,
                start_time=timestamp_to_datetime(start_time),
                end_time=timestamp_to_datetime(end_time),
                yes_votes=format_units(yes_votes, VOTING_POWER_DECIMALS),
                no_votes=format_units(no_votes, VOTING_POWER_DECIMALS),
                cancelled=bool(cancelled),
                status=status,
                is_active=bool(is_active),
                result=ProposalResult(
                    ended=bool(ended),
                    passed=bool(passed),
                    yes_votes=format_units(result_yes, VOTING_POWER_DECIMALS),
                    no_votes=format_units(result_no, VOTING_POWER_DECIMALS),
                    total_votes=format_units(total_votes, VOTING_POWER_DECIMALS),
                ),
            )
        except (TypeError, ValueError, OverflowError) as e:
            raise TransportError(f"Malformed data for proposal {proposal_id}: {e}") from e

    async def get_voting_power(self, address: str) -> VotingPower:
        power = await self._call(self._governance, "getVotingPower", self._as_address(address))
        return VotingPower(
            address=address,
            voting_power=format_units(power, VOTING_POWER_DECIMALS),
            raw=int(power),
        )

    async def has_voted(self, proposal_id: int, address: str) -> bool:
        return bool(await self._call(self._governance, "hasUserVoted", proposal_id, self._as_address(address)))

    async def get_treasury(self) -> TreasurySnapshot:
        # Independent reads, dispatched together; all are awaited before the first error is raised
        reads = await asyncio.gather(
            self._call(self._token, "symbol"),
            self._call(self._token, "decimals"),
            self._call(self._token, "balanceOf", self.contracts.splitter),
            return_exceptions=True,
        )
        for read in reads:
            if isinstance(read, BaseException):
                raise read
        symbol, decimals, splitter_balance = reads

        snapshot = TreasurySnapshot(
            token=TokenBalance(
                address=self.contracts.token,
                symbol=symbol,
                decimals=int(decimals),
                balance=format_units(splitter_balance, int(decimals)),
            )
        )

        if self._stable_asset is not None:
            snapshot.stable_asset = await self._get_stable_asset_balance()

        return snapshot

    async def _get_stable_asset_balance(self) -> TokenBalance:
        """
        Best-effort read of the stable asset held by the governance contract.
        A failure is reported in the `error` field rather than raised.
        """
        try:
            balance = await self._call(self._stable_asset, "balanceOf", self.contracts.governance)
        except TransportError as e:
            logger.warning(f"Could not read stable asset balance: {e}")
            return TokenBalance(address=self.contracts.stable_asset, error=e.message)

        return TokenBalance(
            address=self.contracts.stable_asset,
            decimals=STABLE_ASSET_DECIMALS,
            balance=format_units(balance, STABLE_ASSET_DECIMALS),
        )

    # ========== WRITE FUNCTIONS ==========

    async def vote(self, proposal_id: int, support: bool) -> VoteReceipt:
        """
        Votes on a proposal after checking, in order, that the proposal is open,
        that the signer has not voted yet and that the signer has voting power.
        Each check is a remote read; the first failure stops before any
        transaction is sent.

        The receipt reports the voting power seen by the pre-check, which may
        differ from the power applied if it changed before the vote was mined.
        """
        account = self._require_signer()

        if not await self._call(self._governance, "isProposalActive", proposal_id):
            raise PreconditionError(
                f"Proposal {proposal_id} is not active for voting", PreconditionReason.PROPOSAL_NOT_ACTIVE
            )

        if await self._call(self._governance, "hasUserVoted", proposal_id, account.address):
            raise PreconditionError(f"Already voted on proposal {proposal_id}", PreconditionReason.ALREADY_VOTED)

        power = int(await self._call(self._governance, "getVotingPower", account.address))
        if power == 0:
            raise PreconditionError(
                "No voting power. You need governance tokens to vote.", PreconditionReason.NO_VOTING_POWER
            )

        tx = await self._transact(self._governance, "vote", proposal_id, bool(support))

        return VoteReceipt(
            **tx,
            proposal_id=proposal_id,
            support="FOR" if support else "AGAINST",
            voting_power=format_units(power, VOTING_POWER_DECIMALS),
        )

    async def donate(self, amount: Union[str, int, Decimal]) -> DonationReceipt:
        """
        Transfers `amount` of the stable asset to the governance contract.
        Only available on networks that define a stable asset.
        """
        if self._stable_asset is None:
            raise ConfigurationError(f"Stable asset donation is not available on network '{self.network}'")
        self._require_signer()

        units = self.to_stable_units(amount)

        tx = await self._transact(self._stable_asset, "transfer", self.contracts.governance, units)

        return DonationReceipt(
            **tx,
            amount=format_units(units, STABLE_ASSET_DECIMALS),
            to=self.contracts.governance,
        )

    @staticmethod
    def to_stable_units(amount: Union[str, int, Decimal]) -> int:
        try:
            units = parse_units(amount, STABLE_ASSET_DECIMALS)
        except ValueError as e:
            raise PreconditionError(str(e), PreconditionReason.INVALID_AMOUNT) from e
        if units <= 0:
            raise PreconditionError(f"Amount must be positive, got {amount}", PreconditionReason.INVALID_AMOUNT)
        return units

    async def create_proposal(self, title: str, description: str) -> ProposalCreationReceipt:
        """
        Creates a proposal. Ownership is checked by the contract, not here.
        The new id is read back from proposalCount once the transaction is mined.
        """
        self._require_signer()

        tx = await self._transact(self._governance, "createProposal", title, description)
        proposal_id = await self.get_proposal_count()

        return ProposalCreationReceipt(**tx, proposal_id=proposal_id, title=title)

    # ========== HELPERS ==========

    def _require_signer(self) -> LocalAccount:
        if self._account is None:
            raise ConfigurationError(self._signer_error)
        return self._account

    @staticmethod
    def _as_address(address: str) -> str:
        try:
            return to_normalized_address(address)
        except (ValueError, TypeError) as e:
            raise TransportError(f"Invalid address {address!r}: {e}") from e

    async def _call(self, contract, fn_name: str, *args) -> Any:
        try:
            return await getattr(contract.functions, fn_name)(*args).call()
        except TRANSPORT_ERRORS as e:
            rendered_args = ", ".join(str(arg) for arg in args)
            raise TransportError(f"{fn_name}({rendered_args}) call failed: {e}") from e

    async def _transact(self, contract, fn_name: str, *args) -> Dict[str, Any]:
        """
        Builds, signs and sends a transaction, then waits until it is mined.
        Once sent it cannot be withdrawn; a reverted receipt raises TransportError.
        """
        account = self._require_signer()

        try:
            nonce = await self.w3.eth.get_transaction_count(account.address, "pending")
            tx = await getattr(contract.functions, fn_name)(*args).build_transaction({
                "from": account.address,
                "nonce": nonce,
                "chainId": self.config.chain_id,
            })
            signed = account.sign_transaction(tx)
            tx_hash = await self.w3.eth.send_raw_transaction(signed.raw_transaction)
        except TRANSPORT_ERRORS as e:
            raise TransportError(f"Sending {fn_name} transaction failed: {e}") from e

        tx_hash_hex = Web3.to_hex(tx_hash)
        logger.info(f"Sent {fn_name} tx: {tx_hash_hex}")

        try:
            receipt = await self.w3.eth.wait_for_transaction_receipt(tx_hash)
        except TRANSPORT_ERRORS as e:
            raise TransportError(f"Waiting for {fn_name} tx {tx_hash_hex} failed: {e}", tx_hash=tx_hash_hex) from e

        if receipt["status"] == 0:
            raise TransportError(f"Transaction {tx_hash_hex} ({fn_name}) reverted", tx_hash=tx_hash_hex)

        logger.info(f"Included block: {receipt['blockNumber']}, gasUsed: {receipt['gasUsed']}")

        return {
            "tx_hash": tx_hash_hex,
            "explorer_url": self.config.tx_url(tx_hash_hex),
            "block_number": receipt["blockNumber"],
            "gas_used": receipt["gasUsed"],
        }
