from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    CONFIGURATION = "configuration"     # Missing signer, unknown network, feature not on this network
    PRECONDITION = "precondition"       # Checked remotely before a transaction is sent
    TRANSPORT = "transport"             # RPC failure, malformed response, reverted transaction
    DATA_INTEGRITY = "data_integrity"   # Remote value outside the known domain


class PreconditionReason(str, Enum):
    PROPOSAL_NOT_ACTIVE = "proposal_not_active"
    ALREADY_VOTED = "already_voted"
    NO_VOTING_POWER = "no_voting_power"
    INVALID_AMOUNT = "invalid_amount"


class GovernanceError(Exception):
    """
    Base class for every error raised by the governance client.
    The `kind` tag lets callers branch without parsing the message.
    """

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(GovernanceError):
    kind = ErrorKind.CONFIGURATION


class PreconditionError(GovernanceError):
    kind = ErrorKind.PRECONDITION

    def __init__(self, message: str, reason: PreconditionReason):
        super().__init__(message)
        self.reason = reason


class TransportError(GovernanceError):
    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str, tx_hash: Optional[str] = None):
        super().__init__(message)
        self.tx_hash = tx_hash


class DataIntegrityError(GovernanceError):
    kind = ErrorKind.DATA_INTEGRITY
