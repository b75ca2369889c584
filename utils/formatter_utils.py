from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation, localcontext
from typing import Optional, Union

from eth_utils import to_checksum_address

from utils.logger_utils import get_logger

logger = get_logger("Formatter Utils")

# uint256 has 78 decimal digits; keep every one of them when scaling
_UINT256_PRECISION = 80


def format_units(value: int, decimals: int) -> Decimal:
    """
    Scales an on-chain integer amount down to a human decimal.
    e.g. format_units(10_000_000, 6) == Decimal("10")
    """
    if decimals < 0:
        raise ValueError(f"decimals must be >= 0, got {decimals}")
    with localcontext() as ctx:
        ctx.prec = _UINT256_PRECISION
        return Decimal(int(value)).scaleb(-decimals)


def parse_units(amount: Union[str, int, Decimal], decimals: int) -> int:
    """
    Converts a human decimal amount into the smallest integer unit.
    Raises ValueError when the amount is not a number or carries more
    fractional digits than `decimals` allows.
    """
    if isinstance(amount, float):
        # repr() keeps the shortest round-tripping form (0.1 -> "0.1")
        amount = repr(amount)
    try:
        value = Decimal(str(amount).strip())
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {amount!r}") from None

    if not value.is_finite():
        raise ValueError(f"Invalid amount: {amount!r}")

    with localcontext() as ctx:
        ctx.prec = _UINT256_PRECISION
        scaled = value.scaleb(decimals)
        if scaled != scaled.to_integral_value():
            raise ValueError(f"Amount {amount} has more than {decimals} decimal places")
        return int(scaled)


def decimal_to_str(value: Decimal) -> str:
    """
    Plain notation without trailing zeros: Decimal("10.000000") -> "10".
    """
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def to_normalized_address(address: Optional[str]) -> Optional[str]:
    """
    Converts an address to its EIP-55 checksum form.
    None passes through; a malformed address raises ValueError.
    """
    if address is None:
        return None
    return to_checksum_address(address)


def timestamp_to_datetime(timestamp: int) -> datetime:
    """Unix seconds to an aware UTC datetime. Out-of-range values raise ValueError."""
    try:
        return datetime.fromtimestamp(int(timestamp), tz=timezone.utc)
    except (OverflowError, OSError) as e:
        raise ValueError(f"Timestamp out of range: {timestamp}") from e
