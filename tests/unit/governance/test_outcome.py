import pytest

from governance.exceptions import (
    ConfigurationError,
    DataIntegrityError,
    ErrorKind,
    PreconditionError,
    PreconditionReason,
    TransportError,
)
from governance.outcome import Outcome, attempt


async def _returns(value):
    return value


async def _raises(error):
    raise error


@pytest.mark.asyncio
async def test_attempt_success():
    outcome = await attempt(_returns(41))

    assert outcome.ok is True
    assert outcome.value == 41
    assert outcome.error_kind is None
    assert outcome.unwrap() == 41


@pytest.mark.asyncio
@pytest.mark.parametrize("error, kind", [
    (ConfigurationError("no signer"), ErrorKind.CONFIGURATION),
    (TransportError("connection refused"), ErrorKind.TRANSPORT),
    (DataIntegrityError("status 9"), ErrorKind.DATA_INTEGRITY),
])
async def test_attempt_tags_error_kind(error, kind):
    outcome = await attempt(_raises(error))

    assert outcome.ok is False
    assert outcome.error_kind is kind
    assert outcome.message == str(error)
    assert outcome.reason is None


@pytest.mark.asyncio
async def test_attempt_keeps_precondition_reason():
    outcome = await attempt(_raises(PreconditionError("Already voted", PreconditionReason.ALREADY_VOTED)))

    assert outcome.error_kind is ErrorKind.PRECONDITION
    assert outcome.reason is PreconditionReason.ALREADY_VOTED
    with pytest.raises(PreconditionError):
        outcome.unwrap()


@pytest.mark.asyncio
async def test_attempt_does_not_hide_bugs():
    with pytest.raises(KeyError):
        await attempt(_raises(KeyError("oops")))


def test_outcome_serialises_without_exception():
    outcome = Outcome.failure(TransportError("timeout"))

    assert outcome.model_dump(mode="json") == {
        "ok": False,
        "value": None,
        "error_kind": "transport",
        "reason": None,
        "message": "timeout",
    }
