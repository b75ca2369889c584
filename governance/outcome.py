from typing import Any, Awaitable, Optional

from pydantic import BaseModel, ConfigDict, Field

from governance.exceptions import ErrorKind, GovernanceError, PreconditionReason


class Outcome(BaseModel):
    """
    Success or one of the tagged governance errors, so callers can branch on
    `error_kind` / `reason` instead of parsing messages.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    ok: bool
    value: Any = None
    error_kind: Optional[ErrorKind] = None
    reason: Optional[PreconditionReason] = None
    message: Optional[str] = None
    error: Optional[GovernanceError] = Field(default=None, exclude=True, repr=False)

    @classmethod
    def success(cls, value: Any) -> "Outcome":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: GovernanceError) -> "Outcome":
        return cls(
            ok=False,
            error_kind=error.kind,
            reason=getattr(error, "reason", None),
            message=error.message,
            error=error,
        )

    def unwrap(self) -> Any:
        """Returns the value, or re-raises the captured error."""
        if not self.ok:
            raise self.error
        return self.value


async def attempt(awaitable: Awaitable[Any]) -> Outcome:
    """
    Awaits a client operation and folds GovernanceError into an Outcome.
    Any other exception is a bug and propagates.
    """
    try:
        value = await awaitable
    except GovernanceError as e:
        return Outcome.failure(e)
    return Outcome.success(value)
