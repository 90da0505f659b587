"""Tagged results for repository writes.

Writes never raise for storage failures. They return a ``WriteResult`` whose
``status`` tells the caller whether the entity was created, a constraint
rejected it, or some other storage error occurred.
"""

from enum import Enum
from typing import Generic, NoReturn, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class WriteStatus(str, Enum):
    """Outcome of a repository write."""

    OK = "ok"
    CONSTRAINT_VIOLATION = "constraint_violation"
    ERROR = "error"


class ConstraintKind(str, Enum):
    """Kind of integrity rule that rejected a write."""

    UNIQUE = "unique"
    FOREIGN_KEY = "foreign_key"


class WriteResult(BaseModel, Generic[T]):
    """Ok(entity) | ConstraintViolation(kind) | Error(exception)."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status: WriteStatus
    value: Optional[T] = None
    violation: Optional[ConstraintKind] = None
    constraint: Optional[str] = None
    error: Optional[Exception] = None

    @classmethod
    def ok(cls, value: T) -> "WriteResult[T]":
        return cls(status=WriteStatus.OK, value=value)

    @classmethod
    def violated(
        cls, kind: ConstraintKind, constraint: Optional[str] = None
    ) -> "WriteResult[T]":
        return cls(
            status=WriteStatus.CONSTRAINT_VIOLATION,
            violation=kind,
            constraint=constraint,
        )

    @classmethod
    def failed(cls, error: Exception) -> "WriteResult[T]":
        return cls(status=WriteStatus.ERROR, error=error)

    def violates(self, kind: ConstraintKind) -> bool:
        """Check whether the write was rejected by a constraint of ``kind``."""
        return (
            self.status is WriteStatus.CONSTRAINT_VIOLATION and self.violation is kind
        )

    def unwrap(self) -> T:
        """Return the created entity or re-raise the storage failure.

        Constraint violations that the caller did not translate are raised as
        ``UnhandledConstraintViolation``; storage errors are re-raised
        unmodified.
        """
        if self.status is WriteStatus.OK:
            return self.value  # type: ignore[return-value]
        self._raise()

    def _raise(self) -> NoReturn:
        if self.status is WriteStatus.ERROR and self.error is not None:
            raise self.error
        raise UnhandledConstraintViolation(self.violation, self.constraint)


class UnhandledConstraintViolation(Exception):
    """A constraint rejected a write and the caller had no translation for it."""

    def __init__(self, kind: Optional[ConstraintKind], constraint: Optional[str]):
        self.kind = kind
        self.constraint = constraint
        kind_name = kind.value if kind else "unknown"
        message = f"Write rejected by {kind_name} constraint"
        if constraint:
            message = f"{message} {constraint}"
        super().__init__(message)
