# ticketdesk/client/results.py
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    INVALID_INPUT = "InvalidInput"
    TRANSPORT_FAILED = "TransportFailed"
    NOT_FOUND = "NotFound"
    CREATION_FAILED = "CreationFailed"


@dataclass(frozen=True)
class ClientError:
    kind: ErrorKind
    # only set when an unexpected HTTP status caused a TransportFailed
    status_code: int | None = None


class TicketClientError(Exception):
    def __init__(self, error: ClientError):
        super().__init__(error.kind.value)
        self.error = error


@dataclass(frozen=True)
class ClientResult(Generic[T]):
    """Outcome of one client call: a payload or a classified failure, never both."""

    value: T | None = None
    error: ClientError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "ClientResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, status_code: int | None = None) -> "ClientResult[T]":
        return cls(error=ClientError(kind, status_code))

    def unwrap(self) -> T:
        if self.error is not None:
            raise TicketClientError(self.error)
        return self.value


__all__ = ["ClientError", "ClientResult", "ErrorKind", "TicketClientError"]
