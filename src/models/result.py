"""Transport result container and network error kinds."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class NetworkError(str, Enum):
    """Why a single HTTP call failed."""

    NO_CONNECTIVITY = "no_connectivity"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    DESERIALIZATION_FAILURE = "deserialization_failure"
    UNKNOWN_FAILURE = "unknown_failure"


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful call carrying the decoded payload."""

    data: T


@dataclass(frozen=True)
class Err:
    """Failed call carrying the classified error kind."""

    error: NetworkError


Result = Union[Ok[T], Err]
