"""Transfer error codes and the error attached to a response."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class ErrorCode(IntEnum):
    """Kinds of failure a request can end with."""

    OK = 0
    CONNECTION_FAILURE = 1
    EMPTY_RESPONSE = 2
    HOST_RESOLUTION_FAILURE = 3
    INTERNAL_ERROR = 4
    INVALID_URL_FORMAT = 5
    NETWORK_RECEIVE_ERROR = 6
    NETWORK_SEND_FAILURE = 7
    OPERATION_TIMEDOUT = 8
    PROXY_RESOLUTION_FAILURE = 9
    SSL_CONNECT_ERROR = 10
    SSL_LOCAL_CERTIFICATE_ERROR = 11
    SSL_REMOTE_CERTIFICATE_ERROR = 12
    SSL_CACERT_ERROR = 13
    GENERIC_SSL_ERROR = 14
    UNSUPPORTED_PROTOCOL = 15
    UNKNOWN_ERROR = 1000


@dataclass
class Error:
    """An error code with its message; true when something went wrong."""

    code: ErrorCode = ErrorCode.OK
    message: str = ""

    def __bool__(self) -> bool:
        return self.code != ErrorCode.OK