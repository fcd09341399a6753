from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, NamedTuple, Optional


class ErrorKind(str, Enum):
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    PROTOCOL = "protocol"
    CONTRACT = "contract"


class ErrorShape(str, Enum):
    STRING = "string"
    MESSAGE = "message"
    CODE = "code"
    CODE_AND_MESSAGE = "code_and_message"
    UNKNOWN = "unknown"


class ClassifiedError(NamedTuple):
    shape: ErrorShape
    description: str
    code: Optional[int]
    message: Optional[str]


def _int_code(value: Any) -> Optional[int]:
    # bool is an int subclass; `true` is not an error code.
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def classify_error_payload(payload: Any) -> ClassifiedError:
    """
    Map an arbitrary error value onto one of the ErrorShape variants.

    Only an `int` code and a `str` message count; anything else in those
    slots is ignored. The description is never empty.
    """
    if isinstance(payload, str):
        return ClassifiedError(ErrorShape.STRING, payload or "Unknown error", None, payload)
    if isinstance(payload, Mapping):
        code = _int_code(payload.get("code"))
        message = payload.get("message")
        if not isinstance(message, str):
            message = None
        fallback = f"Code {code}" if code is not None else "Unknown error"
        if code is not None and message is not None:
            return ClassifiedError(ErrorShape.CODE_AND_MESSAGE, message or fallback, code, message)
        if message is not None:
            return ClassifiedError(ErrorShape.MESSAGE, message or fallback, None, message)
        if code is not None:
            return ClassifiedError(ErrorShape.CODE, fallback, code, None)
    return ClassifiedError(ErrorShape.UNKNOWN, "Unknown error", None, None)


class WalletRpcError(RuntimeError):
    kind: ErrorKind = ErrorKind.PROTOCOL

    def __init__(
        self,
        description: str,
        *,
        code: Optional[int] = None,
        message: Optional[str] = None,
        method: Optional[str] = None,
        data: Any = None,
    ):
        super().__init__(description)
        self.code = code
        self.message = message
        self.method = method
        self.data = data

    @property
    def description(self) -> str:
        return str(self)

    @classmethod
    def from_payload(cls, payload: Any, *, method: Optional[str] = None) -> "WalletRpcError":
        c = classify_error_payload(payload)
        return cls(c.description, code=c.code, message=c.message, method=method, data=payload)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r}, kind={self.kind.value!r}, code={self.code!r}, method={self.method!r})"


class RpcTransportError(WalletRpcError):
    """Connection refused/reset, timeouts, or a body that is not valid JSON."""

    kind = ErrorKind.TRANSPORT


class RpcHttpStatusError(WalletRpcError):
    kind = ErrorKind.HTTP_STATUS

    def __init__(self, status_code: int, *, method: Optional[str] = None):
        super().__init__(f"RPC call failed with status code {status_code}", method=method)
        self.status_code = status_code


class RpcProtocolError(WalletRpcError):
    """The wallet answered with a JSON-RPC `error` object."""

    kind = ErrorKind.PROTOCOL


class RpcContractError(WalletRpcError):
    """The envelope carried neither `result` nor `error`."""

    kind = ErrorKind.CONTRACT
