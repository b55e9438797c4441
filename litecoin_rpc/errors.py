"""
Typed error classes for the Litecoin RPC client.

Every failure surfaces as one of two kinds so callers can tell them apart
while still being able to catch the base `LitecoinRpcError`:

- `LitecoindError`: the node answered with a JSON-RPC `error` object.
- `ClientError`: anything else (network failure, non-2xx without a node
  error, malformed response). `ConfigurationError` is the narrow case of a
  bad client configuration, raised eagerly at construction time.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict, Optional

__all__ = [
    "LitecoinRpcError",
    "LitecoindError",
    "ClientError",
    "ConfigurationError",
    "RpcCode",
    "from_jsonrpc_error",
]


class LitecoinRpcError(Exception):
    """Base class for all litecoin-rpc errors."""


class RpcCode(IntEnum):
    # JSON-RPC 2.0 spec
    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603

    # General application errors
    MISC_ERROR = -1
    TYPE_ERROR = -3
    INVALID_ADDRESS_OR_KEY = -5
    OUT_OF_MEMORY = -7
    INVALID_PARAMETER = -8
    DATABASE_ERROR = -20
    DESERIALIZATION_ERROR = -22
    VERIFY_ERROR = -25
    VERIFY_REJECTED = -26
    VERIFY_ALREADY_IN_CHAIN = -27
    IN_WARMUP = -28
    METHOD_DEPRECATED = -32

    # P2P client errors
    CLIENT_NOT_CONNECTED = -9
    CLIENT_IN_INITIAL_DOWNLOAD = -10
    CLIENT_NODE_ALREADY_ADDED = -23
    CLIENT_NODE_NOT_ADDED = -24
    CLIENT_NODE_NOT_CONNECTED = -29
    CLIENT_INVALID_IP_OR_SUBNET = -30
    CLIENT_P2P_DISABLED = -31

    # Wallet errors
    WALLET_ERROR = -4
    WALLET_INSUFFICIENT_FUNDS = -6
    WALLET_INVALID_LABEL_NAME = -11
    WALLET_KEYPOOL_RAN_OUT = -12
    WALLET_UNLOCK_NEEDED = -13
    WALLET_PASSPHRASE_INCORRECT = -14
    WALLET_WRONG_ENC_STATE = -15
    WALLET_ENCRYPTION_FAILED = -16
    WALLET_ALREADY_UNLOCKED = -17
    WALLET_NOT_FOUND = -18
    WALLET_NOT_SPECIFIED = -19


class LitecoindError(LitecoinRpcError):
    """Raised when litecoind returns a JSON-RPC error object."""

    def __init__(
        self,
        error: Dict[str, Any],
        *,
        request_id: Optional[Any] = None,
        http_status: Optional[int] = None,
    ):
        self.error = dict(error)
        try:
            self.code = int(self.error.get("code"))
        except (TypeError, ValueError):
            self.code = int(RpcCode.MISC_ERROR)
        self.message = str(self.error.get("message", "Unknown litecoind error"))
        self.data = self.error.get("data")
        self.request_id = request_id
        self.http_status = http_status
        super().__init__(f"RPC error {self.code}: {self.message}")

    @property
    def code_enum(self) -> Optional[RpcCode]:
        try:
            return RpcCode(self.code)
        except ValueError:
            return None


class ClientError(LitecoinRpcError):
    """Network/HTTP transport-level error, or a response that is not JSON-RPC."""

    def __init__(self, message: str, code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.code = code


class ConfigurationError(ClientError):
    """Invalid connection configuration (e.g. an unparsable URL)."""


def from_jsonrpc_error(
    err_obj: Any,
    *,
    request_id: Optional[Any] = None,
    http_status: Optional[int] = None,
) -> LitecoindError:
    """
    Convert a JSON-RPC error value into LitecoindError.

    `err_obj` should resemble: {"code": int, "message": str, "data": any?}.
    Older daemons occasionally send a bare string; it becomes the message.
    """
    if not isinstance(err_obj, dict):
        err_obj = {"code": int(RpcCode.MISC_ERROR), "message": str(err_obj)}
    return LitecoindError(err_obj, request_id=request_id, http_status=http_status)
