"""
litecoin-rpc for Python
JSON-RPC client for Litecoin Core (litecoind) over HTTP(S).
"""

from .version import __version__  # noqa: F401

# Core config & errors
from .config import ConnectionConfig  # noqa: F401
from .errors import (  # noqa: F401
    ClientError,
    ConfigurationError,
    LitecoindError,
    LitecoinRpcError,
    RpcCode,
)

# RPC
from .response import LitecoindResponse  # noqa: F401
from .rpc.http import Client  # noqa: F401

# Amounts
from .utils.amount import (  # noqa: F401
    COIN,
    to_decimal,
    to_fixed,
    to_ltc,
    to_minor_units,
    to_satoshi,
    truncate_to_fixed,
)

__all__ = [
    "__version__",
    # Core
    "ConnectionConfig",
    "LitecoinRpcError", "LitecoindError", "ClientError", "ConfigurationError", "RpcCode",
    # RPC
    "Client", "LitecoindResponse",
    # Amounts
    "COIN", "to_minor_units", "to_decimal", "truncate_to_fixed",
    "to_satoshi", "to_ltc", "to_fixed",
]
