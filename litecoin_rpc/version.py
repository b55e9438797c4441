"""
Version of the litecoin-rpc package.

The value is sent in the User-Agent header of every request.
"""

from __future__ import annotations

# Bump this when publishing
__version__ = "0.1.0"

USER_AGENT = f"litecoin-rpc-python/{__version__}"

__all__ = ["__version__", "USER_AGENT"]
