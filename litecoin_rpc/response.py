"""
Decoded JSON-RPC response from litecoind.

`LitecoindResponse` wraps an `httpx.Response` and decodes the body once.
Decoding never raises: a body that is not a JSON object is treated as an
empty envelope, so `has_error()` is False and `result` fails with a
`ClientError` naming the HTTP status.

Result accessors take dotted keys into nested dicts and lists:

    resp = client.call("getblock", [block_hash, 2])
    resp.get("tx.0.vout.1.value")
    resp.count("tx")
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any, Dict, Iterator, List, Optional

import httpx

from .errors import ClientError

_MISSING = object()


def _decode(resp: httpx.Response) -> Dict[str, Any]:
    try:
        body = json.loads(resp.content or b"", parse_float=Decimal)
    except (ValueError, UnicodeDecodeError):
        return {}
    return body if isinstance(body, dict) else {}


def _walk(value: Any, key: Optional[str]) -> Any:
    if key is None or key == "":
        return value
    for part in str(key).split("."):
        if isinstance(value, dict) and part in value:
            value = value[part]
        elif isinstance(value, list) and part.lstrip("-").isdigit():
            idx = int(part)
            if not -len(value) <= idx < len(value):
                return _MISSING
            value = value[idx]
        else:
            return _MISSING
    return value


class LitecoindResponse:
    """A litecoind JSON-RPC response."""

    __slots__ = ("response", "body")

    def __init__(self, response: httpx.Response):
        self.response = response
        self.body = _decode(response)

    @classmethod
    def from_response(cls, response: Any) -> "LitecoindResponse":
        if isinstance(response, LitecoindResponse):
            return response
        return cls(response)

    def __repr__(self) -> str:
        return f"LitecoindResponse(status={self.status_code}, body={self.body!r})"

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def id(self) -> Any:
        return self.body.get("id")

    # --- envelope --------------------------------------------------------

    def has_error(self) -> bool:
        return self.body.get("error") is not None

    def error(self) -> Dict[str, Any]:
        err = self.body.get("error")
        if err is None:
            return {}
        if not isinstance(err, dict):
            return {"message": str(err)}
        return err

    def has_result(self) -> bool:
        return "result" in self.body

    @property
    def result(self) -> Any:
        if "result" not in self.body:
            raise ClientError(
                f"Malformed JSON-RPC response (HTTP {self.status_code}): no result field",
                self.status_code,
            )
        return self.body["result"]

    # --- result accessors ------------------------------------------------

    def get(self, key: Optional[str] = None, default: Any = None) -> Any:
        """Value at dotted `key` inside the result, or `default`."""
        value = _walk(self.result, key)
        return default if value is _MISSING else value

    def exists(self, key: str) -> bool:
        """True if `key` is present in the result, even when its value is null."""
        return _walk(self.result, key) is not _MISSING

    def has(self, key: str) -> bool:
        value = _walk(self.result, key)
        return value is not _MISSING and value is not None

    def keys(self, key: Optional[str] = None) -> List[Any]:
        value = self.get(key)
        if isinstance(value, dict):
            return list(value.keys())
        if isinstance(value, list):
            return list(range(len(value)))
        return []

    def values(self, key: Optional[str] = None) -> List[Any]:
        value = self.get(key)
        if isinstance(value, dict):
            return list(value.values())
        if isinstance(value, list):
            return list(value)
        return []

    def count(self, key: Optional[str] = None) -> int:
        value = self.get(key)
        if isinstance(value, (dict, list)):
            return len(value)
        return 0 if value is None else 1

    def first(self, key: Optional[str] = None) -> Any:
        values = self.values(key)
        return values[0] if values else None

    def last(self, key: Optional[str] = None) -> Any:
        values = self.values(key)
        return values[-1] if values else None

    def __getitem__(self, key: str) -> Any:
        value = _walk(self.result, key)
        if value is _MISSING:
            raise KeyError(key)
        return value

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.exists(key)

    def __len__(self) -> int:
        return self.count()

    def __bool__(self) -> bool:
        return True

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values())


__all__ = ["LitecoindResponse"]
