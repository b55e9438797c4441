import json

import pytest
import respx

from litecoin_rpc import Client

NODE_URL = "http://127.0.0.1:9332"


def sent_payload(route, index: int = -1) -> dict:
    """JSON body of a request captured by a respx route."""
    return json.loads(route.calls[index].request.content)


@pytest.fixture
def node():
    """respx router standing in for litecoind at the default endpoint."""
    with respx.mock(base_url=NODE_URL, assert_all_called=False) as router:
        yield router


@pytest.fixture
def client():
    rpc = Client({"user": "rpcuser", "pass": "rpcpass"})
    yield rpc
    rpc.close()
