import pytest

from litecoin_rpc import Client
from litecoin_rpc.rpc.methods import RPC_METHODS, NodeMethods

from .conftest import sent_payload


class RecordingRpc(NodeMethods):
    """Collects calls instead of sending them."""

    def __init__(self) -> None:
        self.calls = []

    def call(self, method, params=None):
        self.calls.append((method, list(params or [])))
        return None


def test_table_lists_wrappers():
    assert "getblockchaininfo" in RPC_METHODS
    assert "sendtoaddress" in RPC_METHODS
    assert "call" not in RPC_METHODS
    assert all(name == name.lower() for name in RPC_METHODS)


def test_every_wrapper_calls_its_own_name():
    rpc = RecordingRpc()
    for name in RPC_METHODS:
        fn = getattr(rpc, name)
        required = fn.__code__.co_argcount - 1
        fn(*range(required))
        assert rpc.calls[-1][0] == name


@pytest.mark.parametrize(
    "invoke, expected",
    [
        (lambda r: r.getblockhash(0), ("getblockhash", [0])),
        (lambda r: r.getblock("ab"), ("getblock", ["ab"])),
        (lambda r: r.getblock("ab", 2), ("getblock", ["ab", 2])),
        (lambda r: r.getbalance(), ("getbalance", [])),
        (lambda r: r.getbalance("*", 6), ("getbalance", ["*", 6])),
        (lambda r: r.walletpassphrase("pw", 60), ("walletpassphrase", ["pw", 60])),
        (lambda r: r.sendtoaddress("ltc1q", "0.1", "", "", True), ("sendtoaddress", ["ltc1q", "0.1", "", "", True])),
    ],
)
def test_wrapper_params(invoke, expected):
    rpc = RecordingRpc()
    invoke(rpc)
    assert rpc.calls == [expected]


def test_names_containing_async_are_not_special(node):
    # No substring detection: a method name is sent as-is
    route = node.post("/").respond(json={"result": None, "error": None, "id": 0})
    rpc = Client()

    rpc.call("getAsyncStatus", [1])

    assert sent_payload(route)["method"] == "getasyncstatus"
    rpc.close()


def test_client_wrappers_go_over_the_wire(node):
    route = node.post("/").respond(json={"result": {"chain": "main", "blocks": 2500000}, "error": None, "id": 0})
    rpc = Client("http://u:p@127.0.0.1:9332")

    info = rpc.getblockchaininfo()

    assert info.get("chain") == "main"
    assert sent_payload(route) == {"method": "getblockchaininfo", "params": [], "id": 0}
    rpc.close()
