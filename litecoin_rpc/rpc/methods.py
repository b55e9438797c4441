"""
Explicit wrappers for common litecoind RPC methods.

Each wrapper forwards its positional arguments as the params list of a
`call()`; there is no name-based dispatch. Methods that are not listed here
are reached through `Client.call(name, params)`, and asynchronous requests
always go through `Client.call_async` or `Client.acall`:

    rpc.getblockhash(0)
    rpc.call("getblockfilter", [block_hash])
    await rpc.acall("getbestblockhash")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Tuple

if TYPE_CHECKING:
    from ..response import LitecoindResponse


class NodeMethods:
    """Mixin over any object providing `call(method, params)`."""

    def call(self, method: str, params: Any = None) -> "LitecoindResponse":  # pragma: no cover - overridden
        raise NotImplementedError

    # == Blockchain ==

    def getbestblockhash(self) -> "LitecoindResponse":
        return self.call("getbestblockhash")

    def getblock(self, blockhash: str, *params: Any) -> "LitecoindResponse":
        """`getblock <hash> [verbosity]`; verbosity 2 includes decoded transactions."""
        return self.call("getblock", [blockhash, *params])

    def getblockchaininfo(self) -> "LitecoindResponse":
        return self.call("getblockchaininfo")

    def getblockcount(self) -> "LitecoindResponse":
        return self.call("getblockcount")

    def getblockhash(self, height: int) -> "LitecoindResponse":
        return self.call("getblockhash", [height])

    def getblockheader(self, blockhash: str, *params: Any) -> "LitecoindResponse":
        return self.call("getblockheader", [blockhash, *params])

    def getblockstats(self, hash_or_height: Any, *params: Any) -> "LitecoindResponse":
        return self.call("getblockstats", [hash_or_height, *params])

    def getchaintips(self) -> "LitecoindResponse":
        return self.call("getchaintips")

    def getdifficulty(self) -> "LitecoindResponse":
        return self.call("getdifficulty")

    def getmempoolinfo(self) -> "LitecoindResponse":
        return self.call("getmempoolinfo")

    def getrawmempool(self, *params: Any) -> "LitecoindResponse":
        return self.call("getrawmempool", params)

    def gettxout(self, txid: str, n: int, *params: Any) -> "LitecoindResponse":
        return self.call("gettxout", [txid, n, *params])

    def gettxoutsetinfo(self, *params: Any) -> "LitecoindResponse":
        return self.call("gettxoutsetinfo", params)

    # == Control ==

    def getmemoryinfo(self, *params: Any) -> "LitecoindResponse":
        return self.call("getmemoryinfo", params)

    def getrpcinfo(self) -> "LitecoindResponse":
        return self.call("getrpcinfo")

    def help(self, *params: Any) -> "LitecoindResponse":
        return self.call("help", params)

    def stop(self) -> "LitecoindResponse":
        return self.call("stop")

    def uptime(self) -> "LitecoindResponse":
        return self.call("uptime")

    # == Mining ==

    def getblocktemplate(self, *params: Any) -> "LitecoindResponse":
        return self.call("getblocktemplate", params)

    def getmininginfo(self) -> "LitecoindResponse":
        return self.call("getmininginfo")

    def getnetworkhashps(self, *params: Any) -> "LitecoindResponse":
        return self.call("getnetworkhashps", params)

    def submitblock(self, hexdata: str, *params: Any) -> "LitecoindResponse":
        return self.call("submitblock", [hexdata, *params])

    # == Network ==

    def addnode(self, node: str, command: str) -> "LitecoindResponse":
        return self.call("addnode", [node, command])

    def getconnectioncount(self) -> "LitecoindResponse":
        return self.call("getconnectioncount")

    def getnetworkinfo(self) -> "LitecoindResponse":
        return self.call("getnetworkinfo")

    def getpeerinfo(self) -> "LitecoindResponse":
        return self.call("getpeerinfo")

    def ping(self) -> "LitecoindResponse":
        return self.call("ping")

    # == Rawtransactions ==

    def createrawtransaction(self, inputs: Any, outputs: Any, *params: Any) -> "LitecoindResponse":
        return self.call("createrawtransaction", [inputs, outputs, *params])

    def decoderawtransaction(self, hexstring: str, *params: Any) -> "LitecoindResponse":
        return self.call("decoderawtransaction", [hexstring, *params])

    def decodescript(self, hexstring: str) -> "LitecoindResponse":
        return self.call("decodescript", [hexstring])

    def fundrawtransaction(self, hexstring: str, *params: Any) -> "LitecoindResponse":
        return self.call("fundrawtransaction", [hexstring, *params])

    def getrawtransaction(self, txid: str, *params: Any) -> "LitecoindResponse":
        return self.call("getrawtransaction", [txid, *params])

    def sendrawtransaction(self, hexstring: str, *params: Any) -> "LitecoindResponse":
        return self.call("sendrawtransaction", [hexstring, *params])

    def signrawtransactionwithwallet(self, hexstring: str, *params: Any) -> "LitecoindResponse":
        return self.call("signrawtransactionwithwallet", [hexstring, *params])

    def testmempoolaccept(self, rawtxs: Any, *params: Any) -> "LitecoindResponse":
        return self.call("testmempoolaccept", [rawtxs, *params])

    # == Util ==

    def estimatesmartfee(self, conf_target: int, *params: Any) -> "LitecoindResponse":
        return self.call("estimatesmartfee", [conf_target, *params])

    def validateaddress(self, address: str) -> "LitecoindResponse":
        return self.call("validateaddress", [address])

    def verifymessage(self, address: str, signature: str, message: str) -> "LitecoindResponse":
        return self.call("verifymessage", [address, signature, message])

    # == Wallet ==

    def createwallet(self, wallet_name: str, *params: Any) -> "LitecoindResponse":
        return self.call("createwallet", [wallet_name, *params])

    def getbalance(self, *params: Any) -> "LitecoindResponse":
        return self.call("getbalance", params)

    def getbalances(self) -> "LitecoindResponse":
        return self.call("getbalances")

    def getnewaddress(self, *params: Any) -> "LitecoindResponse":
        return self.call("getnewaddress", params)

    def getrawchangeaddress(self, *params: Any) -> "LitecoindResponse":
        return self.call("getrawchangeaddress", params)

    def getreceivedbyaddress(self, address: str, *params: Any) -> "LitecoindResponse":
        return self.call("getreceivedbyaddress", [address, *params])

    def gettransaction(self, txid: str, *params: Any) -> "LitecoindResponse":
        return self.call("gettransaction", [txid, *params])

    def getwalletinfo(self) -> "LitecoindResponse":
        return self.call("getwalletinfo")

    def listreceivedbyaddress(self, *params: Any) -> "LitecoindResponse":
        return self.call("listreceivedbyaddress", params)

    def listsinceblock(self, *params: Any) -> "LitecoindResponse":
        return self.call("listsinceblock", params)

    def listtransactions(self, *params: Any) -> "LitecoindResponse":
        return self.call("listtransactions", params)

    def listunspent(self, *params: Any) -> "LitecoindResponse":
        return self.call("listunspent", params)

    def listwallets(self) -> "LitecoindResponse":
        return self.call("listwallets")

    def loadwallet(self, filename: str, *params: Any) -> "LitecoindResponse":
        return self.call("loadwallet", [filename, *params])

    def sendmany(self, dummy: str, amounts: Any, *params: Any) -> "LitecoindResponse":
        return self.call("sendmany", [dummy, amounts, *params])

    def sendtoaddress(self, address: str, amount: Any, *params: Any) -> "LitecoindResponse":
        """Amounts may be Decimal; they are sent as exact strings."""
        return self.call("sendtoaddress", [address, amount, *params])

    def settxfee(self, amount: Any) -> "LitecoindResponse":
        return self.call("settxfee", [amount])

    def signmessage(self, address: str, message: str) -> "LitecoindResponse":
        return self.call("signmessage", [address, message])

    def unloadwallet(self, *params: Any) -> "LitecoindResponse":
        return self.call("unloadwallet", params)

    def walletlock(self) -> "LitecoindResponse":
        return self.call("walletlock")

    def walletpassphrase(self, passphrase: str, timeout: int) -> "LitecoindResponse":
        return self.call("walletpassphrase", [passphrase, timeout])


RPC_METHODS: Tuple[str, ...] = tuple(
    name for name, attr in vars(NodeMethods).items() if callable(attr) and not name.startswith("_") and name != "call"
)

__all__ = ["NodeMethods", "RPC_METHODS"]
