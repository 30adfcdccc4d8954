"""Named wrappers over the node's JSON-RPC procedures.

Each wrapper forwards its positional arguments, unchanged and in order, to
``call()`` with a fixed wire method name. Parameters and return values are
defined by the node; nothing is validated here.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Coroutine, Dict


def rpc_method(wire_name: str, doc: str = "") -> Callable[..., Coroutine[Any, Any, Any]]:
    """Create a wrapper method bound to ``wire_name``."""

    async def method(self, *params: Any) -> Any:
        return await self.call(wire_name, *params)

    method.rpc_method = wire_name
    method.__doc__ = doc or f"Call ``{wire_name}`` on the node."
    return method


class NodeMethods(ABC):
    """Mixin providing one coroutine per remote procedure."""

    @abstractmethod
    async def call(self, method: str, *params: Any) -> Any:
        """Send ``method`` with ``params`` to the node and return its result."""
        pass

    # Avalanche

    add_avalanche_node = rpc_method(
        "addavalanchenode",
        """Add a node to the avalanche pool.

        Args: nodeid, publickey, proof, and optionally delegation.
        Returns whether the addition succeeded.
        """,
    )
    build_avalanche_proof = rpc_method(
        "buildavalancheproof",
        """Build a proof from stakes.

        Args: sequence, expiration, master private key, stakes, payout address.
        Returns the serialized, hex-encoded proof.
        """,
    )
    decode_avalanche_delegation = rpc_method(
        "decodeavalanchedelegation",
        "Decode a hex-encoded delegation into an object. The delegation is not verified.",
    )
    decode_avalanche_proof = rpc_method(
        "decodeavalancheproof",
        "Decode a hex-encoded proof into an object. The proof is not verified.",
    )
    delegate_avalanche_proof = rpc_method(
        "delegateavalancheproof",
        """Delegate a proof to another public key.

        Args: limited proof id, private key, public key, and optionally a
        parent delegation. Returns the hex-encoded delegation.
        """,
    )
    get_avalanche_info = rpc_method("getavalancheinfo", "Return avalanche networking state.")
    get_avalanche_key = rpc_method("getavalanchekey", "Return the key used to sign avalanche messages.")
    get_avalanche_peer_info = rpc_method(
        "getavalanchepeerinfo",
        "Return data about one avalanche peer by proof id, or about all peers.",
    )
    get_raw_avalanche_proof = rpc_method("getrawavalancheproof", "Return data about a proof by id.")
    is_final_block = rpc_method(
        "isfinalblock", "Whether a block hash has been finalized by avalanche votes."
    )
    is_final_transaction = rpc_method(
        "isfinaltransaction",
        "Whether a txid (optionally within a given block) has been finalized by avalanche votes.",
    )
    send_avalanche_proof = rpc_method("sendavalancheproof", "Broadcast a proof.")
    verify_avalanche_delegation = rpc_method("verifyavalanchedelegation")
    verify_avalanche_proof = rpc_method("verifyavalancheproof")

    # Wallet

    estimate_fee = rpc_method("estimatefee", "Estimated fee per kilobyte.")
    list_transactions = rpc_method("listtransactions")
    list_unspent = rpc_method(
        "listunspent", "List UTXOs, optionally bounded by min and max confirmations."
    )
    sign_raw_transaction = rpc_method(
        "signrawtransactionwithkey",
        "Sign a raw transaction. Returns the signed hex and a completion flag.",
    )
    verify_message = rpc_method(
        "verifymessage", "Verify a signed message. Args: address, signature, message."
    )
    get_balance = rpc_method("getbalance")
    get_unconfirmed_balance = rpc_method("getunconfirmedbalance")
    set_tx_fee = rpc_method("settxfee")
    get_wallet_info = rpc_method("getwalletinfo")

    # Chain

    get_blockchain_info = rpc_method("getblockchaininfo")
    get_block_count = rpc_method(
        "getblockcount", "Height of the most-work fully-validated chain."
    )
    get_block_hash = rpc_method("getblockhash", "Hash of the block at the given height.")
    get_block = rpc_method("getblock")
    get_raw_transaction = rpc_method("getrawtransaction", "Args: txid, and optionally verbose.")
    get_transaction = rpc_method("gettransaction")
    decode_raw_transaction = rpc_method("decoderawtransaction")
    get_tx_out = rpc_method("gettxout", "Args: txid, vout.")
    get_tx_out_proof = rpc_method(
        "gettxoutproof",
        "Hex-encoded proof that the txids were included in a block.",
    )
    get_raw_mempool = rpc_method("getrawmempool")
    send_raw_transaction = rpc_method("sendrawtransaction", "Broadcast a raw transaction. Returns its txid.")


RPC_METHODS: Dict[str, str] = {}

for _name, _attr in list(vars(NodeMethods).items()):
    if hasattr(_attr, "rpc_method"):
        _attr.__name__ = _name
        _attr.__qualname__ = f"NodeMethods.{_name}"
        RPC_METHODS[_name] = _attr.rpc_method

del _name, _attr
