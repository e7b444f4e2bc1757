"""Chain access: ABI codec and failover JSON-RPC client."""

from tokenmeta.chain.abi import (
    TOKEN_URI_SELECTOR,
    decode_string,
    encode_call,
    encode_string_result,
)
from tokenmeta.chain.rpc import FailoverResult, RpcFailoverClient

__all__ = [
    # ABI
    "TOKEN_URI_SELECTOR",
    "decode_string",
    "encode_call",
    "encode_string_result",
    # RPC
    "FailoverResult",
    "RpcFailoverClient",
]
