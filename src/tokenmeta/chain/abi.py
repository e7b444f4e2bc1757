"""
ABI codec for the ERC-721 tokenURI(uint256) call.

Uses eth-abi for argument encoding. The function selector is fixed, so no
Keccak backend is needed at runtime. String results are read with a fixed
layout (offset word, length word, payload) rather than by following the
offset pointer, which keeps all-zero results decodable as "".
"""

from __future__ import annotations

import logging

from eth_abi import encode
from eth_abi.exceptions import EncodingError

from tokenmeta.core.exceptions import EncodeError

logger = logging.getLogger(__name__)

# keccak256("tokenURI(uint256)")[:4]
TOKEN_URI_SELECTOR = "c87b56dd"

WORD_HEX = 64
# Offset word + length word
MIN_STRING_RESULT_HEX = 2 * WORD_HEX


def _strip_hex_prefix(value: str) -> str:
    return value[2:] if value[:2] in ("0x", "0X") else value


def encode_call(token_id: int) -> str:
    """
    Build calldata for tokenURI(token_id).

    Args:
        token_id: Token identifier, 0 <= token_id < 2**256

    Returns:
        0x-prefixed hex: 4-byte selector + 32-byte big-endian token id

    Raises:
        EncodeError: If token_id is not an unsigned 256-bit integer
    """
    if isinstance(token_id, bool) or not isinstance(token_id, int):
        raise EncodeError(
            f"Token id must be an integer, got {type(token_id).__name__}",
            details={"token_id": repr(token_id)},
        )

    try:
        encoded_args = encode(["uint256"], [token_id])
    except EncodingError as e:
        raise EncodeError(
            f"Token id {token_id} is not representable as uint256",
            details={"token_id": str(token_id)},
        ) from e

    return "0x" + TOKEN_URI_SELECTOR + encoded_args.hex()


def decode_string(raw: str | None) -> str | None:
    """
    Decode an ABI-encoded dynamic string from eth_call output.

    Layout: 32-byte offset, 32-byte length L, then L bytes of UTF-8
    right-padded to a 32-byte boundary. Padding is ignored.

    Returns:
        The decoded string, or None if the result is empty, too short,
        or malformed (e.g. nonexistent token, reverted call)
    """
    if not raw:
        return None

    data = _strip_hex_prefix(raw)
    if len(data) < MIN_STRING_RESULT_HEX:
        return None

    try:
        length = int(data[WORD_HEX:MIN_STRING_RESULT_HEX], 16)
    except ValueError:
        logger.warning(f"Call result has a non-hex length word: {raw[:140]!r}")
        return None

    payload_hex = data[MIN_STRING_RESULT_HEX : MIN_STRING_RESULT_HEX + length * 2]
    if len(payload_hex) < length * 2:
        logger.warning(
            f"Call result declares {length} bytes but carries {len(payload_hex) // 2}"
        )
        return None

    try:
        payload = bytes.fromhex(payload_hex)
    except ValueError:
        logger.warning(f"Call result payload is not valid hex: {raw[:140]!r}")
        return None

    return payload.decode("utf-8", errors="replace")


def encode_string_result(value: str) -> str:
    """Encode a string the way a contract returns it from eth_call."""
    return "0x" + encode(["string"], [value]).hex()
