"""Core enums and type definitions."""

from enum import StrEnum


class UriScheme(StrEnum):
    """Token URI encodings understood by the metadata resolver."""

    DATA_BASE64 = "data_base64"  # data:application/json;base64,<b64>
    DATA_JSON = "data_json"  # data:application/json,<percent-encoded>
    IPFS = "ipfs"  # ipfs://<cid>
    HTTP = "http"  # anything else, fetched as-is


class FailureReason(StrEnum):
    """Why a single RPC endpoint attempt failed."""

    HTTP_STATUS = "http_status"
    TRANSPORT = "transport"
    TIMEOUT = "timeout"
    RPC_ERROR = "rpc_error"
    INVALID_RESPONSE = "invalid_response"
