"""Token metadata endpoints."""

from __future__ import annotations

import logging
import re

from fastapi import APIRouter

from tokenmeta.api.dependencies import Settings, TokenClient
from tokenmeta.api.schemas import APIError, TokenResponse
from tokenmeta.core.exceptions import ValidationError
from tokenmeta.core.models import ResolutionResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/normie", tags=["normie"])

# Query-string form served at /api/normie?id=<n>
legacy_router = APIRouter(tags=["normie"])

_TOKEN_ID_RE = re.compile(r"^[0-9]+$")

_ERROR_RESPONSES = {
    400: {"model": APIError, "description": "Invalid token id"},
    502: {"model": APIError, "description": "Chain or metadata source unavailable"},
}


def parse_token_id(raw: str | None, max_token_id: int) -> int:
    """
    Validate a token id from the request before any network access.

    Raises:
        ValidationError: If the id is not a base-10 integer in [0, max_token_id]
    """
    message = f"Invalid token ID (0-{max_token_id})"
    value = (raw or "").strip()
    if not _TOKEN_ID_RE.match(value):
        raise ValidationError(message, details={"id": raw})

    # Bound the digit count before int() so oversized input cannot hit the
    # interpreter's integer-string limit
    digits = value.lstrip("0") or "0"
    if len(digits) > len(str(max_token_id)):
        raise ValidationError(message, details={"id": raw})

    token_id = int(digits)
    if token_id > max_token_id:
        raise ValidationError(message, details={"id": raw})
    return token_id


def _convert_to_response(result: ResolutionResult) -> TokenResponse:
    """Convert domain ResolutionResult to API response."""
    return TokenResponse(
        id=result.id,
        name=result.name,
        pixel_count=result.pixel_count,
        image_url=result.image_url,
    )


async def _resolve(raw_id: str | None, client: TokenClient, settings: Settings) -> TokenResponse:
    token_id = parse_token_id(raw_id, settings.max_token_id)
    result = await client.resolve(token_id)
    logger.info(f"Resolved token {token_id}: pixelCount={result.pixel_count}")
    return _convert_to_response(result)


@legacy_router.get(
    "/normie",
    response_model=TokenResponse,
    responses=_ERROR_RESPONSES,
    operation_id="getNormieByQuery",
    summary="Resolve token metadata",
    description="Resolve name, pixel count and image for the token given by ?id=.",
)
async def get_normie_by_query(
    client: TokenClient,
    settings: Settings,
    id: str | None = None,
) -> TokenResponse:
    """Resolve a token given as a query parameter."""
    return await _resolve(id, client, settings)


@router.get(
    "/{token_id}",
    response_model=TokenResponse,
    responses=_ERROR_RESPONSES,
    operation_id="getNormie",
    summary="Resolve token metadata",
    description="Resolve name, pixel count and image for one token.",
)
async def get_normie(
    token_id: str,
    client: TokenClient,
    settings: Settings,
) -> TokenResponse:
    """Resolve a token given in the path."""
    return await _resolve(token_id, client, settings)
