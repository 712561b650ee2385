"""
Authentication dependencies for route protection.
"""
import logging
from typing import Annotated, Optional

from fastapi import Depends, Header, HTTPException, status

from diary_api.core.gate import verify_request
from diary_api.core.security import TokenCodec, get_token_codec
from diary_api.schemas.auth import TokenPayload

logger = logging.getLogger(__name__)


async def require_token(
    codec: Annotated[TokenCodec, Depends(get_token_codec)],
    authorization: Annotated[
        Optional[str], Header(description="Bearer token: `Bearer <jwt>`")
    ] = None,
) -> TokenPayload:
    """
    Gate for protected routes.

    Admits the request with the decoded token payload, or stops it with a
    401 before the route body runs.

    Raises:
        HTTPException 401: If the token is missing, malformed, forged or expired
    """
    result = verify_request(authorization, codec)

    if not result.admitted:
        logger.info("Request rejected by gate: %s", type(result.reason).__name__)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=result.reason.detail,
            headers={"WWW-Authenticate": "Bearer"},
        )

    return result.payload


# Type alias for cleaner route signatures
AuthenticatedUser = Annotated[TokenPayload, Depends(require_token)]
