"""
Request gate for protected routes.

``verify_request`` turns a raw ``Authorization`` header value into a tagged
result instead of raising, so callers decide how a rejection is reported.
"""
from dataclasses import dataclass
from typing import Optional, Union

from diary_api.core.exceptions import InvalidTokenError, MissingTokenError
from diary_api.core.security import TokenCodec
from diary_api.schemas.auth import TokenPayload

BEARER_SCHEME = "bearer"

GateFailure = Union[MissingTokenError, InvalidTokenError]


@dataclass(frozen=True)
class GateResult:
    """Outcome of verifying one request: admitted with a payload, or rejected with a reason."""

    admitted: bool
    payload: Optional[TokenPayload] = None
    reason: Optional[GateFailure] = None

    @classmethod
    def admit(cls, payload: TokenPayload) -> "GateResult":
        return cls(admitted=True, payload=payload)

    @classmethod
    def reject(cls, reason: GateFailure) -> "GateResult":
        return cls(admitted=False, reason=reason)


def extract_bearer_token(header_value: Optional[str]) -> str:
    """
    Pull the token out of an ``Authorization: Bearer <token>`` value.

    The value must be exactly two segments separated by a single space.

    Raises:
        MissingTokenError: If the header is absent or malformed
    """
    if header_value is None:
        raise MissingTokenError()

    parts = header_value.split(" ")
    if len(parts) != 2:
        raise MissingTokenError()

    scheme, token = parts
    if scheme.lower() != BEARER_SCHEME or not token:
        raise MissingTokenError()

    return token


def verify_request(header_value: Optional[str], codec: TokenCodec) -> GateResult:
    """
    Verify the bearer token carried by a request.

    Args:
        header_value: Raw ``Authorization`` header value (None when absent)
        codec: Token codec holding the signing secret

    Returns:
        GateResult.admit(payload) when the signature and claims check out,
        GateResult.reject(reason) otherwise
    """
    try:
        token = extract_bearer_token(header_value)
        payload = codec.decode_token(token)
    except (MissingTokenError, InvalidTokenError) as e:
        return GateResult.reject(e)

    return GateResult.admit(payload)
