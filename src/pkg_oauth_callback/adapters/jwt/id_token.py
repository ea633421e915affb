from typing import Any, Mapping, Optional

import jwt
from jwt.exceptions import DecodeError, InvalidTokenError as JWTInvalidTokenError

from ...domain.entities import TokenCallback
from ...domain.exceptions import InvalidTokenError


def peek_id_token_claims(callback: TokenCallback) -> Optional[Mapping[str, Any]]:
    """
    Read the claims of the callback's id_token WITHOUT verifying it.

    Useful for looking at `nonce` or `sub` before handing the token to a
    real verifier. Nothing returned here is trustworthy on its own.

    Returns:
        Mapping of claims, or None when the callback carries no id_token.

    Raises:
        InvalidTokenError if the id_token is not a decodable JWT.
    """
    if not callback.id_token:
        return None

    try:
        return jwt.decode(
            callback.id_token,
            options={
                "verify_signature": False,
                "verify_aud": False,
            },
        )
    except (DecodeError, JWTInvalidTokenError) as exc:
        raise InvalidTokenError(f"Invalid id_token: {exc}") from exc
