from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass(frozen=True, slots=True)
class TokenCallback:
    """
    Successful implicit-flow grant, as found in the redirect fragment.

    `access_token` is always a string (empty when the provider left the key
    out). `id_token` is only present when the request carried the `openid`
    scope.
    """
    access_token: str = ""
    id_token: Optional[str] = None
    expires_in: Optional[int] = None
    token_type: Optional[str] = None
    state: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class ErrorCallback:
    """
    Authorization failure reported by the identity provider.
    """
    error: str = ""
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class NoMatch:
    """
    The fragment is neither a token grant nor an authorization error.

    This is a routing outcome, not a failure: callers fall through to their
    own default handling. Falsy, so `if not result:` reads naturally.
    """

    def __bool__(self) -> bool:
        return False


NO_MATCH = NoMatch()
