from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from fastapi import HTTPException, Query, status

from ..common.callback_factory import CallbackDependencies
from ...domain.entities import ErrorCallback, NoMatch, TokenCallback
from ...domain.exceptions import AuthorizationDeniedError, CallbackNotRecognizedError

logger = logging.getLogger(__name__)

FRAGMENT_PARAM = "fragment"


@dataclass(slots=True)
class FastAPICallback:
    """
    FastAPI integration for pkg_oauth_callback.

    Browsers never send the URL fragment to the server, so the redirect page
    has to relay it, e.g.

        location.replace("/auth/callback?fragment="
                         + encodeURIComponent(location.hash.slice(1)))

    These dependencies read that `fragment` query parameter. Query-string
    decoding undoes the relay's encodeURIComponent; the fragment itself is
    then parsed verbatim.
    """

    callbacks: CallbackDependencies

    async def get_callback(
            self,
            fragment: str = Query("", alias=FRAGMENT_PARAM),
    ) -> Union[TokenCallback, ErrorCallback]:
        """Dependency: token grant or provider error, 400 otherwise."""
        result = self.callbacks.classify(fragment)
        if isinstance(result, NoMatch):
            logger.info("Rejected callback: fragment matched no callback shape")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Not an OAuth2 callback",
            )
        return result

    async def require_token(
            self,
            fragment: str = Query("", alias=FRAGMENT_PARAM),
    ) -> TokenCallback:
        """Dependency: require a token grant."""
        try:
            return self.callbacks.require_token(fragment)
        except CallbackNotRecognizedError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(exc),
            ) from exc
        except AuthorizationDeniedError as exc:
            logger.info("Identity provider denied authorization: %s", exc.callback.error)
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=exc.callback.to_dict(),
            ) from exc


"""

from fastapi import Depends, FastAPI
from pkg_oauth_callback import TokenCallback
from pkg_oauth_callback.integrations.fastapi import create_fastapi_callback

app = FastAPI()
callbacks = create_fastapi_callback()


@app.get("/auth/callback")
async def auth_callback(token: TokenCallback = Depends(callbacks.require_token)):
    return {"state": token.state}

"""
