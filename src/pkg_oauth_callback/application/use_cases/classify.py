from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Union

from ...adapters.implicit.fragment_decoder import (
    ErrorFragmentDecoder,
    TokenFragmentDecoder,
)
from ...domain.entities import NO_MATCH, ErrorCallback, NoMatch, TokenCallback
from ...domain.exceptions import AuthorizationDeniedError, CallbackNotRecognizedError
from ...domain.ports import FragmentDecoder
from ...domain.value_objects import Fragment

logger = logging.getLogger(__name__)

CallbackResult = Union[TokenCallback, ErrorCallback, NoMatch]


@dataclass(slots=True)
class ClassifyCallbackUseCase:
    """
    Application use case:
    - Route a redirect fragment to the token or error decoder
    - Report NoMatch when it is neither, so callers can try other routes

    The token decoder is tried first. Field-level problems never surface
    here; only the shape of the fragment decides the outcome.
    """

    token_decoder: FragmentDecoder[TokenCallback] = field(default_factory=TokenFragmentDecoder)
    error_decoder: FragmentDecoder[ErrorCallback] = field(default_factory=ErrorFragmentDecoder)

    @classmethod
    def with_strict_prefix(cls, strict_prefix: bool) -> "ClassifyCallbackUseCase":
        return cls(
            token_decoder=TokenFragmentDecoder(strict_prefix=strict_prefix),
            error_decoder=ErrorFragmentDecoder(strict_prefix=strict_prefix),
        )

    def execute(self, fragment: str) -> CallbackResult:
        token = self.token_decoder.decode(fragment)
        if not isinstance(token, NoMatch):
            logger.debug("Fragment classified as token callback")
            return token

        error = self.error_decoder.decode(fragment)
        if not isinstance(error, NoMatch):
            logger.debug("Fragment classified as error callback: %s", error.error)
            return error

        logger.debug("Fragment matched no callback shape")
        return NO_MATCH

    def execute_url(self, url: str) -> CallbackResult:
        """Classify the fragment of a full redirect URL."""
        return self.execute(str(Fragment.from_url(url)))

    def execute_or_raise(self, fragment: str) -> TokenCallback:
        """
        Like execute(), but only a token grant is a success.

        Raises:
            CallbackNotRecognizedError
            AuthorizationDeniedError
        """
        result = self.execute(fragment)
        if isinstance(result, TokenCallback):
            return result
        if isinstance(result, ErrorCallback):
            raise AuthorizationDeniedError(result)
        raise CallbackNotRecognizedError("Fragment is not an OAuth2 implicit-flow callback")


def parse_callback(fragment: str) -> CallbackResult:
    return ClassifyCallbackUseCase().execute(fragment)
