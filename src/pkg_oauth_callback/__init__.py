"""
pkg_oauth_callback

Decoder for OAuth2 / OIDC implicit-flow redirect fragments that can be
integrated with multiple frameworks (FastAPI, plain scripts, etc.).

Keys and values are returned exactly as they appear in the fragment; no
percent-decoding is performed.
"""

__version__ = "0.1.0"

from .domain.entities import TokenCallback, ErrorCallback, NoMatch, NO_MATCH
from .domain.constants import CallbackKind
from .domain.exceptions import (
    CallbackError,
    CallbackNotRecognizedError,
    AuthorizationDeniedError,
    InvalidTokenError,
)
from .domain.value_objects import Fragment
from .domain.ports import FragmentDecoder

from .adapters.implicit.fragment_decoder import (
    TokenFragmentDecoder,
    ErrorFragmentDecoder,
    parse_token_callback,
    parse_error_callback,
)
from .adapters.jwt.id_token import peek_id_token_claims

from .application.use_cases.classify import ClassifyCallbackUseCase, parse_callback
from .settings import ParserSettings
from .env import settings_from_env

__all__ = [
    "__version__",
    # domain core
    "TokenCallback",
    "ErrorCallback",
    "NoMatch",
    "NO_MATCH",
    "CallbackKind",
    "Fragment",
    "FragmentDecoder",
    # exceptions
    "CallbackError",
    "CallbackNotRecognizedError",
    "AuthorizationDeniedError",
    "InvalidTokenError",
    # adapters
    "TokenFragmentDecoder",
    "ErrorFragmentDecoder",
    "parse_token_callback",
    "parse_error_callback",
    "peek_id_token_claims",
    # use cases
    "ClassifyCallbackUseCase",
    "parse_callback",
    # config
    "ParserSettings",
    "settings_from_env",
]
