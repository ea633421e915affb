# tests/test_classify.py
import logging

import pytest

from pkg_oauth_callback.application.use_cases.classify import ClassifyCallbackUseCase, parse_callback
from pkg_oauth_callback.domain.entities import ErrorCallback, NoMatch, TokenCallback, NO_MATCH
from pkg_oauth_callback.domain.exceptions import AuthorizationDeniedError, CallbackNotRecognizedError


def test_routes_token_callback():
    result = parse_callback("access_token=abc&state=s")
    assert result == TokenCallback(access_token="abc", state="s")


def test_routes_error_callback():
    result = parse_callback("error=access_denied&error_description=nope")
    assert result == ErrorCallback("access_denied", "nope")


def test_unrecognized_fragment_is_no_match():
    assert parse_callback("code=abc&state=s") is NO_MATCH
    assert isinstance(parse_callback(""), NoMatch)


def test_execute_url():
    uc = ClassifyCallbackUseCase()
    result = uc.execute_url("https://app.example.com/callback#access_token=abc&token_type=Bearer")
    assert result == TokenCallback(access_token="abc", token_type="Bearer")
    assert isinstance(uc.execute_url("https://app.example.com/callback?code=abc"), NoMatch)


def test_execute_or_raise():
    uc = ClassifyCallbackUseCase()
    assert uc.execute_or_raise("access_token=abc") == TokenCallback(access_token="abc")

    with pytest.raises(AuthorizationDeniedError) as exc_info:
        uc.execute_or_raise("error=access_denied&error_description=User%20denied")
    assert exc_info.value.callback == ErrorCallback("access_denied", "User%20denied")

    with pytest.raises(CallbackNotRecognizedError):
        uc.execute_or_raise("state=s")


def test_strict_prefix_use_case():
    strict = ClassifyCallbackUseCase.with_strict_prefix(True)
    assert isinstance(strict.execute("access_token_extra=abc"), NoMatch)
    assert isinstance(strict.execute("errors=1"), NoMatch)
    assert strict.execute("error=x") == ErrorCallback(error="x")

    lenient = ClassifyCallbackUseCase.with_strict_prefix(False)
    assert isinstance(lenient.execute("access_token_extra=abc"), TokenCallback)


def test_custom_decoders_are_used():
    class AlwaysNoMatch:
        def decode(self, fragment):
            return NO_MATCH

    uc = ClassifyCallbackUseCase(token_decoder=AlwaysNoMatch(), error_decoder=AlwaysNoMatch())
    assert uc.execute("access_token=abc") is NO_MATCH


def test_tokens_are_not_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="pkg_oauth_callback")
    parse_callback("access_token=s3cr3t-token&state=s")
    assert "classified as token callback" in caplog.text
    assert "s3cr3t-token" not in caplog.text
