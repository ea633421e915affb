# tests/test_domain.py
import dataclasses

import pytest

from pkg_oauth_callback.domain.constants import CallbackKind
from pkg_oauth_callback.domain.entities import TokenCallback, ErrorCallback, NoMatch, NO_MATCH
from pkg_oauth_callback.domain.exceptions import AuthorizationDeniedError, CallbackError
from pkg_oauth_callback.domain.value_objects import Fragment


def test_fragment_strips_single_leading_hash():
    assert str(Fragment("#access_token=abc")) == "access_token=abc"
    assert str(Fragment("access_token=abc")) == "access_token=abc"
    assert str(Fragment("##error=x")) == "#error=x"


def test_fragment_from_url():
    frag = Fragment.from_url("https://app.example.com/cb?x=1#access_token=abc&state=s")
    assert str(frag) == "access_token=abc&state=s"

    assert str(Fragment.from_url("https://app.example.com/cb")) == ""
    # everything after the first '#' belongs to the fragment
    assert str(Fragment.from_url("https://a/#error=x#y")) == "error=x#y"


def test_fragment_pairs_skip_malformed_chunks():
    frag = Fragment("access_token=abc&garbage&a=b=c&&state=")
    assert list(frag.pairs()) == [("access_token", "abc"), ("state", "")]


def test_fragment_prefix_matching():
    # --- plain prefix test ---
    assert Fragment("access_token=abc").matches(CallbackKind.TOKEN)
    assert Fragment("access_token_extra=abc").matches(CallbackKind.TOKEN)
    assert Fragment("errors=1").matches(CallbackKind.ERROR)
    assert not Fragment("state=1&access_token=abc").matches(CallbackKind.TOKEN)

    # --- key-boundary test ---
    assert Fragment("access_token=abc").matches(CallbackKind.TOKEN, strict=True)
    assert Fragment("access_token").matches(CallbackKind.TOKEN, strict=True)
    assert Fragment("error&x=1").matches(CallbackKind.ERROR, strict=True)
    assert not Fragment("access_token_extra=abc").matches(CallbackKind.TOKEN, strict=True)
    assert not Fragment("errors=1").matches(CallbackKind.ERROR, strict=True)


def test_records_are_immutable():
    token = TokenCallback(access_token="abc")
    with pytest.raises(dataclasses.FrozenInstanceError):
        token.access_token = "other"

    error = ErrorCallback(error="access_denied")
    with pytest.raises(dataclasses.FrozenInstanceError):
        error.error = "other"


def test_record_defaults():
    assert TokenCallback().to_dict() == {
        "access_token": "",
        "id_token": None,
        "expires_in": None,
        "token_type": None,
        "state": None,
    }
    assert ErrorCallback().to_dict() == {"error": "", "description": ""}


def test_no_match_is_falsy_value():
    assert not NO_MATCH
    assert NoMatch() == NO_MATCH


def test_authorization_denied_error_message():
    exc = AuthorizationDeniedError(ErrorCallback("access_denied", "User denied"))
    assert isinstance(exc, CallbackError)
    assert exc.callback.error == "access_denied"
    assert str(exc) == "access_denied: User denied"

    assert str(AuthorizationDeniedError(ErrorCallback())) == "authorization failed"
