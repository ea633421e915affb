from __future__ import annotations

import re
from dataclasses import replace
from typing import Callable, Iterable, Mapping, Optional, Tuple, TypeVar, Union

from ...domain.constants import (
    ACCESS_TOKEN,
    ERROR,
    ERROR_DESCRIPTION,
    EXPIRES_IN,
    ID_TOKEN,
    STATE,
    TOKEN_TYPE,
    CallbackKind,
)
from ...domain.entities import NO_MATCH, ErrorCallback, NoMatch, TokenCallback
from ...domain.ports import FragmentDecoder
from ...domain.value_objects import Fragment

R = TypeVar("R")
Setter = Callable[[R, str], R]

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(value: str) -> Optional[int]:
    """Unparsable numbers become None (absent), never zero."""
    if _INTEGER.fullmatch(value) is None:
        return None
    return int(value)


TOKEN_SETTERS: Mapping[str, Setter[TokenCallback]] = {
    ACCESS_TOKEN: lambda cb, v: replace(cb, access_token=v),
    ID_TOKEN: lambda cb, v: replace(cb, id_token=v),
    EXPIRES_IN: lambda cb, v: replace(cb, expires_in=_parse_int(v)),
    TOKEN_TYPE: lambda cb, v: replace(cb, token_type=v),
    STATE: lambda cb, v: replace(cb, state=v),
}

ERROR_SETTERS: Mapping[str, Setter[ErrorCallback]] = {
    ERROR: lambda cb, v: replace(cb, error=v),
    ERROR_DESCRIPTION: lambda cb, v: replace(cb, description=v),
}


def fold_pairs(
    pairs: Iterable[Tuple[str, str]],
    setters: Mapping[str, Setter[R]],
    initial: R,
) -> R:
    """
    Apply each recognized pair to `initial`, right to left.

    Walking from the right means the leftmost occurrence of a duplicated key
    is applied last and wins. Unknown keys are ignored.
    """
    record = initial
    for key, value in reversed(list(pairs)):
        setter = setters.get(key)
        if setter is not None:
            record = setter(record, value)
    return record


class TokenFragmentDecoder(FragmentDecoder[TokenCallback]):
    """
    Adapter implementing FragmentDecoder for implicit-flow token grants.

    Holds nothing but the prefix mode, so one instance can be shared.
    """

    def __init__(self, strict_prefix: bool = False) -> None:
        self.strict_prefix = strict_prefix

    def decode(self, fragment: str) -> Union[TokenCallback, NoMatch]:
        frag = Fragment(fragment)
        if not frag.matches(CallbackKind.TOKEN, strict=self.strict_prefix):
            return NO_MATCH
        return fold_pairs(frag.pairs(), TOKEN_SETTERS, TokenCallback())


class ErrorFragmentDecoder(FragmentDecoder[ErrorCallback]):
    """
    Adapter implementing FragmentDecoder for authorization error callbacks.
    """

    def __init__(self, strict_prefix: bool = False) -> None:
        self.strict_prefix = strict_prefix

    def decode(self, fragment: str) -> Union[ErrorCallback, NoMatch]:
        frag = Fragment(fragment)
        if not frag.matches(CallbackKind.ERROR, strict=self.strict_prefix):
            return NO_MATCH
        return fold_pairs(frag.pairs(), ERROR_SETTERS, ErrorCallback())


_default_token_decoder = TokenFragmentDecoder()
_default_error_decoder = ErrorFragmentDecoder()


def parse_token_callback(fragment: str) -> Union[TokenCallback, NoMatch]:
    return _default_token_decoder.decode(fragment)


def parse_error_callback(fragment: str) -> Union[ErrorCallback, NoMatch]:
    return _default_error_decoder.decode(fragment)
