# src/pkg_oauth_callback/domain/value_objects.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from .constants import CallbackKind, KEY_VALUE_SEPARATOR, PAIR_SEPARATOR


@dataclass(frozen=True, slots=True)
class Fragment:
    """
    The part of a redirect URL after `#`.

    One leading `#` is stripped, so both `"#access_token=..."` and
    `"access_token=..."` are accepted. Keys and values are kept exactly as
    they appear: no percent-decoding happens here or anywhere in this
    package. Decode them yourself if your provider escapes them.
    """
    value: str

    def __init__(self, value: str) -> None:
        object.__setattr__(self, "value", value.removeprefix("#"))

    @classmethod
    def from_url(cls, url: str) -> "Fragment":
        """
        Fragment of a full redirect URL (empty when the URL has none).
        """
        _, _, fragment = url.partition("#")
        return cls(fragment)

    def __str__(self) -> str:
        return self.value

    def matches(self, kind: CallbackKind, strict: bool = False) -> bool:
        """
        Prefix test used for routing.

        By default this is a plain string-prefix check, so
        `access_token_extra=...` counts as a token callback. With `strict`
        the prefix must be a whole key: followed by `=`, `&` or the end.
        """
        if not self.value.startswith(kind.prefix):
            return False
        if not strict:
            return True
        rest = self.value[len(kind.prefix):]
        return rest == "" or rest[0] in (KEY_VALUE_SEPARATOR, PAIR_SEPARATOR)

    def pairs(self) -> Iterator[Tuple[str, str]]:
        """
        `key=value` chunks in order of appearance.

        Chunks that do not split into exactly two parts on `=` are skipped.
        """
        for chunk in self.value.split(PAIR_SEPARATOR):
            parts = chunk.split(KEY_VALUE_SEPARATOR)
            if len(parts) == 2:
                yield parts[0], parts[1]
