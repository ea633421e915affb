from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ParserSettings:
    """
    Fragment parsing settings.

    Host code decides how to construct this (env, config file, etc.).

    strict_prefix: require `access_token` / `error` to be a whole key
    (followed by `=`, `&` or the end) instead of a plain string prefix.
    Off by default so `access_token_extra=...` keeps routing as a token
    callback, as existing integrations expect.
    """
    strict_prefix: bool = False
