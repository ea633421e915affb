from __future__ import annotations

import os

from .settings import ParserSettings

STRICT_PREFIX_ENV = "OAUTH_CALLBACK_STRICT_PREFIX"


def settings_from_env() -> ParserSettings:
    def _bool(key: str, default: bool = False) -> bool:
        raw = os.getenv(key)
        if raw is None:
            return default
        return str(raw).strip().lower() in {"1", "true", "yes", "on"}

    return ParserSettings(strict_prefix=_bool(STRICT_PREFIX_ENV, False))
