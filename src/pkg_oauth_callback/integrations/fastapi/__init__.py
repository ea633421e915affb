from __future__ import annotations

from .deps import FastAPICallback
from ..common.callback_factory import create_callback_dependencies, CallbackDependencies
from ...settings import ParserSettings


def create_fastapi_callback(
    settings: ParserSettings | None = None,
) -> FastAPICallback:
    """
    High-level helper for FastAPI apps:

    - Creates CallbackDependencies from ParserSettings
    - Wraps them in FastAPICallback, exposing dependencies like:

        fastapi_callback.get_callback
        fastapi_callback.require_token
    """
    callbacks: CallbackDependencies = create_callback_dependencies(settings)
    return FastAPICallback(callbacks=callbacks)


__all__ = ["FastAPICallback", "create_fastapi_callback"]
