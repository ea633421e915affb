from __future__ import annotations

from dataclasses import dataclass

from ...application.use_cases.classify import CallbackResult, ClassifyCallbackUseCase
from ...domain.entities import TokenCallback
from ...settings import ParserSettings


@dataclass(slots=True)
class CallbackDependencies:
    """
    Framework-agnostic callback facade.

    Integrations (FastAPI, CLI, etc.) adapt this to their own
    dependency / command systems.
    """

    classify_use_case: ClassifyCallbackUseCase

    def classify(self, fragment: str) -> CallbackResult:
        """Fragment -> TokenCallback | ErrorCallback | NoMatch."""
        return self.classify_use_case.execute(fragment)

    def classify_url(self, url: str) -> CallbackResult:
        return self.classify_use_case.execute_url(url)

    def require_token(self, fragment: str) -> TokenCallback:
        """Fragment -> TokenCallback (or raise callback exceptions)."""
        return self.classify_use_case.execute_or_raise(fragment)


def create_callback_dependencies(
        settings: ParserSettings | None = None,
) -> CallbackDependencies:
    """
    High-level factory: ParserSettings -> CallbackDependencies.

    - builds the token and error decoders with the configured prefix mode
    - wires them into ClassifyCallbackUseCase
    - returns a CallbackDependencies facade.
    """
    settings = settings or ParserSettings()
    use_case = ClassifyCallbackUseCase.with_strict_prefix(settings.strict_prefix)
    return CallbackDependencies(classify_use_case=use_case)
