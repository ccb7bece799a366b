"""Error hierarchy for the brain API.

Error layers:
- BrainError: Base class for all errors raised by this package
- DomainError: Requests the current state cannot satisfy (e.g. nothing loaded yet)
- InfrastructureError: Upstream and network failures

Routes never see raw httpx or json exceptions; adapters translate them into
InfrastructureError subclasses. The global exception handler in app.py turns
any BrainError into an ``{"error": ...}`` body.
"""


class BrainError(Exception):
    """Base class for all brain API errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors
# =============================================================================


class DomainError(BrainError):
    """Base class for domain errors."""


class NotLoadedError(DomainError):
    """A query ran before any ingestion succeeded."""

    def __init__(self, message: str = "Data not loaded yet") -> None:
        super().__init__(message, code="not_loaded")


# =============================================================================
# Infrastructure Errors
# =============================================================================


class InfrastructureError(BrainError):
    """Base class for infrastructure/system errors."""


class UpstreamUnavailableError(InfrastructureError):
    """Upstream unreachable, timed out, or answered with an error status."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="upstream_unavailable")


class UpstreamParseError(InfrastructureError):
    """Upstream answered with a body that is not valid JSON."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="upstream_parse_error")
