"""Custom exceptions for the cheer API."""


class CheerAppError(Exception):
    """Base exception for the cheer API."""

    pass


class ProviderError(CheerAppError):
    """Exception raised when an upstream content provider cannot be used."""

    def __init__(self, provider: str, message: str):
        self.provider = provider
        self.message = message
        super().__init__(f"{provider}: {message}")


class ProviderTimeoutError(ProviderError):
    """Exception raised when a provider does not answer within its timeout."""

    def __init__(self, provider: str, timeout: float):
        self.timeout = timeout
        super().__init__(provider, f"timed out after {timeout:.1f}s")


class ProviderStatusError(ProviderError):
    """Exception raised when a provider returns a non-success status."""

    def __init__(self, provider: str, status_code: int):
        self.status_code = status_code
        super().__init__(provider, f"returned HTTP {status_code}")


class ProviderUnavailableError(ProviderError):
    """Exception raised for network/connection errors."""

    pass


class MalformedPayloadError(ProviderError):
    """Exception raised when a provider payload is unusable.

    Covers non-JSON bodies, missing or empty fields and error flags embedded
    in an otherwise successful response.
    """

    pass


class ConfigurationError(CheerAppError):
    """Exception raised for configuration errors."""

    pass
