class ProviderError(Exception):
    """A fact category could not be fetched."""

    kind = "ProviderError"

    def describe(self) -> str:
        detail = str(self)
        return f"{self.kind}({detail})" if detail else self.kind


class ProviderTimeoutError(ProviderError):
    kind = "Timeout"


class InvalidResponseError(ProviderError):
    kind = "InvalidResponse"


class NetworkError(ProviderError):
    kind = "NetworkError"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class NotFoundError(ProviderError):
    kind = "NotFound"


class UnsupportedChainError(ValueError):
    """No provider serves this chain."""


class InvalidAddressError(ValueError):
    """Address is not well-formed for the chain family."""
