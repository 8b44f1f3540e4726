"""Errors raised by upstream repositories."""


class UpstreamError(Exception):
    """Base class for failures talking to an upstream provider."""

    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider}: {message}")
        self.provider = provider


class NetworkError(UpstreamError):
    """Connection could not be made or was dropped."""


class UpstreamTimeoutError(UpstreamError, TimeoutError):
    """Upstream did not answer before the timer ran out."""


class UpstreamStatusError(UpstreamError):
    """Upstream answered with a non-2xx status."""

    def __init__(self, provider: str, status_code: int, reason: str = ""):
        super().__init__(provider, f"HTTP {status_code} {reason}".rstrip())
        self.status_code = status_code


class MalformedResponseError(UpstreamError):
    """Upstream body did not have the expected shape."""
