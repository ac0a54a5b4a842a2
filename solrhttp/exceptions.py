"""Custom exceptions for the solrhttp transport."""


class TransportInputError(ValueError):
    """Raised when a transport operation is called with invalid arguments."""

    def __init__(self, argument: str, reason: str = "is required"):
        self.argument = argument
        self.reason = reason
        super().__init__(f"Argument '{argument}' {reason}")


class HttpFetchError(Exception):
    """Raised when an HTTP fetch fails due to network/transport errors."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")
