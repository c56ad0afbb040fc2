"""Client layer errors."""


class ClientError(Exception):
    """Base client error."""

    pass


class ApiRequestError(ClientError):
    """A call to the Reel Talk API failed.

    Attributes:
        kind: Error kind reported by the server, or "network_error" when
            the request never produced a response
        message: Human-readable message from the server, if it sent one
        status_code: HTTP status, None for transport failures
    """

    def __init__(self, kind: str, message: str | None, status_code: int | None):
        self.kind = kind
        self.message = message
        self.status_code = status_code
        super().__init__(message or kind)
