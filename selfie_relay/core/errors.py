"""Error taxonomy shared by the generation and relay stages.

All errors are terminal for the current invocation and are never retried.
`api.cli` catches `SelfieRelayError`, prints a single error line and exits
non-zero.
"""


class SelfieRelayError(Exception):
    """Base class for runtime failures surfaced to the top-level caller."""


class ConfigurationError(SelfieRelayError):
    """Required credential or setting is missing."""


class UpstreamError(SelfieRelayError):
    """Generation API rejected the request or returned no usable image.

    Attributes:
        body: Raw response text (or vendor error text) when available.
        status_code: HTTP status when the failure came from an HTTP response.
    """

    def __init__(self, message, body=None, status_code=None):
        super().__init__(message)
        self.body = body
        self.status_code = status_code


class RelayError(SelfieRelayError):
    """Messaging delivery failed via subprocess exit code or HTTP status.

    Attributes:
        body: Captured stderr/stdout text or HTTP response body.
        returncode: Exit status of the CLI transport.
        status_code: HTTP status of the HTTP transport.
        image_url: Generated image that was not delivered, set by orchestration
            so a caller can retry the relay by hand.
    """

    def __init__(self, message, body=None, returncode=None, status_code=None, image_url=None):
        super().__init__(message)
        self.body = body
        self.returncode = returncode
        self.status_code = status_code
        self.image_url = image_url
