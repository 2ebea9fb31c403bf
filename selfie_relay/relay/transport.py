"""OpenClaw message relay transports.

Processing flow:
    1. Caller picks a transport name (`cli` or `http`); no auto-detection here.
    2. `CliTransport` runs `openclaw message send ...` as a subprocess with an
       argument list, or `HttpTransport` POSTs JSON to `<gateway>/message`.
    3. Any failure raises `RelayError`; success returns `None`.

Side effects:
    Exactly one subprocess or HTTP call per `send`. No queuing, no fan-out.

Error handling strategy:
    - Non-zero exit status -> `RelayError` with captured stderr/stdout.
    - Missing CLI binary -> `RelayError`.
    - Non-2xx gateway response or connection failure -> `RelayError`.
"""

import logging
import subprocess
from typing import Protocol

import requests

from selfie_relay.config.provider_config import (
    DEFAULT_TRANSPORT,
    get_cli_binary,
    get_gateway_token,
    get_gateway_url,
)
from selfie_relay.core.errors import RelayError
from selfie_relay.core.types import RelayMessage

logger = logging.getLogger(__name__)

TRANSPORT_CLI = "cli"
TRANSPORT_HTTP = "http"
TRANSPORTS = (TRANSPORT_CLI, TRANSPORT_HTTP)


class MessageTransport(Protocol):
    def send(self, message: RelayMessage) -> None:
        ...


class CliTransport:
    """Relay through the `openclaw` command-line tool."""

    def __init__(self, binary: str | None = None, runner=None):
        self.binary = binary or get_cli_binary()
        self.runner = runner or subprocess.run

    def build_command(self, message: RelayMessage) -> list[str]:
        return [
            self.binary,
            "message",
            "send",
            "--action",
            "send",
            "--channel",
            message.channel,
            "--message",
            message.caption,
            "--media",
            message.media_url,
        ]

    def send(self, message: RelayMessage) -> None:
        command = self.build_command(message)
        logger.debug("Running %s message send for channel %s", self.binary, message.channel)

        try:
            completed = self.runner(command, capture_output=True, text=True)
        except FileNotFoundError as exc:
            raise RelayError(f"OpenClaw CLI not found: {self.binary}") from exc

        if completed.returncode != 0:
            output = (completed.stderr or completed.stdout or "").strip()
            raise RelayError(
                f"OpenClaw send failed (exit {completed.returncode}): {output}",
                body=output,
                returncode=completed.returncode,
            )


class HttpTransport:
    """Relay through the OpenClaw gateway HTTP endpoint."""

    def __init__(self, gateway_url: str | None = None, token: str | None = None, session=None):
        self.gateway_url = (gateway_url or get_gateway_url()).rstrip("/")
        self.token = token if token is not None else get_gateway_token()
        self.session = session or requests

    @property
    def endpoint(self) -> str:
        return f"{self.gateway_url}/message"

    def build_headers(self) -> dict:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def send(self, message: RelayMessage) -> None:
        logger.debug("POST %s", self.endpoint)
        try:
            response = self.session.post(
                self.endpoint,
                json=message.to_payload(),
                headers=self.build_headers(),
            )
        except requests.RequestException as exc:
            raise RelayError(f"OpenClaw gateway unreachable at {self.gateway_url}: {exc}") from exc

        if not response.ok:
            raise RelayError(
                f"OpenClaw send failed: {response.text}",
                body=response.text,
                status_code=response.status_code,
            )


def get_transport(name: str = DEFAULT_TRANSPORT) -> MessageTransport:
    """Build a transport by name using environment-derived settings."""
    if name == TRANSPORT_CLI:
        return CliTransport()
    if name == TRANSPORT_HTTP:
        return HttpTransport()
    raise ValueError(f"Unknown transport: {name!r} (expected one of {', '.join(TRANSPORTS)})")


def send_message(message: RelayMessage, transport=DEFAULT_TRANSPORT) -> None:
    """Deliver one message through a transport instance or transport name."""
    if isinstance(transport, str):
        transport = get_transport(transport)
    transport.send(message)
