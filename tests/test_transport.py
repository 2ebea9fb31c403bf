import subprocess

import pytest
import requests

from selfie_relay.core.errors import RelayError
from selfie_relay.core.types import RelayMessage
from selfie_relay.relay.transport import (
    CliTransport,
    HttpTransport,
    get_transport,
    send_message,
)
from tests.conftest import FakeResponse, RecordingSession


MESSAGE = RelayMessage(channel="#art", caption='Check "it"!', media_url="https://x/1.jpg")


class RecordingRunner:
    def __init__(self, returncode=0, stdout="", stderr="", exc=None):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.exc = exc
        self.calls = []

    def __call__(self, command, **kwargs):
        self.calls.append((command, kwargs))
        if self.exc is not None:
            raise self.exc
        return subprocess.CompletedProcess(command, self.returncode, self.stdout, self.stderr)


def test_cli_transport_passes_discrete_arguments():
    runner = RecordingRunner()
    CliTransport(binary="openclaw", runner=runner).send(MESSAGE)

    command, kwargs = runner.calls[0]
    assert command == [
        "openclaw", "message", "send",
        "--action", "send",
        "--channel", "#art",
        "--message", 'Check "it"!',
        "--media", "https://x/1.jpg",
    ]
    assert kwargs["capture_output"] is True
    assert "shell" not in kwargs


def test_cli_transport_nonzero_exit_raises_with_stderr():
    runner = RecordingRunner(returncode=3, stderr="unknown channel #art\n")

    with pytest.raises(RelayError) as excinfo:
        CliTransport(binary="openclaw", runner=runner).send(MESSAGE)

    assert excinfo.value.returncode == 3
    assert excinfo.value.body == "unknown channel #art"


def test_cli_transport_falls_back_to_stdout_text():
    runner = RecordingRunner(returncode=1, stdout="gateway offline")

    with pytest.raises(RelayError, match="gateway offline"):
        CliTransport(binary="openclaw", runner=runner).send(MESSAGE)


def test_cli_transport_missing_binary():
    runner = RecordingRunner(exc=FileNotFoundError("openclaw"))

    with pytest.raises(RelayError, match="not found"):
        CliTransport(binary="openclaw", runner=runner).send(MESSAGE)


def test_cli_binary_from_environment(monkeypatch):
    monkeypatch.setenv("OPENCLAW_BIN", "/opt/bin/openclaw")
    assert CliTransport().binary == "/opt/bin/openclaw"


def test_http_transport_posts_message_body():
    session = RecordingSession(FakeResponse(200, {"ok": True}))
    HttpTransport(gateway_url="http://gw:18789/", token=None, session=session).send(MESSAGE)

    call = session.calls[0]
    assert call["url"] == "http://gw:18789/message"
    assert call["json"] == {
        "action": "send",
        "channel": "#art",
        "message": 'Check "it"!',
        "media": "https://x/1.jpg",
    }
    assert "Authorization" not in call["headers"]


def test_http_transport_bearer_token_from_environment(monkeypatch):
    monkeypatch.setenv("OPENCLAW_GATEWAY_URL", "http://gateway.local:9000/")
    monkeypatch.setenv("OPENCLAW_GATEWAY_TOKEN", "tok")
    session = RecordingSession(FakeResponse(200, {}))

    HttpTransport(session=session).send(MESSAGE)

    call = session.calls[0]
    assert call["url"] == "http://gateway.local:9000/message"
    assert call["headers"]["Authorization"] == "Bearer tok"


def test_http_transport_default_gateway():
    assert HttpTransport().endpoint == "http://localhost:18789/message"


def test_http_transport_error_status_raises_with_body():
    session = RecordingSession(FakeResponse(502, None, text="bad gateway"))

    with pytest.raises(RelayError) as excinfo:
        HttpTransport(gateway_url="http://gw", session=session).send(MESSAGE)

    assert excinfo.value.status_code == 502
    assert excinfo.value.body == "bad gateway"


def test_http_transport_connection_error():
    session = RecordingSession(exc=requests.ConnectionError("refused"))

    with pytest.raises(RelayError, match="unreachable"):
        HttpTransport(gateway_url="http://gw", session=session).send(MESSAGE)


def test_get_transport_by_name():
    assert isinstance(get_transport("cli"), CliTransport)
    assert isinstance(get_transport("http"), HttpTransport)
    with pytest.raises(ValueError):
        get_transport("carrier-pigeon")


def test_send_message_uses_given_transport_once():
    runner = RecordingRunner()
    send_message(MESSAGE, CliTransport(binary="openclaw", runner=runner))
    assert len(runner.calls) == 1
