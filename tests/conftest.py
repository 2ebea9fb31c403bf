import pytest


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else ("" if payload is None else str(payload))

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class RecordingSession:
    """Stands in for `requests`; records every POST."""

    def __init__(self, response=None, exc=None):
        self.response = response or FakeResponse()
        self.exc = exc
        self.calls = []

    def post(self, url, json=None, headers=None):
        self.calls.append({"url": url, "json": json, "headers": headers})
        if self.exc is not None:
            raise self.exc
        return self.response


class FakeImageClient:
    def __init__(self, data=None, exc=None):
        self.data = data
        self.exc = exc
        self.requests = []

    def generate(self, request):
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return self.data


class FakeTransport:
    def __init__(self, exc=None):
        self.exc = exc
        self.messages = []

    def send(self, message):
        self.messages.append(message)
        if self.exc is not None:
            raise self.exc


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("FAL_KEY", "OPENCLAW_GATEWAY_URL", "OPENCLAW_GATEWAY_TOKEN", "OPENCLAW_BIN"):
        monkeypatch.delenv(name, raising=False)
    # keeps config/fal.key lookups away from the developer's checkout
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def image_payload():
    return {
        "images": [
            {
                "url": "https://x/1.jpg",
                "content_type": "image/jpeg",
                "width": 1024,
                "height": 1024,
            }
        ]
    }
