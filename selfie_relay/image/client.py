"""Grok Imagine generation clients.

Processing flow:
    1. Build the JSON body from `GenerationRequest.to_payload()`.
    2. Pick the generate or edit model depending on the reference image.
    3. Submit through the vendor client or a raw `requests` POST.
    4. Return the decoded JSON response unchanged.

Client selection:
    `select_image_client` prefers `FalClient` when the optional `fal_client`
    package imports cleanly and falls back to `HttpImageClient` when the import
    fails for any reason (missing package or a broken dependency). Both
    send identical bodies, so callers cannot tell them apart.

Error handling strategy:
    - Non-2xx HTTP responses raise `UpstreamError` carrying the raw body text.
    - Transport and vendor exceptions are wrapped into `UpstreamError`.
    - Payload-level checks (error field, empty images) happen in `image.service`.

Security considerations:
    - Exceptions may include upstream provider response bodies.
    - The API key is never logged.
"""

import importlib
import logging
from typing import Protocol

import requests

from selfie_relay.config.provider_config import (
    GROK_IMAGINE_EDIT_MODEL,
    GROK_IMAGINE_EDIT_URL,
    GROK_IMAGINE_MODEL,
    GROK_IMAGINE_URL,
)
from selfie_relay.core.errors import UpstreamError
from selfie_relay.core.types import GenerationRequest

logger = logging.getLogger(__name__)

FAL_CLIENT_MODULE = "fal_client"


class ImageGenerationClient(Protocol):
    """Capability interface consumed by `image.service.generate_image`."""

    def generate(self, request: GenerationRequest) -> dict:
        ...


class HttpImageClient:
    """Raw HTTP client posting directly to `fal.run`."""

    def __init__(self, api_key: str, session=None):
        self.api_key = api_key
        self.session = session or requests

    def generate(self, request: GenerationRequest) -> dict:
        """Send one generation request and return the parsed JSON response.

        Error handling:
            - Connection/transport failure -> `UpstreamError`
            - Non-2xx HTTP response -> `UpstreamError` with body and status
            - Non-JSON success body -> `UpstreamError` with body
        """
        url = GROK_IMAGINE_EDIT_URL if request.is_edit else GROK_IMAGINE_URL
        headers = {
            "Authorization": f"Key {self.api_key}",
            "Content-Type": "application/json",
        }

        logger.debug("POST %s", url)
        try:
            response = self.session.post(url, json=request.to_payload(), headers=headers)
        except requests.RequestException as exc:
            raise UpstreamError(f"Image generation request failed: {exc}") from exc

        if not response.ok:
            raise UpstreamError(
                f"Image generation failed: {response.text}",
                body=response.text,
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamError(
                f"Image generation returned invalid JSON: {response.text}",
                body=response.text,
                status_code=response.status_code,
            ) from exc


class FalClient:
    """Vendor client backed by the optional `fal_client` package."""

    def __init__(self, api_key: str, module=None):
        self.api_key = api_key
        fal_client = module or importlib.import_module(FAL_CLIENT_MODULE)
        self.client = fal_client.SyncClient(key=api_key)

    def generate(self, request: GenerationRequest) -> dict:
        model = GROK_IMAGINE_EDIT_MODEL if request.is_edit else GROK_IMAGINE_MODEL

        logger.debug("fal_client subscribe %s", model)
        try:
            return self.client.subscribe(model, arguments=request.to_payload())
        except Exception as exc:
            # fal_client raises its own and httpx error types
            raise UpstreamError(f"Image generation failed: {exc}", body=str(exc)) from exc


def select_image_client(api_key: str, importer=importlib.import_module) -> ImageGenerationClient:
    """Return the preferred generation client for this environment.

    The import attempt itself decides availability; an `ImportError` from
    `fal_client` or one of its dependencies selects the HTTP client.
    """
    try:
        module = importer(FAL_CLIENT_MODULE)
    except ImportError as exc:
        logger.debug("fal_client unavailable (%s); using direct HTTP", exc)
        return HttpImageClient(api_key)

    logger.debug("Using fal_client for image generation")
    return FalClient(api_key, module=module)
