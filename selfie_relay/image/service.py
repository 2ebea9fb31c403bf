"""Image generation stage used by `core.engine`.

Role in pipeline:
    - Fails fast when no credential is configured.
    - Resolves a generation client (injected, or chosen by `select_image_client`).
    - Validates the decoded payload and returns a `GenerationResult`.

Error handling strategy:
    - Missing key -> `ConfigurationError`, raised before any network call.
    - Payload `error` field or empty `images` -> `UpstreamError`.
    - Client exceptions propagate unchanged.

Performance characteristics:
    Single attempt, no retry, transport default timeout.
"""

import json
import logging

from selfie_relay.config.provider_config import FAL_KEY_HELP_URL
from selfie_relay.core.errors import ConfigurationError, UpstreamError
from selfie_relay.core.types import GenerationRequest, GenerationResult
from selfie_relay.image.client import ImageGenerationClient, select_image_client

logger = logging.getLogger(__name__)


def _raise_for_payload_error(data: dict) -> None:
    error = data.get("error")
    if not error:
        return
    detail = data.get("detail")
    if isinstance(error, str):
        message = error
    elif isinstance(detail, str) and detail:
        message = detail
    else:
        message = json.dumps(error)
    raise UpstreamError(f"Image generation failed: {message}", body=json.dumps(data))


def generate_image(
    request: GenerationRequest,
    api_key: str | None,
    client: ImageGenerationClient | None = None,
) -> GenerationResult:
    """Generate (or edit) an image and return the decoded result.

    Args:
        request: Immutable generation request.
        api_key: fal.ai credential.
        client: Generation client; chosen by `select_image_client` when omitted.

    Returns:
        `GenerationResult` with at least one image.
    """
    if not api_key or not api_key.strip():
        raise ConfigurationError(
            f"FAL_KEY environment variable not set. Get your key from {FAL_KEY_HELP_URL}"
        )

    if client is None:
        client = select_image_client(api_key)

    data = client.generate(request)
    if not isinstance(data, dict):
        raise UpstreamError("Image generation returned an unexpected payload", body=repr(data))

    _raise_for_payload_error(data)

    result = GenerationResult.from_response(data)
    if not result.images or not result.first_image_url:
        raise UpstreamError("Image generation failed: no image returned", body=json.dumps(data))

    return result
