"""Core orchestration: generate one image, then relay it to a channel.

Control-flow model:
    1. Resolve the credential (argument or `FAL_KEY`).
    2. Run the generation stage (`image.service.generate_image`).
    3. Run the relay stage (`relay.transport.send_message`) with the first image.
    4. Return a `SendResult` summary.

Failure model:
    - Generation failure: the relay stage is never invoked; the error propagates.
    - Relay failure: the error propagates with `image_url` attached so the
      top-level caller can report the URL for a manual relay retry.
    - No partial-failure recovery, no retries.

Interaction surface:
    - Image: `image.service.generate_image`, `image.client.select_image_client`.
    - Relay: `relay.transport.get_transport`, `relay.transport.send_message`.

Determinism:
    Request construction is deterministic; generated output is not.
"""

import logging

from selfie_relay.config.provider_config import get_fal_key
from selfie_relay.core.errors import RelayError
from selfie_relay.core.types import GenerateAndSendOptions, RelayMessage, SendResult
from selfie_relay.image.client import ImageGenerationClient
from selfie_relay.image.service import generate_image
from selfie_relay.relay.transport import MessageTransport, get_transport, send_message


logger = logging.getLogger(__name__)


def generate_and_send(
    options: GenerateAndSendOptions,
    api_key: str | None = None,
    image_client: ImageGenerationClient | None = None,
    transport: MessageTransport | None = None,
) -> SendResult:
    """Generate an image and send it with a caption to `options.channel`.

    Args:
        options: Prompt, channel and generation/relay options.
        api_key: fal.ai credential; read from `FAL_KEY` when omitted.
        image_client: Generation client; chosen by `select_image_client` when omitted.
        transport: Relay transport; built from `options.transport` when omitted.

    Returns:
        `SendResult` with the delivered image URL.

    Raises:
        ConfigurationError: No credential.
        UpstreamError: Generation failed or returned no image.
        RelayError: Delivery failed; `image_url` holds the generated image.
    """
    if api_key is None:
        api_key = get_fal_key()

    request = options.build_request()

    logger.info("Generating image with Grok Imagine...")
    logger.info("Prompt: %s", request.prompt)
    logger.info("Aspect ratio: %s", request.aspect_ratio)
    if request.is_edit:
        logger.info("Reference image: %s", request.reference_image_url)

    result = generate_image(request, api_key, client=image_client)

    image_url = result.first_image_url
    logger.info("Image generated: %s", image_url)
    if result.revised_prompt:
        logger.info("Revised prompt: %s", result.revised_prompt)

    if transport is None:
        transport = get_transport(options.transport)

    message = RelayMessage(
        channel=options.channel,
        caption=options.resolved_caption,
        media_url=image_url,
    )

    logger.info("Sending to channel: %s", message.channel)
    try:
        send_message(message, transport)
    except RelayError as exc:
        exc.image_url = image_url
        raise
    logger.info("Done! Image sent to %s", message.channel)

    return SendResult(
        success=True,
        image_url=image_url,
        channel=options.channel,
        prompt=request.prompt,
        revised_prompt=result.revised_prompt,
    )
