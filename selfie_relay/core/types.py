"""Request/response data contracts for `selfie_relay.core.engine`.

Architectural role:
    Defines the value objects passed between the generation stage, the relay
    stage and the orchestration layer, plus their wire encodings.

Determinism:
    Pure data classes with no I/O. `to_payload` / `to_dict` output is fully
    determined by field values.
"""

from dataclasses import dataclass

from selfie_relay.config.provider_config import (
    DEFAULT_ASPECT_RATIO,
    DEFAULT_CAPTION,
    DEFAULT_NUM_IMAGES,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_TRANSPORT,
)


ASPECT_RATIOS = (
    "2:1",
    "20:9",
    "19.5:9",
    "16:9",
    "4:3",
    "3:2",
    "1:1",
    "2:3",
    "3:4",
    "9:16",
    "9:19.5",
    "9:20",
    "1:2",
)

OUTPUT_FORMATS = ("jpeg", "png", "webp")

MAX_NUM_IMAGES = 4


@dataclass(frozen=True)
class GenerationRequest:
    """Single generation/edit request, immutable once built.

    Raises:
        ValueError: `num_images` outside 1..4, or unknown ratio/format.
    """

    prompt: str
    reference_image_url: str | None = None
    num_images: int = DEFAULT_NUM_IMAGES
    aspect_ratio: str = DEFAULT_ASPECT_RATIO
    output_format: str = DEFAULT_OUTPUT_FORMAT

    def __post_init__(self):
        if not 1 <= self.num_images <= MAX_NUM_IMAGES:
            raise ValueError(f"num_images must be between 1 and {MAX_NUM_IMAGES}, got {self.num_images}")
        if self.aspect_ratio not in ASPECT_RATIOS:
            raise ValueError(f"Unsupported aspect ratio: {self.aspect_ratio}")
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(f"Unsupported output format: {self.output_format}")

    @property
    def is_edit(self) -> bool:
        return bool(self.reference_image_url)

    def to_payload(self) -> dict:
        """Return the JSON body shared by both generation clients."""
        payload = {
            "prompt": self.prompt,
            "num_images": self.num_images,
            "aspect_ratio": self.aspect_ratio,
            "output_format": self.output_format,
        }
        if self.is_edit:
            payload["image_url"] = self.reference_image_url
        return payload


@dataclass(frozen=True)
class GeneratedImage:
    url: str
    content_type: str | None = None
    width: int | None = None
    height: int | None = None
    file_name: str | None = None


@dataclass(frozen=True)
class GenerationResult:
    """Decoded generation response. Only the first image is consumed."""

    images: tuple = ()
    revised_prompt: str | None = None

    @classmethod
    def from_response(cls, data: dict) -> "GenerationResult":
        images = tuple(
            GeneratedImage(
                url=item.get("url"),
                content_type=item.get("content_type"),
                width=item.get("width"),
                height=item.get("height"),
                file_name=item.get("file_name"),
            )
            for item in (data.get("images") or [])
            if isinstance(item, dict)
        )
        return cls(images=images, revised_prompt=data.get("revised_prompt") or None)

    @property
    def first_image_url(self) -> str:
        return self.images[0].url


@dataclass(frozen=True)
class RelayMessage:
    channel: str
    caption: str
    media_url: str

    def to_payload(self) -> dict:
        return {
            "action": "send",
            "channel": self.channel,
            "message": self.caption,
            "media": self.media_url,
        }


@dataclass
class GenerateAndSendOptions:
    """Caller options for `core.engine.generate_and_send`.

    Attributes:
        prompt: Final prompt text sent to the model.
        channel: Target channel, e.g. `#general` or `@user`.
        caption: Message text; falls back to `DEFAULT_CAPTION` when empty.
        reference_image_url: Switches the request to the edit endpoint.
        transport: `cli` or `http`.
    """

    prompt: str
    channel: str
    caption: str | None = None
    aspect_ratio: str | None = None
    output_format: str | None = None
    num_images: int = DEFAULT_NUM_IMAGES
    reference_image_url: str | None = None
    transport: str = DEFAULT_TRANSPORT

    def build_request(self) -> GenerationRequest:
        return GenerationRequest(
            prompt=self.prompt,
            reference_image_url=self.reference_image_url,
            num_images=self.num_images,
            aspect_ratio=self.aspect_ratio or DEFAULT_ASPECT_RATIO,
            output_format=self.output_format or DEFAULT_OUTPUT_FORMAT,
        )

    @property
    def resolved_caption(self) -> str:
        return self.caption or DEFAULT_CAPTION


@dataclass
class SendResult:
    success: bool
    image_url: str
    channel: str
    prompt: str
    revised_prompt: str | None = None

    def to_dict(self) -> dict:
        """Return the camelCase summary printed by the CLI."""
        summary = {
            "success": self.success,
            "imageUrl": self.image_url,
            "channel": self.channel,
            "prompt": self.prompt,
        }
        if self.revised_prompt:
            summary["revisedPrompt"] = self.revised_prompt
        return summary
