"""
Command-line entrypoint: generate a Grok Imagine image and send it via OpenClaw.

Usage:
    selfie-relay <prompt> <channel> [caption] [aspect_ratio] [output_format]
    selfie-relay "wearing a santa hat" "#general" --mode auto --reference-image URL

Request lifecycle:
1. Parse positional arguments and options.
2. Optionally turn the prompt into a selfie prompt (`--mode`).
3. Resolve the relay transport (`--transport auto` looks for the CLI binary).
4. Delegate to `core.engine.generate_and_send`.
5. Print the JSON summary to stdout.

Input validation behavior:
- Missing prompt/channel prints help and exits 1.
- Unknown aspect ratio/output format or out-of-range image count is a usage
  error (exit 2).

Error handling strategy:
- `SelfieRelayError` is logged as a single `[ERROR]` line and exits 1; a
  failed relay names the generated image URL in that line.
- Progress logs go to stderr; stdout carries only the result summary.
"""

import argparse
import json
import logging
import shutil
import sys

from selfie_relay.config.provider_config import (
    DEFAULT_ASPECT_RATIO,
    DEFAULT_CAPTION,
    DEFAULT_OUTPUT_FORMAT,
    get_cli_binary,
)
from selfie_relay.core.engine import generate_and_send
from selfie_relay.core.errors import SelfieRelayError
from selfie_relay.core.types import ASPECT_RATIOS, MAX_NUM_IMAGES, OUTPUT_FORMATS, GenerateAndSendOptions
from selfie_relay.prompting.prompt_builder import MODES, build_prompt
from selfie_relay.relay.transport import TRANSPORT_CLI, TRANSPORT_HTTP, TRANSPORTS

logger = logging.getLogger(__name__)

TRANSPORT_AUTO = "auto"

EPILOG = f"""\
Environment:
  FAL_KEY                 fal.ai API key (required)
  OPENCLAW_GATEWAY_URL    gateway URL for --transport http (default: http://localhost:18789)
  OPENCLAW_GATEWAY_TOKEN  gateway bearer token (optional)
  OPENCLAW_BIN            OpenClaw CLI binary (default: openclaw)

Example:
  FAL_KEY=your_key selfie-relay "A cyberpunk city" "#art" "Check this out!"

Aspect ratios: {', '.join(ASPECT_RATIOS)}
Output formats: {', '.join(OUTPUT_FORMATS)}
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="selfie-relay",
        description="Generate an image with Grok Imagine and send it via OpenClaw.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("prompt", nargs="?", help="Image description (or selfie context with --mode)")
    parser.add_argument("channel", nargs="?", help="Target channel, e.g. #general or @user")
    parser.add_argument("caption", nargs="?", help=f"Message caption (default: '{DEFAULT_CAPTION}')")
    parser.add_argument("aspect_ratio", nargs="?", help=f"Image ratio (default: {DEFAULT_ASPECT_RATIO})")
    parser.add_argument("output_format", nargs="?", help=f"Image format (default: {DEFAULT_OUTPUT_FORMAT})")
    parser.add_argument("--mode", choices=MODES, default=None, help="Render the prompt as a selfie prompt")
    parser.add_argument("--reference-image", default=None, help="Reference image URL; uses the edit endpoint")
    parser.add_argument(
        "--transport",
        choices=(TRANSPORT_AUTO,) + TRANSPORTS,
        default=TRANSPORT_AUTO,
        help="Relay transport (default: auto)",
    )
    parser.add_argument("--num-images", type=int, default=1, help=f"Images to request (1-{MAX_NUM_IMAGES})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
        stream=sys.stderr,
    )


def resolve_transport(name: str) -> str:
    """Map `auto` to `cli` when the OpenClaw binary is on PATH, else `http`."""
    if name != TRANSPORT_AUTO:
        return name

    binary = get_cli_binary()
    if shutil.which(binary):
        return TRANSPORT_CLI

    logger.warning("%s CLI not found - will attempt direct API call", binary)
    return TRANSPORT_HTTP


def main(argv=None) -> int:
    """Run one generate-and-send invocation and return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.prompt or not args.channel:
        parser.print_help()
        return 1

    if args.aspect_ratio and args.aspect_ratio not in ASPECT_RATIOS:
        parser.error(f"invalid aspect_ratio {args.aspect_ratio!r}")
    if args.output_format and args.output_format not in OUTPUT_FORMATS:
        parser.error(f"invalid output_format {args.output_format!r}")
    if not 1 <= args.num_images <= MAX_NUM_IMAGES:
        parser.error(f"--num-images must be between 1 and {MAX_NUM_IMAGES}")

    configure_logging(args.verbose)

    prompt = args.prompt
    if args.mode:
        resolved_mode, prompt = build_prompt(args.prompt, args.mode)
        logger.info("Selfie mode: %s", resolved_mode)

    options = GenerateAndSendOptions(
        prompt=prompt,
        channel=args.channel,
        caption=args.caption,
        aspect_ratio=args.aspect_ratio,
        output_format=args.output_format,
        num_images=args.num_images,
        reference_image_url=args.reference_image,
        transport=resolve_transport(args.transport),
    )

    try:
        result = generate_and_send(options)
    except SelfieRelayError as exc:
        image_url = getattr(exc, "image_url", None)
        if image_url:
            logger.error("%s (generated image: %s)", exc, image_url)
        else:
            logger.error("%s", exc)
        return 1

    print(json.dumps(result.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
