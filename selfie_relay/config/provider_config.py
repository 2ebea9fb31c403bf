"""Provider/runtime configuration for generation and relay.

Architectural role:
    Centralizes endpoint selection, defaults and credential lookup for
    `selfie_relay.image` and `selfie_relay.relay`.

Call flow integration:
    - `image.client` consumes `GROK_IMAGINE_*` endpoints and model ids.
    - `image.service` / `core.engine` consume `get_fal_key`.
    - `relay.transport` consumes gateway URL/token getters and `DEFAULT_CLI_BINARY`.

Determinism:
    Endpoint constants are fixed at import time. Credentials and gateway settings
    are read through getters at call time so a changed environment is honoured.

Failure behavior:
    Missing key material is represented as `None`; the generation stage turns it
    into `ConfigurationError`.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# Upstream model routing.
FAL_RUN_BASE_URL = "https://fal.run"
GROK_IMAGINE_MODEL = "xai/grok-imagine-image"
GROK_IMAGINE_EDIT_MODEL = "xai/grok-imagine-image/edit"

GROK_IMAGINE_URL = f"{FAL_RUN_BASE_URL}/{GROK_IMAGINE_MODEL}"
GROK_IMAGINE_EDIT_URL = f"{FAL_RUN_BASE_URL}/{GROK_IMAGINE_EDIT_MODEL}"

FAL_KEY_FILE = "config/fal.key"
FAL_KEY_HELP_URL = "https://fal.ai/dashboard/keys"

# Request defaults shared by both generation clients.
DEFAULT_NUM_IMAGES = 1
DEFAULT_ASPECT_RATIO = "1:1"
DEFAULT_OUTPUT_FORMAT = "jpeg"
DEFAULT_CAPTION = "Generated with Grok Imagine"

# Messaging gateway.
DEFAULT_GATEWAY_URL = "http://localhost:18789"
DEFAULT_CLI_BINARY = "openclaw"
DEFAULT_TRANSPORT = "cli"


def load_key(path, env_name):
    """Load API key from environment override or key file.

    Resolution order:
        1. Environment variable `env_name`.
        2. Raw file contents at `path`.

    Args:
        path: Configured key file path or `None`.
        env_name: Environment variable consulted first.

    Returns:
        Key string or `None` when not available.

    Edge cases:
        - Blank environment value falls through to the key file.
        - Missing or blank file returns `None`.
    """
    env_value = (os.getenv(env_name) or "").strip()
    if env_value:
        return env_value
    if not path or not os.path.exists(path):
        return None
    with open(path, "r") as f:
        return f.read().strip() or None


def get_fal_key():
    """Return the fal.ai credential from `FAL_KEY` or `config/fal.key`."""
    return load_key(FAL_KEY_FILE, env_name="FAL_KEY")


def get_gateway_url() -> str:
    return (os.getenv("OPENCLAW_GATEWAY_URL") or DEFAULT_GATEWAY_URL).strip().rstrip("/")


def get_gateway_token():
    token = (os.getenv("OPENCLAW_GATEWAY_TOKEN") or "").strip()
    return token or None


def get_cli_binary() -> str:
    return (os.getenv("OPENCLAW_BIN") or DEFAULT_CLI_BINARY).strip()
