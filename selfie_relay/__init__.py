"""selfie-relay: generate Grok Imagine images and relay them through OpenClaw.

Composition:
    - `prompting` / `nlp`: selfie prompt templates and mode detection.
    - `image`: generation clients and the generation stage.
    - `relay`: OpenClaw CLI and HTTP transports.
    - `core`: data contracts, errors and orchestration.
    - `api`: command-line adapter.
"""

__version__ = "0.1.0"
