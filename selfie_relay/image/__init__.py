"""Image generation adapter package.

Scope:
    Provides Grok Imagine clients (vendor `fal_client` or raw HTTP) and the
    generation stage used by core orchestration.

Non-goals:
    - No image download, decoding or content validation.
    - No retries or rate-limit handling.
"""
