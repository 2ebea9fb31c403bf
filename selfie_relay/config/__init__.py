"""Configuration package.

Holds endpoint constants, request defaults and credential/gateway lookups.
`.env` is loaded on first import of `provider_config`.
"""
