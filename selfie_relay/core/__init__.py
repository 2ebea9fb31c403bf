"""Core orchestration package.

Composition:
    - `engine`: generate-then-relay control flow.
    - `types`: request/result data contracts.
    - `errors`: `ConfigurationError`, `UpstreamError`, `RelayError`.
"""
