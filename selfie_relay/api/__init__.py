"""selfie-relay API adapter package.

Architectural role:
- Defines the command-line interaction boundary.
- Performs argument validation and result rendering.
- Delegates generation and delivery to the core layer.
"""
