"""Prompting package.

Deterministic selfie prompt construction. It does not perform model
invocation or relay delivery.
"""
