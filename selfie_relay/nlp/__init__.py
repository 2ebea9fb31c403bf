"""Rule-based text classification helpers (selfie mode detection)."""
