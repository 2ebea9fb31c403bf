"""OpenClaw relay package: CLI subprocess and gateway HTTP transports."""
