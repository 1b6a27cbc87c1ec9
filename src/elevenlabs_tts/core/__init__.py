"""Provider constants, voice registry and request data models."""
