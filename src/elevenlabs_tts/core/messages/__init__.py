"""Request and settings data models."""
