"""Infrastructure layer: persistence, security services and request schemas."""
