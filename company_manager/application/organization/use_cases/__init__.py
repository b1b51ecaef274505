"""Use cases of the organization context."""
