"""Identity application layer: authentication, tokens and role resolution."""
