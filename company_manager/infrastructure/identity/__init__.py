"""Identity infrastructure: account and role persistence, hashing and tokens."""
