"""
Application layer.

The application layer orchestrates domain objects and defines the boundaries
of the system. It contains use cases that represent the operations available
to external actors.

This layer contains:
- Use cases: One class per operation, dependencies injected as protocols
- Services: Checks shared by several use cases (authorization, uniqueness)
- DTOs: Data transfer objects returned to callers
- Protocols: Interfaces for repositories and security services
"""
