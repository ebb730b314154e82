"""
Application layer.

The application layer orchestrates domain objects and defines the boundaries
of the system. It contains use cases that represent the operations available
to external actors.

This layer contains:
- Protocols: Repository contracts implemented by the infrastructure layer
- Use cases: One public operation each, returning a Result
- DTOs: Plain data records returned across the use case boundary
"""
