"""
Infrastructure layer - Adapters and cross-cutting concerns.

This layer contains:
- In-memory stubs for the ledger transfer and caller identity ports
- Structured logging and correlation ID support

IMPORT RULES:
- CAN import from: domain, application
- CANNOT import from: bootstrap
"""
