"""
DOMAIN LAYER - The Heart of the Forum

This layer contains:
- Entities: Business objects and command payloads (Thread, Comment, Reply, User)
- Ports: Interfaces that infrastructure implements (repositories, security)
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no clock)
3. Only depends on Python stdlib
4. This is where business rules live
"""
