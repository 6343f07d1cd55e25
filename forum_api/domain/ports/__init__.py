"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

- repositories/  → Data persistence interfaces (Prisma, in-memory)
- security.py    → Password hashing and token issuance (bcrypt, PyJWT)
"""
