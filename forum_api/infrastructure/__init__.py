"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: Prisma repositories (PostgreSQL) and in-memory repositories
- security/: bcrypt password hashing and PyJWT token management
"""
