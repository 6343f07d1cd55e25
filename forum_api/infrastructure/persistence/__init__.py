"""
Persistence Layer - Database implementations.

- prisma_*_repository.py: Prisma (PostgreSQL) implementations of domain ports.
  Importing them requires a generated Prisma client (`prisma generate`).
- memory/: In-memory implementations, no external dependencies.
"""
