"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (add thread/comment/reply, delete, register, login)
- queries/   → Read operations (thread detail)
- common/    → Shared interfaces (CommandHandler, QueryHandler base classes)

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Coordinates entities and repositories
"""
