"""
Shared, cross-cutting code for the API.

`core/` holds the pieces both services use: the asyncpg pool wrapper,
environment settings and logging setup. Table-specific SQL stays in the
owning service package (`clients/`, `products/`).
"""
