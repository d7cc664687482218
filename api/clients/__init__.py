"""
Client registry: CRUD over the `clients` table.
"""
