"""
Product catalog: CRUD over the `products` table.
"""
