"""
Catalog bounded context: domain layer.

Users, categories, subcategories and the summaries filed under them.
"""
