"""
Database infrastructure: engine construction and table definitions.
"""
