"""
Catalog bounded context: infrastructure adapters.
"""
