"""
Catalog bounded context: HTTP interface (routes, request records, response schemas).
"""
