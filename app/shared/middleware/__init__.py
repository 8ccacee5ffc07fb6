"""
HTTP middleware: request ids, request logging, timeouts, secure headers
and rate limiting.

No business logic. Pure cross-cutting concerns.
"""
