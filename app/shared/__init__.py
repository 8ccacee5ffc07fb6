"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Request binding and validation
- Error handling and mapping
- HTTP middleware and rate limiting
- Logging configuration
"""
