"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error handling and mapping
- API key authentication
- Rate limiting
- Logging configuration
"""
