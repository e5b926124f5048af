"""
Core utilities shared across the Astro API.

This package hosts configuration, logging setup, the error taxonomy and the
security primitives (password hashing, signed session tokens, rate limiting).
Routers and services depend on these modules instead of reading os.environ or
talking to crypto libraries directly.
"""
